import json
from collections.abc import Iterable

from buildstore.catalog import MODES_SHORT, ModeShort


def encode_modes(modes: Iterable[ModeShort] | None) -> str | None:
    """モード集合を正規順序のJSON配列に。空・未指定は NULL（モード制限なし）"""
    if not modes:
        return None
    unique = list(dict.fromkeys(modes))
    if not unique:
        return None
    ordered = sorted(unique, key=MODES_SHORT.index)
    return json.dumps(ordered, separators=(",", ":"))


def decode_modes(raw: str | None) -> list[ModeShort] | None:
    if not raw:
        return None
    return json.loads(raw)
