"""ゲーム内リスト: モードの正規順序と武器IDの別ID（リナンバリング前のID）"""
from typing import Literal

ModeShort = Literal["TW", "SZ", "TC", "RM", "CB"]

# この順序がモード集合の正規順序
MODES_SHORT: tuple[ModeShort, ...] = ("TW", "SZ", "TC", "RM", "CB")

# 同一武器の別ID（ヒーローシリーズ・オーダーシリーズ）。双方向に登録する
_ALT_ID_PAIRS = [
    (40, 45),
    (210, 215),
    (1010, 1015),
    (2010, 2015),
    (3000, 3005),
    (4010, 4015),
    (5010, 5015),
    (6000, 6005),
    (7010, 7015),
    (8010, 8015),
]

WEAPON_ID_TO_ALT_ID: dict[int, int] = {
    **{main: alt for main, alt in _ALT_ID_PAIRS},
    **{alt: main for main, alt in _ALT_ID_PAIRS},
}


def alt_weapon_id(weapon_id: int) -> int | None:
    return WEAPON_ID_TO_ALT_ID.get(weapon_id)
