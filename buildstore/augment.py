"""DB行（JSON集約カラム付き）を構造化された Build に復元"""
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import TypeAdapter

from buildstore.abilities import decode_abilities
from buildstore.models.build import AbilityCell, Build, BuildWeaponInfo
from buildstore.modes import decode_modes

BuildT = TypeVar("BuildT", bound=Build)

_weapons_adapter = TypeAdapter(list[BuildWeaponInfo])
_abilities_adapter = TypeAdapter(list[AbilityCell])


def augment_build(row: Mapping[str, Any], model: type[BuildT] = Build) -> BuildT:
    """weapons は weapon_spl_id 昇順で返す。アビリティ破損時の ShapeError はそのまま伝播"""
    fields = dict(row)
    raw_modes = fields.pop("modes", None)
    raw_weapons = fields.pop("weapons")
    raw_abilities = fields.pop("abilities")

    weapons = sorted(
        _weapons_adapter.validate_json(raw_weapons),
        key=lambda weapon: weapon.weapon_spl_id,
    )
    abilities = decode_abilities(_abilities_adapter.validate_json(raw_abilities))

    return model(
        **fields,
        modes=decode_modes(raw_modes),
        weapons=weapons,
        abilities=abilities,
    )
