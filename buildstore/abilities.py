"""アビリティ行列(3x4) ⇔ build_abilities 行(12件) の変換"""
from collections.abc import Iterable

from buildstore.errors import ShapeError
from buildstore.models.build import GEAR_ORDER, AbilityCell, AbilityMatrix

SLOTS_PER_GEAR = 4
ABILITY_COUNT = len(GEAR_ORDER) * SLOTS_PER_GEAR


def encode_abilities(abilities: AbilityMatrix) -> list[AbilityCell]:
    """行列を (gear_type, slot_index, ability) の12行に展開"""
    return [
        AbilityCell(gear_type=GEAR_ORDER[row_i], slot_index=slot_i, ability=ability)
        for row_i, row in enumerate(abilities)
        for slot_i, ability in enumerate(row)
    ]


def _sort_key(cell: AbilityCell) -> tuple[int, int]:
    return GEAR_ORDER.index(cell.gear_type), cell.slot_index


def decode_abilities(cells: Iterable[AbilityCell]) -> AbilityMatrix:
    """順不同の12行を並べ替えて行列に戻す。件数が12でなければ ShapeError"""
    # DBは行順を保証しないので必ずソートしてから切り出す
    ordered = [cell.ability for cell in sorted(cells, key=_sort_key)]
    if len(ordered) != ABILITY_COUNT:
        raise ShapeError(f"expected {ABILITY_COUNT} abilities, got {len(ordered)}")

    return tuple(
        tuple(ordered[start:start + SLOTS_PER_GEAR])
        for start in range(0, ABILITY_COUNT, SLOTS_PER_GEAR)
    )
