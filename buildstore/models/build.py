from enum import Enum

from pydantic import BaseModel, Field

from buildstore.catalog import ModeShort


class GearType(str, Enum):
    HEAD = "HEAD"
    CLOTHES = "CLOTHES"
    SHOES = "SHOES"


# 行インデックス → ギア種別
GEAR_ORDER: tuple[GearType, ...] = (GearType.HEAD, GearType.CLOTHES, GearType.SHOES)

AbilityRow = tuple[str, str, str, str]
AbilityMatrix = tuple[AbilityRow, AbilityRow, AbilityRow]


class AbilityCell(BaseModel):
    """build_abilities の1行"""
    gear_type: GearType
    slot_index: int = Field(ge=0, le=3)
    ability: str


class BuildWeaponInfo(BaseModel):
    """武器 + 所有者のランキング実績（読み取り時に結合）"""
    weapon_spl_id: int
    min_rank: int | None = None
    max_power: float | None = None


class BuildCreate(BaseModel):
    owner_id: int
    title: str
    description: str | None = None
    modes: list[ModeShort] | None = None
    head_gear_spl_id: int | None = None
    clothes_gear_spl_id: int | None = None
    shoes_gear_spl_id: int | None = None
    weapon_spl_ids: list[int] = Field(min_length=1)
    abilities: AbilityMatrix
    private: bool = False


class BuildReplace(BuildCreate):
    id: int


class Build(BaseModel):
    """一覧取得の戻り値"""
    id: int
    title: str
    description: str | None = None
    modes: list[ModeShort] | None = None
    head_gear_spl_id: int | None = None
    clothes_gear_spl_id: int | None = None
    shoes_gear_spl_id: int | None = None
    updated_at: str | None = None
    private: bool = False
    weapons: list[BuildWeaponInfo]
    abilities: AbilityMatrix


class BuildWithOwner(Build):
    """武器別一覧用: 所有者の公開情報付き"""
    discord_id: str
    discord_name: str
    discord_discriminator: str
    plus_tier: int | None = None
