"""builds テーブルの作成・置換・削除・一覧取得"""
import logging

import aiosqlite

from buildstore.abilities import encode_abilities
from buildstore.augment import augment_build
from buildstore.catalog import alt_weapon_id
from buildstore.database import transaction
from buildstore.models.build import Build, BuildCreate, BuildReplace, BuildWithOwner
from buildstore.modes import encode_modes

logger = logging.getLogger(__name__)

# 別IDが存在しない武器用。weapon_spl_id は CHECK (>= 0) なので一致しない
NO_ALT_WEAPON_ID = -1

CREATE_BUILD_SQL = """INSERT INTO builds (
    id, owner_id, title, description, modes,
    head_gear_spl_id, clothes_gear_spl_id, shoes_gear_spl_id, private
) VALUES (
    :id, :owner_id, :title, :description, :modes,
    :head_gear_spl_id, :clothes_gear_spl_id, :shoes_gear_spl_id, :private
)"""

CREATE_BUILD_WEAPON_SQL = (
    "INSERT INTO build_weapons (build_id, weapon_spl_id) VALUES (:build_id, :weapon_spl_id)"
)

CREATE_BUILD_ABILITY_SQL = """INSERT INTO build_abilities (
    build_id, gear_type, slot_index, ability
) VALUES (:build_id, :gear_type, :slot_index, :ability)"""

DELETE_BY_ID_SQL = "DELETE FROM builds WHERE id = :id"

COUNT_BY_OWNER_SQL = """SELECT COUNT(*) AS count
FROM builds
WHERE owner_id = :owner_id
  AND (private = 0 OR owner_id = :viewer_id)"""

_BUILD_COLUMNS = """b.id, b.title, b.description, b.modes,
    b.head_gear_spl_id, b.clothes_gear_spl_id, b.shoes_gear_spl_id,
    b.updated_at, b.private"""

# 武器ごとの所有者のランキング実績（同一武器の重複登録は1件にまとまる）
_WEAPONS_JSON = """json_group_array(json_object(
        'weapon_spl_id', tw.weapon_spl_id,
        'min_rank', tw.min_rank,
        'max_power', tw.max_power
    )) AS weapons"""

_ABILITIES_JSON = """(
        SELECT json_group_array(json_object(
            'gear_type', ba.gear_type,
            'slot_index', ba.slot_index,
            'ability', ba.ability
        ))
        FROM build_abilities ba
        WHERE ba.build_id = b.id
    ) AS abilities"""

LIST_BY_OWNER_SQL = f"""WITH top500_weapons AS (
    SELECT bw.build_id, bw.weapon_spl_id,
        MIN(xp.rank) AS min_rank,
        MAX(xp.power) AS max_power
    FROM build_weapons bw
    JOIN builds b ON b.id = bw.build_id
    LEFT JOIN x_rank_placements xp
        ON xp.user_id = b.owner_id AND xp.weapon_spl_id = bw.weapon_spl_id
    WHERE b.owner_id = :owner_id
    GROUP BY bw.build_id, bw.weapon_spl_id
)
SELECT {_BUILD_COLUMNS},
    {_WEAPONS_JSON},
    {_ABILITIES_JSON}
FROM builds b
LEFT JOIN top500_weapons tw ON tw.build_id = b.id
WHERE b.owner_id = :owner_id
  AND (b.private = 0 OR b.owner_id = :viewer_id)
GROUP BY b.id
ORDER BY b.updated_at DESC, b.id DESC"""

_WEAPON_MIN_RANK = """MIN(CASE
        WHEN tw.weapon_spl_id IN (:weapon_id, :alt_weapon_id) THEN tw.min_rank
    END)"""

LIST_BY_WEAPON_SQL = f"""WITH matching_builds AS (
    SELECT DISTINCT build_id
    FROM build_weapons
    WHERE weapon_spl_id = :weapon_id OR weapon_spl_id = :alt_weapon_id
),
top500_weapons AS (
    SELECT bw.build_id, bw.weapon_spl_id,
        MIN(xp.rank) AS min_rank,
        MAX(xp.power) AS max_power
    FROM build_weapons bw
    JOIN matching_builds mb ON mb.build_id = bw.build_id
    JOIN builds b ON b.id = bw.build_id
    LEFT JOIN x_rank_placements xp
        ON xp.user_id = b.owner_id AND xp.weapon_spl_id = bw.weapon_spl_id
    GROUP BY bw.build_id, bw.weapon_spl_id
)
SELECT {_BUILD_COLUMNS},
    u.discord_id, u.discord_name, u.discord_discriminator,
    pt.tier AS plus_tier,
    {_WEAPONS_JSON},
    {_ABILITIES_JSON}
FROM builds b
JOIN matching_builds mb ON mb.build_id = b.id
JOIN users u ON u.id = b.owner_id
LEFT JOIN plus_tiers pt ON pt.user_id = b.owner_id
LEFT JOIN top500_weapons tw ON tw.build_id = b.id
WHERE b.private = 0
GROUP BY b.id
ORDER BY {_WEAPON_MIN_RANK} IS NULL, {_WEAPON_MIN_RANK}, b.updated_at DESC, b.id DESC
LIMIT :limit"""


async def _insert_build(db: aiosqlite.Connection, build: BuildCreate, build_id: int | None = None) -> int:
    """ビルド本体 + 武器N件 + アビリティ12件を挿入（トランザクション内で呼ぶこと）"""
    cursor = await db.execute(
        CREATE_BUILD_SQL,
        {
            "id": build_id,
            "owner_id": build.owner_id,
            "title": build.title,
            "description": build.description,
            "modes": encode_modes(build.modes),
            "head_gear_spl_id": build.head_gear_spl_id,
            "clothes_gear_spl_id": build.clothes_gear_spl_id,
            "shoes_gear_spl_id": build.shoes_gear_spl_id,
            "private": int(build.private),
        },
    )
    created_id = cursor.lastrowid

    # 入力順のまま、重複も除かずに挿入
    await db.executemany(
        CREATE_BUILD_WEAPON_SQL,
        [
            {"build_id": created_id, "weapon_spl_id": weapon_spl_id}
            for weapon_spl_id in build.weapon_spl_ids
        ],
    )
    await db.executemany(
        CREATE_BUILD_ABILITY_SQL,
        [
            {
                "build_id": created_id,
                "gear_type": cell.gear_type.value,
                "slot_index": cell.slot_index,
                "ability": cell.ability,
            }
            for cell in encode_abilities(build.abilities)
        ],
    )
    logger.debug("build %s saved (%d weapons)", created_id, len(build.weapon_spl_ids))
    return created_id


async def create(db: aiosqlite.Connection, build: BuildCreate) -> int:
    async with transaction(db):
        return await _insert_build(db, build)


async def update_by_replacing(db: aiosqlite.Connection, build: BuildReplace) -> int:
    """削除→再作成を1トランザクションで。IDは維持する。存在しないIDなら通常の作成"""
    async with transaction(db):
        await db.execute(DELETE_BY_ID_SQL, {"id": build.id})
        return await _insert_build(db, build, build_id=build.id)


async def delete_by_id(db: aiosqlite.Connection, build_id: int):
    """武器・アビリティ行は ON DELETE CASCADE で消える"""
    await db.execute(DELETE_BY_ID_SQL, {"id": build_id})
    logger.debug("build %s deleted", build_id)


async def count_by_owner(db: aiosqlite.Connection, owner_id: int, viewer_id: int | None = None) -> int:
    cursor = await db.execute(COUNT_BY_OWNER_SQL, {"owner_id": owner_id, "viewer_id": viewer_id})
    row = await cursor.fetchone()
    return row["count"] if row else 0


async def list_by_owner(db: aiosqlite.Connection, owner_id: int, viewer_id: int | None = None) -> list[Build]:
    cursor = await db.execute(LIST_BY_OWNER_SQL, {"owner_id": owner_id, "viewer_id": viewer_id})
    rows = await cursor.fetchall()
    return [augment_build(row) for row in rows]


async def list_by_weapon(db: aiosqlite.Connection, weapon_id: int, limit: int) -> list[BuildWithOwner]:
    """別IDで登録されたビルドも含めて取得。所有者の順位が高い順"""
    alt_id = alt_weapon_id(weapon_id)
    cursor = await db.execute(
        LIST_BY_WEAPON_SQL,
        {
            "weapon_id": weapon_id,
            # 別IDがなくてもプレースホルダ数を固定するため、ありえないIDを入れる
            "alt_weapon_id": alt_id if alt_id is not None else NO_ALT_WEAPON_ID,
            "limit": limit,
        },
    )
    rows = await cursor.fetchall()
    return [augment_build(row, BuildWithOwner) for row in rows]
