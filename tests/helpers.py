ABILITIES = (
    ("ISM", "ISM", "ISS", "SSU"),
    ("RSU", "SSU", "SSU", "QR"),
    ("QSJ", "SPU", "SPU", "RES"),
)


async def make_user(db, discord_id="79237403620945920", name="Sendou", plus_tier=None):
    cursor = await db.execute(
        "INSERT INTO users (discord_id, discord_name, discord_discriminator) VALUES (?, ?, ?)",
        (discord_id, name, "0043"),
    )
    user_id = cursor.lastrowid
    if plus_tier is not None:
        await db.execute(
            "INSERT INTO plus_tiers (user_id, tier) VALUES (?, ?)", (user_id, plus_tier)
        )
    return user_id


async def add_placement(db, user_id, weapon_spl_id, rank, power):
    await db.execute(
        "INSERT INTO x_rank_placements (user_id, weapon_spl_id, mode, rank, power) "
        "VALUES (?, ?, 'SZ', ?, ?)",
        (user_id, weapon_spl_id, rank, power),
    )
