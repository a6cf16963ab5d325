import logging
from contextlib import asynccontextmanager
from pathlib import Path

import aiosqlite

from buildstore.config import settings

SCHEMA_PATH = Path(__file__).resolve().parent / "schema.sql"

logger = logging.getLogger(__name__)


async def get_db(path: Path | None = None) -> aiosqlite.Connection:
    """DBコネクションを取得（autocommit、トランザクションは transaction() で明示）"""
    db = await aiosqlite.connect(path or settings.db_path, isolation_level=None)
    db.row_factory = aiosqlite.Row
    await db.execute("PRAGMA journal_mode=WAL")
    await db.execute("PRAGMA foreign_keys=ON")
    return db


async def init_db(path: Path | None = None):
    """スキーマを適用してDBを初期化"""
    path = path or settings.db_path
    path.parent.mkdir(parents=True, exist_ok=True)
    db = await get_db(path)
    try:
        schema = SCHEMA_PATH.read_text(encoding="utf-8")
        await db.executescript(schema)
    finally:
        await db.close()


@asynccontextmanager
async def transaction(db: aiosqlite.Connection):
    """全体を1単位で実行。例外時はROLLBACKして元の例外をそのまま再送出"""
    await db.execute("BEGIN")
    try:
        yield db
    except BaseException:
        # キャンセル時も必ず閉じる。SQLite側で既に巻き戻っていればROLLBACKしない
        if db.in_transaction:
            await db.execute("ROLLBACK")
        logger.debug("transaction rolled back")
        raise
    else:
        await db.execute("COMMIT")
