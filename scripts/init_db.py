"""DB初期化スクリプト: スキーマ適用"""
import asyncio
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from buildstore.config import settings
from buildstore.database import init_db


async def main():
    logging.basicConfig(level=settings.log_level)
    print(f"DB初期化中... ({settings.db_path})")
    await init_db()
    print("完了")


if __name__ == "__main__":
    asyncio.run(main())
