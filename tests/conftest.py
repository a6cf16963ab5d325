"""テスト共通設定: テストごとに tmp_path 配下の新しいSQLiteファイルを使う（非同期処理は asyncio.run で実行）"""

import asyncio

import pytest

from buildstore.database import get_db, init_db


@pytest.fixture
def db_path(tmp_path):
    path = tmp_path / "data" / "builds.db"
    asyncio.run(init_db(path))
    return path


@pytest.fixture
def run_with_db(db_path):
    """接続を開いて非同期関数を実行し、その戻り値を返す"""

    def run(fn):
        async def scenario():
            db = await get_db(db_path)
            try:
                return await fn(db)
            finally:
                await db.close()

        return asyncio.run(scenario())

    return run
