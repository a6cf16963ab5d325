import aiosqlite

# ストレージ層の例外はラップせずそのまま伝播させる。呼び出し側はこの名前で捕捉できる
StorageFailure = aiosqlite.Error


class ShapeError(ValueError):
    """アビリティ行が12件ではない（データ破損または呼び出し側のバグ）"""
