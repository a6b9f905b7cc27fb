"""
例外定義

所有 union-find 相關錯誤皆繼承自 UnionFindError，
並同時繼承 ValueError 以便呼叫端以標準方式捕捉
"""


class UnionFindError(Exception):
    """union-find 錯誤基底類別"""


class InvalidSizeError(UnionFindError, ValueError):
    """站點數量（或試驗次數）不合法"""


class InvalidSiteError(UnionFindError, ValueError):
    """站點索引超出 [0, n) 範圍"""


class InputFormatError(UnionFindError, ValueError):
    """輸入串流格式錯誤"""
