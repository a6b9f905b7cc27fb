"""
核心模組 - 定義介面、例外和共用元件
"""

from .exceptions import (
    InputFormatError,
    InvalidSiteError,
    InvalidSizeError,
    UnionFindError,
)
from .interfaces import BaseForest, ForestProtocol
from .progress import TrialProgressBar


__all__ = [
    "BaseForest",
    "ForestProtocol",
    "InputFormatError",
    "InvalidSiteError",
    "InvalidSizeError",
    "TrialProgressBar",
    "UnionFindError",
]
