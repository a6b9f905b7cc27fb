"""
Forest 實作模組

匯入本模組即完成所有實作的註冊
"""

from .height import HeightForest
from .path_compression import PathCompressionForest
from .quick_find import QuickFindForest
from .quick_union import QuickUnionForest
from .rank_halving import RankHalvingForest
from .registry import ForestRegistry
from .weighted import WeightedQuickUnionForest


DEFAULT_VARIANT = RankHalvingForest.name


__all__ = [
    "DEFAULT_VARIANT",
    "ForestRegistry",
    "HeightForest",
    "PathCompressionForest",
    "QuickFindForest",
    "QuickUnionForest",
    "RankHalvingForest",
    "WeightedQuickUnionForest",
]
