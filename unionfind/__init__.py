"""
Union-find (disjoint-set forest) 連通性工具

提供六種 forest 實作、冗餘連線過濾器與隨機連通模擬器
"""

from unionfind.core import (
    BaseForest,
    ForestProtocol,
    InputFormatError,
    InvalidSiteError,
    InvalidSizeError,
    UnionFindError,
)
from unionfind.features.connectivity_filter import ConnectivityFilter
from unionfind.features.simulation import ConnectivitySimulator
from unionfind.forests import (
    DEFAULT_VARIANT,
    ForestRegistry,
    HeightForest,
    PathCompressionForest,
    QuickFindForest,
    QuickUnionForest,
    RankHalvingForest,
    WeightedQuickUnionForest,
)


__all__ = [
    "DEFAULT_VARIANT",
    "BaseForest",
    "ConnectivityFilter",
    "ConnectivitySimulator",
    "ForestProtocol",
    "ForestRegistry",
    "HeightForest",
    "InputFormatError",
    "InvalidSiteError",
    "InvalidSizeError",
    "PathCompressionForest",
    "QuickFindForest",
    "QuickUnionForest",
    "RankHalvingForest",
    "UnionFindError",
    "WeightedQuickUnionForest",
]
