"""
隨機連通模擬功能

- simulator: ConnectivitySimulator 執行試驗
- statistics: 樣本平均、標準差與理論參考值
"""

from .simulator import ConnectivitySimulator
from .statistics import mean, reference_edges, stddev


__all__ = ["ConnectivitySimulator", "mean", "reference_edges", "stddev"]
