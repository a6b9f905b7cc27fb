"""
統計工具

計算試驗結果的樣本平均與樣本標準差
"""

import math
from collections.abc import Sequence

import numpy as np

from unionfind.core.exceptions import InvalidSizeError


def _as_array(values: Sequence[float]) -> np.ndarray:
    data = np.asarray(values, dtype=np.float64)
    if data.size == 0:
        raise ValueError("statistics require at least one value")
    return data


def mean(values: Sequence[float]) -> float:
    """
    樣本平均

    Args:
        values: 數值序列（不可為空）

    Returns:
        平均值
    """
    return float(np.mean(_as_array(values)))


def stddev(values: Sequence[float]) -> float:
    """
    樣本標準差（不偏估計，分母為 n-1）

    只有一個值時樣本標準差無定義，回傳 nan

    Args:
        values: 數值序列（不可為空）

    Returns:
        標準差
    """
    data = _as_array(values)
    if data.size < 2:
        return float("nan")
    return float(np.std(data, ddof=1))


def reference_edges(n: int) -> float:
    """
    Erdős–Rényi 理論參考值 1/2 n ln n

    Args:
        n: 站點數量（需為正數）

    Returns:
        達到全連通的預期邊數量級
    """
    if n <= 0:
        raise InvalidSizeError(f"site count must be positive: {n}")
    return 0.5 * n * math.log(n)
