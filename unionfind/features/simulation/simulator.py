"""
隨機連通模擬模組

反覆加入隨機邊（可重複、可自環）直到圖完全連通，
統計所需邊數。n 很大時平均值約為 1/2 n ln n
"""

import logging
import operator
from collections.abc import Callable

import numpy as np

from unionfind.core.exceptions import InvalidSizeError
from unionfind.data_model import SimulationResult
from unionfind.forests import DEFAULT_VARIANT, ForestRegistry

from .statistics import mean, stddev


logger = logging.getLogger(__name__)


ProgressCallback = Callable[[int, int, int], None]


def _positive(value: int, what: str) -> int:
    try:
        value = operator.index(value)
    except TypeError as exc:
        raise InvalidSizeError(f"{what} must be an integer: {value!r}") from exc
    if value <= 0:
        raise InvalidSizeError(f"{what} must be positive: {value}")
    return value


class ConnectivitySimulator:
    """
    隨機連通模擬器

    亂數來源與 forest 實作皆由外部注入，相同種子可重現相同結果
    """

    def __init__(
        self,
        rng: np.random.Generator | None = None,
        variant: str = DEFAULT_VARIANT,
        progress_callback: ProgressCallback | None = None,
    ) -> None:
        """
        初始化模擬器

        Args:
            rng: 亂數產生器，預設為以系統熵初始化的 default_rng()
            variant: forest 實作名稱
            progress_callback: 每次試驗結束時呼叫 (completed, total, edges)

        Raises:
            KeyError: variant 未註冊
        """
        self._rng = rng if rng is not None else np.random.default_rng()
        self._variant = variant
        self._forest_cls = ForestRegistry.get(variant)
        self._progress_callback = progress_callback

    @property
    def variant(self) -> str:
        return self._variant

    def count_edges(self, n: int) -> int:
        """
        執行一次試驗

        每條抽出的邊都會計入，包含自環與已連通的冗餘邊

        Args:
            n: 站點數量

        Returns:
            達到單一分量時已抽出的邊數

        Raises:
            InvalidSizeError: n <= 0
        """
        n = _positive(n, "site count")
        forest = self._forest_cls(n)
        rng = self._rng

        edges = 0
        while forest.count() > 1:
            i, j = rng.integers(n, size=2)
            forest.union(i, j)
            edges += 1
        return edges

    def run_trials(self, n: int, trials: int) -> SimulationResult:
        """
        重複執行多次試驗並計算統計值

        Args:
            n: 站點數量
            trials: 試驗次數

        Returns:
            模擬結果

        Raises:
            InvalidSizeError: n 或 trials 不是正整數
        """
        n = _positive(n, "site count")
        trials = _positive(trials, "trial count")

        logger.info(
            "Running %d trials with n=%d using %s", trials, n, self._variant
        )

        edge_counts: list[int] = []
        for completed in range(1, trials + 1):
            edges = self.count_edges(n)
            edge_counts.append(edges)
            logger.debug("Trial %d/%d: %d edges", completed, trials, edges)
            if self._progress_callback is not None:
                self._progress_callback(completed, trials, edges)

        return SimulationResult(
            n=n,
            trials=trials,
            variant=self._variant,
            edge_counts=tuple(edge_counts),
            mean=mean(edge_counts),
            stddev=stddev(edge_counts),
        )
