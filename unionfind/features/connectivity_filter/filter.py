"""
連通性過濾模組

只輸出會帶來新連通性的站點對，冗餘的站點對直接略過
"""

import logging
from collections.abc import Iterable, Iterator

from unionfind.core.interfaces import ForestProtocol
from unionfind.data_model import FilterResult, Pair


logger = logging.getLogger(__name__)


class ConnectivityFilter:
    """
    連通性過濾器

    依序處理站點對：若兩站點尚未連通則合併並接受該對，
    否則視為冗餘。後到的站點對以先前所有已接受者的聯集來判斷
    """

    def __init__(self, forest: ForestProtocol) -> None:
        """
        初始化過濾器

        Args:
            forest: 已建立的 union-find 實例（過濾時會被修改）
        """
        self._forest = forest
        self._seen = 0
        self._accepted = 0

    @property
    def forest(self) -> ForestProtocol:
        return self._forest

    @property
    def seen_count(self) -> int:
        """已讀取的站點對數量"""
        return self._seen

    @property
    def accepted_count(self) -> int:
        """已接受的站點對數量"""
        return self._accepted

    def count(self) -> int:
        """forest 目前的分量數量"""
        return self._forest.count()

    def accept(self, p: int, q: int) -> bool:
        """
        處理一個站點對

        Args:
            p: 站點
            q: 站點

        Returns:
            是否為非冗餘（已合併）

        Raises:
            InvalidSiteError: 任一站點超出範圍
        """
        if self._forest.connected(p, q):
            self._seen += 1
            return False

        self._forest.union(p, q)
        self._seen += 1
        self._accepted += 1
        return True

    def filter(self, pairs: Iterable[Pair]) -> Iterator[Pair]:
        """
        惰性過濾站點對

        Args:
            pairs: 站點對來源

        Yields:
            依到達順序的非冗餘站點對
        """
        for p, q in pairs:
            if self.accept(p, q):
                yield p, q

    def run(self, pairs: Iterable[Pair]) -> FilterResult:
        """
        處理全部站點對並彙整結果

        Args:
            pairs: 站點對來源

        Returns:
            過濾結果
        """
        start_seen = self._seen
        accepted = tuple(self.filter(pairs))
        total = self._seen - start_seen

        logger.info(
            "Filtered %d pairs: %d accepted, %d redundant, %d components",
            total,
            len(accepted),
            total - len(accepted),
            self.count(),
        )
        return FilterResult(accepted=accepted, total=total, components=self.count())
