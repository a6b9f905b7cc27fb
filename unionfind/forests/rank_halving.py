"""
加權 quick-union (依秩) + 路徑減半

兩者結合後的攤銷成本為反 Ackermann 函數
"""

from typing import ClassVar

from unionfind.core.interfaces import BaseForest

from .registry import ForestRegistry


@ForestRegistry.register("rank-halving")
class RankHalvingForest(BaseForest):
    """
    依秩合併、路徑減半的 union-find

    `_rank[r]` 為以 r 為根的樹高上限。find 只走一趟，
    途中把每個經過的站點改指向其祖父節點
    """

    description: ClassVar[str] = "依秩合併 + 路徑減半：攤銷近似 O(1)"

    def __init__(self, n: int) -> None:
        super().__init__(n)
        self._rank: list[int] = [0] * self._n

    def _root(self, site: int) -> int:
        parent = self._parent
        while parent[site] != site:
            parent[site] = parent[parent[site]]  # 路徑減半
            site = parent[site]
        return site

    def _link(self, root_p: int, root_q: int) -> None:
        rank = self._rank
        parent = self._parent

        # 按秩合併：將較小的樹連接到較大的樹
        if rank[root_p] < rank[root_q]:
            parent[root_p] = root_q
            return
        if rank[root_p] > rank[root_q]:
            parent[root_q] = root_p
            return

        parent[root_q] = root_p
        rank[root_p] += 1
