"""
Quick-find

find 為 O(1)，union 需掃描整個陣列為 O(n)
"""

from typing import ClassVar

from unionfind.core.interfaces import BaseForest

from .registry import ForestRegistry


@ForestRegistry.register("quick-find")
class QuickFindForest(BaseForest):
    """
    Quick-find union-find

    `_parent[i]` 直接存放站點 i 的分量識別碼，樹高永遠不超過 1
    """

    description: ClassVar[str] = "Quick-find：find O(1)，union O(n)"

    def _root(self, site: int) -> int:
        return self._parent[site]

    def _link(self, root_p: int, root_q: int) -> None:
        # 所有識別碼等於 p 分量者改為 q 分量
        ids = self._parent
        for i in range(self._n):
            if ids[i] == root_p:
                ids[i] = root_q
