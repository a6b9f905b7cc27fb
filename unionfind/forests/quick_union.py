"""
Quick-union

無權重的樹連結，樹可能退化為長鏈
"""

from typing import ClassVar

from unionfind.core.interfaces import BaseForest

from .registry import ForestRegistry


@ForestRegistry.register("quick-union")
class QuickUnionForest(BaseForest):
    """
    Quick-union union-find

    `_parent[i]` 為站點 i 的父節點，p 的根無條件接到 q 的根之下。
    最壞情況下 find 與 union 皆為 O(n)
    """

    description: ClassVar[str] = "Quick-union：無權重連結，最壞 O(n)"

    def _root(self, site: int) -> int:
        parent = self._parent
        while parent[site] != site:
            site = parent[site]
        return site

    def _link(self, root_p: int, root_q: int) -> None:
        self._parent[root_p] = root_q
