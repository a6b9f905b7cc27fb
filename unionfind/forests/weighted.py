"""
加權 quick-union (依子樹大小)

較小的樹接到較大的樹之下，樹高上限為 log n
"""

from typing import ClassVar

from .quick_union import QuickUnionForest
from .registry import ForestRegistry


@ForestRegistry.register("weighted")
class WeightedQuickUnionForest(QuickUnionForest):
    """
    依大小加權的 quick-union（無路徑壓縮）

    `_size[r]` 為以 r 為根的樹的站點數，只在根上有意義
    """

    description: ClassVar[str] = "加權 quick-union (大小)：最壞 O(log n)"

    def __init__(self, n: int) -> None:
        super().__init__(n)
        self._size: list[int] = [1] * self._n

    def size_of(self, site: int) -> int:
        """站點所屬分量的站點數"""
        return self._size[self.find(site)]

    def _link(self, root_p: int, root_q: int) -> None:
        size = self._size
        parent = self._parent

        if size[root_p] < size[root_q]:
            parent[root_p] = root_q
            size[root_q] += size[root_p]
            return

        parent[root_q] = root_p
        size[root_p] += size[root_q]
