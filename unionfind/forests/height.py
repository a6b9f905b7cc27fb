"""
加權 quick-union (依樹高)

以精確樹高作為平衡依據，不做路徑壓縮
"""

from typing import ClassVar

from .quick_union import QuickUnionForest
from .registry import ForestRegistry


@ForestRegistry.register("height")
class HeightForest(QuickUnionForest):
    """
    依樹高合併的 union-find（無路徑壓縮）

    `_height[r]` 為以 r 為根的樹的最長根到葉路徑長度，
    由於沒有壓縮，此值永遠是精確值而非上限
    """

    description: ClassVar[str] = "加權 quick-union (樹高)：最壞 O(log n)"

    def __init__(self, n: int) -> None:
        super().__init__(n)
        self._height: list[int] = [0] * self._n

    def height_of(self, site: int) -> int:
        """站點所屬樹的高度"""
        return self._height[self.find(site)]

    def _link(self, root_p: int, root_q: int) -> None:
        height = self._height
        parent = self._parent

        # 較矮的樹接到較高的樹之下
        if height[root_p] < height[root_q]:
            parent[root_p] = root_q
            return
        if height[root_p] > height[root_q]:
            parent[root_q] = root_p
            return

        parent[root_q] = root_p
        height[root_p] += 1
