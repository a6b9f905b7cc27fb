"""
Quick-union + 完整路徑壓縮

find 走兩趟：先找到根，再把路徑上每個站點直接指向根
"""

from typing import ClassVar

from .quick_union import QuickUnionForest
from .registry import ForestRegistry


@ForestRegistry.register("path-compression")
class PathCompressionForest(QuickUnionForest):
    """
    帶路徑壓縮的 quick-union

    連結規則與 QuickUnionForest 相同，find 的攤銷成本為 O(log n)
    """

    description: ClassVar[str] = "Quick-union + 路徑壓縮：攤銷 O(log n)"

    def _root(self, site: int) -> int:
        parent = self._parent

        root = site
        while parent[root] != root:
            root = parent[root]

        # 第二趟：路徑上每個站點直接指向根
        while site != root:
            next_site = parent[site]
            parent[site] = root
            site = next_site

        return root
