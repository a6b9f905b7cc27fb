"""
介面定義模組

定義 disjoint-set forest 的共用協定與抽象基底類別，
各種連結策略只需實作 `_root` 與 `_link`
"""

import operator
from abc import ABC, abstractmethod
from collections import defaultdict
from typing import ClassVar, Protocol, runtime_checkable

from .exceptions import InvalidSiteError, InvalidSizeError


@runtime_checkable
class ForestProtocol(Protocol):
    """
    Union-find 協定

    任何提供 find / connected / union / count 的物件皆可交給
    ConnectivityFilter 或 ConnectivitySimulator 使用
    """

    def find(self, site: int) -> int:
        """回傳站點所屬分量的代表元素"""
        ...

    def connected(self, p: int, q: int) -> bool:
        """兩站點是否位於同一分量"""
        ...

    def union(self, p: int, q: int) -> None:
        """合併兩站點所屬的分量"""
        ...

    def count(self) -> int:
        """目前分量數量"""
        ...


class BaseForest(ABC):
    """
    Disjoint-set forest 抽象基底類別

    站點為 0..n-1 的整數，建立後每個站點各自為一個分量。
    公開方法在任何修改前先驗證參數，被拒絕的呼叫不會改變狀態。

    非執行緒安全：同一實例不可被多個執行緒同時修改，
    若有此需求須由呼叫端自行加鎖。

    子類別需實作:
        _root: 由已驗證的站點找到代表元素（可順便壓縮路徑）
        _link: 將兩個不同的代表元素合併
    """

    name: ClassVar[str] = ""
    description: ClassVar[str] = ""

    def __init__(self, n: int) -> None:
        """
        初始化 forest

        Args:
            n: 站點數量 (0..n-1)

        Raises:
            InvalidSizeError: n 為負數或不是整數
        """
        try:
            n = operator.index(n)
        except TypeError as exc:
            raise InvalidSizeError(f"site count must be an integer: {n!r}") from exc
        if n < 0:
            raise InvalidSizeError(f"site count must be non-negative: {n}")

        self._n = n
        self._count = n
        self._parent: list[int] = list(range(n))

    def __len__(self) -> int:
        return self._n

    def __repr__(self) -> str:
        return f"{type(self).__name__}(n={self._n}, count={self._count})"

    def validate(self, site: int) -> int:
        """
        驗證站點索引

        Args:
            site: 站點索引（接受 int 與 numpy 整數）

        Returns:
            正規化後的 int 索引

        Raises:
            InvalidSiteError: 索引不是整數或不在 [0, n) 範圍內
        """
        try:
            index = operator.index(site)
        except TypeError as exc:
            raise InvalidSiteError(f"site must be an integer: {site!r}") from exc
        if index < 0 or index >= self._n:
            raise InvalidSiteError(
                f"index {index} is not between 0 and {self._n - 1}"
            )
        return index

    def count(self) -> int:
        """目前分量數量（永不失敗）"""
        return self._count

    def find(self, site: int) -> int:
        """
        尋找站點所屬分量的代表元素

        代表元素只會在 union 呼叫之間改變

        Args:
            site: 站點索引

        Returns:
            代表元素索引

        Raises:
            InvalidSiteError: 索引超出範圍
        """
        return self._root(self.validate(site))

    def connected(self, p: int, q: int) -> bool:
        """
        兩站點是否連通

        Raises:
            InvalidSiteError: 任一索引超出範圍
        """
        p = self.validate(p)
        q = self.validate(q)
        return self._root(p) == self._root(q)

    def union(self, p: int, q: int) -> None:
        """
        合併 p 與 q 所屬的分量

        若已連通則不做任何事；否則合併並使分量數減一

        Raises:
            InvalidSiteError: 任一索引超出範圍
        """
        p = self.validate(p)
        q = self.validate(q)
        root_p = self._root(p)
        root_q = self._root(q)
        if root_p == root_q:
            return

        self._link(root_p, root_q)
        self._count -= 1

    def components(self) -> dict[int, list[int]]:
        """
        依代表元素將站點分組

        Returns:
            代表元素 -> 該分量的站點列表（遞增排序）
        """
        by_root: defaultdict[int, list[int]] = defaultdict(list)
        for site in range(self._n):
            by_root[self._root(site)].append(site)
        return dict(by_root)

    @abstractmethod
    def _root(self, site: int) -> int:
        """由已驗證的站點找到代表元素"""

    @abstractmethod
    def _link(self, root_p: int, root_q: int) -> None:
        """合併兩個不同的代表元素（不處理分量計數）"""
