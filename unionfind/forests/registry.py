"""
Forest 註冊表

以名稱註冊各種 union-find 實作，並提供建立與列舉功能
"""

from collections.abc import Callable

from unionfind.core.interfaces import BaseForest
from unionfind.data_model import VariantInfo


ForestType = type[BaseForest]


class ForestRegistry:
    """
    Forest 實作註冊表

    用法::

        @ForestRegistry.register("quick-find")
        class QuickFindForest(BaseForest):
            ...

        forest = ForestRegistry.create("quick-find", 10)
    """

    _forests: dict[str, ForestType] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[ForestType], ForestType]:
        """
        註冊裝飾器

        Args:
            name: 實作名稱

        Returns:
            類別裝飾器
        """

        def decorator(forest_cls: ForestType) -> ForestType:
            if name in cls._forests and cls._forests[name] is not forest_cls:
                msg = f"Forest variant {name!r} is already registered"
                raise ValueError(msg)
            forest_cls.name = name
            cls._forests[name] = forest_cls
            return forest_cls

        return decorator

    @classmethod
    def get(cls, name: str) -> ForestType:
        """
        取得已註冊的實作類別

        Raises:
            KeyError: 名稱未註冊
        """
        try:
            return cls._forests[name]
        except KeyError:
            available = ", ".join(sorted(cls._forests))
            msg = f"Unknown forest variant {name!r} (available: {available})"
            raise KeyError(msg) from None

    @classmethod
    def create(cls, name: str, n: int) -> BaseForest:
        """
        建立指定實作的 forest

        Args:
            name: 實作名稱
            n: 站點數量

        Returns:
            新的 forest 實例
        """
        return cls.get(name)(n)

    @classmethod
    def list_names(cls) -> list[str]:
        """取得所有已註冊的名稱（依名稱排序）"""
        return sorted(cls._forests)

    @classmethod
    def list_variants(cls) -> list[VariantInfo]:
        """取得所有已註冊實作的說明"""
        return [
            VariantInfo(name=name, description=forest_cls.description)
            for name, forest_cls in sorted(cls._forests.items())
        ]

    @classmethod
    def is_registered(cls, name: str) -> bool:
        """名稱是否已註冊"""
        return name in cls._forests
