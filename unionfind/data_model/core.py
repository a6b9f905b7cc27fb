"""
核心資料模型

使用 Pydantic 封裝過濾與模擬的結果，確保資料完整性
"""

import math

from pydantic import BaseModel, ConfigDict, Field


Pair = tuple[int, int]


class VariantInfo(BaseModel):
    """
    Forest 實作資訊

    Attributes:
        name: 註冊名稱
        description: 說明
    """

    model_config = ConfigDict(frozen=True)

    name: str
    description: str


class FilterResult(BaseModel):
    """
    連通性過濾結果

    Attributes:
        accepted: 依到達順序排列的非冗餘站點對
        total: 讀取的站點對總數
        components: 處理完畢後的分量數量
    """

    model_config = ConfigDict(frozen=True)

    accepted: tuple[Pair, ...] = Field(default_factory=tuple)
    total: int = Field(ge=0)
    components: int = Field(ge=0)

    @property
    def redundant(self) -> int:
        """被判定為冗餘而略過的站點對數量"""
        return self.total - len(self.accepted)


class SimulationResult(BaseModel):
    """
    隨機連通模擬結果

    Attributes:
        n: 站點數量
        trials: 試驗次數
        variant: 使用的 forest 實作名稱
        edge_counts: 每次試驗達到全連通所需的邊數
        mean: 邊數的樣本平均
        stddev: 邊數的樣本標準差（分母 n-1，僅一次試驗時為 nan）
    """

    model_config = ConfigDict(frozen=True)

    n: int = Field(ge=1)
    trials: int = Field(ge=1)
    variant: str
    edge_counts: tuple[int, ...]
    mean: float
    stddev: float

    @property
    def reference(self) -> float:
        """理論參考值 1/2 n ln n"""
        return 0.5 * self.n * math.log(self.n)
