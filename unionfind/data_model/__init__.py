"""
資料模型模組

提供應用程式的核心資料結構，使用 Pydantic 進行驗證
"""

from .core import FilterResult, Pair, SimulationResult, VariantInfo

__all__ = [
    "FilterResult",
    "Pair",
    "SimulationResult",
    "VariantInfo",
]
