"""
應用程式設定

使用 Pydantic BaseSettings 管理環境變數和配置
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class AppSettings(BaseSettings):
    """
    應用程式設定

    從環境變數和 .env 文件讀取設定

    Attributes:
        log_level: 日誌級別 (DEBUG, INFO, WARNING, ERROR, CRITICAL，不分大小寫)
        default_variant: 預設 forest 實作名稱
        simulation_seed: 模擬用亂數種子（None 表示由系統熵產生）
        show_progress: 模擬時是否顯示進度條
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="UNIONFIND_",
        case_sensitive=False,
    )

    # 日誌設定
    log_level: LogLevel = "WARNING"

    # Forest 設定
    default_variant: str = "rank-halving"

    # 模擬設定
    simulation_seed: int | None = Field(default=None, ge=0)
    show_progress: bool = True

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        """環境變數的值不分大小寫"""
        if isinstance(value, str):
            return value.strip().upper()
        return value


# 創建全局設定實例
settings = AppSettings()
