from .app import AppSettings, settings

__all__ = ["AppSettings", "settings"]
