"""
連通性過濾功能

- filter: ConnectivityFilter 過濾冗餘站點對
- reader: 解析文字輸入串流
"""

from .filter import ConnectivityFilter
from .reader import read_input, read_text


__all__ = ["ConnectivityFilter", "read_input", "read_text"]
