#!/usr/bin/env python3
"""
Union-find 連通性工具

主程式進入點

使用方法:
    uv run main.py filter tinyUF.txt
    uv run main.py simulate 1000 100
"""

import sys

from unionfind.cli import main


if __name__ == "__main__":
    sys.exit(main())
