"""
Pytest 配置和共用 fixtures
"""

from pathlib import Path

import numpy as np
import pytest

from tests.fixtures.datasets import TINY_UF_TEXT
from unionfind.core.interfaces import BaseForest
from unionfind.forests import ForestRegistry


@pytest.fixture(params=ForestRegistry.list_names())
def forest_cls(request: pytest.FixtureRequest) -> type[BaseForest]:
    """逐一提供每種已註冊的 forest 實作"""
    return ForestRegistry.get(request.param)


@pytest.fixture
def tiny_uf_file(tmp_path: Path) -> Path:
    """寫出 tinyUF 資料檔"""
    path = tmp_path / "tinyUF.txt"
    path.write_text(TINY_UF_TEXT, encoding="utf-8")
    return path


@pytest.fixture
def random_pairs() -> tuple[int, list[tuple[int, int]]]:
    """固定種子產生的隨機站點對 (n, pairs)"""
    n = 60
    rng = np.random.default_rng(1234)
    pairs = [(int(p), int(q)) for p, q in rng.integers(n, size=(150, 2))]
    return n, pairs
