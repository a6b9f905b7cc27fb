"""
ConnectivityFilter 與輸入讀取測試
"""

import io

import pytest

from tests.fixtures.datasets import SCENARIO_PAIRS, TINY_UF_ACCEPTED, TINY_UF_TEXT
from unionfind.core import InputFormatError, InvalidSiteError, InvalidSizeError
from unionfind.core.interfaces import BaseForest
from unionfind.features.connectivity_filter import (
    ConnectivityFilter,
    read_input,
    read_text,
)
from unionfind.forests import RankHalvingForest


class TestConnectivityFilter:
    """過濾器測試"""

    @pytest.mark.unit
    def test_scenario_all_accepted(self, forest_cls: type[BaseForest]) -> None:
        connectivity_filter = ConnectivityFilter(forest_cls(10))
        accepted = list(connectivity_filter.filter(SCENARIO_PAIRS))

        assert accepted == SCENARIO_PAIRS
        assert connectivity_filter.count() == 5

    @pytest.mark.unit
    def test_scenario_redundant_rejected(self, forest_cls: type[BaseForest]) -> None:
        connectivity_filter = ConnectivityFilter(forest_cls(10))
        list(connectivity_filter.filter(SCENARIO_PAIRS))

        assert connectivity_filter.accept(8, 9) is False
        assert connectivity_filter.count() == 5

    @pytest.mark.unit
    def test_tiny_uf(self, forest_cls: type[BaseForest]) -> None:
        n, pairs = read_text(TINY_UF_TEXT)
        result = ConnectivityFilter(forest_cls(n)).run(pairs)

        assert list(result.accepted) == TINY_UF_ACCEPTED
        assert result.total == 11
        assert result.redundant == 3
        assert result.components == 2

    @pytest.mark.unit
    def test_order_matters(self) -> None:
        first = ConnectivityFilter(RankHalvingForest(3))
        second = ConnectivityFilter(RankHalvingForest(3))

        assert list(first.filter([(0, 1), (1, 2), (0, 2)])) == [(0, 1), (1, 2)]
        assert list(second.filter([(0, 2), (1, 2), (0, 1)])) == [(0, 2), (1, 2)]

    @pytest.mark.unit
    def test_filter_is_lazy(self) -> None:
        forest = RankHalvingForest(4)
        connectivity_filter = ConnectivityFilter(forest)
        stream = connectivity_filter.filter([(0, 1), (2, 3)])

        assert forest.count() == 4
        assert next(stream) == (0, 1)
        assert forest.count() == 3

    @pytest.mark.unit
    def test_counters(self) -> None:
        connectivity_filter = ConnectivityFilter(RankHalvingForest(5))
        connectivity_filter.run([(0, 1), (1, 0), (2, 2), (3, 4)])

        assert connectivity_filter.seen_count == 4
        assert connectivity_filter.accepted_count == 2

    @pytest.mark.unit
    def test_invalid_site_propagates(self) -> None:
        connectivity_filter = ConnectivityFilter(RankHalvingForest(3))
        with pytest.raises(InvalidSiteError):
            connectivity_filter.run([(0, 1), (1, 3)])
        assert connectivity_filter.count() == 2


class TestReadInput:
    """輸入讀取測試"""

    @pytest.mark.unit
    def test_reads_count_and_pairs(self) -> None:
        n, pairs = read_input(io.StringIO(TINY_UF_TEXT))
        assert n == 10
        assert next(pairs) == (4, 3)
        assert len(list(pairs)) == 10

    @pytest.mark.unit
    def test_pairs_may_span_lines(self) -> None:
        n, pairs = read_text("3 0\n1 1 2\n")
        assert n == 3
        assert pairs == [(0, 1), (1, 2)]

    @pytest.mark.unit
    def test_only_count(self) -> None:
        assert read_text("5\n") == (5, [])

    @pytest.mark.unit
    def test_empty_input(self) -> None:
        with pytest.raises(InputFormatError, match="empty"):
            read_text("  \n\n")

    @pytest.mark.unit
    def test_non_integer_token(self) -> None:
        with pytest.raises(InputFormatError, match="line 2"):
            read_text("4\n0 x\n")

    @pytest.mark.unit
    def test_non_integer_count(self) -> None:
        with pytest.raises(InputFormatError):
            read_text("ten\n")

    @pytest.mark.unit
    def test_dangling_site(self) -> None:
        with pytest.raises(InputFormatError, match="no partner"):
            read_text("4\n0 1\n2\n")

    @pytest.mark.unit
    def test_invalid_utf8(self, tmp_path) -> None:
        path = tmp_path / "binary.txt"
        path.write_bytes(b"4\n0 1\n\xff\xfe 2\n")

        with path.open(encoding="utf-8") as stream:
            with pytest.raises(InputFormatError, match="not valid UTF-8"):
                _, pairs = read_input(stream)
                list(pairs)

    @pytest.mark.unit
    def test_negative_count_rejected_by_forest(self) -> None:
        n, _ = read_text("-3\n")
        with pytest.raises(InvalidSizeError):
            RankHalvingForest(n)
