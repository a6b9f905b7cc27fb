"""
資料模型與設定測試
"""

import logging
import math

import pytest
from pydantic import ValidationError

from unionfind.data_model import FilterResult, SimulationResult, VariantInfo
from unionfind.settings import AppSettings


class TestFilterResult:
    """測試 FilterResult"""

    def test_redundant(self) -> None:
        result = FilterResult(accepted=((0, 1), (2, 3)), total=5, components=3)
        assert result.redundant == 3

    def test_defaults(self) -> None:
        result = FilterResult(total=0, components=4)
        assert result.accepted == ()
        assert result.redundant == 0

    def test_frozen(self) -> None:
        result = FilterResult(total=0, components=1)
        with pytest.raises(ValidationError):
            result.components = 2  # type: ignore[misc]

    def test_negative_total_rejected(self) -> None:
        with pytest.raises(ValidationError):
            FilterResult(total=-1, components=0)


class TestSimulationResult:
    """測試 SimulationResult"""

    def test_reference(self) -> None:
        result = SimulationResult(
            n=100, trials=2, variant="height", edge_counts=(250, 270), mean=260.0, stddev=14.1
        )
        assert result.reference == pytest.approx(0.5 * 100 * math.log(100))

    def test_nan_stddev_allowed(self) -> None:
        result = SimulationResult(
            n=3, trials=1, variant="weighted", edge_counts=(4,), mean=4.0, stddev=math.nan
        )
        assert math.isnan(result.stddev)

    def test_zero_sites_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SimulationResult(
                n=0, trials=1, variant="weighted", edge_counts=(0,), mean=0.0, stddev=0.0
            )


class TestVariantInfo:
    """測試 VariantInfo"""

    def test_frozen(self) -> None:
        info = VariantInfo(name="height", description="by height")
        with pytest.raises(ValidationError):
            info.name = "other"  # type: ignore[misc]


class TestAppSettings:
    """測試 AppSettings"""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
        monkeypatch.chdir(tmp_path)
        for key in ("LOG_LEVEL", "DEFAULT_VARIANT", "SIMULATION_SEED", "SHOW_PROGRESS"):
            monkeypatch.delenv(f"UNIONFIND_{key}", raising=False)

        config = AppSettings()
        assert config.log_level == "WARNING"
        assert config.default_variant == "rank-halving"
        assert config.simulation_seed is None
        assert config.show_progress is True

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("UNIONFIND_DEFAULT_VARIANT", "quick-find")
        monkeypatch.setenv("UNIONFIND_SIMULATION_SEED", "99")
        monkeypatch.setenv("UNIONFIND_SHOW_PROGRESS", "false")

        config = AppSettings()
        assert config.default_variant == "quick-find"
        assert config.simulation_seed == 99
        assert config.show_progress is False

    @pytest.mark.parametrize("raw", ["info", "Info", " debug "])
    def test_log_level_case_insensitive(
        self, monkeypatch: pytest.MonkeyPatch, raw: str
    ) -> None:
        monkeypatch.setenv("UNIONFIND_LOG_LEVEL", raw)
        assert AppSettings().log_level == raw.strip().upper()

    def test_unknown_log_level_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("UNIONFIND_LOG_LEVEL", "loud")
        with pytest.raises(ValidationError):
            AppSettings()

    def test_negative_seed_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("UNIONFIND_SIMULATION_SEED", "-1")
        with pytest.raises(ValidationError):
            AppSettings()

    def test_log_level_accepted_by_logging(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("UNIONFIND_LOG_LEVEL", "error")
        level = AppSettings().log_level
        assert logging.getLevelName(level) == logging.ERROR
