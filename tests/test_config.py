"""Integration tests for YAML configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from reef_nutrients.analyzers.projector import ChartProjector
from reef_nutrients.config import TrackerConfig, TargetRanges, load_config, save_config

pytestmark = pytest.mark.integration


def test_defaults_when_file_missing(tmp_path: Path) -> None:
    """Missing config gives the built-in target ranges."""

    config = load_config(tmp_path / "config.yaml")

    assert config.targets.for_metric("po4") == (0.02, 0.08)
    assert config.targets.for_metric("no3") == (2.0, 15.0)
    assert config.chart.padding_low == 0.9
    assert config.chart.gridline_divisions == 4


def test_file_values_override_defaults(tmp_path: Path) -> None:
    """Known keys are merged; unknown keys are ignored."""

    path = tmp_path / "config.yaml"
    path.write_text(
        "targets:\n  no3_max: 10\n  bogus: 1\nchart:\n  visible_labels: 8\n",
        encoding="utf-8",
    )

    config = load_config(path)

    assert config.targets.no3_max == 10
    assert config.targets.no3_min == 2.0
    assert not hasattr(config.targets, "bogus")
    assert config.chart.visible_labels == 8


def test_save_and_reload(tmp_path: Path) -> None:
    """A saved config loads back equal."""

    config = TrackerConfig()
    config.targets.po4_max = 0.1
    config.storage.data_path = "tank.json"
    path = tmp_path / "config.yaml"

    save_config(config, path)

    assert load_config(path) == config
    assert TrackerConfig.from_dict(config.to_dict()) == config


def test_unknown_metric_target() -> None:
    """Only po4 and no3 have target ranges."""

    with pytest.raises(ValueError):
        TargetRanges().for_metric("kh")


@pytest.mark.parametrize("value", [0, -3])
def test_chart_counts_are_at_least_one(tmp_path: Path, value: int) -> None:
    """Zero or negative gridline and label counts are raised to 1."""

    path = tmp_path / "config.yaml"
    path.write_text(
        f"chart:\n  gridline_divisions: {value}\n  visible_labels: {value}\n",
        encoding="utf-8",
    )

    config = load_config(path)

    assert config.chart.gridline_divisions == 1
    assert config.chart.visible_labels == 1
    projector = ChartProjector(config.chart)
    assert projector.project([(0, 1.0), (1, 2.0)]).gridlines == (0.0, 1.0)
    assert projector.label_stride(24) == 24
