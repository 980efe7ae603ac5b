"""
Configuration management for Reef Nutrients.

This module provides dataclasses for target ranges, chart and display settings,
with support for loading from YAML files and runtime modification via UI.
"""

from dataclasses import dataclass, field, asdict, fields
from pathlib import Path
from typing import Optional, Dict, Any, Tuple
import yaml

from reef_nutrients.utils.colors import LINE_COLOR, BAND_COLOR


@dataclass
class TargetRanges:
    """Healthy nutrient ranges in ppm.

    Common reef-keeping targets for a mixed reef tank.
    """
    po4_min: float = 0.02   # Phosphate lower bound
    po4_max: float = 0.08   # Phosphate upper bound
    no3_min: float = 2.0    # Nitrate lower bound
    no3_max: float = 15.0   # Nitrate upper bound

    def for_metric(self, metric: str) -> Tuple[float, float]:
        """Return (min, max) target for 'po4' or 'no3'."""
        if metric == 'po4':
            return self.po4_min, self.po4_max
        if metric == 'no3':
            return self.no3_min, self.no3_max
        raise ValueError(f"Unknown metric: {metric!r}")


@dataclass
class ChartSettings:
    """Settings for chart scaling and rendering."""
    # Axis padding applied to the raw min/max
    padding_low: float = 0.9
    padding_high: float = 1.1

    # Horizontal gridlines (equal subdivisions of the plot height)
    gridline_divisions: int = 4

    # Roughly how many x-axis date labels to show
    visible_labels: int = 6

    height: int = 220

    line_color: str = LINE_COLOR
    band_color: str = BAND_COLOR
    band_opacity: float = 0.15


@dataclass
class DisplaySettings:
    """Number formatting for summary cards and the history table."""
    po4_decimals: int = 3
    no3_decimals: int = 1
    ratio_decimals: int = 1
    placeholder: str = "—"

    def decimals_for(self, metric: str) -> int:
        return self.po4_decimals if metric == 'po4' else self.no3_decimals


@dataclass
class StorageSettings:
    """Where readings are stored on disk."""
    data_path: str = "reef_nutrients.json"


@dataclass
class TrackerConfig:
    """Master configuration container."""
    targets: TargetRanges = field(default_factory=TargetRanges)
    chart: ChartSettings = field(default_factory=ChartSettings)
    display: DisplaySettings = field(default_factory=DisplaySettings)
    storage: StorageSettings = field(default_factory=StorageSettings)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TrackerConfig':
        """Create config from dictionary."""
        return cls(
            targets=TargetRanges(**data.get('targets', {})),
            chart=ChartSettings(**data.get('chart', {})),
            display=DisplaySettings(**data.get('display', {})),
            storage=StorageSettings(**data.get('storage', {})),
        )


# Counts used as divisors when building gridlines and label strides
AT_LEAST_ONE = {
    ('chart', 'gridline_divisions'),
    ('chart', 'visible_labels'),
}


def load_config(config_path: Optional[Path] = None) -> TrackerConfig:
    """Load configuration from YAML file.

    Args:
        config_path: Path to config.yaml. If None, looks for config.yaml
                    in the reef_nutrients package directory.

    Returns:
        TrackerConfig with values from file merged with defaults.
    """
    if config_path is None:
        config_path = Path(__file__).parent / "config.yaml"
    config_path = Path(config_path)

    if not config_path.exists():
        return TrackerConfig()

    with open(config_path, 'r') as f:
        data = yaml.safe_load(f) or {}

    # Create config with defaults, then override with file values
    config = TrackerConfig()

    for section in fields(config):
        values = data.get(section.name)
        if not values:
            continue
        target = getattr(config, section.name)
        for key, value in values.items():
            if hasattr(target, key):
                if (section.name, key) in AT_LEAST_ONE:
                    value = max(1, int(value))
                setattr(target, key, value)

    return config


def save_config(config: TrackerConfig, config_path: Path) -> None:
    """Save configuration to YAML file."""
    with open(config_path, 'w') as f:
        yaml.dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)
