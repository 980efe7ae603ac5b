"""
Reef Nutrients - A phosphate and nitrate tracker for reef aquariums.

This package provides modular components for:
- Recording dated PO4/NO3 readings and storing them locally
- Summarizing the latest reading, its change and the NO3:PO4 ratio
- Projecting reading series into normalized chart coordinates
- Rendering trend charts with the target range highlighted
"""

from reef_nutrients.config import TrackerConfig, load_config
from reef_nutrients.analyzers.aggregator import summarize
from reef_nutrients.analyzers.projector import ChartProjector, project

__version__ = "1.0.0"
__all__ = ["TrackerConfig", "load_config", "summarize", "ChartProjector", "project"]
