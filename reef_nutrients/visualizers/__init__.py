"""Visualization modules for nutrient charts."""

from reef_nutrients.visualizers.matplotlib_viz import MatplotlibVisualizer
from reef_nutrients.visualizers.plotly_viz import PlotlyVisualizer

__all__ = ["MatplotlibVisualizer", "PlotlyVisualizer"]
