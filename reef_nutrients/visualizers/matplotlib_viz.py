"""
Matplotlib Visualizer - Static nutrient charts for export.
"""

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
from io import BytesIO
from pathlib import Path
from typing import Optional, List, Tuple, Union

from reef_nutrients.analyzers.projector import x_label_positions
from reef_nutrients.config import TrackerConfig
from reef_nutrients.metrics.projection import ChartProjection
from reef_nutrients.utils.colors import AXIS_COLOR, GRID_COLOR, LABEL_COLOR


class MatplotlibVisualizer:
    """PNG-friendly version of the dashboard charts."""

    def __init__(self, config: Optional[TrackerConfig] = None):
        """Initialize visualizer.

        Args:
            config: Optional configuration.
        """
        self.config = config or TrackerConfig()

    def create_nutrient_chart(
        self,
        projection: ChartProjection,
        labels: List[str],
        title: str,
        unit: str = "ppm",
        decimals: int = 2,
        figsize: Tuple[float, float] = (6, 3),
    ) -> plt.Figure:
        """Create a static line chart for one nutrient.

        Args:
            projection: Output of ChartProjector.project.
            labels: Ascending date labels for the whole entry list.
            title: Chart title.
            unit: Y-axis unit label.
            decimals: Decimals for y tick labels.
            figsize: Figure size in inches.

        Returns:
            Matplotlib Figure.
        """
        chart = self.config.chart
        fig, ax = plt.subplots(figsize=figsize)

        for fraction in projection.gridlines:
            ax.axhline(fraction, color=GRID_COLOR, linewidth=1, zorder=0)

        if projection.band is not None:
            ax.axhspan(
                projection.band.low,
                projection.band.high,
                color=chart.band_color,
                alpha=chart.band_opacity,
                linewidth=0,
                zorder=1,
            )

        if not projection.is_empty:
            xs = [p.x_fraction for p in projection.points]
            ys = [p.y_fraction for p in projection.points]
            ax.plot(xs, ys, color=chart.line_color, linewidth=2,
                    solid_capstyle='round', solid_joinstyle='round', zorder=2)
            ax.scatter(xs, ys, color=chart.line_color, s=20, zorder=3)
        else:
            ax.text(0.5, 0.5, "No data", ha='center', va='center', color=LABEL_COLOR)

        ax.set_xlim(-0.02, 1.02)
        ax.set_ylim(0, 1)
        ax.set_yticks(list(projection.gridlines))
        ax.set_yticklabels([f"{projection.value_at(f):.{decimals}f}" for f in projection.gridlines])

        ticks = x_label_positions(projection, labels, chart.visible_labels)
        ax.set_xticks([pos for pos, _ in ticks])
        ax.set_xticklabels([text for _, text in ticks])

        for side in ('top', 'right'):
            ax.spines[side].set_visible(False)
        for side in ('left', 'bottom'):
            ax.spines[side].set_color(AXIS_COLOR)
        ax.tick_params(colors=LABEL_COLOR, labelsize=8)
        ax.set_ylabel(unit, color=LABEL_COLOR)
        ax.set_title(title, loc='left', fontsize=11)

        fig.tight_layout()
        return fig

    def save_figure(
        self,
        fig: plt.Figure,
        filepath: Union[str, Path],
        dpi: int = 150,
    ) -> None:
        """Save figure to file."""
        fig.savefig(filepath, dpi=dpi, bbox_inches='tight')

    def figure_to_bytes(self, fig: plt.Figure, format: str = 'png') -> bytes:
        """Convert figure to bytes for embedding.

        Args:
            fig: Matplotlib figure.
            format: Output format (png, svg, pdf).

        Returns:
            Image bytes.
        """
        buf = BytesIO()
        fig.savefig(buf, format=format, dpi=150, bbox_inches='tight')
        buf.seek(0)
        return buf.getvalue()
