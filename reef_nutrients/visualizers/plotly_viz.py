"""
Plotly Visualizer - Interactive nutrient charts for the Streamlit dashboard.

Charts are drawn directly in the projector's fraction space; tick labels
translate fractions back to ppm values and dates.
"""

import plotly.graph_objects as go
from typing import Optional, List, Tuple

from reef_nutrients.analyzers.projector import x_label_positions
from reef_nutrients.config import TrackerConfig
from reef_nutrients.metrics.projection import ChartProjection
from reef_nutrients.utils.colors import AXIS_COLOR, GRID_COLOR, hex_to_rgba


class PlotlyVisualizer:
    """Interactive Plotly visualizations for Streamlit.

    Provides interactive charts with consistent styling.
    """

    def __init__(self, config: Optional[TrackerConfig] = None):
        """Initialize visualizer.

        Args:
            config: Optional configuration.
        """
        self.config = config or TrackerConfig()
        self.font_family = "Inter, sans-serif"

    def _get_base_layout(self, height: int = 220, **kwargs) -> dict:
        """Get base layout for consistent styling."""
        return {
            'height': height,
            'margin': dict(l=50, r=12, t=40, b=30),
            'paper_bgcolor': 'rgba(0,0,0,0)',
            'plot_bgcolor': 'rgba(0,0,0,0)',
            'font': dict(family=self.font_family, size=12),
            'hoverlabel': dict(font_size=12, bordercolor='rgba(128,128,128,0.3)'),
            'showlegend': False,
            **kwargs
        }

    def x_ticks(self, projection: ChartProjection, labels: List[str]) -> Tuple[List[float], List[str]]:
        """Thinned x-axis tick positions and MM-DD texts, aligned with the points."""
        ticks = x_label_positions(projection, labels, self.config.chart.visible_labels)
        return [pos for pos, _ in ticks], [text for _, text in ticks]

    def y_ticks(self, projection: ChartProjection, decimals: int = 2) -> Tuple[List[float], List[str]]:
        """Gridline fractions and their ppm values."""
        fractions = list(projection.gridlines)
        texts = [f"{projection.value_at(f):.{decimals}f}" for f in fractions]
        return fractions, texts

    def create_nutrient_chart(
        self,
        projection: ChartProjection,
        labels: List[str],
        title: str,
        unit: str = "ppm",
        decimals: int = 2,
        height: Optional[int] = None,
    ) -> go.Figure:
        """Create a line chart for one nutrient with its target band.

        Args:
            projection: Output of ChartProjector.project.
            labels: Ascending date labels for the whole entry list.
            title: Chart title.
            unit: Unit shown in hover text.
            decimals: Decimals for y tick labels.
            height: Chart height; defaults to the configured chart height.

        Returns:
            Plotly Figure.
        """
        chart = self.config.chart
        fig = go.Figure()

        if projection.band is not None:
            fig.add_shape(
                type='rect',
                xref='x', yref='y',
                x0=0, x1=1,
                y0=projection.band.low, y1=projection.band.high,
                fillcolor=hex_to_rgba(chart.band_color, chart.band_opacity),
                line_width=0,
                layer='below',
            )

        if not projection.is_empty:
            fig.add_trace(
                go.Scatter(
                    x=[p.x_fraction for p in projection.points],
                    y=[p.y_fraction for p in projection.points],
                    customdata=[
                        [labels[p.index] if p.index < len(labels) else '', p.value]
                        for p in projection.points
                    ],
                    mode='lines+markers',
                    line=dict(color=chart.line_color, width=2),
                    marker=dict(color=chart.line_color, size=7),
                    hovertemplate=(
                        '%{customdata[0]}<br><b>%{customdata[1]}</b> '
                        + unit + '<extra></extra>'
                    ),
                )
            )

        x_vals, x_text = self.x_ticks(projection, labels)
        y_vals, y_text = self.y_ticks(projection, decimals)

        fig.update_layout(
            **self._get_base_layout(height=height or chart.height),
            title=dict(text=title, font=dict(size=14)),
        )
        fig.update_xaxes(
            range=[-0.02, 1.02],
            tickvals=x_vals,
            ticktext=x_text,
            showgrid=False,
            showline=True,
            linecolor=AXIS_COLOR,
            zeroline=False,
        )
        fig.update_yaxes(
            range=[0, 1],
            tickvals=y_vals,
            ticktext=y_text,
            showgrid=True,
            gridcolor=GRID_COLOR,
            showline=True,
            linecolor=AXIS_COLOR,
            zeroline=False,
        )

        return fig
