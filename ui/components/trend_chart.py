# ui/components/trend_chart.py
import plotly.graph_objects as go

from core.time_utils import local_display
from services.trend_service import ChartDescriptor

GRID_COLOR = "#6B7280"
LABEL_COLOR = "#9CA3AF"

def trend_figure(chart: ChartDescriptor) -> go.Figure:
    """Plot-space descriptor -> plotly figure; y range is inverted to match screen coordinates."""
    fig = go.Figure()
    for s in chart.series:
        fig.add_trace(go.Scatter(
            x=[x for x, _ in s.points],
            y=[y for _, y in s.points],
            mode="lines+markers",
            name=s.label,
            line=dict(color=s.color, width=3, shape="linear"),
            marker=dict(size=8, color="#fff", line=dict(color=s.color, width=2)),
            customdata=[[local_display(m), sc] for m, sc in zip(s.moments, s.scores)],
            hovertemplate="%{customdata[0]}<br>" + s.label + ": %{customdata[1]}/10<extra></extra>",
        ))
    fig.update_xaxes(
        range=[0, chart.width], showgrid=False, zeroline=False,
        tickmode="array",
        tickvals=[x for x, _ in chart.x_labels],
        ticktext=[lbl for _, lbl in chart.x_labels],
        tickfont=dict(color=LABEL_COLOR, size=10),
    )
    fig.update_yaxes(
        range=[chart.height, 0], zeroline=False,
        tickmode="array",
        tickvals=[y for y, _ in chart.y_ticks],
        ticktext=[lbl for _, lbl in chart.y_ticks],
        gridcolor=GRID_COLOR, griddash="dot",
        tickfont=dict(color=LABEL_COLOR, size=10),
    )
    fig.update_layout(height=360, legend_title="", margin=dict(l=10, r=10, t=30, b=10))
    return fig
