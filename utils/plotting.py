# utils/plotting.py

from typing import Optional

import plotly.graph_objects as go

from models import SimulationResult

CONE_COLOR = "#6366f1"
MEDIAN_COLOR = "#4f46e5"
TARGET_COLOR = "#f43f5e"


def empty_figure(message: str, title: str = "Wealth Projection") -> go.Figure:
    fig = go.Figure()
    fig.add_annotation(
        text=message,
        xref="paper", yref="paper", x=0.5, y=0.5,
        showarrow=False, font_size=20
    )
    fig.update_layout(title=title, height=450, template="plotly_white")
    return fig


# ------------------------------------------------------------------
# Cone of uncertainty: p10-p90 band, median path, target line
# ------------------------------------------------------------------
def create_cone_figure(result: Optional[SimulationResult], inflation_adjusted: bool = False) -> go.Figure:
    """
    Builds the projection chart from a SimulationResult.
    Guards against a missing result (target year not in the future).
    """
    if result is None or not result.chart_data:
        return empty_figure("Pick a target year after the current year")

    years = [s.year for s in result.chart_data]
    p10 = [s.p10 for s in result.chart_data]
    p50 = [s.p50 for s in result.chart_data]
    p90 = [s.p90 for s in result.chart_data]
    target = [s.target for s in result.chart_data]

    hover = '<b>%{fullData.name}</b><br>Year: %{x}<br>Value: ₹%{y:,.0f}<extra></extra>'

    fig = go.Figure()

    # Lower bound first so the upper bound can fill down to it
    fig.add_trace(go.Scatter(
        x=years, y=p10,
        mode='lines',
        line=dict(color=CONE_COLOR, width=1, dash='dash'),
        name="Pessimistic (10%)",
        hovertemplate=hover,
    ))
    fig.add_trace(go.Scatter(
        x=years, y=p90,
        mode='lines',
        line=dict(color=CONE_COLOR, width=1, dash='dash'),
        fill='tonexty',
        fillcolor='rgba(99, 102, 241, 0.15)',
        name="Optimistic (90%)",
        hovertemplate=hover,
    ))
    fig.add_trace(go.Scatter(
        x=years, y=p50,
        mode='lines',
        line=dict(color=MEDIAN_COLOR, width=3),
        name="Median (50%)",
        hovertemplate=hover,
    ))
    fig.add_trace(go.Scatter(
        x=years, y=target,
        mode='lines',
        line=dict(color=TARGET_COLOR, width=2, dash='dot'),
        name="Target",
        hovertemplate=hover,
    ))

    basis = "Real (today's ₹)" if inflation_adjusted else "Nominal (₹)"
    fig.update_layout(
        title="Wealth Projection – 90% Likely Range",
        xaxis_title="Year",
        yaxis_title=f"Corpus, {basis}",
        template="plotly_white",
        hovermode="x unified",
        height=450,
        legend=dict(x=0, y=1, xanchor="left", yanchor="top", bgcolor="rgba(255,255,255,0.9)")
    )
    return fig
