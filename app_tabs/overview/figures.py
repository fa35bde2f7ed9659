from typing import Dict, List, Optional

import plotly.graph_objects as go
from loguru import logger

from config.settings import PROJECTION_YEARS
from utils.colors import DARK_TEXT, LIGHT_GRID, LIGHT_TEXT, SEVERITY_SCALE, color_for

from .filters import FilterState
from .series import CHART_IDS

AXIS_FONT = dict(family="Inter, sans-serif", size=12, color=DARK_TEXT)
AXIS_TITLE_FONT = dict(size=14)

GRAPH_LABELS = {
    "trend": "Mortality Trend by Cancer Type",
    "bar": "Average Rate by Cancer Type (Top 15)",
    "pie": "Share of Total by Cancer Type",
    "area": "Cumulative Burden over Time",
    "treemap": "Severity vs. Volume Snapshot",
}


def _base_layout(**extra) -> dict:
    layout = dict(
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        font=dict(family="Inter, sans-serif", color=LIGHT_TEXT),
        uirevision="overview",
    )
    layout.update(extra)
    return layout


def empty_figure(message: str = "No data for the current selection") -> go.Figure:
    """Placeholder shown when a chart has nothing (or failed) to draw."""
    fig = go.Figure()
    fig.update_layout(
        **_base_layout(
            xaxis=dict(visible=False),
            yaxis=dict(visible=False),
            margin=dict(t=20, l=20, r=20, b=20),
            annotations=[
                dict(
                    text=message,
                    x=0.5,
                    y=0.5,
                    xref="paper",
                    yref="paper",
                    showarrow=False,
                    font=dict(size=14, color=LIGHT_TEXT),
                )
            ],
        )
    )
    return fig


def trend_figure(series: List[Dict], filters: FilterState) -> go.Figure:
    """Spline per cancer type with an optional dotted projection segment."""
    if not series:
        return empty_figure()
    fig = go.Figure()
    for s in series:
        color = color_for(s["color_index"])
        fig.add_trace(
            go.Scatter(
                x=s["years"],
                y=s["values"],
                mode="lines",
                name=s["type"],
                line=dict(color=color, width=3, shape="spline"),
            )
        )
        proj = s.get("projection")
        if proj:
            fig.add_trace(
                go.Scatter(
                    x=proj["years"],
                    y=proj["values"],
                    mode="lines",
                    name=f"{s['type']} (Proj)",
                    line=dict(color=color, width=1, dash="dot"),
                    showlegend=False,
                    hoverinfo="skip",
                )
            )
    extra_years = PROJECTION_YEARS if filters.show_projection else 0
    fig.update_layout(
        **_base_layout(
            xaxis=dict(
                title=dict(text="Year", font=AXIS_TITLE_FONT),
                gridcolor=LIGHT_GRID,
                range=[filters.year_min, filters.year_max + extra_years],
                tickfont=AXIS_FONT,
            ),
            yaxis=dict(
                title=dict(text=filters.metric, font=AXIS_TITLE_FONT),
                gridcolor=LIGHT_GRID,
                tickfont=AXIS_FONT,
            ),
            margin=dict(t=20, l=50, r=20, b=50),
            # Legend lives in its own panel
            showlegend=False,
        )
    )
    return fig


def bar_figure(series: Dict, filters: FilterState) -> go.Figure:
    if not series or not series.get("labels"):
        return empty_figure()
    labels = series["labels"]
    fig = go.Figure(
        go.Bar(
            x=labels,
            y=series["values"],
            marker=dict(color=[color_for(i) for i in range(len(labels))]),
            hovertemplate="<b>%{x}</b><br>%{y:.2f}<extra></extra>",
        )
    )
    fig.update_layout(
        **_base_layout(
            font=dict(family="Inter, sans-serif", color=DARK_TEXT),
            xaxis=dict(tickangle=-45, tickfont=AXIS_FONT),
            yaxis=dict(
                title=dict(text=f"Avg {filters.metric}", font=AXIS_TITLE_FONT),
                tickfont=AXIS_FONT,
                gridcolor=LIGHT_GRID,
            ),
            margin=dict(t=10, b=80),
        )
    )
    return fig


def pie_figure(series: Dict, filters: FilterState) -> go.Figure:
    """Donut of each type's summed metric."""
    if not series or not series.get("labels"):
        return empty_figure()
    fig = go.Figure(
        go.Pie(
            labels=series["labels"],
            values=series["values"],
            hole=0.4,
            textinfo="label+percent",
            textposition="inside",
            insidetextorientation="radial",
            automargin=True,
            marker=dict(colors=[color_for(i) for i in series["color_indices"]]),
            textfont=dict(family="Inter, sans-serif", size=13, color="#ffffff"),
            sort=False,
        )
    )
    fig.update_layout(
        **_base_layout(showlegend=False, margin=dict(t=0, b=0, l=0, r=0))
    )
    return fig


def area_figure(series: Dict, filters: FilterState) -> go.Figure:
    if not series or not series.get("series"):
        return empty_figure()
    fig = go.Figure()
    for s in series["series"]:
        color = color_for(s["color_index"])
        fig.add_trace(
            go.Scatter(
                x=series["years"],
                y=s["values"],
                name=s["type"],
                stackgroup="one",
                fillcolor=color,
                line=dict(width=0, color=color),
            )
        )
    fig.update_layout(
        **_base_layout(
            font=dict(family="Inter, sans-serif", color=DARK_TEXT),
            xaxis=dict(
                title=dict(text="Year", font=AXIS_TITLE_FONT),
                gridcolor=LIGHT_GRID,
                tickfont=AXIS_FONT,
            ),
            yaxis=dict(
                title=dict(text=f"Stacked {filters.metric}", font=AXIS_TITLE_FONT),
                gridcolor=LIGHT_GRID,
                tickfont=AXIS_FONT,
            ),
            margin=dict(t=20, l=50, r=20, b=50),
            showlegend=False,
        )
    )
    return fig


def treemap_figure(series: Dict, filters: FilterState) -> go.Figure:
    """Leaves sized by total cases, colored by the metric for the snapshot year."""
    # Only the root node means no selected type has a record that year
    if not series or len(series.get("labels") or []) <= 1:
        return empty_figure()
    year = series["year"]
    text = [
        f"Cases: {total:,}<br>Rate: {rate:.2f}" if parent else ""
        for parent, total, rate in zip(series["parents"], series["values"], series["colors"])
    ]
    fig = go.Figure(
        go.Treemap(
            labels=series["labels"],
            parents=series["parents"],
            values=series["values"],
            text=text,
            textinfo="label+value",
            hoverinfo="label+text+value",
            marker=dict(
                colors=series["colors"],
                colorscale=SEVERITY_SCALE,
                reversescale=False,
                showscale=True,
                colorbar=dict(title=f"{filters.metric} ({year})"),
            ),
            tiling=dict(packing="squarify"),
        )
    )
    fig.update_layout(**_base_layout(margin=dict(t=30, l=20, r=20, b=30)))
    return fig


RENDERERS = {
    "trend": trend_figure,
    "bar": bar_figure,
    "pie": pie_figure,
    "area": area_figure,
    "treemap": treemap_figure,
}


def build_overview_figures(series: Dict[str, Optional[object]], filters: FilterState) -> Dict[str, go.Figure]:
    """Render each chart independently; a failing chart falls back to a placeholder."""
    tab_logger = logger.bind(tab="Overview")
    figs: Dict[str, go.Figure] = {}
    for chart_id in CHART_IDS:
        data = series.get(chart_id)
        if data is None:
            figs[chart_id] = empty_figure("This chart could not be computed")
            continue
        try:
            figs[chart_id] = RENDERERS[chart_id](data, filters)
        except Exception:
            tab_logger.exception(f"Rendering failed for chart {chart_id}")
            figs[chart_id] = empty_figure("This chart could not be rendered")
    return figs
