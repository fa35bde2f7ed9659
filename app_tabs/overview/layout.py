from dash import dcc, html

from data_layer.records import Dataset
from services.insights import chart_title
from utils.colors import color_for

from .figures import GRAPH_LABELS
from .filters import FilterState
from .series import CHART_IDS


def legend_items(filters: FilterState):
    """One swatch per selected type, colored by its position in the selection."""
    return [
        html.Div(
            [
                html.Div(
                    className="legend-color",
                    style={"background": color_for(i)},
                ),
                html.Span(ctype),
            ],
            className="legend-item",
        )
        for i, ctype in enumerate(filters.selected_types)
    ]


def _kpi_card(label: str, value_id: str, sub_id: str | None = None):
    children = [
        html.Div(label, className="kpi-label"),
        html.Div("-", id=value_id, className="kpi-value"),
    ]
    if sub_id:
        children.append(html.Div("", id=sub_id, className="kpi-sub"))
    return html.Div(children, className="kpi-card")


def _chart_card(chart_id: str, wide: bool = False):
    return html.Div(
        [
            html.Div(
                [
                    html.Div(GRAPH_LABELS[chart_id], className="graph-title"),
                    html.Button(
                        "Expand",
                        id={"type": "expand-btn", "chart": chart_id},
                        n_clicks=0,
                        className="expand-btn",
                    ),
                ],
                className="graph-header",
            ),
            dcc.Graph(
                id=f"graph-{chart_id}",
                config={"responsive": True, "displayModeBar": chart_id == "trend"},
                style={"height": "100%", "minHeight": "360px"},
            ),
            html.Div(
                [
                    html.Div(chart_title(chart_id), className="analysis-title"),
                    html.Div(id={"type": "analysis", "chart": chart_id}),
                ],
                className="analysis",
            ),
        ],
        id={"type": "chart-card", "chart": chart_id},
        className="dashboard-card chart-card" + (" wide" if wide else ""),
    )


def _sidebar(dataset: Dataset, filters: FilterState):
    lo, hi = dataset.year_bounds
    return html.Div(
        [
            html.Div("Year range", className="control-label"),
            dcc.RangeSlider(
                id="year-range",
                min=lo,
                max=hi,
                step=1,
                value=[filters.year_min, filters.year_max],
                allowCross=False,
                pushable=1,
                marks=None,
                tooltip={"placement": "bottom", "always_visible": False},
            ),
            html.Div(
                f"{filters.year_min} - {filters.year_max}",
                id="year-readout",
                className="control-readout",
            ),
            html.Div("Cancer types", className="control-label"),
            dcc.Input(
                id="type-search",
                type="text",
                placeholder="Search cancer types...",
                debounce=False,
                style={"width": "100%"},
            ),
            html.Div(
                [
                    html.Button("Select all", id="select-all-btn", n_clicks=0),
                    html.Button("Clear all", id="clear-all-btn", n_clicks=0),
                ],
                className="graph-actions-row",
            ),
            dcc.Checklist(
                id="type-checklist",
                options=[{"label": t, "value": t} for t in dataset.cancer_types],
                value=list(filters.selected_types),
                className="type-checklist",
                labelClassName="checkbox-item",
            ),
            html.Div("Metric", className="control-label"),
            dcc.Dropdown(
                id="metric-select",
                options=[{"label": m, "value": m} for m in dataset.metrics],
                value=filters.metric,
                clearable=False,
            ),
            dcc.Checklist(
                id="projection-toggle",
                options=[{"label": " Show projection (linear trend)", "value": "on"}],
                value=["on"] if filters.show_projection else [],
                className="switch-toggle",
            ),
            html.Button(
                "Export / Print",
                id="export-btn",
                n_clicks=0,
                className="export-btn",
            ),
            html.Div(id="print-signal", style={"display": "none"}),
        ],
        className="sidebar",
    )


def get_layout(dataset: Dataset, filters: FilterState):
    """Return the single-page dashboard layout (sidebar, KPIs, legend, five charts)."""
    return html.Div(
        [
            dcc.Store(id="filter-store", data=filters.to_dict()),
            dcc.Store(id="kpi-store", data=None),
            _sidebar(dataset, filters),
            html.Div(
                [
                    html.H1("Cancer Mortality Dashboard", style={"textAlign": "center"}),
                    html.Div(
                        [
                            _kpi_card("Average rate", "kpi-avg-rate"),
                            _kpi_card("Highest cancer type", "kpi-top-type", "kpi-top-value"),
                        ],
                        className="kpi-row",
                    ),
                    html.Div(id="legend", className="custom-legend"),
                    html.Div(
                        [_chart_card(cid, wide=(cid in ("trend", "treemap"))) for cid in CHART_IDS],
                        className="chart-grid",
                    ),
                ],
                id="main-content",
            ),
        ],
        className="dashboard",
        style={"fontFamily": '"Inter", sans-serif'},
    )


def get_error_layout(message: str):
    """Blocking message shown when the dataset cannot be loaded."""
    return html.Div(
        [
            html.H1("Cancer Mortality Dashboard"),
            html.Div(
                [
                    html.H3("Failed to load dataset"),
                    html.P(message),
                    html.P(
                        "Check that the embedded data is intact or that CANCER_DATA_PATH "
                        "points to a readable CSV file, then restart the app."
                    ),
                ],
                className="load-error",
                role="alert",
            ),
        ],
        className="dashboard",
        style={"fontFamily": '"Inter", sans-serif', "padding": "40px"},
    )
