import dash
from dash import ALL, Input, Output, State, clientside_callback, ctx, html, no_update
from dash.exceptions import PreventUpdate
from loguru import logger
import plotly.io as pio

from app_tabs.overview.figures import build_overview_figures
from app_tabs.overview.filters import (
    FilterState,
    clamp_year_range,
    default_filters,
    filter_records,
    normalize_filters,
    search_type_options,
)
from app_tabs.overview.kpis import KPIs, compute_kpis, format_kpis
from app_tabs.overview.layout import get_error_layout, get_layout, legend_items
from app_tabs.overview.series import CHART_IDS, build_series
from config.logging import configure_logging
from config.settings import DASH_DEBUG, DASH_PORT
from data_layer.base import LoadFailure, load_dataset
from data_layer.records import Dataset
from services.insights import describe


# ---------- Fonts / styles ----------
external_stylesheets = [
    "https://fonts.googleapis.com/css2?family=Inter:wght@300;400;500;600;700;800&display=swap"
]


EMPTY_KPIS = KPIs(avg_rate=None, top_type=None, top_value=0.0)


def recompute(dataset: Dataset, filters: FilterState) -> dict:
    """Full pipeline for one filter state: filter -> aggregate -> render -> KPIs.

    The records are filtered once and shared by the aggregators and the KPIs.
    Returns figures per chart id, the KPIs and the derived series so callers
    (callbacks, tests, exports) share one code path.
    """
    filtered = filter_records(dataset.frame, filters)
    series = build_series(dataset, filters, filtered=filtered)
    figures = build_overview_figures(series, filters)
    try:
        kpis = compute_kpis(filtered, filters.metric)
    except Exception:
        logger.bind(tab="Overview").exception("KPI computation failed")
        kpis = EMPTY_KPIS
    return {"series": series, "figures": figures, "kpis": kpis}


def filters_from_controls(
    dataset: Dataset,
    trig_id,
    year_range,
    checked,
    metric,
    projection,
    current: dict | None,
) -> FilterState:
    """Build the next FilterState from raw sidebar values.

    `trig_id` is the id of the control that fired. Select all and Clear all
    override the checklist. The slider handle that moved keeps its position
    when the range is clamped.
    """
    prev = normalize_filters(current, dataset)

    lo, hi = (list(year_range or []) + [prev.year_min, prev.year_max])[:2]
    moved = "max" if (hi != prev.year_max and lo == prev.year_min) else "min"
    lo, hi = clamp_year_range(lo, hi, dataset.year_bounds, moved=moved)
    if trig_id == "select-all-btn":
        checked = list(dataset.cancer_types)
    elif trig_id == "clear-all-btn":
        checked = []

    raw = {
        "year_min": lo,
        "year_max": hi,
        "selected_types": checked,
        "metric": metric,
        "show_projection": "on" in (projection or []),
    }
    return normalize_filters(raw, dataset)


def kpi_outputs(kpis: KPIs, metric: str) -> tuple:
    """Values for the three KPI cards and the KPI store.

    An empty result leaves every KPI output untouched so the previous values
    stay on screen.
    """
    if kpis.avg_rate is None:
        return no_update, no_update, no_update, no_update
    shown = format_kpis(kpis, metric)
    return shown["avg_rate"], shown["top_type"], shown["top_value"], kpis.to_dict()


def create_dashboard(dataset: Dataset | None, load_error: str | None = None):
    """
    Single-page cancer statistics dashboard: year/type/metric filters, five
    linked charts, KPI cards, legend and per-chart descriptive text.

    When the dataset failed to load, the app only shows a blocking error page.
    """
    app = dash.Dash(
        __name__,
        suppress_callback_exceptions=True,
        external_stylesheets=external_stylesheets,
        title="Cancer Mortality Dashboard",
    )
    pio.templates.default = "plotly_white"

    if dataset is None:
        app.layout = get_error_layout(load_error or "Dataset not available")
        return app

    tab_logger = logger.bind(tab="Overview")
    initial = default_filters(dataset)
    app.layout = html.Div(
        [
            get_layout(dataset, initial),
            html.Div(id="resize-signal", style={"display": "none"}),
        ]
    )

    # ----- Filter controls -> FilterState -----
    @app.callback(
        Output("filter-store", "data"),
        Output("type-checklist", "value"),
        Output("year-range", "value"),
        Output("year-readout", "children"),
        Input("year-range", "value"),
        Input("type-checklist", "value"),
        Input("select-all-btn", "n_clicks"),
        Input("clear-all-btn", "n_clicks"),
        Input("metric-select", "value"),
        Input("projection-toggle", "value"),
        State("filter-store", "data"),
        prevent_initial_call=True,
    )
    def update_filters(year_range, checked, _all, _clear, metric, projection, current):
        trig_id = ctx.triggered_id
        if trig_id is None:
            raise PreventUpdate
        new = filters_from_controls(
            dataset, trig_id, year_range, checked, metric, projection, current
        )

        tab_logger.info(
            f"Filters changed via {trig_id}: years {new.year_min}-{new.year_max}, "
            f"{len(new.selected_types)} types, metric {new.metric!r}, projection {new.show_projection}"
        )
        return (
            new.to_dict(),
            list(new.selected_types),
            [new.year_min, new.year_max],
            f"{new.year_min} - {new.year_max}",
        )

    # ----- Searchable type list -----
    @app.callback(
        Output("type-checklist", "options"),
        Input("type-search", "value"),
    )
    def filter_type_options(term):
        # Hidden types keep their checked state; only the visible list changes
        return [{"label": t, "value": t} for t in search_type_options(dataset.cancer_types, term)]

    # ----- Recompute charts, legend and KPIs -----
    @app.callback(
        *[Output(f"graph-{cid}", "figure") for cid in CHART_IDS],
        Output("legend", "children"),
        Output("kpi-avg-rate", "children"),
        Output("kpi-top-type", "children"),
        Output("kpi-top-value", "children"),
        Output("kpi-store", "data"),
        Input("filter-store", "data"),
    )
    def update_dashboard(filter_data):
        filters = normalize_filters(filter_data, dataset)
        result = recompute(dataset, filters)
        figs = [result["figures"][cid] for cid in CHART_IDS]
        return (
            *figs,
            legend_items(filters),
            *kpi_outputs(result["kpis"], filters.metric),
        )

    # ----- Expand a chart (one at a time) and describe it -----
    @app.callback(
        Output({"type": "chart-card", "chart": ALL}, "className"),
        Output({"type": "expand-btn", "chart": ALL}, "children"),
        Output({"type": "analysis", "chart": ALL}, "children"),
        Output("main-content", "className"),
        Input({"type": "expand-btn", "chart": ALL}, "n_clicks"),
        State({"type": "chart-card", "chart": ALL}, "className"),
        State({"type": "analysis", "chart": ALL}, "children"),
        State("filter-store", "data"),
        State("kpi-store", "data"),
        prevent_initial_call=True,
    )
    def toggle_expand(_clicks, classes, texts, filter_data, kpi_data):
        trig_id = ctx.triggered_id
        if not trig_id or not any(_clicks or []):
            raise PreventUpdate
        chart_ids = [o["id"]["chart"] for o in ctx.outputs_list[0]]
        target = trig_id["chart"]
        idx = chart_ids.index(target)
        was_expanded = "expanded" in (classes[idx] or "").split()

        base_classes = [
            " ".join(c for c in (cls or "").split() if c != "expanded") for cls in classes
        ]
        labels = ["Expand"] * len(chart_ids)
        texts = list(texts or [None] * len(chart_ids))
        if was_expanded:
            return base_classes, labels, texts, ""

        base_classes[idx] = f"{base_classes[idx]} expanded"
        labels[idx] = "Minimize"
        filters = normalize_filters(filter_data, dataset)
        texts[idx] = describe(target, filters, KPIs.from_dict(kpi_data))
        tab_logger.info(f"Expanded chart {target}")
        return base_classes, labels, texts, "has-expanded-chart"

    # Layout changed size: let Plotly re-measure the expanded graph
    clientside_callback(
        """
        function(className) {
            setTimeout(function() {
                window.dispatchEvent(new Event('resize'));
            }, 50);
            return window.dash_clientside.no_update;
        }
        """,
        Output("resize-signal", "children"),
        Input("main-content", "className"),
        prevent_initial_call=True,
    )

    # Export: hand the current page to the browser's print dialog
    clientside_callback(
        """
        function(n) {
            if (n) {
                window.print();
            }
            return window.dash_clientside.no_update;
        }
        """,
        Output("print-signal", "children"),
        Input("export-btn", "n_clicks"),
        prevent_initial_call=True,
    )

    return app


if __name__ == "__main__":
    configure_logging()
    try:
        dataset = load_dataset()
        app = create_dashboard(dataset)
    except LoadFailure as e:
        logger.error(f"Failed to load dataset: {e}")
        app = create_dashboard(None, load_error=str(e))
    app.run(debug=DASH_DEBUG, port=DASH_PORT)
