import json

import pytest
from dash import no_update
from plotly.utils import PlotlyJSONEncoder

import app as app_module
import app_tabs.overview.series as series_module
from app_tabs.overview.filters import default_filters
from app_tabs.overview.kpis import KPIs
from app_tabs.overview.layout import legend_items


def test_dashboard_builds(embedded_dataset):
    dash_app = app_module.create_dashboard(embedded_dataset)
    layout_json = json.dumps(dash_app.layout, cls=PlotlyJSONEncoder)
    for component_id in ("filter-store", "year-range", "type-checklist", "metric-select", "export-btn"):
        assert component_id in layout_json


def test_error_page_when_dataset_missing():
    dash_app = app_module.create_dashboard(None, load_error="Dataset is empty or missing")
    assert "Dataset is empty or missing" in str(dash_app.layout)


def test_recompute_end_to_end(small_dataset, small_filters):
    f = small_filters.with_changes(year_min=2020, year_max=2021)
    result = app_module.recompute(small_dataset, f)
    assert result["kpis"].top_type == "Lung"
    assert result["kpis"].avg_rate == pytest.approx(40.0)
    # Treemap is the fixed snapshot regardless of the year range
    assert result["series"]["treemap"]["labels"] == ["Breast", "Lung", "All Cancers"]

    full = app_module.recompute(small_dataset, small_filters)
    assert full["kpis"].avg_rate == pytest.approx(38.3333, rel=1e-4)


def test_recompute_filters_once_for_charts_and_kpis(monkeypatch, small_dataset, small_filters):
    def refilter(*_args, **_kwargs):
        raise AssertionError("records filtered a second time")

    monkeypatch.setattr(series_module, "filter_records", refilter)
    result = app_module.recompute(small_dataset, small_filters)
    assert result["series"]["pie"]["labels"] == ["Breast", "Lung"]
    assert result["kpis"].top_type == "Lung"


def test_recompute_survives_kpi_failure(monkeypatch, small_dataset, small_filters):
    def boom(*_args, **_kwargs):
        raise RuntimeError("bad kpis")

    monkeypatch.setattr(app_module, "compute_kpis", boom)
    result = app_module.recompute(small_dataset, small_filters)
    assert result["kpis"] == app_module.EMPTY_KPIS
    assert len(result["figures"]["trend"].data) == 2


def test_legend_matches_selection(embedded_dataset):
    f = default_filters(embedded_dataset)
    items = legend_items(f)
    assert len(items) == len(f.selected_types)
    assert items[2].children[1].children == f.selected_types[2]


def _controls(dataset, trig_id, year_range, checked, current, metric="ASR (World)", projection=None):
    return app_module.filters_from_controls(
        dataset, trig_id, year_range, checked, metric, projection or [], current
    )


def test_select_all_checks_every_type(small_dataset, small_filters):
    new = _controls(small_dataset, "select-all-btn", [2020, 2023], [], small_filters.to_dict())
    assert new.selected_types == ("Breast", "Lung")


def test_clear_all_unchecks_every_type(small_dataset, small_filters):
    new = _controls(small_dataset, "clear-all-btn", [2020, 2023], ["Lung"], small_filters.to_dict())
    assert new.selected_types == ()


def test_checklist_order_is_canonical(small_dataset, small_filters):
    new = _controls(small_dataset, "type-checklist", [2020, 2023], ["Lung", "Breast"], small_filters.to_dict())
    assert new.selected_types == ("Breast", "Lung")


def test_dragged_max_handle_keeps_its_position(small_dataset, small_filters):
    current = small_filters.with_changes(year_min=2021, year_max=2023).to_dict()
    new = _controls(small_dataset, "year-range", [2021, 2021], ["Breast", "Lung"], current)
    assert (new.year_min, new.year_max) == (2020, 2021)


def test_dragged_min_handle_keeps_its_position(small_dataset, small_filters):
    current = small_filters.with_changes(year_min=2020, year_max=2022).to_dict()
    new = _controls(small_dataset, "year-range", [2022, 2022], ["Breast", "Lung"], current)
    assert (new.year_min, new.year_max) == (2022, 2023)


def test_projection_and_unknown_metric_from_controls(small_dataset, small_filters):
    new = _controls(
        small_dataset, "metric-select", [2020, 2023], ["Lung"], small_filters.to_dict(),
        metric="Not a metric", projection=["on"],
    )
    assert new.metric == "ASR (World)"
    assert new.show_projection is True


def test_kpi_outputs_formats_cards_and_store():
    kpis = KPIs(avg_rate=38.3333, top_type="Lung", top_value=42.5)
    avg, top_type, top_value, stored = app_module.kpi_outputs(kpis, "ASR (World)")
    assert (avg, top_type, top_value) == ("38.33", "Lung", "42.50 (ASR (World))")
    assert stored == {"avg_rate": 38.3333, "top_type": "Lung", "top_value": 42.5}


def test_kpi_outputs_keep_previous_values_on_empty_result(small_dataset, small_filters):
    empty = app_module.recompute(small_dataset, small_filters.with_changes(selected_types=()))
    outputs = app_module.kpi_outputs(empty["kpis"], small_filters.metric)
    assert len(outputs) == 4
    assert all(o is no_update for o in outputs)
