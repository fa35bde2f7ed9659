import pytest

from app_tabs.overview.filters import FilterState
from app_tabs.overview.kpis import KPIs
from app_tabs.overview.series import CHART_IDS
from services.insights import CHART_INSIGHTS, chart_title, describe

FILTERS = FilterState(2005, 2015, ("Lung",), "ASR (World)", False)
KPI_VALUES = KPIs(avg_rate=12.0, top_type="Lung", top_value=21.456)


def test_every_chart_has_a_template():
    assert set(CHART_INSIGHTS) == set(CHART_IDS)


@pytest.mark.parametrize("chart_id", ["trend", "bar", "pie", "area"])
def test_year_range_interpolated(chart_id):
    text = describe(chart_id, FILTERS, KPI_VALUES)
    assert "2005" in text and "2015" in text


def test_trend_mentions_top_type_and_value():
    text = describe("trend", FILTERS, KPI_VALUES)
    assert "Lung" in text
    assert "21.46 (ASR (World))" in text


def test_treemap_uses_snapshot_year():
    text = describe("treemap", FILTERS, KPI_VALUES)
    assert "2023" in text
    assert chart_title("treemap") == "2023 Cross-Sectional Severity Analysis"


def test_missing_kpis_still_describe():
    text = describe("bar", FILTERS, None)
    assert "{" not in text


def test_deterministic():
    assert describe("pie", FILTERS, KPI_VALUES) == describe("pie", FILTERS, KPI_VALUES)


def test_unknown_chart():
    with pytest.raises(KeyError):
        describe("heatmap", FILTERS, KPI_VALUES)
