from __future__ import annotations

from typing import Dict, Optional

from app_tabs.overview.filters import FilterState
from app_tabs.overview.kpis import KPIs, format_kpis
from config.settings import TREEMAP_YEAR


# Fixed prose per chart; {year_min}, {year_max}, {top_type}, {top_value} are interpolated.
CHART_INSIGHTS: Dict[str, Dict[str, str]] = {
    "trend": {
        "title": "Longitudinal Trend Analysis",
        "template": (
            "The data indicates a longitudinal progression of mortality rates from {year_min} to {year_max}. "
            "Current projections (dashed lines) suggest a continued trajectory for key cancer types. "
            "Notably, {top_type} demonstrates significant activity, peaking at {top_value}. "
            "Linear regression models applied to this dataset estimate future burden stability or decline, "
            "depending on the specific cancer site."
        ),
    },
    "bar": {
        "title": "Comparative Cohort Analysis",
        "template": (
            "This comparative study highlights the mean mortality rates across the selected period "
            "({year_min}-{year_max}). {top_type} presents as the dominant contributor to mortality burden. "
            "The disparity between high-ranking and low-ranking cancer types suggests distinct etiological "
            "factors or variations in treatment efficacy."
        ),
    },
    "pie": {
        "title": "Proportional Distribution Metrics",
        "template": (
            "The proportional distribution illustrates the relative specific mortality fraction of each cancer "
            "type between {year_min} and {year_max}. Dominant segments indicate public health priorities. "
            "{top_type} constitutes a major portion of the total observed mortality, warranting targeted "
            "intervention strategies."
        ),
    },
    "area": {
        "title": "Cumulative Burden Assessment",
        "template": (
            "The stacked area visualization demonstrates the aggregate accumulation of mortality from "
            "{year_min} to {year_max}. The widening vertical amplitude corresponds to an increase in total "
            "absolute burden, driven by both population growth and specific rate changes. "
            "This view is critical for resource allocation planning."
        ),
    },
    "treemap": {
        "title": "{year} Cross-Sectional Severity Analysis",
        "template": (
            "This treemap provides a snapshot of the year {year}, independent of the selected year range. "
            "Box size corresponds to absolute mortality volume (total deaths), while color intensity "
            "(red scale) indicates the selected rate (severity). High-volume cancers are not always the "
            "most lethal per capita, and vice versa."
        ),
    },
}


def chart_title(chart_id: str, year: Optional[int] = None) -> str:
    return CHART_INSIGHTS[chart_id]["title"].format(year=year or TREEMAP_YEAR)


def describe(chart_id: str, filters: FilterState, kpis: Optional[KPIs]) -> str:
    """Descriptive text for one chart from the current filters and KPIs.

    Raises KeyError for an unknown chart id.
    """
    entry = CHART_INSIGHTS[chart_id]
    shown = format_kpis(kpis, filters.metric) if kpis is not None else {}
    return entry["template"].format(
        year_min=filters.year_min,
        year_max=filters.year_max,
        top_type=shown.get("top_type", ""),
        top_value=shown.get("top_value", ""),
        year=TREEMAP_YEAR,
    )
