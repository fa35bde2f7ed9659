from __future__ import annotations

from typing import Callable, Dict, List, Optional

import pandas as pd
from loguru import logger

from config.settings import BAR_TOP_N, PROJECTION_YEARS, TREEMAP_YEAR
from data_layer.records import TYPE_COL, YEAR_COL, Dataset
from utils.regression import linear_fit

from .filters import FilterState, filter_records

CHART_IDS = ("trend", "bar", "pie", "area", "treemap")
TREEMAP_ROOT = "All Cancers"


def _values(df: pd.DataFrame, metric: str) -> pd.Series:
    # Missing metric cells count as 0
    return pd.to_numeric(df[metric], errors="coerce").fillna(0.0)


def _groups(filtered: pd.DataFrame, filters: FilterState):
    """Yield (color_index, type, rows) for selected types that have filtered rows."""
    if filtered.empty:
        return
    by_type = {k: g for k, g in filtered.groupby(TYPE_COL, sort=False)}
    for i, ctype in enumerate(filters.selected_types):
        rows = by_type.get(ctype)
        if rows is None or rows.empty:
            continue
        yield i, ctype, rows


def trend_series(filtered: pd.DataFrame, filters: FilterState) -> List[Dict]:
    """Per selected type: year-ordered values plus an optional projected segment.

    The projection runs from the first observed year to PROJECTION_YEARS past
    the last one and is only fitted for series with more than two points.
    """
    out: List[Dict] = []
    for i, ctype, rows in _groups(filtered, filters):
        rows = rows.sort_values(YEAR_COL, kind="mergesort")
        years = [int(y) for y in rows[YEAR_COL].tolist()]
        values = [float(v) for v in _values(rows, filters.metric).tolist()]

        projection = None
        if filters.show_projection and len(years) > 2 and len(set(years)) > 1:
            fit = linear_fit(years, values)
            x0, x1 = years[0], years[-1] + PROJECTION_YEARS
            projection = {
                "years": [x0, x1],
                "values": [fit.predict(x0), fit.predict(x1)],
            }

        out.append(
            {
                "type": ctype,
                "color_index": i,
                "years": years,
                "values": values,
                "projection": projection,
            }
        )
    return out


def bar_series(filtered: pd.DataFrame, filters: FilterState, top_n: int = BAR_TOP_N) -> Dict:
    """Mean metric per selected type, highest first (stable on ties), top N."""
    labels: List[str] = []
    values: List[float] = []
    for _i, ctype, rows in _groups(filtered, filters):
        labels.append(ctype)
        values.append(float(_values(rows, filters.metric).mean()))
    if not labels:
        return {"labels": [], "values": []}
    ranked = (
        pd.DataFrame({"label": labels, "value": values})
        .sort_values("value", ascending=False, kind="mergesort")
        .head(top_n)
    )
    return {"labels": ranked["label"].tolist(), "values": ranked["value"].tolist()}


def pie_series(filtered: pd.DataFrame, filters: FilterState) -> Dict:
    """Sum of the metric per selected type, with each slice's legend color index."""
    labels: List[str] = []
    values: List[float] = []
    color_indices: List[int] = []
    for i, ctype, rows in _groups(filtered, filters):
        labels.append(ctype)
        values.append(float(_values(rows, filters.metric).sum()))
        color_indices.append(i)
    return {"labels": labels, "values": values, "color_indices": color_indices}


def area_series(filtered: pd.DataFrame, filters: FilterState) -> Dict:
    """Year-indexed matrix for stacking; absent (type, year) pairs are 0."""
    if filtered.empty:
        return {"years": [], "series": []}
    years = sorted(int(y) for y in filtered[YEAR_COL].unique().tolist())
    series = []
    for i, ctype, rows in _groups(filtered, filters):
        # First record per year wins, as with a lookup by year
        by_year = (
            rows.assign(_v=_values(rows, filters.metric))
            .drop_duplicates(YEAR_COL, keep="first")
            .set_index(YEAR_COL)["_v"]
        )
        values = [float(v) for v in by_year.reindex(years, fill_value=0.0).tolist()]
        series.append({"type": ctype, "color_index": i, "values": values})
    return {"years": years, "series": series}


def treemap_series(dataset: Dataset, filters: FilterState, year: int = TREEMAP_YEAR) -> Dict:
    """Snapshot of one fixed year from the full record set, ignoring the year filter.

    Leaves are sized by total cases and colored by the metric; types without a
    record for `year` are skipped. The root node comes last.
    """
    labels: List[str] = []
    parents: List[str] = []
    values: List[float] = []
    colors: List[float] = []
    for ctype in filters.selected_types:
        rec = dataset.find_record(ctype, year)
        if rec is None:
            continue
        labels.append(ctype)
        parents.append(TREEMAP_ROOT)
        values.append(int(rec.total))
        colors.append(rec.value(filters.metric))

    labels.append(TREEMAP_ROOT)
    parents.append("")
    values.append(0)
    colors.append(0.0)
    return {
        "year": year,
        "labels": labels,
        "parents": parents,
        "values": values,
        "colors": colors,
    }


def build_series(
    dataset: Dataset,
    filters: FilterState,
    filtered: Optional[pd.DataFrame] = None,
) -> Dict[str, Optional[object]]:
    """Run every aggregator for the current filters.

    `filtered` is the already-filtered frame when the caller has one. A failure
    in one chart's aggregation is logged and leaves that chart as None; the
    others are still computed.
    """
    tab_logger = logger.bind(tab="Overview")
    if filtered is None:
        filtered = filter_records(dataset.frame, filters)

    builders: Dict[str, Callable[[], object]] = {
        "trend": lambda: trend_series(filtered, filters),
        "bar": lambda: bar_series(filtered, filters),
        "pie": lambda: pie_series(filtered, filters),
        "area": lambda: area_series(filtered, filters),
        "treemap": lambda: treemap_series(dataset, filters),
    }
    out: Dict[str, Optional[object]] = {}
    for chart_id, build in builders.items():
        try:
            out[chart_id] = build()
        except Exception:
            tab_logger.exception(f"Aggregation failed for chart {chart_id}")
            out[chart_id] = None
    return out
