from __future__ import annotations

from dataclasses import asdict, dataclass, field, replace
from typing import Iterable, List, Optional, Tuple

import pandas as pd
from loguru import logger

from config.settings import DEFAULT_METRIC
from data_layer.records import TYPE_COL, YEAR_COL, Dataset, UnknownMetricError


@dataclass(frozen=True)
class FilterState:
    year_min: int
    year_max: int
    selected_types: Tuple[str, ...] = field(default_factory=tuple)
    metric: str = DEFAULT_METRIC
    show_projection: bool = False

    def to_dict(self) -> dict:
        """JSON-friendly form for dcc.Store."""
        d = asdict(self)
        d["selected_types"] = list(self.selected_types)
        return d

    def with_changes(self, **changes) -> "FilterState":
        return replace(self, **changes)


def default_metric(dataset: Dataset) -> str:
    try:
        return dataset.metric_column(DEFAULT_METRIC)
    except UnknownMetricError:
        return dataset.metrics[0]


def default_filters(dataset: Dataset) -> FilterState:
    """Full year span, every cancer type selected, default metric, no projection."""
    lo, hi = dataset.year_bounds
    return FilterState(
        year_min=lo,
        year_max=hi,
        selected_types=tuple(dataset.cancer_types),
        metric=default_metric(dataset),
        show_projection=False,
    )


def clamp_year_range(
    year_min: int,
    year_max: int,
    bounds: Optional[Tuple[int, int]] = None,
    moved: str = "min",
) -> Tuple[int, int]:
    """Keep the two range handles from crossing (min <= max - 1).

    `moved` names the handle the user dragged; the other one is pushed so the
    dragged handle keeps its position where possible.
    """
    lo, hi = int(year_min), int(year_max)
    if bounds is not None:
        b_lo, b_hi = bounds
        lo = max(b_lo, min(b_hi, lo))
        hi = max(b_lo, min(b_hi, hi))
        if b_hi - b_lo < 1:
            return b_lo, b_hi
    if lo > hi - 1:
        if moved == "max":
            lo = hi - 1
        else:
            hi = lo + 1
        if bounds is not None:
            # Pushed past an edge: pin to the edge and move the dragged handle back
            if hi > bounds[1]:
                hi = bounds[1]
                lo = hi - 1
            if lo < bounds[0]:
                lo = bounds[0]
                hi = lo + 1
    return lo, hi


def canonical_types(dataset: Dataset, types: Optional[Iterable[object]]) -> Tuple[str, ...]:
    """Drop unknown types and order the rest as the dataset lists them."""
    wanted = {str(t) for t in (types or []) if t is not None}
    return tuple(t for t in dataset.cancer_types if t in wanted)


def normalize_filters(raw: Optional[dict], dataset: Dataset) -> FilterState:
    """Build a valid FilterState from raw UI / store values."""
    base = default_filters(dataset)
    raw = raw or {}

    try:
        year_min = int(raw.get("year_min", base.year_min))
        year_max = int(raw.get("year_max", base.year_max))
    except (TypeError, ValueError):
        year_min, year_max = base.year_min, base.year_max
    year_min, year_max = clamp_year_range(year_min, year_max, dataset.year_bounds)

    if "selected_types" in raw:
        selected = canonical_types(dataset, raw.get("selected_types"))
    else:
        selected = base.selected_types

    metric = raw.get("metric", base.metric)
    try:
        metric = dataset.metric_column(metric)
    except UnknownMetricError as e:
        logger.bind(tab="Overview").warning(f"{e}; falling back to {base.metric!r}")
        metric = base.metric

    return FilterState(
        year_min=year_min,
        year_max=year_max,
        selected_types=selected,
        metric=metric,
        show_projection=bool(raw.get("show_projection", False)),
    )


def filter_records(frame: pd.DataFrame, filters: FilterState) -> pd.DataFrame:
    """Rows inside [year_min, year_max] whose cancer type is selected (order kept)."""
    if frame is None or frame.empty:
        return pd.DataFrame(columns=getattr(frame, "columns", None))
    mask = (
        frame[YEAR_COL].ge(filters.year_min)
        & frame[YEAR_COL].le(filters.year_max)
        & frame[TYPE_COL].isin(list(filters.selected_types))
    )
    return frame[mask]


def search_type_options(types: Iterable[str], term: Optional[str]) -> List[str]:
    """Cancer types whose label contains the search term (case-insensitive)."""
    needle = (term or "").strip().lower()
    if not needle:
        return list(types)
    return [t for t in types if needle in t.lower()]
