from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping, Optional, Tuple

import pandas as pd


# Source header -> normalized column name
SOURCE_COLUMNS = {
    "Year": "year",
    "Cancer label": "cancer_type",
    "Total": "total",
}
YEAR_COL = "year"
TYPE_COL = "cancer_type"
TOTAL_COL = "total"

# Metric columns the dashboard knows how to plot, in display order.
KNOWN_METRICS = (
    "ASR (World)",
    "ASR (Australia)",
    "Crude rate",
)


class UnknownMetricError(ValueError):
    """Raised when a metric name is not part of the dataset's metric enumeration."""

    def __init__(self, name: object, available: Iterable[str]):
        self.name = name
        self.available = tuple(available)
        super().__init__(
            f"Unknown metric {name!r}; expected one of: {', '.join(self.available) or '(none)'}"
        )


def discover_metrics(columns: Iterable[str]) -> Tuple[str, ...]:
    """Return the known metric columns present in a header, in header order."""
    known = set(KNOWN_METRICS)
    return tuple(c for c in columns if c in known)


def metric_column(metrics: Iterable[str], name: object) -> str:
    """Safe lookup of a metric column by its user-facing name."""
    metrics = tuple(metrics)
    if isinstance(name, str) and name in metrics:
        return name
    raise UnknownMetricError(name, metrics)


@dataclass(frozen=True)
class Record:
    """Typed view of one dataset row.

    Aggregations work on the frame directly; `Dataset.find_record` returns a
    Record for single (type, year) lookups such as the treemap snapshot.
    """

    year: int
    cancer_type: str
    total: int = 0
    metrics: Mapping[str, float] = field(default_factory=dict)

    def value(self, metric: str) -> float:
        """Metric value for this record; missing cells read as 0."""
        v = self.metrics.get(metric)
        if v is None or pd.isna(v):
            return 0.0
        return float(v)

    @classmethod
    def from_row(cls, row: Mapping, metrics: Iterable[str]) -> "Record":
        total = row.get(TOTAL_COL)
        return cls(
            year=int(row[YEAR_COL]),
            cancer_type=str(row[TYPE_COL]),
            total=0 if total is None or pd.isna(total) else int(total),
            metrics={m: row.get(m) for m in metrics},
        )


@dataclass(frozen=True, eq=False)
class Dataset:
    """The immutable record set loaded once at startup.

    frame: normalized rows sorted ascending by year (stable)
    metrics: metric enumeration discovered from the header
    cancer_types: sorted distinct cancer types
    year_bounds: (first, last) year present
    """

    frame: pd.DataFrame
    metrics: Tuple[str, ...]
    cancer_types: Tuple[str, ...]
    year_bounds: Tuple[int, int]

    @classmethod
    def from_frame(cls, frame: pd.DataFrame, metrics: Iterable[str]) -> "Dataset":
        types = tuple(sorted(frame[TYPE_COL].unique().tolist()))
        return cls(
            frame=frame,
            metrics=tuple(metrics),
            cancer_types=types,
            year_bounds=(int(frame[YEAR_COL].min()), int(frame[YEAR_COL].max())),
        )

    def metric_column(self, name: object) -> str:
        return metric_column(self.metrics, name)

    def find_record(self, cancer_type: str, year: int) -> Optional[Record]:
        """First record for (cancer_type, year) in the full record set, if any."""
        df = self.frame
        hit = df[(df[YEAR_COL] == year) & (df[TYPE_COL] == cancer_type)]
        if hit.empty:
            return None
        return Record.from_row(hit.iloc[0].to_dict(), self.metrics)

