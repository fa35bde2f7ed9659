from __future__ import annotations

import io
from pathlib import Path
from typing import Optional

import pandas as pd
from loguru import logger

from config.settings import CANCER_DATA_PATH
from .embedded import EMBEDDED_CSV
from .records import (
    SOURCE_COLUMNS,
    TOTAL_COL,
    TYPE_COL,
    YEAR_COL,
    Dataset,
    discover_metrics,
)


class LoadFailure(RuntimeError):
    """The dataset is missing or cannot be turned into a usable record set."""


def parse_records(text: Optional[str]) -> Dataset:
    """Parse CSV text (header row first) into the immutable record set.

    - numeric vs string typing is inferred per column
    - fully blank lines are skipped
    - rows missing Year or Cancer label are dropped
    - rows are sorted ascending by year (stable)
    """
    data_logger = logger.bind(tab="Data")
    if text is None or not str(text).strip():
        raise LoadFailure("Dataset is empty or missing")

    try:
        raw = pd.read_csv(io.StringIO(str(text).strip()), skip_blank_lines=True)
    except (pd.errors.ParserError, pd.errors.EmptyDataError, ValueError) as e:
        raise LoadFailure(f"Dataset could not be parsed: {e}") from e

    raw.columns = [str(c).strip() for c in raw.columns]
    missing = [c for c in ("Year", "Cancer label") if c not in raw.columns]
    if missing:
        raise LoadFailure(f"Dataset is missing required columns: {', '.join(missing)}")

    metrics = discover_metrics(raw.columns)
    if not metrics:
        raise LoadFailure("Dataset has no recognised metric columns")

    df = raw.rename(columns=SOURCE_COLUMNS)
    if TOTAL_COL not in df.columns:
        df[TOTAL_COL] = 0

    # Drop rows without a usable year or label
    df[YEAR_COL] = pd.to_numeric(df[YEAR_COL], errors="coerce")
    df[TYPE_COL] = df[TYPE_COL].fillna("").astype(str).str.strip()
    keep = df[YEAR_COL].notna() & df[YEAR_COL].ne(0) & df[TYPE_COL].ne("")
    dropped = int((~keep).sum())
    df = df[keep].copy()
    if df.empty:
        raise LoadFailure("Dataset contains no valid rows")

    df[YEAR_COL] = df[YEAR_COL].astype(int)
    df[TOTAL_COL] = pd.to_numeric(df[TOTAL_COL], errors="coerce").fillna(0).astype(int)
    for m in metrics:
        df[m] = pd.to_numeric(df[m], errors="coerce")

    df = df[[YEAR_COL, TYPE_COL, TOTAL_COL, *metrics]]
    df = df.sort_values(YEAR_COL, kind="mergesort").reset_index(drop=True)

    if dropped:
        data_logger.warning(f"Dropped {dropped} rows missing Year or Cancer label")
    dataset = Dataset.from_frame(df, metrics)
    data_logger.info(
        f"Loaded {len(df)} records: {len(dataset.cancer_types)} cancer types, "
        f"years {dataset.year_bounds[0]}-{dataset.year_bounds[1]}, metrics {list(metrics)}"
    )
    return dataset


def load_dataset(path: Optional[str] = CANCER_DATA_PATH) -> Dataset:
    """Load the record set from `path` when given, else from the embedded blob."""
    if path:
        p = Path(path)
        logger.bind(tab="Data").info(f"Reading dataset from {p}")
        try:
            text = p.read_text(encoding="utf-8-sig")
        except OSError as e:
            raise LoadFailure(f"Dataset file could not be read: {p} ({e})") from e
        return parse_records(text)
    return parse_records(EMBEDDED_CSV)
