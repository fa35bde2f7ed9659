from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Optional

import pandas as pd

from data_layer.records import TYPE_COL


@dataclass(frozen=True)
class KPIs:
    avg_rate: Optional[float]
    top_type: Optional[str]
    top_value: float

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Optional[dict]) -> Optional["KPIs"]:
        if not d:
            return None
        return cls(
            avg_rate=d.get("avg_rate"),
            top_type=d.get("top_type"),
            top_value=float(d.get("top_value") or 0.0),
        )


def compute_kpis(filtered: pd.DataFrame, metric: str) -> KPIs:
    """Average metric and highest-mean cancer type over the filtered rows.

    avg_rate is None when there are no rows. The top type scan walks groups in
    first-seen order against a baseline of 0 with a strict comparison: the
    first maximum wins ties, and a non-positive mean never becomes top type.
    """
    if filtered is None or filtered.empty:
        return KPIs(avg_rate=None, top_type=None, top_value=0.0)

    values = pd.to_numeric(filtered[metric], errors="coerce").fillna(0.0)
    avg_rate = float(values.mean())

    top_type: Optional[str] = None
    top_value = 0.0
    means = values.groupby(filtered[TYPE_COL], sort=False).mean()
    for ctype, mean in means.items():
        if mean > top_value:
            top_value = float(mean)
            top_type = str(ctype)
    return KPIs(avg_rate=avg_rate, top_type=top_type, top_value=top_value)


def format_kpis(kpis: KPIs, metric: str) -> Dict[str, str]:
    """Display strings for the KPI cards."""
    return {
        "avg_rate": "" if kpis.avg_rate is None else f"{kpis.avg_rate:.2f}",
        "top_type": kpis.top_type or "",
        "top_value": f"{kpis.top_value:.2f} ({metric})",
    }
