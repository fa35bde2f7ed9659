from __future__ import annotations

from typing import NamedTuple, Sequence

import numpy as np


class LinearFit(NamedTuple):
    slope: float
    intercept: float

    def predict(self, x: float) -> float:
        return self.slope * x + self.intercept


def linear_fit(xs: Sequence[float], ys: Sequence[float]) -> LinearFit:
    """Ordinary least squares fit of y = slope * x + intercept.

    Uses the closed-form sums directly. When every x is identical the
    denominator is zero and slope/intercept come back as NaN; callers guard
    by only fitting series with more than two points and distinct xs.
    """
    x = np.asarray(xs, dtype=float)
    y = np.asarray(ys, dtype=float)
    if x.shape != y.shape:
        raise ValueError(f"xs and ys must have equal length ({x.size} != {y.size})")
    n = x.size
    if n == 0:
        raise ValueError("linear_fit needs at least one point")

    sum_x = x.sum()
    sum_y = y.sum()
    sum_xy = (x * y).sum()
    sum_xx = (x * x).sum()
    denom = n * sum_xx - sum_x * sum_x
    if denom == 0:
        return LinearFit(float("nan"), float("nan"))
    slope = (n * sum_xy - sum_x * sum_y) / denom
    intercept = (sum_y - slope * sum_x) / n
    return LinearFit(float(slope), float(intercept))
