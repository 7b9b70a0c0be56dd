from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np
import pandas as pd

from ..data.series import Observation
from ..errors import DegenerateFitError, InsufficientDataError
from .base import to_1d

logger = logging.getLogger(__name__)

MIN_OBSERVATIONS = 2


@dataclass(frozen=True)
class TrendModel:
    # Line over the zero-based observation index, not calendar time
    slope: float
    intercept: float
    n_obs: int

    def predict(self, x: float) -> float:
        return self.slope * x + self.intercept

    def fitted_values(self) -> np.ndarray:
        """The line evaluated at each index it was fitted on."""
        return self.slope * np.arange(self.n_obs, dtype=float) + self.intercept

    @property
    def is_finite(self) -> bool:
        return math.isfinite(self.slope) and math.isfinite(self.intercept)


def fit_line(y: Sequence[float] | pd.Series | np.ndarray) -> TrendModel:
    """
    Ordinary least squares over x = 0..n-1 using the closed-form sums:

        slope     = (n*Sxy - Sx*Sy) / (n*Sxx - Sx**2)
        intercept = (Sy - slope*Sx) / n
    """
    arr = to_1d(y)
    n = len(arr)
    if n < MIN_OBSERVATIONS:
        raise InsufficientDataError(f"Need at least {MIN_OBSERVATIONS} observations to fit, got {n}.")

    x = np.arange(n, dtype=float)
    sum_x = float(np.sum(x))
    sum_y = float(np.sum(arr))
    sum_xy = float(np.sum(x * arr))
    sum_xx = float(np.sum(x * x))

    denom = n * sum_xx - sum_x * sum_x
    if denom == 0:
        raise DegenerateFitError("Index variance is zero; the slope is undefined.")
    slope = (n * sum_xy - sum_x * sum_y) / denom
    intercept = (sum_y - slope * sum_x) / n

    model = TrendModel(slope=slope, intercept=intercept, n_obs=n)
    if not model.is_finite:
        raise DegenerateFitError(f"Fit produced a non-finite model (slope={slope}, intercept={intercept}).")
    logger.debug("Fitted trend over %d points: slope=%s intercept=%s", n, slope, intercept)
    return model


def fit_trend(series: Sequence[Observation]) -> TrendModel:
    """Fit the trend line to a parsed Series; row order defines the abscissa."""
    return fit_line([o.value for o in series])


class LinearTrend:
    """
    Index-based linear trend behind the fit/predict interface.

    Example:
        m = LinearTrend()
        m.fit([100, 102, 104])
        m.predict(2)   # [106.0, 108.0]
    """
    def __init__(self):
        self.model_: Optional[TrendModel] = None

    def fit(self, y: Sequence[float] | pd.Series | np.ndarray) -> None:
        self.model_ = fit_line(y)

    def predict(self, horizon: int) -> list[float]:
        if self.model_ is None:
            raise RuntimeError("Call fit() before predict().")
        last = self.model_.n_obs - 1
        return [self.model_.predict(last + i) for i in range(1, int(horizon) + 1)]
