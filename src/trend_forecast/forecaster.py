from __future__ import annotations
import datetime as dt
import logging
from typing import Sequence

from .config import DEFAULT_HORIZON
from .data.series import ExtendedSeries, ForecastPoint, Observation
from .errors import DateRangeError, DegenerateFitError, InsufficientDataError
from .models.linear import MIN_OBSERVATIONS, TrendModel, fit_trend

logger = logging.getLogger(__name__)


def _check_horizon(horizon: int) -> int:
    if isinstance(horizon, bool) or not isinstance(horizon, int) or horizon < 0:
        raise ValueError(f"horizon must be a non-negative integer, got {horizon!r}")
    return horizon


def extend(
    series: Sequence[Observation],
    model: TrendModel,
    horizon: int = DEFAULT_HORIZON,
) -> ExtendedSeries:
    """
    Continue `series` by `horizon` daily points predicted from `model`.

    Step i (1-based) sits at index (n-1)+i and is dated last.date + i days.
    History is returned untouched.
    """
    horizon = _check_horizon(horizon)
    history = tuple(series)
    n = len(history)
    if n < MIN_OBSERVATIONS:
        raise InsufficientDataError(f"Need at least {MIN_OBSERVATIONS} observations to forecast, got {n}.")
    if not model.is_finite:
        raise DegenerateFitError(f"Cannot extrapolate a non-finite model {model}.")

    last = history[-1].date
    try:
        last + dt.timedelta(days=horizon)
    except OverflowError as e:
        raise DateRangeError(f"{horizon} days past {last} is beyond {dt.date.max}.") from e

    points = []
    for i in range(1, horizon + 1):
        yhat = model.predict((n - 1) + i)
        points.append(ForecastPoint(date=last + dt.timedelta(days=i), value=yhat, predicted=yhat))

    logger.debug("Extended %d observations by %d days past %s", n, horizon, last)
    return ExtendedSeries(history=history, forecast=tuple(points), model=model)


def forecast_series(series: Sequence[Observation], horizon: int = DEFAULT_HORIZON) -> ExtendedSeries:
    """Fit the trend and extend in one go."""
    return extend(series, fit_trend(series), horizon)
