# src/trend_forecast/data/series.py
from __future__ import annotations
import datetime as dt
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Tuple, Union

import numpy as np
import pandas as pd

if TYPE_CHECKING:
    from ..models.linear import TrendModel


@dataclass(frozen=True)
class Observation:
    date: dt.date
    value: float


@dataclass(frozen=True)
class ForecastPoint(Observation):
    # None on history rows; equal to value on forecast rows
    predicted: Optional[float] = None


Series = Tuple[Observation, ...]


@dataclass(frozen=True)
class ExtendedSeries:
    """
    Historical observations followed by the extrapolated horizon.

    `history` is the input series as given; `forecast` holds one ForecastPoint
    per future day. Both are immutable, callers only read them.
    """
    history: Series
    forecast: Tuple[ForecastPoint, ...]
    model: "TrendModel"

    @property
    def horizon(self) -> int:
        return len(self.forecast)

    @property
    def points(self) -> Tuple[Observation, ...]:
        return self.history + self.forecast

    def __len__(self) -> int:
        return len(self.history) + len(self.forecast)

    def __iter__(self):
        return iter(self.points)

    def to_frame(self) -> pd.DataFrame:
        """Chart-ready frame: columns ['date','value','predicted'], predicted is NaN on history rows."""
        return to_frame(self.points)


SeriesLike = Union[Series, ExtendedSeries]


def to_frame(points) -> pd.DataFrame:
    rows = list(points)
    predicted = [
        p.predicted if isinstance(p, ForecastPoint) and p.predicted is not None else np.nan
        for p in rows
    ]
    return pd.DataFrame({
        "date": pd.to_datetime([p.date for p in rows]),
        "value": pd.Series([p.value for p in rows], dtype="float64"),
        "predicted": pd.Series(predicted, dtype="float64"),
    })


@dataclass(frozen=True)
class SeriesPreview:
    rows: Series
    remaining: int  # observations not shown


def preview(series: SeriesLike, limit: int = 5) -> SeriesPreview:
    """First `limit` observations plus how many more there are."""
    if limit < 0:
        raise ValueError("limit must be >= 0")
    points = tuple(series)
    return SeriesPreview(rows=points[:limit], remaining=max(len(points) - limit, 0))
