# src/trend_forecast/models/base.py
from __future__ import annotations
from typing import Protocol, Sequence
import numpy as np
import pandas as pd

from ..data.series import Observation

class SupportsForecast(Protocol):
    def fit(self, y: Sequence[float] | pd.Series | np.ndarray) -> None: ...
    def predict(self, horizon: int) -> list[float]: ...

def to_1d(y: Sequence[float] | Sequence[Observation] | pd.Series | np.ndarray) -> np.ndarray:
    if isinstance(y, (list, tuple)) and y and isinstance(y[0], Observation):
        y = [o.value for o in y]
    arr = pd.Series(y, dtype="float64").values
    if arr.ndim != 1:
        raise ValueError("Input series must be 1D.")
    return arr
