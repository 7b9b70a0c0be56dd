# src/trend_forecast/eval/backtest.py
from __future__ import annotations
from typing import Any, Dict, Sequence
import pandas as pd
from ..data.series import Observation
from ..models.base import SupportsForecast, to_1d
from .metrics import score

def holdout_backtest(
    model: SupportsForecast,
    y: Sequence[float] | Sequence[Observation] | pd.Series,
    horizon: int,
) -> Dict[str, Any]:
    """Fit on y[:-h], predict h, score vs y[-h:]."""
    y = pd.Series(to_1d(y))
    h = int(horizon)
    if h <= 0 or h >= len(y):
        raise ValueError("horizon must be >0 and < len(y)")
    y_tr, y_te = y.iloc[:-h], y.iloc[-h:]

    model.fit(y_tr)
    preds = model.predict(h)

    return {
        "horizon": h,
        **score(y_te, preds),
        "y_true": y_te.reset_index(drop=True),
        "y_pred": pd.Series(preds, dtype="float64"),
    }
