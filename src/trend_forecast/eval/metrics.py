# src/trend_forecast/eval/metrics.py
from __future__ import annotations
from typing import Dict
import numpy as np
import pandas as pd

def _to_arr(x): return pd.Series(x, dtype="float64").to_numpy()

def _pair(y_true, y_pred):
    a = _to_arr(y_true); b = _to_arr(y_pred)
    if a.shape != b.shape:
        raise ValueError(f"y_true and y_pred differ in length ({len(a)} vs {len(b)})")
    if a.size == 0:
        raise ValueError("Cannot score empty series.")
    return a, b

def mae(y_true, y_pred) -> float:
    a, b = _pair(y_true, y_pred)
    return float(np.mean(np.abs(a - b)))

def rmse(y_true, y_pred) -> float:
    a, b = _pair(y_true, y_pred)
    return float(np.sqrt(np.mean((a - b) ** 2)))

def mape(y_true, y_pred, eps: float = 1e-12) -> float:
    """Mean absolute percentage error, in percent. Zero actuals are clamped to eps."""
    a, b = _pair(y_true, y_pred)
    denom = np.maximum(np.abs(a), eps)
    return float(np.mean(np.abs((a - b) / denom))) * 100.0

def r2(y_true, y_pred) -> float:
    """Coefficient of determination; 1.0 for a constant series matched exactly."""
    a, b = _pair(y_true, y_pred)
    ss_res = float(np.sum((a - b) ** 2))
    ss_tot = float(np.sum((a - np.mean(a)) ** 2))
    if ss_tot == 0:
        return 1.0 if ss_res == 0 else 0.0
    return 1.0 - ss_res / ss_tot

def score(y_true, y_pred) -> Dict[str, float]:
    return {
        "mae": mae(y_true, y_pred),
        "rmse": rmse(y_true, y_pred),
        "mape": mape(y_true, y_pred),
        "r2": r2(y_true, y_pred),
    }
