# src/trend_forecast/config.py
from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Literal

NonFinitePolicy = Literal["drop", "reject"]

DEFAULT_HORIZON = 10


def _is_count(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


@dataclass(frozen=True)
class PipelineConfig:
    # Forecast
    horizon: int = DEFAULT_HORIZON     # number of future days to extrapolate
    model: str = "linear_trend"        # registry name, used for holdout scoring
    backtest_horizon: int = 0          # 0 disables the holdout backtest
    # Input
    delimiter: str = ","
    non_finite: NonFinitePolicy = "drop"  # what to do with rows whose value is not a finite number
    # Output
    date_header: str = "date"
    value_header: str = "value"
    include_predicted: bool = False

    def __post_init__(self) -> None:
        if not _is_count(self.horizon):
            raise ValueError(f"horizon must be a non-negative integer, got {self.horizon!r}")
        if not _is_count(self.backtest_horizon):
            raise ValueError(f"backtest_horizon must be a non-negative integer, got {self.backtest_horizon!r}")
        if len(self.delimiter) != 1:
            raise ValueError("delimiter must be a single character.")
        if self.non_finite not in ("drop", "reject"):
            raise ValueError(f"Unknown non_finite policy={self.non_finite!r}")

    @classmethod
    def from_env(cls, prefix: str = "TREND_FORECAST_", **overrides) -> "PipelineConfig":
        """Build a config from ``{prefix}HORIZON``, ``{prefix}DELIMITER`` and ``{prefix}NON_FINITE``.

        Explicit keyword overrides win over the environment.
        """
        values = {}
        horizon = os.getenv(f"{prefix}HORIZON")
        if horizon:
            values["horizon"] = int(horizon)
        delimiter = os.getenv(f"{prefix}DELIMITER")
        if delimiter:
            values["delimiter"] = delimiter
        policy = os.getenv(f"{prefix}NON_FINITE")
        if policy:
            values["non_finite"] = policy.lower()
        values.update(overrides)
        return cls(**values)
