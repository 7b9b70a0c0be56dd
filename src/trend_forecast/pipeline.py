"""
End-to-end run: parse -> fit -> extend -> serialize.

Every domain failure is caught here and handed back on the result together
with a message fit for display; nothing is kept between runs.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import pandas as pd

from .config import PipelineConfig
from .data.export import to_delimited_text
from .data.loaders import parse_series
from .data.series import ExtendedSeries, Series, to_frame
from .errors import TrendForecastError
from .eval import holdout_backtest, score
from .forecaster import extend
from .models.linear import TrendModel, fit_trend
from .registry import get_model

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineResult:
    series: Optional[Series] = None
    extended: Optional[ExtendedSeries] = None
    error: Optional[TrendForecastError] = None
    fit_metrics: Dict[str, float] = field(default_factory=dict)
    backtest: Optional[Dict[str, Any]] = None
    config: PipelineConfig = field(default_factory=PipelineConfig)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> Optional[str]:
        return self.error.user_message if self.error is not None else None

    @property
    def model(self) -> Optional[TrendModel]:
        return self.extended.model if self.extended is not None else None

    def chart_data(self) -> pd.DataFrame:
        """Forecast when there is one, otherwise the plain history."""
        if self.extended is not None:
            return self.extended.to_frame()
        return to_frame(self.series or ())

    def to_text(self) -> str:
        """Delimited export of whatever the chart shows."""
        data = self.extended if self.extended is not None else self.series
        if data is None:
            raise ValueError("Nothing to export; the input could not be parsed.")
        return to_delimited_text(
            data,
            date_header=self.config.date_header,
            value_header=self.config.value_header,
            include_predicted=self.config.include_predicted,
            delimiter=self.config.delimiter,
        )


class ForecastPipeline:
    def __init__(self, config: Optional[PipelineConfig] = None):
        self.config = config or PipelineConfig()

    def parse(self, text: str) -> Series:
        return parse_series(text, delimiter=self.config.delimiter, non_finite=self.config.non_finite)

    def forecast(self, series: Series) -> ExtendedSeries:
        return extend(series, fit_trend(series), self.config.horizon)

    def _backtest(self, series: Series) -> Optional[Dict[str, Any]]:
        h = self.config.backtest_horizon
        # need at least two points left to fit on
        if h == 0 or len(series) - h < 2:
            return None
        return holdout_backtest(get_model(self.config.model), series, h)

    def run(self, text: str) -> PipelineResult:
        cfg = self.config
        try:
            series = self.parse(text)
        except TrendForecastError as e:
            logger.warning("Input rejected: %s", e)
            return PipelineResult(error=e, config=cfg)

        try:
            extended = self.forecast(series)
        except TrendForecastError as e:
            logger.warning("Forecast skipped for %d observation(s): %s", len(series), e)
            return PipelineResult(series=series, error=e, config=cfg)

        values = [o.value for o in series]
        fit_metrics = score(values, extended.model.fitted_values())
        result = PipelineResult(
            series=series,
            extended=extended,
            fit_metrics=fit_metrics,
            backtest=self._backtest(series),
            config=cfg,
        )
        logger.info(
            "Forecast %d days from %d observations (slope=%.6g, r2=%.3f)",
            cfg.horizon, len(series), extended.model.slope, fit_metrics["r2"],
        )
        return result


def run_pipeline(text: str, config: Optional[PipelineConfig] = None) -> PipelineResult:
    return ForecastPipeline(config).run(text)
