from .config import PipelineConfig
from .errors import (
    TrendForecastError,
    ParseError,
    InsufficientDataError,
    DegenerateFitError,
    SchemaMismatchError,
    DateRangeError,
)
from .data.series import Observation, ForecastPoint, ExtendedSeries, Series, preview
from .data.loaders import parse_series, sample_csv
from .data.export import to_delimited_text, tabular_export
from .models.linear import TrendModel, LinearTrend, fit_trend
from .forecaster import extend, forecast_series
from .pipeline import ForecastPipeline, PipelineResult, run_pipeline

__all__ = [
    "PipelineConfig",
    "TrendForecastError", "ParseError", "InsufficientDataError",
    "DegenerateFitError", "SchemaMismatchError", "DateRangeError",
    "Observation", "ForecastPoint", "ExtendedSeries", "Series", "preview",
    "parse_series", "sample_csv",
    "to_delimited_text", "tabular_export",
    "TrendModel", "LinearTrend", "fit_trend",
    "extend", "forecast_series",
    "ForecastPipeline", "PipelineResult", "run_pipeline",
]
