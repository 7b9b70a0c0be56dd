# src/trend_forecast/errors.py
from __future__ import annotations
from typing import Optional


class TrendForecastError(ValueError):
    """Base class for failures reported back to the caller rather than crashing it."""

    user_message = "Something went wrong while processing the series."

    def __init__(self, message: str, user_message: Optional[str] = None):
        super().__init__(message)
        if user_message is not None:
            self.user_message = user_message


class ParseError(TrendForecastError):
    user_message = "Error parsing CSV file. Please check the format."


class InsufficientDataError(TrendForecastError):
    user_message = "Need at least 2 data points for prediction."


class DegenerateFitError(TrendForecastError):
    user_message = "Could not fit a trend to this data."


class SchemaMismatchError(TrendForecastError):
    user_message = "Records do not share the same fields and cannot be exported."


class DateRangeError(TrendForecastError):
    user_message = "Forecast dates would run past the last supported calendar date."
