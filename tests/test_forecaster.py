import datetime as dt
import math

import pytest

from trend_forecast.config import DEFAULT_HORIZON
from trend_forecast.data.series import ForecastPoint, Observation
from trend_forecast.errors import DateRangeError, DegenerateFitError, InsufficientDataError
from trend_forecast.forecaster import extend, forecast_series
from trend_forecast.models.linear import TrendModel, fit_trend


def make_series(start, values):
    return tuple(Observation(start + dt.timedelta(days=i), float(v)) for i, v in enumerate(values))


def test_end_to_end_scenario():
    series = make_series(dt.date(2023, 1, 1), [100, 102, 104])
    model = fit_trend(series)
    assert (model.slope, model.intercept) == (2.0, 100.0)

    ext = extend(series, model, horizon=2)
    assert ext.forecast == (
        ForecastPoint(dt.date(2023, 1, 4), 106.0, predicted=106.0),
        ForecastPoint(dt.date(2023, 1, 5), 108.0, predicted=108.0),
    )


def test_history_is_returned_unchanged():
    series = make_series(dt.date(2023, 1, 1), [5, 3, 8, 1])
    ext = forecast_series(series, horizon=3)
    assert len(ext) == len(series) + 3
    assert ext.history == series
    assert ext.points[:len(series)] == series
    assert all(type(p) is Observation for p in ext.history)


def test_forecast_points_carry_value_equal_to_predicted():
    ext = forecast_series(make_series(dt.date(2023, 1, 1), [1, 5, 2, 7]), horizon=4)
    for p in ext.forecast:
        assert p.predicted is not None
        assert p.value == p.predicted


def test_dates_step_one_day_across_boundaries():
    series = (Observation(dt.date(2023, 12, 1), 1.0), Observation(dt.date(2023, 12, 30), 2.0))
    ext = forecast_series(series, horizon=3)
    assert [p.date for p in ext.forecast] == [
        dt.date(2023, 12, 31), dt.date(2024, 1, 1), dt.date(2024, 1, 2),
    ]

    leap = make_series(dt.date(2024, 2, 27), [1, 2])
    assert forecast_series(leap, horizon=1).forecast[0].date == dt.date(2024, 2, 29)


def test_abscissa_continues_from_last_index():
    # irregular dates; index n-1+i is used, not calendar distance
    series = (Observation(dt.date(2023, 1, 1), 0.0), Observation(dt.date(2023, 3, 1), 1.0))
    ext = forecast_series(series, horizon=2)
    assert [p.value for p in ext.forecast] == [2.0, 3.0]


def test_default_horizon():
    ext = forecast_series(make_series(dt.date(2023, 1, 1), [1, 2, 3]))
    assert ext.horizon == DEFAULT_HORIZON == 10


def test_zero_horizon():
    series = make_series(dt.date(2023, 1, 1), [1, 2])
    ext = forecast_series(series, horizon=0)
    assert ext.forecast == ()
    assert ext.points == series


@pytest.mark.parametrize("horizon", [-1, 1.5, True])
def test_bad_horizon(horizon):
    series = make_series(dt.date(2023, 1, 1), [1, 2])
    with pytest.raises(ValueError):
        extend(series, fit_trend(series), horizon)


@pytest.mark.parametrize("values", [[], [1]])
def test_insufficient_history(values):
    series = make_series(dt.date(2023, 1, 1), values)
    with pytest.raises(InsufficientDataError):
        extend(series, TrendModel(1.0, 0.0, 2), 3)


def test_non_finite_model_is_rejected():
    series = make_series(dt.date(2023, 1, 1), [1, 2])
    with pytest.raises(DegenerateFitError):
        extend(series, TrendModel(float("nan"), 0.0, 2), 3)


def test_to_frame_for_charting():
    ext = forecast_series(make_series(dt.date(2023, 1, 1), [100, 102, 104]), horizon=2)
    frame = ext.to_frame()
    assert list(frame.columns) == ["date", "value", "predicted"]
    assert len(frame) == 5
    assert frame["value"].tolist() == [100.0, 102.0, 104.0, 106.0, 108.0]
    assert all(math.isnan(v) for v in frame["predicted"][:3])
    assert frame["predicted"][3:].tolist() == [106.0, 108.0]
    assert str(frame["date"].iloc[-1].date()) == "2023-01-05"


def test_forecast_past_last_calendar_date():
    series = make_series(dt.date(9999, 12, 30), [1, 2])
    with pytest.raises(DateRangeError):
        forecast_series(series, horizon=2)
    # exactly reaching the limit is still fine
    assert forecast_series(make_series(dt.date(9999, 12, 29), [1, 2]), horizon=1).forecast[0].date == dt.date.max
