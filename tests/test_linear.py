import datetime as dt

import pytest

from trend_forecast.data.series import Observation
from trend_forecast.errors import DegenerateFitError, InsufficientDataError
from trend_forecast.models.linear import LinearTrend, TrendModel, fit_line, fit_trend


def test_fit_matches_closed_form():
    model = fit_line([100.0, 102.0, 104.0])
    assert model.slope == 2.0
    assert model.intercept == 100.0
    assert model.n_obs == 3


def test_leading_duplicate_shifts_fit_as_computed_by_hand():
    # x=0..3, y=[100,100,102,104]: Sx=6 Sxx=14 Sy=406 Sxy=616
    model = fit_line([100.0, 100.0, 102.0, 104.0])
    assert model.slope == pytest.approx((4 * 616 - 6 * 406) / (4 * 14 - 6 * 6))
    assert model.slope == pytest.approx(1.4)
    assert model.intercept == pytest.approx((406 - 1.4 * 6) / 4)
    assert model.intercept == pytest.approx(99.4)


def test_calendar_gaps_do_not_affect_fit():
    dense = [Observation(dt.date(2023, 1, i), v) for i, v in zip((1, 2, 3), (1.0, 3.0, 5.0))]
    sparse = [Observation(dt.date(2023, m, 1), v) for m, v in zip((1, 5, 12), (1.0, 3.0, 5.0))]
    assert fit_trend(dense) == fit_trend(sparse)


@pytest.mark.parametrize("values", [[], [1.0]])
def test_insufficient_data(values):
    with pytest.raises(InsufficientDataError):
        fit_line(values)


def test_two_points_is_enough():
    model = fit_line([1.0, 4.0])
    assert model.slope == 3.0
    assert model.intercept == 1.0


def test_non_finite_fit_is_reported():
    with pytest.raises(DegenerateFitError):
        fit_line([1.0, float("nan"), 3.0])


def test_fitted_values():
    model = fit_line([1.0, 2.0, 3.0])
    assert model.fitted_values().tolist() == pytest.approx([1.0, 2.0, 3.0])


def test_trend_model_predict():
    assert TrendModel(slope=0.5, intercept=1.0, n_obs=2).predict(4) == 3.0


def test_linear_trend_estimator():
    m = LinearTrend()
    with pytest.raises(RuntimeError):
        m.predict(2)
    m.fit([100, 102, 104])
    assert m.predict(2) == [106.0, 108.0]
    assert m.predict(0) == []
