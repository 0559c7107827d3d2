"""
Test cases for the Song-Chissom forecasting entry point, including the reference scenario, validation order, output length, extrapolation behaviour and pass-through of non-finite observations.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import math

import pytest

from engine.datasets import OIL_FUTURES
from engine.exceptions import (
    ForecastError,
    InsufficientDataError,
    InvalidConfigurationError,
    InvalidUniverseError,
)
from engine.fts import FuzzyLogicalRelationship as FLR
from engine.fts import song_chissom_forecast, song_chissom_trace

OIL = [o.actual for o in OIL_FUTURES]


def test_reference_scenario(reference_series):
    trace = song_chissom_trace(reference_series, 30, 100, 7)
    assert trace.fuzzified == [2, 1, 2]
    assert trace.relationships == [FLR(2, 1), FLR(1, 2)]
    assert trace.groups == {2: [1], 1: [2]}
    assert trace.historical == [35.0, 45.0]
    assert trace.future == []
    assert song_chissom_forecast(reference_series, 30, 100, 7) == [35.0, 45.0]


def test_default_set_count_is_seven(reference_series):
    assert song_chissom_forecast(reference_series, 30, 100) == [35.0, 45.0]


def test_reference_scenario_with_future_steps(reference_series):
    assert song_chissom_forecast(reference_series, 30, 100, 7, forecast_steps=3) == [
        35.0, 45.0, 35.0, 45.0, 35.0,
    ]


def test_insufficient_data():
    with pytest.raises(InsufficientDataError):
        song_chissom_forecast([50], 30, 100, 7)
    with pytest.raises(InsufficientDataError):
        song_chissom_forecast([], 30, 100, 7)


def test_invalid_universe():
    with pytest.raises(InvalidUniverseError):
        song_chissom_forecast([50, 60], 90, 80, 7)


def test_nan_universe_bound_rejected():
    with pytest.raises(InvalidUniverseError):
        song_chissom_forecast([1.0, 2.0], float("nan"), 10.0, 3)
    with pytest.raises(InvalidUniverseError):
        song_chissom_forecast([1.0, 2.0], 0.0, float("nan"), 3)


def test_invalid_set_count():
    with pytest.raises(InvalidConfigurationError):
        song_chissom_forecast([50, 60], 30, 100, 2)


def test_negative_forecast_steps():
    with pytest.raises(InvalidConfigurationError):
        song_chissom_forecast([50, 60], 30, 100, 7, forecast_steps=-1)


def test_validation_order():
    # data length is checked first, then universe, then set count
    with pytest.raises(InsufficientDataError):
        song_chissom_forecast([50], 90, 80, 2)
    with pytest.raises(InvalidUniverseError):
        song_chissom_forecast([50, 60], 90, 80, 2)


def test_errors_share_a_base():
    for exc in (InsufficientDataError, InvalidUniverseError, InvalidConfigurationError):
        assert issubclass(exc, ForecastError)


@pytest.mark.parametrize("steps", [0, 1, 5, 24])
def test_output_length(steps):
    out = song_chissom_forecast(OIL, 30, 100, 7, forecast_steps=steps)
    assert len(out) == len(OIL) - 1 + steps


def test_oil_futures_groups():
    trace = song_chissom_trace(OIL, 30, 100, 7)
    assert trace.fuzzified == [2, 1, 2, 3, 3, 4, 4, 3, 3, 3, 2, 3, 5, 6, 7, 5, 6, 5]
    assert trace.groups == {
        2: [1, 3, 3],
        1: [2],
        3: [3, 4, 3, 3, 2, 5],
        4: [4, 3],
        5: [6, 6],
        6: [7, 5],
        7: [5],
    }
    assert trace.historical[:4] == pytest.approx([145.0 / 3, 45.0, 145.0 / 3, 350.0 / 6])
    assert trace.historical[-1] == 85.0


def test_oil_futures_extrapolation_settles():
    # 75.71 sits in set 5, whose group leads to 85, and set 6 maps 85 back to 85
    out = song_chissom_forecast(OIL, 30, 100, 7, forecast_steps=4)
    assert out[-4:] == [85.0, 85.0, 85.0, 85.0]


def test_constant_after_first_step_when_state_maps_to_itself():
    out = song_chissom_forecast([35, 35, 35], 30, 100, 7, forecast_steps=5)
    assert out == [35.0] * 7


def test_historical_forecasts_stay_inside_universe():
    series = [12.0, 150.0, -3.0, 88.0, 101.0, 29.0]
    out = song_chissom_forecast(series, 30, 100, 9)
    assert all(30 <= v <= 100 for v in out)


def test_deterministic():
    a = song_chissom_forecast(OIL, 30, 100, 11, forecast_steps=6)
    b = song_chissom_forecast(OIL, 30, 100, 11, forecast_steps=6)
    assert a == b


def test_non_finite_observation_passes_through():
    trace = song_chissom_trace([47.12, float("nan"), 41.6], 30, 100, 7)
    assert trace.fuzzified == [2, 7, 2]
    assert trace.historical == [95.0, 45.0]


def test_non_finite_last_value_extrapolates():
    out = song_chissom_forecast([47.12, 41.6, math.inf], 30, 100, 7, forecast_steps=1)
    # inf clamps to set 7, which was never a transition source
    assert out == [70.0, 70.0, 95.0]


def test_inputs_are_not_mutated(reference_series):
    before = list(reference_series)
    song_chissom_forecast(reference_series, 30, 100, 7, forecast_steps=2)
    assert reference_series == before
