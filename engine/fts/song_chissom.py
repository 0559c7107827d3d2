"""
Song–Chissom (1993) fuzzy time series forecasting, composing universe partitioning, fuzzification, relationship grouping and defuzzification into a single pure call over an ordered numeric series.

Song, Q., & Chissom, B. S. (1993). Fuzzy time series and its models.
Fuzzy Sets and Systems, 54(3), 269-277.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from config import DEFAULT_NUM_FUZZY_SETS, MIN_HISTORY_LENGTH
from engine.exceptions import InsufficientDataError, InvalidConfigurationError
from engine.fts.forecaster import extrapolate, forecast_history
from engine.fts.fuzzify import fuzzify_series
from engine.fts.partition import (
    FuzzyInterval,
    partition_universe,
    validate_set_count,
    validate_universe,
)
from engine.fts.relationships import (
    FuzzyLogicalRelationship,
    RelationshipGroups,
    build_relationships,
    group_relationships,
)

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ForecastTrace:
    intervals: Tuple[FuzzyInterval, ...]
    fuzzified: List[int]
    relationships: List[FuzzyLogicalRelationship]
    groups: RelationshipGroups
    historical: List[float]
    future: List[float]

    @property
    def forecast(self) -> List[float]:
        return self.historical + self.future


def validate_inputs(
    historical_data: Sequence[float],
    universe_min: float,
    universe_max: float,
    num_fuzzy_sets: int,
    forecast_steps: int,
) -> None:
    if len(historical_data) < MIN_HISTORY_LENGTH:
        raise InsufficientDataError(
            f"at least {MIN_HISTORY_LENGTH} data points are required (got {len(historical_data)})"
        )
    validate_universe(universe_min, universe_max)
    validate_set_count(num_fuzzy_sets)
    if forecast_steps < 0:
        raise InvalidConfigurationError(f"forecast_steps must be >= 0 (got {forecast_steps})")


def song_chissom_trace(
    historical_data: Sequence[float],
    universe_min: float,
    universe_max: float,
    num_fuzzy_sets: int = DEFAULT_NUM_FUZZY_SETS,
    forecast_steps: int = 0,
) -> ForecastTrace:
    """Run the full method and keep every intermediate artefact.

    All inputs are checked before anything is built, so a failure leaves no
    partial result behind. Non-finite observations are not rejected: they
    fuzzify like any other value and only propagate through arithmetic that
    consumes them.
    """
    validate_inputs(historical_data, universe_min, universe_max, num_fuzzy_sets, forecast_steps)

    intervals = partition_universe(universe_min, universe_max, num_fuzzy_sets)
    fuzzified = fuzzify_series(historical_data, intervals)
    relationships = build_relationships(fuzzified)
    groups = group_relationships(relationships)
    historical = forecast_history(fuzzified, groups, intervals)
    future = (
        extrapolate(historical_data[-1], forecast_steps, groups, intervals)
        if forecast_steps > 0 else []
    )
    log.debug(
        "song_chissom points=%d sets=%d groups=%d future=%d",
        len(historical_data), num_fuzzy_sets, len(groups), len(future),
    )
    return ForecastTrace(
        intervals=intervals,
        fuzzified=fuzzified,
        relationships=relationships,
        groups=groups,
        historical=historical,
        future=future,
    )


def song_chissom_forecast(
    historical_data: Sequence[float],
    universe_min: float,
    universe_max: float,
    num_fuzzy_sets: int = DEFAULT_NUM_FUZZY_SETS,
    forecast_steps: int = 0,
) -> List[float]:
    return song_chissom_trace(
        historical_data, universe_min, universe_max, num_fuzzy_sets, forecast_steps
    ).forecast
