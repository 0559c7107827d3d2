"""
Universe of discourse partitioning for fuzzy time series, splitting a numeric range into equal-width contiguous intervals whose midpoints act as the defuzzified value of each fuzzy state.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Tuple

from config import MIN_FUZZY_SETS
from engine.exceptions import InvalidConfigurationError, InvalidUniverseError

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class FuzzyInterval:
    id: int
    min: float
    max: float
    mid: float


def validate_universe(universe_min: float, universe_max: float) -> None:
    # also rejects NaN bounds, which fail every comparison
    if not universe_min < universe_max:
        raise InvalidUniverseError(
            f"universe_min must be less than universe_max (got {universe_min}, {universe_max})"
        )


def validate_set_count(num_fuzzy_sets: int) -> None:
    if num_fuzzy_sets < MIN_FUZZY_SETS:
        raise InvalidConfigurationError(
            f"num_fuzzy_sets must be >= {MIN_FUZZY_SETS} (got {num_fuzzy_sets})"
        )


def partition_universe(
    universe_min: float,
    universe_max: float,
    num_fuzzy_sets: int,
) -> Tuple[FuzzyInterval, ...]:
    validate_universe(universe_min, universe_max)
    validate_set_count(num_fuzzy_sets)

    width = (universe_max - universe_min) / num_fuzzy_sets
    # bounds are computed from the index, so neighbouring intervals share
    # the exact same float at their common edge
    intervals = tuple(
        FuzzyInterval(
            id=i + 1,
            min=universe_min + i * width,
            max=universe_min + (i + 1) * width,
            mid=universe_min + (i + 0.5) * width,
        )
        for i in range(num_fuzzy_sets)
    )
    log.debug(
        "partition_universe [%s, %s] sets=%d width=%s",
        universe_min, universe_max, num_fuzzy_sets, width,
    )
    return intervals
