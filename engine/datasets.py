"""
Bundled reference dataset: half-yearly Brent crude oil futures settlement prices, used as the default series for forecasting and as a fixture for tests.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Any, Dict, Tuple

from config import settings
from engine.series import Observation

OIL_FUTURES: Tuple[Observation, ...] = (
    Observation("2015-07-01", 47.12),
    Observation("2016-01-01", 33.62),
    Observation("2016-07-01", 41.6),
    Observation("2017-01-01", 52.81),
    Observation("2017-07-01", 50.17),
    Observation("2018-01-01", 64.73),
    Observation("2018-07-01", 68.76),
    Observation("2019-01-01", 53.79),
    Observation("2019-07-01", 58.58),
    Observation("2020-01-01", 51.56),
    Observation("2020-07-01", 40.27),
    Observation("2021-01-01", 52.2),
    Observation("2021-07-01", 73.95),
    Observation("2022-01-01", 86.49),
    Observation("2022-07-01", 93.75),
    Observation("2023-01-01", 79.17),
    Observation("2023-07-01", 81.32),
    Observation("2024-01-01", 75.71),
)


def default_parameters() -> Dict[str, Any]:
    return {
        "universe_min": settings.default_universe_min,
        "universe_max": settings.default_universe_max,
        "num_fuzzy_sets": settings.default_num_fuzzy_sets,
        "forecast_steps": settings.default_forecast_steps,
    }
