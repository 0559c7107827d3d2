"""
Engine Packages for Fuzzy Cast Forecasting Engine

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.exceptions import (
    ForecastError,
    InsufficientDataError,
    InvalidUniverseError,
    InvalidConfigurationError,
    DuplicateObservationError,
)
from engine.fts import song_chissom_forecast

__all__ = [
    "ForecastError",
    "InsufficientDataError",
    "InvalidUniverseError",
    "InvalidConfigurationError",
    "DuplicateObservationError",
    "song_chissom_forecast",
]
