"""
Constants and configuration for Fuzzy Cast.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os

from pydantic_settings import BaseSettings


APP_NAME = "Fuzzy Cast"
APP_VERSION = "1.0.0"

FUZZYCAST_HOST: str = os.getenv("FUZZYCAST_HOST", "0.0.0.0")
FUZZYCAST_PORT: int = int(os.getenv("FUZZYCAST_PORT", "4322"))
FUZZYCAST_LOG_LEVEL: str = os.getenv("FUZZYCAST_LOG_LEVEL", "INFO").upper()

# universe of discourse used by the bundled oil futures dataset
DEFAULT_UNIVERSE_MIN: float = 30.0
DEFAULT_UNIVERSE_MAX: float = 100.0
DEFAULT_NUM_FUZZY_SETS: int = 7

# practical range of fuzzy set counts
MIN_FUZZY_SETS: int = 3
MAX_FUZZY_SETS: int = 15
MAX_FORECAST_STEPS: int = 24
MIN_HISTORY_LENGTH: int = 2


class Settings(BaseSettings):
    host: str = FUZZYCAST_HOST
    port: int = FUZZYCAST_PORT
    log_level: str = FUZZYCAST_LOG_LEVEL

    default_universe_min: float = DEFAULT_UNIVERSE_MIN
    default_universe_max: float = DEFAULT_UNIVERSE_MAX
    default_num_fuzzy_sets: int = DEFAULT_NUM_FUZZY_SETS

    # range of set counts accepted by the API
    min_fuzzy_sets: int = MIN_FUZZY_SETS
    max_fuzzy_sets: int = MAX_FUZZY_SETS

    default_forecast_steps: int = 1
    max_forecast_steps: int = MAX_FORECAST_STEPS

    # observations are half-yearly; future rows are dated this many months apart
    series_step_months: int = 6

    # MAPE (%) above which a forecast is flagged as inaccurate
    mape_warning_threshold: float = 10.0

    sweep_max_parallel: int = 4

    model_config = {
        "env_prefix": "FUZZYCAST_",
        "extra": "ignore",
    }


settings = Settings()
