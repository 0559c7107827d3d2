"""
Fuzzy time series forecasting after Song and Chissom, including universe partitioning, fuzzification, fuzzy logical relationship grouping, one-step-ahead defuzzified forecasts and recursive extrapolation beyond the observed series.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""


from engine.fts.partition import FuzzyInterval, partition_universe
from engine.fts.fuzzify import fuzzify, fuzzify_series
from engine.fts.relationships import (
    FuzzyLogicalRelationship,
    RelationshipGroups,
    build_relationships,
    group_relationships,
)
from engine.fts.forecaster import defuzzify, extrapolate, forecast_history
from engine.fts.song_chissom import (
    ForecastTrace,
    song_chissom_forecast,
    song_chissom_trace,
    validate_inputs,
)

__all__ = [
    "FuzzyInterval",
    "partition_universe",
    "fuzzify",
    "fuzzify_series",
    "FuzzyLogicalRelationship",
    "RelationshipGroups",
    "build_relationships",
    "group_relationships",
    "defuzzify",
    "extrapolate",
    "forecast_history",
    "ForecastTrace",
    "song_chissom_forecast",
    "song_chissom_trace",
    "validate_inputs",
]
