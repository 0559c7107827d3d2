"""
Response models for API endpoints.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from typing import Any, Dict, List, Optional

import numpy as np
from pydantic import BaseModel, Field, model_serializer


def _coerce(obj: Any) -> Any:
    if isinstance(obj, dict):
        return {k: _coerce(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_coerce(v) for v in obj]
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, np.floating):
        obj = float(obj)
    if isinstance(obj, float) and not math.isfinite(obj):
        # JSON has no NaN; future rows carry no observation
        return None
    return obj


class NpModel(BaseModel):

    @model_serializer(mode="wrap")
    def _serialize(self, handler: Any) -> Any:
        return _coerce(handler(self))


class IntervalOut(NpModel):

    id: int
    min: float
    max: float
    mid: float


class ForecastTraceOut(NpModel):

    intervals: List[IntervalOut]
    fuzzified: List[int]
    relationship_groups: Dict[int, List[int]]


class ForecastResponse(NpModel):

    forecast: List[float]
    historical: List[float]
    future: List[float]
    trace: Optional[ForecastTraceOut] = None


class ForecastPointOut(NpModel):

    date: str
    actual: Optional[float]
    predicted: Optional[float]
    is_future: bool = False


class AccuracyOut(NpModel):

    last_predicted: Optional[float]
    avg_actual: float
    avg_predicted: float
    mape: float
    mae: float
    rmse: float
    valid_points: int


class ObservationForecastResponse(NpModel):

    points: List[ForecastPointOut]
    accuracy: AccuracyOut
    high_error: bool
    universe_min: float
    universe_max: float
    num_fuzzy_sets: int


class SweepResult(NpModel):

    num_fuzzy_sets: int
    mape: float
    mae: float
    rmse: float
    valid_points: int


class SweepResponse(NpModel):

    results: List[SweepResult] = Field(default_factory=list)
    best: Optional[SweepResult] = None


class ObservationOut(NpModel):

    date: str
    actual: float


class DatasetResponse(NpModel):

    name: str
    observations: List[ObservationOut]
    parameters: Dict[str, Any]
