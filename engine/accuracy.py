"""
Accuracy metrics for aligned actual and predicted series, skipping rows without a prediction and rows whose values are not finite (such as future rows that have no observation yet).

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np


@dataclass(frozen=True)
class AccuracyMetrics:
    last_predicted: Optional[float]
    avg_actual: float
    avg_predicted: float
    mape: float
    mae: float
    rmse: float
    valid_points: int


def _is_usable(actual: Optional[float], predicted: Optional[float]) -> bool:
    return (
        actual is not None
        and predicted is not None
        and math.isfinite(actual)
        and math.isfinite(predicted)
    )


def _last_prediction(predicted: Sequence[Optional[float]]) -> Optional[float]:
    for p in reversed(predicted):
        if p is not None:
            return float(p)
    return None


def evaluate(
    actuals: Sequence[Optional[float]],
    predicted: Sequence[Optional[float]],
) -> AccuracyMetrics:
    last = _last_prediction(predicted)
    pairs = [(a, p) for a, p in zip(actuals, predicted) if _is_usable(a, p)]
    if not pairs:
        return AccuracyMetrics(
            last_predicted=last,
            avg_actual=0.0,
            avg_predicted=0.0,
            mape=0.0,
            mae=0.0,
            rmse=0.0,
            valid_points=0,
        )

    a = np.array([x for x, _ in pairs], dtype=float)
    p = np.array([y for _, y in pairs], dtype=float)
    abs_err = np.abs(a - p)
    # zero actuals contribute a 0% error instead of dividing by zero
    safe_a = np.where(a != 0, np.abs(a), 1.0)
    pct_err = np.where(a != 0, abs_err / safe_a * 100.0, 0.0)

    return AccuracyMetrics(
        last_predicted=last,
        avg_actual=float(np.mean(a)),
        avg_predicted=float(np.mean(p)),
        mape=float(np.mean(pct_err)),
        mae=float(np.mean(abs_err)),
        rmse=float(np.sqrt(np.mean(abs_err ** 2))),
        valid_points=len(pairs),
    )
