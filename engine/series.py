"""
Dated observation handling for forecasting: chronological ordering with duplicate date detection, calendar month stepping for future rows, and alignment of one-step-ahead forecasts with the observations they predict.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from engine.exceptions import DuplicateObservationError

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Observation:
    date: str
    actual: float


@dataclass(frozen=True)
class ForecastPoint:
    date: str
    actual: float
    predicted: Optional[float]
    is_future: bool = False


def sort_chronologically(observations: Iterable[Observation]) -> List[Observation]:
    ordered = sorted(observations, key=lambda o: o.date)
    for prev, cur in zip(ordered, ordered[1:]):
        if prev.date == cur.date:
            raise DuplicateObservationError(f"duplicate observation date {cur.date}")
    return ordered


def add_months(date: str, months: int) -> str:
    # day of month is carried over unchanged; the series is dated on the 1st
    year, month, day = (int(part) for part in date.split("-"))
    total = year * 12 + (month - 1) + months
    return f"{total // 12:04d}-{total % 12 + 1:02d}-{day:02d}"


def align_forecast(
    observations: Sequence[Observation],
    forecast: Sequence[float],
    step_months: int,
) -> List[ForecastPoint]:
    """Attach each forecast value to the row it predicts.

    The first observation has nothing predicting it. Forecast values past the
    last observation become future rows with a NaN actual, each dated
    ``step_months`` after the row before it.
    """
    rows: List[ForecastPoint] = []
    for i, obs in enumerate(observations):
        rows.append(ForecastPoint(
            date=obs.date,
            actual=obs.actual,
            predicted=None if i == 0 else forecast[i - 1],
        ))

    last_date = observations[-1].date
    for value in forecast[len(observations) - 1:]:
        last_date = add_months(last_date, step_months)
        rows.append(ForecastPoint(
            date=last_date,
            actual=float("nan"),
            predicted=value,
            is_future=True,
        ))

    log.debug("align_forecast rows=%d future=%d", len(rows), len(rows) - len(observations))
    return rows
