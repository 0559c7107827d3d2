"""
Forecast service that runs the fuzzy time series engine for API requests, aligns results with dated observations, scores accuracy and sweeps the fuzzy set count concurrently.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""
from __future__ import annotations

import asyncio
import dataclasses
import logging
import math
from typing import List, Sequence

from api.requests import ForecastRequest, ObservationForecastRequest, SweepRequest
from api.responses import (
    AccuracyOut,
    ForecastPointOut,
    ForecastResponse,
    ForecastTraceOut,
    IntervalOut,
    ObservationForecastResponse,
    SweepResponse,
    SweepResult,
)
from config import settings
from engine.accuracy import evaluate
from engine.exceptions import InvalidConfigurationError
from engine.fts import ForecastTrace, song_chissom_trace, validate_inputs
from engine.series import Observation, align_forecast, sort_chronologically

log = logging.getLogger(__name__)


def _trace_out(trace: ForecastTrace) -> ForecastTraceOut:
    return ForecastTraceOut(
        intervals=[
            IntervalOut(id=i.id, min=i.min, max=i.max, mid=i.mid) for i in trace.intervals
        ],
        fuzzified=list(trace.fuzzified),
        relationship_groups={k: list(v) for k, v in trace.groups.items()},
    )


def run_forecast(req: ForecastRequest) -> ForecastResponse:
    log.info(
        "forecast points=%d sets=%d steps=%d",
        len(req.series), req.num_fuzzy_sets, req.forecast_steps,
    )
    trace = song_chissom_trace(
        req.series,
        req.universe_min,
        req.universe_max,
        req.num_fuzzy_sets,
        req.forecast_steps,
    )
    return ForecastResponse(
        forecast=trace.forecast,
        historical=trace.historical,
        future=trace.future,
        trace=_trace_out(trace) if req.include_trace else None,
    )


def run_observation_forecast(req: ObservationForecastRequest) -> ObservationForecastResponse:
    steps = settings.default_forecast_steps if req.forecast_steps is None else req.forecast_steps
    ordered = sort_chronologically(Observation(o.date, o.actual) for o in req.observations)
    log.info(
        "observation forecast rows=%d sets=%d steps=%d (%s..%s)",
        len(ordered), req.num_fuzzy_sets, steps, ordered[0].date, ordered[-1].date,
    )

    trace = song_chissom_trace(
        [o.actual for o in ordered],
        req.universe_min,
        req.universe_max,
        req.num_fuzzy_sets,
        steps,
    )
    rows = align_forecast(ordered, trace.forecast, settings.series_step_months)
    metrics = evaluate([r.actual for r in rows], [r.predicted for r in rows])
    high_error = metrics.mape > settings.mape_warning_threshold
    if high_error:
        log.warning(
            "forecast MAPE %.2f%% exceeds %.2f%% (sets=%d)",
            metrics.mape, settings.mape_warning_threshold, req.num_fuzzy_sets,
        )

    return ObservationForecastResponse(
        points=[
            ForecastPointOut(
                date=r.date,
                actual=r.actual if math.isfinite(r.actual) else None,
                predicted=r.predicted,
                is_future=r.is_future,
            )
            for r in rows
        ],
        accuracy=AccuracyOut(**dataclasses.asdict(metrics)),
        high_error=high_error,
        universe_min=req.universe_min,
        universe_max=req.universe_max,
        num_fuzzy_sets=req.num_fuzzy_sets,
    )


def _score(
    series: Sequence[float],
    universe_min: float,
    universe_max: float,
    num_fuzzy_sets: int,
) -> SweepResult:
    trace = song_chissom_trace(series, universe_min, universe_max, num_fuzzy_sets)
    metrics = evaluate(list(series[1:]), trace.historical)
    return SweepResult(
        num_fuzzy_sets=num_fuzzy_sets,
        mape=metrics.mape,
        mae=metrics.mae,
        rmse=metrics.rmse,
        valid_points=metrics.valid_points,
    )


async def sweep(req: SweepRequest) -> SweepResponse:
    if req.min_sets > req.max_sets:
        raise InvalidConfigurationError(
            f"min_sets must not exceed max_sets (got {req.min_sets} > {req.max_sets})"
        )
    validate_inputs(req.series, req.universe_min, req.universe_max, req.min_sets, 0)

    max_parallel = max(1, int(settings.sweep_max_parallel))
    sem = asyncio.Semaphore(max_parallel)

    async def _run(n: int) -> SweepResult:
        async with sem:
            return await asyncio.to_thread(
                _score, req.series, req.universe_min, req.universe_max, n
            )

    counts = list(range(req.min_sets, req.max_sets + 1))
    results: List[SweepResult] = list(await asyncio.gather(*[_run(n) for n in counts]))
    # a count with no usable pair has nothing to rank it by
    scored = [r for r in results if r.valid_points > 0]
    if not scored:
        log.warning("sweep sets=%d..%d produced no usable pairs", req.min_sets, req.max_sets)
        return SweepResponse(results=results, best=None)

    # gather keeps input order, so ties resolve to the smaller set count
    best = min(scored, key=lambda r: r.mape)
    log.info(
        "sweep sets=%d..%d best=%d mape=%.4f",
        req.min_sets, req.max_sets, best.num_fuzzy_sets, best.mape,
    )
    return SweepResponse(results=results, best=best)
