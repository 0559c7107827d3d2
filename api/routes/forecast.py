"""
Forecast routes for fuzzy time series predictions over raw series and dated observations, plus a sweep over the fuzzy set count.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from fastapi import APIRouter

from api.requests import ForecastRequest, ObservationForecastRequest, SweepRequest
from api.responses import ForecastResponse, ObservationForecastResponse, SweepResponse
from api.routes.exception import handle_exceptions
from services.forecast_service import run_forecast, run_observation_forecast, sweep

router = APIRouter(tags=["Forecast"])


@router.post("/forecast", response_model=ForecastResponse, summary="Song-Chissom forecast for a numeric series")
@handle_exceptions
async def forecast_series(req: ForecastRequest) -> ForecastResponse:
    return run_forecast(req)


@router.post(
    "/forecast/observations",
    response_model=ObservationForecastResponse,
    summary="Forecast dated observations with accuracy metrics",
)
@handle_exceptions
async def forecast_observations(req: ObservationForecastRequest) -> ObservationForecastResponse:
    return run_observation_forecast(req)


@router.post("/forecast/sweep", response_model=SweepResponse, summary="Score every fuzzy set count in a range")
@handle_exceptions
async def forecast_sweep(req: SweepRequest) -> SweepResponse:
    return await sweep(req)
