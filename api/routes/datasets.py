"""
Dataset routes exposing the bundled reference series together with the parameters it is forecast with by default.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from fastapi import APIRouter

from api.responses import DatasetResponse, ObservationOut
from api.routes.exception import handle_exceptions
from engine.datasets import OIL_FUTURES, default_parameters

router = APIRouter(tags=["Datasets"])


@router.get("/datasets/oil-futures", response_model=DatasetResponse)
@handle_exceptions
async def oil_futures() -> DatasetResponse:
    return DatasetResponse(
        name="oil-futures",
        observations=[ObservationOut(date=o.date, actual=o.actual) for o in OIL_FUTURES],
        parameters=default_parameters(),
    )
