"""
Entry point for the Fuzzy Cast forecasting API server.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncIterator

import uvicorn
from fastapi import FastAPI

from api.routes import router
from config import APP_NAME, APP_VERSION, settings

logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    stream=sys.stdout,
)
log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    log.info(
        "%s %s starting (universe=[%s, %s] sets=%d)",
        APP_NAME,
        APP_VERSION,
        settings.default_universe_min,
        settings.default_universe_max,
        settings.default_num_fuzzy_sets,
    )
    yield
    log.info("%s shutting down", APP_NAME)


app = FastAPI(
    title=f"{APP_NAME} Forecasting Engine",
    description="Song-Chissom fuzzy time series forecasting over ordered numeric series.",
    version=APP_VERSION,
    lifespan=lifespan,
)

app.include_router(router, prefix="/api/v1")


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        access_log=True,
    )
