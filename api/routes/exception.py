"""
Centralized exception handling decorator for API route functions.

The :func:`handle_exceptions` decorator wraps an endpoint handler and converts
uncaught exceptions into :class:`fastapi.HTTPException` responses.
HTTPExceptions raised by the handler are propagated untouched, thus
preserving status codes and detail messages defined locally.  Forecasting
input errors (:class:`engine.exceptions.ForecastError`) become a ``422`` with
the error message as detail.  All other exceptions are turned into a ``500``.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import inspect
import logging
from functools import wraps
from typing import Any, Callable, TypeVar, cast

from fastapi import HTTPException

from engine.exceptions import ForecastError

F = TypeVar("F", bound=Callable[..., Any])

log = logging.getLogger(__name__)


def _translate(exc: Exception) -> HTTPException:
    if isinstance(exc, ForecastError):
        log.warning("rejected forecast input: %s: %s", type(exc).__name__, exc)
        return HTTPException(
            status_code=422,
            detail={"error": type(exc).__name__, "message": str(exc)},
        )
    log.exception("unhandled error in route")
    return HTTPException(status_code=500, detail=str(exc))


def handle_exceptions(func: F) -> F:
    """Decorator that converts uncaught exceptions to HTTP errors.

    * :class:`HTTPException` is re-raised verbatim.
    * :class:`ForecastError` becomes ``HTTPException(status_code=422)`` whose
      detail names the error kind and carries its message.
    * Any other exception becomes ``HTTPException(status_code=500)``.

    The decorator works with both regular and async functions.
    """

    if inspect.iscoroutinefunction(func):
        @wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)
            except HTTPException:
                raise
            except Exception as exc:
                raise _translate(exc) from exc

        return cast(F, async_wrapper)

    @wraps(func)
    def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except HTTPException:
            raise
        except Exception as exc:
            raise _translate(exc) from exc

    return cast(F, sync_wrapper)
