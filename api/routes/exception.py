"""
Centralized exception handling decorator for API route functions.

The :func:`handle_exceptions` decorator wraps an endpoint handler and converts
uncaught exceptions into :class:`fastapi.HTTPException` responses.
HTTPExceptions raised by the handler are propagated untouched. Engine errors
the caller can fix (an unsupported export format, a malformed dependency map)
become ``400`` responses; anything else becomes a ``500`` with the exception
message as the detail.

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

from engine.exceptions import DependencyGraphError

F = TypeVar("F", bound=Callable[..., Any])

log = logging.getLogger(__name__)

_CLIENT_ERRORS = (DependencyGraphError, ValueError)


def _translate(exc: Exception) -> HTTPException:
    if isinstance(exc, _CLIENT_ERRORS):
        return HTTPException(status_code=400, detail=str(exc))
    log.exception("unhandled error in route handler")
    return HTTPException(status_code=500, detail=str(exc))


def handle_exceptions(func: F) -> F:
    """Decorator that converts uncaught exceptions to HTTP errors.

    Route handlers are coroutines; anything else is rejected at import time.
    """

    if not inspect.iscoroutinefunction(func):
        raise TypeError(f"{func.__qualname__} must be an async route handler")

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except HTTPException:
            raise
        except Exception as exc:
            raise _translate(exc) from exc

    return cast(F, wrapper)
