"""
Centralized exception handling decorator for API route functions.

The :func:`handle_exceptions` decorator wraps an endpoint handler and converts
engine failures into :class:`fastapi.HTTPException` responses.  Each
:class:`engine.errors.AnalysisError` is mapped to the status code registered
for its kind (``InvalidInput`` -> 400, ``DegenerateSeries`` -> 422) with a
``{"kind", "message"}`` detail body.  HTTPExceptions raised by the handler are
propagated untouched, and any other exception becomes a ``500`` error with the
exception message as the response detail.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import inspect
from functools import wraps
from typing import Any, Callable, TypeVar, cast

from fastapi import HTTPException

from engine.errors import AnalysisError

F = TypeVar("F", bound=Callable[..., Any])


def to_http_exception(exc: AnalysisError) -> HTTPException:
    return HTTPException(status_code=exc.kind.status_code(), detail=exc.to_dict())


def handle_exceptions(func: F) -> F:
    """Decorator that converts uncaught exceptions to HTTP errors.

    The decorator works with both regular and async functions.
    """

    if inspect.iscoroutinefunction(func):
        @wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)
            except HTTPException:
                raise
            except AnalysisError as exc:
                raise to_http_exception(exc) from exc
            except Exception as exc:
                raise HTTPException(status_code=500, detail=str(exc)) from exc

        return cast(F, async_wrapper)

    @wraps(func)
    def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except HTTPException:
            raise
        except AnalysisError as exc:
            raise to_http_exception(exc) from exc
        except Exception as exc:
            raise HTTPException(status_code=500, detail=str(exc)) from exc

    return cast(F, sync_wrapper)
