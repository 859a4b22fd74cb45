"""Translate raised errors into the gateway's JSON error responses."""

from __future__ import annotations

import logging
from typing import Callable, Coroutine

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.routing import APIRoute
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..core.errors import ConfigurationError, GatewayError, StoreError, SubmissionError

logger = logging.getLogger(__name__)

METHOD_NOT_ALLOWED = "Method not allowed"
INTERNAL_ERROR = "Internal server error"

# Raised on purpose and answered by a registered handler.
_HANDLED = (GatewayError, StarletteHTTPException, RequestValidationError)


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


class GatewayRoute(APIRoute):
    """Route that answers unexpected errors itself.

    The response is built inside the middleware stack, so it still passes
    through CORS, and the exception does not reach the server error middleware.
    """

    def get_route_handler(self) -> Callable[[Request], Coroutine[None, None, Response]]:
        handler = super().get_route_handler()

        async def route_handler(request: Request) -> Response:
            try:
                return await handler(request)
            except _HANDLED:
                raise
            except Exception:
                logger.exception("Unexpected error handling %s %s", request.method, request.url.path)
                return _error_response(500, INTERNAL_ERROR)

        return route_handler


async def gateway_error_handler(request: Request, exc: GatewayError) -> JSONResponse:
    if isinstance(exc, SubmissionError):
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.message)
        return _error_response(exc.status_code, exc.message)
    if isinstance(exc, StoreError):
        logger.error("%s: %s", exc.message, exc.detail)
        return _error_response(exc.status_code, exc.message)
    if isinstance(exc, ConfigurationError):
        logger.error("Configuration error: %s", exc.message)
        return _error_response(exc.status_code, INTERNAL_ERROR)
    logger.error("Unhandled gateway error: %s", exc.message)
    return _error_response(exc.status_code, INTERNAL_ERROR)


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 405:
        return PlainTextResponse(METHOD_NOT_ALLOWED, status_code=405, headers=exc.headers)
    return JSONResponse({"error": exc.detail}, status_code=exc.status_code, headers=exc.headers)


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    # Last resort for errors raised outside a GatewayRoute, e.g. in middleware.
    logger.exception("Unexpected error handling %s %s", request.method, request.url.path)
    return _error_response(500, INTERNAL_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the gateway's error translators to the given app."""

    app.add_exception_handler(GatewayError, gateway_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)


__all__ = [
    "GatewayRoute",
    "INTERNAL_ERROR",
    "METHOD_NOT_ALLOWED",
    "register_exception_handlers",
]
