"""Error response format and handlers for the API.

All API errors use a consistent response format:
{
    "error": "error_code",
    "message": "Human-readable description"
}

Station searches never fail because of upstream mirrors (they return an
empty result instead), so these handlers only see configuration and
programming errors surfacing from the ondas library.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from ondas import ConfigurationError, MirrorError, OndasError
from pydantic import BaseModel

logger = logging.getLogger(__name__)


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str
    message: str


# Map ondas exceptions to machine-readable error codes
_ERROR_CODES: dict[type[OndasError], str] = {
    ConfigurationError: "configuration_error",
    MirrorError: "upstream_error",
}


def error_code_for(exc: OndasError) -> str:
    """Return the error code for an exception, most specific class first."""
    for exc_class in type(exc).__mro__:
        if exc_class in _ERROR_CODES:
            return _ERROR_CODES[exc_class]
    return "internal_error"


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers on the FastAPI app."""

    @app.exception_handler(OndasError)
    async def ondas_error_handler(request: Request, exc: OndasError) -> JSONResponse:
        """Generic handler for all OndasError subclasses."""
        logger.error("%s on %s: %s", type(exc).__name__, request.url.path, exc)
        content = ErrorResponse(error=error_code_for(exc), message=exc.message)
        return JSONResponse(status_code=exc.status_code, content=content.model_dump())
