"""
Error handling for the FastAPI application.

User-facing errors are returned as ``{"errors": [{"msg": ...}]}`` with a 400
status. Everything else becomes an opaque ``Server error`` response; the
details are logged only.

Version: 1.0
"""

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.middleware.base import BaseHTTPMiddleware
from typing import Any, Callable, Dict, List

from credential_service.core.constants import SERVER_ERROR_MESSAGE
from credential_service.core.exceptions import BaseAPIException, ValidationException
from credential_service.core.logging import get_request_logger, log_error

# Configure logger
logger = get_request_logger(
    trace_id="error_handler",
    context={
        "component": "middleware",
        "module": "error_handler"
    }
)

def format_validation_errors(errors: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Convert pydantic error entries into ``{msg, param, location}`` objects.
    Submitted values are left out so passwords never echo back.
    """
    formatted = []
    for error in errors:
        loc = error.get("loc", ())
        formatted.append({
            "msg": error.get("msg", "Invalid value"),
            "param": str(loc[-1]) if len(loc) > 1 else None,
            "location": str(loc[0]) if loc else None,
        })
    return formatted

def server_error_response() -> Response:
    return PlainTextResponse(SERVER_ERROR_MESSAGE, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

async def request_validation_handler(request: Request, exc: RequestValidationError) -> Response:
    """Malformed request bodies are reported field by field with a 400."""
    validation_error = ValidationException(format_validation_errors(exc.errors()))
    return JSONResponse(
        status_code=validation_error.status_code,
        content={"errors": validation_error.errors}
    )

async def api_exception_handler(request: Request, exc: BaseAPIException) -> Response:
    """Report user-facing errors; hide operator-facing ones behind a generic 500."""
    if isinstance(exc, ValidationException):
        return JSONResponse(status_code=exc.status_code, content={"errors": exc.errors})

    if exc.user_facing:
        return JSONResponse(
            status_code=exc.status_code,
            content={"errors": [{"msg": exc.message}]}
        )

    log_error(
        logger,
        exc,
        "Request processing failed",
        {"path": request.url.path, "method": request.method, "error_details": exc.details}
    )
    return server_error_response()

class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Catches exceptions no handler claimed and turns them into a 500."""

    async def dispatch(
        self,
        request: Request,
        call_next: Callable
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as e:
            log_error(
                logger,
                e,
                "Unhandled error during request",
                {"path": request.url.path, "method": request.method}
            )
            return server_error_response()

def register_exception_handlers(app: FastAPI) -> None:
    """Install the exception handlers and the fallback middleware on ``app``."""
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(BaseAPIException, api_exception_handler)
    app.add_middleware(ErrorHandlerMiddleware)

__all__ = [
    'ErrorHandlerMiddleware',
    'format_validation_errors',
    'register_exception_handlers',
]
