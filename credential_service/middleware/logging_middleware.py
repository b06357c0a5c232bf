# Version: 1.0
# Purpose: FastAPI middleware for request/response logging with trace IDs

import time
import uuid
from typing import Callable
from fastapi import Request, Response

from credential_service.core.logging import get_request_logger

# Global Constants
EXCLUDED_PATHS = [
    '/health', '/metrics', '/docs', '/redoc', '/openapi.json',
    '/favicon.ico', '/static/*'
]
TRACE_HEADER = 'X-Trace-ID'

def generate_trace_id() -> str:
    """
    Generate a unique trace ID.

    Returns:
        str: Microsecond timestamp followed by a UUID4
    """
    timestamp = int(time.time() * 1_000_000)
    return f"{timestamp}-{uuid.uuid4()}"

def should_log_path(path: str) -> bool:
    """
    Determine if the request path should be logged.

    Args:
        path: Request path to evaluate

    Returns:
        bool: True if path should be logged, False if excluded
    """
    if path in EXCLUDED_PATHS:
        return False

    for excluded in EXCLUDED_PATHS:
        if excluded.endswith('/*') and path.startswith(excluded[:-2]):
            return False

    return True

async def logging_middleware(request: Request, call_next: Callable) -> Response:
    """
    Log each request with its status and duration, and tag the response
    with a trace ID.
    """
    trace_id = request.headers.get(TRACE_HEADER) or generate_trace_id()
    start_time = time.perf_counter()
    request.state.trace_id = trace_id

    response = await call_next(request)

    duration = time.perf_counter() - start_time
    response.headers[TRACE_HEADER] = trace_id

    if should_log_path(request.url.path):
        get_request_logger(trace_id, {
            'method': request.method,
            'path': request.url.path,
            'client_host': request.client.host if request.client else None,
            'status_code': response.status_code,
            'response_time_ms': round(duration * 1000, 2),
        }).info(f"{request.method} {request.url.path} {response.status_code}")

    return response

# Export middleware function
__all__ = ['logging_middleware', 'generate_trace_id', 'should_log_path']
