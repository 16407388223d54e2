"""
Custom middleware for the FastAPI application.
"""
import time
import logging
import uuid
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from .static import is_reserved

# Set up logging
logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
QUIET_PATHS = ("/health",)


def _log_level(path: str, status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400 and is_reserved(path):
        return logging.WARNING
    if path in QUIET_PATHS or not is_reserved(path):
        return logging.DEBUG
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs every request with a request id and its duration.

    The id comes from the caller's ``X-Request-ID`` header when present, so
    a frontend can correlate a failed triage with the server log; otherwise
    a new one is generated. Record, exam and triage calls are logged at
    INFO, client errors on them at WARNING, server errors and 502s from the
    triage route at ERROR. Health checks and static assets only at DEBUG.
    """
    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id
        path = request.url.path

        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                f"[{request_id}] {request.method} {path} raised {e.__class__.__name__}: {str(e)} "
                f"after {time.perf_counter() - start_time:.3f}s"
            )
            raise

        process_time = time.perf_counter() - start_time
        response.headers["X-Process-Time"] = f"{process_time:.4f}"
        response.headers[REQUEST_ID_HEADER] = request_id
        logger.log(
            _log_level(path, response.status_code),
            f"[{request_id}] {request.method} {path} -> {response.status_code} in {process_time:.3f}s",
        )
        return response


def setup_middlewares(app):
    """
    Set up all custom middlewares for the application.

    Args:
        app: FastAPI application instance
    """
    app.add_middleware(RequestLoggingMiddleware)
