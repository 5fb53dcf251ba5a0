"""Request context middleware: request IDs, access log, last-resort 500.

Learn: Every request gets an ID, either from the incoming X-Request-ID
header or freshly generated. It's bound to structlog's contextvars so
every log line for the request carries it, and echoed in the response.

Unhandled exceptions stop here: the traceback is logged and the client
gets a JSON 500 instead of a dropped connection.
"""

import time
import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

logger = structlog.get_logger()


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Bind a request ID, log completion, and turn crashes into 500s."""

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)

        started = time.perf_counter()
        try:
            response: Response = await call_next(request)
        except Exception:
            logger.exception(
                "request.failed", method=request.method, path=request.url.path
            )
            response = JSONResponse(
                status_code=500, content={"detail": "Internal server error"}
            )

        response.headers["X-Request-ID"] = request_id
        logger.info(
            "request.completed",
            method=request.method,
            path=request.url.path,
            status=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 1),
        )
        return response
