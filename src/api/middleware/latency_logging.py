"""Request latency logging middleware."""

import logging
import time
from typing import Callable

from fastapi import Request, Response

logger = logging.getLogger(__name__)

# Thresholds for log levels (in milliseconds)
SLOW_REQUEST_THRESHOLD_MS = 1000
VERY_SLOW_REQUEST_THRESHOLD_MS = 3000

HEALTH_CHECK_PATHS = frozenset({"/health", "/health/ready"})


async def latency_logging_middleware(request: Request, call_next: Callable) -> Response:
    """Log method, path, status and latency of every request.

    Slow and failing requests are logged at a higher level. Health checks
    are only logged at debug level.

    Args:
        request: The incoming request.
        call_next: The next middleware/handler in the chain.

    Returns:
        Response: The response from the handler.
    """
    start_time = time.perf_counter()
    response: Response | None = None

    try:
        response = await call_next(request)
        return response
    finally:
        latency_ms = (time.perf_counter() - start_time) * 1000
        status_code = response.status_code if response is not None else 500
        path = request.url.path

        if path in HEALTH_CHECK_PATHS:
            level = logging.DEBUG
        elif status_code >= 500 or latency_ms > VERY_SLOW_REQUEST_THRESHOLD_MS:
            level = logging.ERROR
        elif status_code >= 400 or latency_ms > SLOW_REQUEST_THRESHOLD_MS:
            level = logging.WARNING
        else:
            level = logging.INFO

        logger.log(
            level,
            "%s %s - %d - %.2fms",
            request.method,
            path,
            status_code,
            latency_ms,
            extra={"status_code": status_code, "latency_ms": round(latency_ms, 2)},
        )
