"""HTTP request logging."""
import time
from typing import Awaitable, Callable

from fastapi import Request, Response

from src.app.logging import get_logger

logger = get_logger("src.app.http")

SKIPPED_PATHS = frozenset({"/health", "/api/health"})


async def log_requests(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Log method, path, status and duration of each request except health checks."""
    if request.url.path in SKIPPED_PATHS:
        return await call_next(request)

    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        "%s %s %d - %.1f ms",
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
    )
    return response
