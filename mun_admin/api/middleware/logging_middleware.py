"""Request logging with correlation ids.

Each request runs in a fresh log context holding its correlation id
(taken from X-Correlation-ID when usable, minted otherwise). The id is
echoed on the response. Completed requests are logged at info, or at
warning for 4xx/5xx; health and metrics endpoints only at debug.
"""

import time
from collections.abc import Awaitable, Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from mun_admin.infrastructure.observability import (
    bind_correlation_id,
    clear_correlation_id,
    resolve_correlation_id,
)

CORRELATION_HEADER = "X-Correlation-ID"
QUIET_PATHS = frozenset({"/api/health", "/api/metrics"})

logger = structlog.get_logger(__name__)


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


class LoggingMiddleware(BaseHTTPMiddleware):
    """Binds a correlation id per request and logs the outcome."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        correlation_id = resolve_correlation_id(request.headers.get(CORRELATION_HEADER))
        bind_correlation_id(correlation_id)
        log = logger.bind(method=request.method, path=request.url.path)

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            log.exception("request_failed", duration_ms=_elapsed_ms(started))
            raise
        finally:
            clear_correlation_id()

        if request.url.path in QUIET_PATHS:
            emit = log.debug
        elif response.status_code >= 400:
            emit = log.warning
        else:
            emit = log.info
        emit(
            "request_completed",
            status_code=response.status_code,
            duration_ms=_elapsed_ms(started),
            correlation_id=correlation_id,
        )

        response.headers[CORRELATION_HEADER] = correlation_id
        return response
