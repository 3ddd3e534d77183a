"""Prometheus request metrics.

Requests are labelled by route template (``/api/evaluations/{evaluation_id}``)
rather than the raw path, so record ids never become label values.
Requests that match no route share the ``<unmatched>`` endpoint label.
"""

import time
from collections.abc import Awaitable, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.routing import BaseRoute

from mun_admin.infrastructure.monitoring.metrics import get_metrics_collector

UNMATCHED_ENDPOINT = "<unmatched>"

_ERROR_TYPES = {
    400: "bad_request",
    404: "not_found",
    405: "method_not_allowed",
    409: "conflict",
    422: "validation_error",
    500: "internal_error",
    502: "bad_gateway",
    503: "service_unavailable",
    504: "gateway_timeout",
}


def _classify_error_type(status_code: int) -> str:
    """error_type label for a 4xx/5xx status."""
    if status_code in _ERROR_TYPES:
        return _ERROR_TYPES[status_code]
    if 400 <= status_code < 500:
        return "client_error"
    if status_code >= 500:
        return "server_error"
    return "unknown"


def _endpoint_label(request: Request) -> str:
    route = request.scope.get("route")
    if isinstance(route, BaseRoute):
        return getattr(route, "path", UNMATCHED_ENDPOINT)
    return UNMATCHED_ENDPOINT


class MetricsMiddleware(BaseHTTPMiddleware):
    """Records duration, totals and failures per method, route and status."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        duration = time.perf_counter() - started

        endpoint = _endpoint_label(request)
        status = str(response.status_code)
        collector = get_metrics_collector()
        collector.observe_request_duration(request.method, endpoint, duration)
        collector.increment_requests(request.method, endpoint, status)
        if response.status_code >= 400:
            collector.increment_failed_requests(
                request.method,
                endpoint,
                status,
                _classify_error_type(response.status_code),
            )
        return response
