"""Prometheus scrape endpoint."""

from fastapi import APIRouter, Response

from mun_admin.infrastructure.monitoring import METRICS_CONTENT_TYPE, generate_metrics

router = APIRouter(prefix="/api", tags=["metrics"])


@router.get(
    "/metrics",
    response_class=Response,
    summary="Prometheus scrape target",
    responses={200: {"content": {METRICS_CONTENT_TYPE: {}}}},
)
async def get_metrics() -> Response:
    """Current ``mun_admin_*`` series in text exposition format."""
    return Response(content=generate_metrics(), media_type=METRICS_CONTENT_TYPE)
