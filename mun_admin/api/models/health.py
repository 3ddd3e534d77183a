"""Liveness check payload."""

from typing import Literal

from mun_admin.api.models.base import CamelModel


class HealthResponse(CamelModel):
    """What a monitor or operator sees at ``GET /api/health``.

    Attributes:
        status: Always "ok" while the process serves requests.
        service: Configured service name (the metrics ``service`` label).
        version: Package version.
        environment: Deployment environment.
        uptime_seconds: Seconds since startup, 0.0 before the lifespan ran.
    """

    status: Literal["ok"] = "ok"
    service: str
    version: str
    environment: str
    uptime_seconds: float
