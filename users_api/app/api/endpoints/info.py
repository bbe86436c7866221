"""
Service metadata and health endpoints.

``GET /`` describes the running service; ``GET /health`` is a liveness
probe reporting the current time and how long the process has been
up.  Neither touches the user store.
"""

import time
from datetime import datetime, timezone

import fastapi
from fastapi import APIRouter, Request

from users_api.app.schemas.info import HealthStatus, ServiceInfo

router = APIRouter()

# Captured when the application package is first imported, which for a
# served process is at startup.
PROCESS_STARTED_AT = time.monotonic()


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and ``Z``."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@router.api_route("/", methods=["GET", "HEAD"], response_model=ServiceInfo)
async def service_info(request: Request) -> ServiceInfo:
    settings = request.app.state.settings
    return ServiceInfo(
        message=f"Welcome to the {settings.project_name}",
        version=settings.api_version,
        framework=f"FastAPI {fastapi.__version__}",
    )


@router.api_route("/health", methods=["GET", "HEAD"], response_model=HealthStatus)
async def health() -> HealthStatus:
    return HealthStatus(
        status="healthy",
        timestamp=utc_timestamp(),
        uptime=time.monotonic() - PROCESS_STARTED_AT,
    )
