"""
Health check endpoints for monitoring and orchestration (K8s, Docker, etc.)

- /health: Basic liveness check (always returns 200)
- /health/live: Alias of /health
- /health/ready: Readiness check (rental backend reachable when not in memory)
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ecomove.api.dependencies import get_repositories
from ecomove.domain.errors import RepositoryError
from ecomove.infrastructure.http import endpoints

logger = logging.getLogger(__name__)

router = APIRouter()

SERVICE_NAME = "ecomove-api"


@router.get("/health")
async def health_check():
    """
    Basic liveness probe.

    Returns 200 OK if the application is running.
    """
    return {"status": "ok", "service": SERVICE_NAME}


@router.get("/health/live")
async def health_check_live():
    return {"status": "ok", "service": SERVICE_NAME}


@router.get("/health/ready")
async def health_check_ready(repos: Annotated[dict, Depends(get_repositories)]):
    """
    Readiness probe.

    In memory mode there are no external dependencies. Otherwise the rental
    backend must answer its own health endpoint; returns 503 if it does not.
    """
    health_status = {"status": "ready", "checks": {}}

    api_client = repos.get("api_client")
    if api_client is None:
        health_status["checks"]["backend"] = "in_memory"
        return health_status

    try:
        await api_client.get(endpoints.HEALTH)
        health_status["checks"]["backend"] = "healthy"
    except RepositoryError as e:
        logger.error("Readiness check: backend unhealthy", extra={"error_code": e.code})
        health_status["status"] = "not_ready"
        health_status["checks"]["backend"] = "unhealthy"
        return JSONResponse(status_code=503, content=health_status)

    return health_status
