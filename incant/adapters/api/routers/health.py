# incant/adapters/api/routers/health.py
from typing import Dict

import structlog
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Response, status

from incant.services.dialect_registry import DialectRegistry
from incant.shared.container import Container

logger = structlog.get_logger()

router = APIRouter(prefix="/health", tags=["System"])


@router.get("/live", status_code=status.HTTP_200_OK)
async def liveness_probe():
    """
    Liveness Probe.
    Returns 200 OK if the service is operational.
    """
    return {"status": "ok", "service": "incant-api"}


@router.get("/ready", status_code=status.HTTP_200_OK)
@inject
async def readiness_probe(
    response: Response,
    registry: DialectRegistry = Depends(Provide[Container.dialect_registry]),
) -> Dict[str, str]:
    """
    Readiness Probe.
    Ready once the lexicon source is readable and at least one dialect
    passed validation. Returns 503 otherwise.
    """
    health_status = {
        "storage": "up" if registry.repo.health_check() else "down",
        "dialects": ",".join(registry.ids()) or "down",
    }

    if health_status["storage"] == "down" or not registry.is_ready:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        logger.warning("readiness_probe_failed", status=health_status)

    return health_status
