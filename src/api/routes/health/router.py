"""Endpoints de health check."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from config.settings import get_base_settings, get_beehiiv_settings

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe — verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service=get_base_settings().service_name,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check() -> JSONResponse:
    """Readiness probe: pronto só com credenciais do Beehiiv presentes.

    Não chama o provedor; a única dependência é a configuração.
    """
    configured = get_beehiiv_settings().is_configured
    if not configured:
        logger.warning("readiness_beehiiv_not_configured")

    payload = {
        "status": "ready" if configured else "not_ready",
        "checks": {"beehiiv": {"status": "ok" if configured else "not_configured"}},
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if configured else 503)
