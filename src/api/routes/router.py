"""Agregador de rotas — registra todos os routers.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.health.router import router as health_router
from api.routes.subscribe.router import router as subscribe_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados."""
    api_router = APIRouter()

    # Health checks na raiz (/health e /ready)
    api_router.include_router(health_router, tags=["health"])

    # Formulário da landing page
    api_router.include_router(subscribe_router, prefix="/api", tags=["subscribe"])

    return api_router
