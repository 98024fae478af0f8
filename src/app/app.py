"""Entrypoint ASGI do asap-jobs-signup.

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import create_api_router
from app.bootstrap import create_subscribe_use_case, initialize_app, validate_runtime_settings
from config.logging import get_logger
from config.settings import get_base_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: valida settings e monta o use case uma única vez."""
    service = get_base_settings().service_name
    logger.info("app_starting", extra={"service": service})
    validate_runtime_settings()
    app.state.subscribe_use_case = create_subscribe_use_case()

    yield

    logger.info("app_shutting_down", extra={"service": service})
    app.state.subscribe_use_case = None


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI."""
    base = get_base_settings()
    fastapi_app = FastAPI(
        title="asap-jobs-signup",
        description="Inscrição da landing page na newsletter (Beehiiv)",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=None if base.is_production else "/docs",
        redoc_url=None,
        openapi_url=None if base.is_production else "/openapi.json",
    )

    # allow_credentials exige origins explícitas
    wildcard = "*" in base.cors_origins
    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=list(base.cors_origins),
        allow_credentials=not wildcard,
        allow_methods=["POST", "OPTIONS"],
        allow_headers=["Content-Type", "X-Correlation-Id"],
        expose_headers=["X-Correlation-Id"],
    )

    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": base.service_name})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting asap-jobs-signup in development mode")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()
