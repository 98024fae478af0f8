"""Bootstrap da aplicação — inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings e
expõe a factory do use case.

Uso:
    from app.bootstrap import initialize_app, create_subscribe_use_case

    initialize_app()
    use_case = create_subscribe_use_case()
"""

from __future__ import annotations

import logging

from app.bootstrap.dependencies import create_subscribe_use_case
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_beehiiv_settings

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging JSON com correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )


def initialize_test_app() -> None:
    """Inicializa logging em nível DEBUG para testes."""
    base = get_base_settings()
    configure_logging(
        level="DEBUG",
        service_name=f"{base.service_name}_test",
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings no startup.

    Credenciais ausentes não bloqueiam o boot: cada requisição responde
    500 "Server not configured". Valores malformados falham rápido em
    staging/produção e só geram alerta em desenvolvimento.
    """
    base = get_base_settings()
    beehiiv = get_beehiiv_settings()

    errors = [f"base: {error}" for error in base.validate()]
    errors.extend(f"beehiiv: {error}" for error in beehiiv.malformed_errors())

    if not beehiiv.is_configured:
        logger.error(
            "beehiiv_credentials_missing",
            extra={"component": "bootstrap", "environment": base.environment},
        )

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.is_strict:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


__all__ = [
    "create_subscribe_use_case",
    "initialize_app",
    "initialize_test_app",
    "validate_runtime_settings",
]
