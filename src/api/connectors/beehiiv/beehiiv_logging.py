"""Helpers de logging para a API Beehiiv (sem PII)."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

# Corpo bruto pode ser grande (HTML de erro do proxy)
MAX_LOGGED_BODY_CHARS = 2000


def log_delivery_error(status_code: int, endpoint: str, raw_body: str) -> None:
    """Loga resposta rejeitada com status e corpo bruto para diagnóstico."""
    logger.error(
        "beehiiv_delivery_failed",
        extra={
            "method": "POST",
            "endpoint": endpoint,
            "status_code": status_code,
            "upstream_body": raw_body[:MAX_LOGGED_BODY_CHARS],
        },
    )


def log_already_subscribed(endpoint: str) -> None:
    logger.info(
        "beehiiv_already_subscribed",
        extra={"method": "POST", "endpoint": endpoint, "status_code": 409},
    )


def log_success(endpoint: str, status_code: int) -> None:
    """Loga sucesso sem expor dados sensíveis."""
    logger.info(
        "beehiiv_subscription_created",
        extra={
            "method": "POST",
            "endpoint": endpoint,
            "status_code": status_code,
        },
    )
