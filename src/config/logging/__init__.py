"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="asap_jobs_signup")
    logger = get_logger(__name__)

Campos obrigatórios em todo log: asctime, level, logger, message,
correlation_id, service. Emails nunca aparecem em logs.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import (
    REDACTED_EMAIL,
    CorrelationIdFilter,
    EmailRedactionFilter,
    redact_emails,
)
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REDACTED_EMAIL",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "EmailRedactionFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "redact_emails",
]
