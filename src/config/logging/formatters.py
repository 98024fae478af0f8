"""Formatters de logging estruturado.

Logs JSON com campos obrigatórios em ordem fixa:
- asctime
- level
- logger
- message
- correlation_id
- service
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Ordem importa: é a ordem das chaves no JSON emitido
REQUIRED_LOG_FIELDS: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {
            "asctime": "2026-10-19 10:30:00,123",
            "level": "WARNING",
            "logger": "api.connectors.beehiiv.http_client",
            "message": "beehiiv_delivery_failed",
            "correlation_id": "abc-123",
            "service": "asap_jobs_signup",
            "status_code": 422
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
    )
