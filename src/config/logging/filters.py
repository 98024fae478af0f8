"""Filters de logging para injeção de contexto e redação de PII.

- CorrelationIdFilter: adiciona correlation_id e service
- EmailRedactionFilter: mascara endereços de email na mensagem final
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

_EMAIL_RE = re.compile(r"[\w.+-]+@[\w-]+(?:\.[\w-]+)+")
REDACTED_EMAIL = "<email>"


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        # correlation_id explícito via `extra` tem precedência
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


class EmailRedactionFilter(logging.Filter):
    """Remove emails de mensagens e de campos string passados via `extra`.

    O corpo bruto do upstream pode ecoar o email do inscrito; logs
    nunca devem carregá-lo.
    """

    def __init__(self, extra_fields: tuple[str, ...] = ("upstream_body", "error")) -> None:
        super().__init__()
        self._extra_fields = extra_fields

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        if _EMAIL_RE.search(message):
            record.msg = redact_emails(message)
            record.args = None
        for name in self._extra_fields:
            value = getattr(record, name, None)
            if isinstance(value, str):
                setattr(record, name, redact_emails(value))
        return True


def redact_emails(text: str) -> str:
    """Substitui qualquer email em `text` por um marcador fixo."""
    return _EMAIL_RE.sub(REDACTED_EMAIL, text)
