"""Protocolos de normalização inbound."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from .models import SubmissionRecord


class SubmissionNormalizerProtocol(Protocol):
    """Contrato mínimo para transformar o body bruto em SubmissionRecord."""

    def normalize(self, raw_body: Any) -> SubmissionRecord: ...
