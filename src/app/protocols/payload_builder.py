"""Protocolos de construção de payload outbound."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import SubmissionRecord, SubscriptionPayload


class PayloadBuilderProtocol(Protocol):
    """Contrato mínimo para construir o payload de inscrição."""

    def build(self, record: SubmissionRecord) -> SubscriptionPayload: ...
