"""Protocolos de validação da submissão."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import SubmissionRecord


class SubmissionValidatorProtocol(Protocol):
    """Contrato mínimo para validar a submissão normalizada.

    Levanta utils.errors.ValidationError quando inválida.
    """

    def validate(self, record: SubmissionRecord) -> None: ...
