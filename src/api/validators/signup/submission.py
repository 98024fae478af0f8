"""Validação da submissão normalizada."""

from app.protocols.models import SubmissionRecord
from utils.errors import ValidationError

EMAIL_REQUIRED_MESSAGE = "Email is required"


def validate_submission(record: SubmissionRecord) -> None:
    """Valida presença do email.

    Sintaxe do email não é validada aqui: o provedor é a fonte de verdade.

    Raises:
        ValidationError: Se email ausente ou vazio após trim
    """
    if not record.email.strip():
        raise ValidationError(EMAIL_REQUIRED_MESSAGE)


class SubmissionValidator:
    """Implementa SubmissionValidatorProtocol."""

    def validate(self, record: SubmissionRecord) -> None:
        validate_submission(record)
