"""Validadores do formulário de inscrição.

Uso:
    from api.validators.signup import SubmissionValidator

    SubmissionValidator().validate(record)
"""

from api.validators.signup.submission import (
    EMAIL_REQUIRED_MESSAGE,
    SubmissionValidator,
    validate_submission,
)

__all__ = [
    "EMAIL_REQUIRED_MESSAGE",
    "SubmissionValidator",
    "validate_submission",
]
