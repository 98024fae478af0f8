"""Testes para api.validators.signup."""

from __future__ import annotations

import pytest

from api.validators.signup import EMAIL_REQUIRED_MESSAGE, SubmissionValidator, validate_submission
from app.protocols.models import SubmissionRecord
from utils.errors import ValidationError


class TestValidateSubmission:
    """Testes para validate_submission."""

    def test_valid_email_passes(self) -> None:
        validate_submission(SubmissionRecord(email="a@b.com"))

    def test_email_syntax_is_not_checked(self) -> None:
        """Sintaxe fica a cargo do provedor."""
        SubmissionValidator().validate(SubmissionRecord(email="not-an-email"))

    @pytest.mark.parametrize("email", ["", "   ", "\t\n"])
    def test_empty_email_raises(self, email: str) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_submission(SubmissionRecord(email=email))

        assert exc_info.value.status_code == 400
        assert exc_info.value.public_message == EMAIL_REQUIRED_MESSAGE == "Email is required"
