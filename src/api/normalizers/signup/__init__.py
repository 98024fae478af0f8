"""Normalizer do formulário de inscrição.

Responsabilidades:
- Decodificar o body (dict, texto ou bytes)
- Converter formato legado `preferences` para `filters`
- Normalizar para SubmissionRecord com defaults vazios
"""

from .extractor import INVALID_BODY_MESSAGE, decode_body
from .normalizer import SignupFormNormalizer, normalize_submission

__all__ = [
    "INVALID_BODY_MESSAGE",
    "SignupFormNormalizer",
    "decode_body",
    "normalize_submission",
]
