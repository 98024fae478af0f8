"""Normalizers — conversão de payloads externos para modelos internos.

Estrutura:
- signup/: formulário de inscrição da landing page
"""

from .signup import SignupFormNormalizer, decode_body, normalize_submission

__all__ = [
    "SignupFormNormalizer",
    "decode_body",
    "normalize_submission",
]
