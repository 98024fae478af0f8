"""Use case de inscrição na newsletter."""

from .responses import decode_upstream_body, error_result, success_result
from .subscribe import ALLOWED_METHOD, SubscribeUseCase

__all__ = [
    "ALLOWED_METHOD",
    "SubscribeUseCase",
    "decode_upstream_body",
    "error_result",
    "success_result",
]
