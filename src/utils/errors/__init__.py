"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ConfigurationError,
    DeliveryError,
    MethodNotAllowedError,
    SignupError,
    TransportError,
    ValidationError,
)

__all__ = [
    "ConfigurationError",
    "DeliveryError",
    "MethodNotAllowedError",
    "SignupError",
    "TransportError",
    "ValidationError",
]
