"""Helpers de formatação compartilhados."""

from .numbers import format_number

__all__ = ["format_number"]
