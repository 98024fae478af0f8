"""Formatação de números para campos texto."""

from __future__ import annotations


def format_number(value: int | float | None) -> str:
    """Forma decimal do número; floats inteiros saem sem ".0".

    None e bool viram "" (bool não é número de formulário).
    """
    if value is None or isinstance(value, bool):
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
