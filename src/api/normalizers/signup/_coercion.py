"""Coerção tolerante de valores do formulário.

O formulário é não confiável: valores inesperados viram default vazio
em vez de erro.
"""

from __future__ import annotations

from typing import Any

from utils.formatting import format_number

_TRUE_STRINGS = frozenset({"true", "1", "yes", "on"})


def as_text(value: Any) -> str:
    """Converte para string sem espaços nas bordas ("" se inutilizável)."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (int, float)):
        return format_number(value)
    if isinstance(value, (list, tuple)):
        return ", ".join(item for item in (as_text(v) for v in value) if item)
    return ""


def as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    if isinstance(value, (int, float)):
        return value != 0
    return False


def as_number(value: Any) -> int | float | None:
    """Aceita apenas números reais (bool não conta)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def as_string_list(value: Any) -> list[str]:
    """Normaliza uma sequência de filtros: strings aparadas, sem vazios.

    Valores que não são sequência são ignorados.
    """
    if not isinstance(value, (list, tuple)):
        return []
    items: list[str] = []
    for item in value:
        text = as_text(item)
        if text:
            items.append(text)
    return items
