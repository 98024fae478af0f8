"""Achatamento dos filtros do formulário em strings de custom field."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from app.constants.beehiiv import (
    ACTIVE_FILTERS_SEPARATOR,
    CATEGORY_FIELD_NAMES,
    FILTER_SEPARATOR,
    UNKNOWN_CATEGORY_SUFFIX,
    FilterCategory,
)

_CAMEL_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
_NON_WORD_RE = re.compile(r"[^a-z0-9]+")
_KNOWN_CATEGORIES = frozenset(category.value for category in FilterCategory)


@dataclass(frozen=True, slots=True)
class FlattenedFilters:
    """Resultado do achatamento.

    Attributes:
        values: nome do custom field -> valores unidos por " | "
        active: categorias com ao menos um valor, em ordem determinística
    """

    values: dict[str, str] = field(default_factory=dict)
    active: tuple[str, ...] = ()

    @property
    def active_filters(self) -> str:
        return ACTIVE_FILTERS_SEPARATOR.join(self.active)


def category_field_name(category: str) -> str:
    """Nome do custom field para uma categoria.

    Categorias conhecidas usam o nome do contrato; desconhecidas viram
    snake_case + "_pref" (ex: "remotePolicy" -> "remote_policy_pref").
    """
    if category in _KNOWN_CATEGORIES:
        return CATEGORY_FIELD_NAMES[FilterCategory(category)]
    snake = _CAMEL_BOUNDARY_RE.sub("_", category).lower()
    snake = _NON_WORD_RE.sub("_", snake).strip("_")
    return f"{snake}{UNKNOWN_CATEGORY_SUFFIX}"


def ordered_categories(filters: dict[str, list[str]]) -> list[str]:
    """Categorias conhecidas na ordem declarada, depois as desconhecidas na ordem de entrada."""
    known = [category.value for category in FilterCategory if category.value in filters]
    unknown = [category for category in filters if category not in known]
    return known + unknown


def flatten_filters(filters: dict[str, list[str]]) -> FlattenedFilters:
    """Une os valores de cada categoria não vazia com " | ".

    Categorias ausentes ou vazias ficam fora de `values` e de `active`.
    Toda categoria com valores entra em `active`; o valor de uma categoria
    cujo nome de campo colide com um já mapeado não é emitido.
    """
    values: dict[str, str] = {}
    active: list[str] = []
    for category in ordered_categories(filters):
        items = [item.strip() for item in filters[category] if item and item.strip()]
        if not items:
            continue
        active.append(category)
        name = category_field_name(category)
        if name == UNKNOWN_CATEGORY_SUFFIX or name in values:
            # Nome vazio ou colidindo com categoria já mapeada
            continue
        values[name] = FILTER_SEPARATOR.join(items)
    return FlattenedFilters(values=values, active=tuple(active))
