"""Mapeamento SubmissionRecord -> custom fields do Beehiiv.

Regras:
- Booleanos sempre presentes como "true"/"false"
- Strings e filtros achatados omitidos quando vazios
- Faixa salarial só quando numérica
- Ordem de saída fixa (determinística)
"""

from __future__ import annotations

from app.constants.beehiiv import CustomField
from app.protocols.models import SubmissionRecord
from utils.formatting import format_number

from .filters import flatten_filters


def _bool_text(value: bool) -> str:
    return "true" if value else "false"


def map_to_custom_fields(record: SubmissionRecord) -> dict[str, str]:
    """Traduz a submissão para o mapa plano de custom fields.

    Função pura: a mesma entrada produz sempre a mesma saída, na mesma ordem.
    Nunca falha; categorias de filtro desconhecidas são preservadas.

    Args:
        record: Submissão normalizada

    Returns:
        Mapa nome -> valor (todos strings, nenhum vazio)
    """
    flattened = flatten_filters(record.filters)
    band = record.salary_band

    candidates: list[tuple[str, str]] = [
        # perfil
        (CustomField.FIRST_NAME, record.first_name),
        (CustomField.COUNTRY_OF_RESIDENCE, record.country_of_residence),
        (CustomField.TIMEZONE, record.timezone),
        (CustomField.SEND_WINDOW, record.send_window),
        (CustomField.ALERTS_PLAN, record.alerts_plan),
        (CustomField.ASAP_MODE_ENABLED, _bool_text(record.asap_mode_enabled)),
        (CustomField.INSTANT_ALERTS, _bool_text(record.instant_alerts)),
        (CustomField.HOURLY_ALERTS, _bool_text(record.hourly_alerts)),
        # preferências
        (CustomField.HIGH_SALARY_ONLY, _bool_text(record.high_salary_only)),
        (CustomField.FREQUENCY, record.frequency),
        (CustomField.URGENCY, record.urgency),
        (CustomField.EXCLUDE_KEYWORDS, record.exclude_keywords),
        (CustomField.ACTIVE_FILTERS, flattened.active_filters),
        *flattened.values.items(),
        # faixa salarial
        (CustomField.SALARY_BAND_MIN, format_number(band.min if band else None)),
        (CustomField.SALARY_BAND_MAX, format_number(band.max if band else None)),
        (CustomField.SALARY_BAND_CURRENCY, band.currency if band else ""),
        (CustomField.SEARCH_TERM, record.search_term),
    ]

    fields: dict[str, str] = {}
    for name, value in candidates:
        text = (value or "").strip()
        if text and str(name) not in fields:
            fields[str(name)] = text
    return fields
