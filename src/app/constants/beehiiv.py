"""Nomes canônicos do contrato de custom fields do Beehiiv.

Os nomes de campo são contrato externo: precisam bater exatamente com os
custom fields cadastrados na publicação. Não abreviar nem renomear.
"""

from __future__ import annotations

from enum import StrEnum

FILTER_SEPARATOR = " | "
ACTIVE_FILTERS_SEPARATOR = ","
UNKNOWN_CATEGORY_SUFFIX = "_pref"


class FilterCategory(StrEnum):
    """Categorias de filtro conhecidas, na ordem de declaração do formulário."""

    LOCATIONS = "locations"
    EMPLOYMENT = "employment"
    EXPERIENCE = "experience"
    JOB_ROLES = "jobRoles"
    JOB_CATEGORIES = "jobCategories"
    BENEFITS = "benefits"
    TECHNOLOGIES = "technologies"
    INDUSTRIES = "industries"
    LANGUAGES = "languages"
    COMPANY_SIZES = "companySizes"


class CustomField(StrEnum):
    """Custom fields de perfil e preferências (não derivados de filtros)."""

    FIRST_NAME = "first_name"
    COUNTRY_OF_RESIDENCE = "country_of_residence"
    TIMEZONE = "timezone"
    SEND_WINDOW = "send_window"
    ALERTS_PLAN = "alerts_plan"
    ASAP_MODE_ENABLED = "asap_mode_enabled"
    INSTANT_ALERTS = "instant_alerts"
    HOURLY_ALERTS = "hourly_alerts"
    HIGH_SALARY_ONLY = "high_salary_only"
    FREQUENCY = "frequency"
    URGENCY = "urgency"
    EXCLUDE_KEYWORDS = "exclude_keywords"
    ACTIVE_FILTERS = "active_filters"
    SALARY_BAND_MIN = "salary_band_min"
    SALARY_BAND_MAX = "salary_band_max"
    SALARY_BAND_CURRENCY = "salary_band_currency"
    SEARCH_TERM = "search_term"


# Categoria -> custom field com o valor achatado
CATEGORY_FIELD_NAMES: dict[FilterCategory, str] = {
    FilterCategory.LOCATIONS: "location_pref",
    FilterCategory.EMPLOYMENT: "employment_type",
    FilterCategory.EXPERIENCE: "experience_level",
    FilterCategory.JOB_ROLES: "job_roles",
    FilterCategory.JOB_CATEGORIES: "job_category",
    FilterCategory.BENEFITS: "benefits_pref",
    FilterCategory.TECHNOLOGIES: "technologies_pref",
    FilterCategory.INDUSTRIES: "industries_pref",
    FilterCategory.LANGUAGES: "languages",
    FilterCategory.COMPANY_SIZES: "company_sizes_pref",
}

# Campos booleanos: sempre enviados como "true"/"false"
BOOLEAN_FIELDS: frozenset[CustomField] = frozenset(
    {
        CustomField.ASAP_MODE_ENABLED,
        CustomField.INSTANT_ALERTS,
        CustomField.HOURLY_ALERTS,
        CustomField.HIGH_SALARY_ONLY,
    }
)

# Formato legado (`preferences` com strings já achatadas) -> categoria
LEGACY_PREFERENCE_CATEGORIES: dict[str, FilterCategory] = {
    "location": FilterCategory.LOCATIONS,
    "employment": FilterCategory.EMPLOYMENT,
    "experience": FilterCategory.EXPERIENCE,
    "jobCategory": FilterCategory.JOB_CATEGORIES,
    "benefits": FilterCategory.BENEFITS,
    "technologies": FilterCategory.TECHNOLOGIES,
    "languages": FilterCategory.LANGUAGES,
}
