"""Normalização do formulário de inscrição para SubmissionRecord."""

from __future__ import annotations

from typing import Any

from app.protocols.models import SalaryBand, SubmissionRecord

from ._coercion import as_bool, as_number, as_string_list, as_text
from .extractor import decode_body
from .legacy import is_legacy_payload, upgrade_legacy_payload


def normalize_submission(payload: dict[str, Any]) -> SubmissionRecord:
    """Constrói SubmissionRecord a partir do payload decodificado.

    Nunca falha por formato: campos ausentes ou inutilizáveis recebem default.
    A obrigatoriedade do email é checada pelo validator.
    """
    if is_legacy_payload(payload):
        payload = upgrade_legacy_payload(payload)

    return SubmissionRecord(
        email=_normalize_email(payload.get("email")),
        first_name=as_text(payload.get("firstName")),
        filters=_normalize_filters(payload.get("filters")),
        high_salary_only=as_bool(payload.get("highSalaryOnly")),
        salary_band=_normalize_salary_band(payload.get("salaryBand")),
        country_of_residence=as_text(payload.get("countryOfResidence")),
        timezone=as_text(payload.get("timezone")),
        send_window=as_text(payload.get("sendWindow")),
        alerts_plan=as_text(payload.get("alertsPlan")),
        asap_mode_enabled=as_bool(payload.get("asapModeEnabled")),
        instant_alerts=as_bool(payload.get("instantAlerts")),
        hourly_alerts=as_bool(payload.get("hourlyAlerts")),
        frequency=as_text(payload.get("frequency")),
        urgency=as_text(payload.get("urgency")),
        exclude_keywords=as_text(payload.get("excludeKeywords")),
        search_term=as_text(payload.get("searchTerm")),
    )


def _normalize_email(raw: Any) -> str:
    # Só string: listas e booleanos viram vazio e falham na validação
    return raw.strip() if isinstance(raw, str) else ""


def _normalize_filters(raw: Any) -> dict[str, list[str]]:
    # Preserva a ordem de inserção; qualquer chave é categoria válida
    if not isinstance(raw, dict):
        return {}
    return {str(category): as_string_list(values) for category, values in raw.items()}


def _normalize_salary_band(raw: Any) -> SalaryBand | None:
    if not isinstance(raw, dict):
        return None
    return SalaryBand(
        min=as_number(raw.get("min")),
        max=as_number(raw.get("max")),
        currency=as_text(raw.get("currency")),
    )


class SignupFormNormalizer:
    """Implementa SubmissionNormalizerProtocol: body bruto -> SubmissionRecord."""

    def normalize(self, raw_body: Any) -> SubmissionRecord:
        return normalize_submission(decode_body(raw_body))
