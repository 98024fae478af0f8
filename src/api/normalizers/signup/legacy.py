"""Upgrade do formato legado `preferences` para o formato canônico.

A primeira versão do formulário enviava:
    {"email", "firstName", "preferences": {"highSalaryOnly", "location", ...}}
com cada categoria já achatada em string.
"""

from __future__ import annotations

from typing import Any

from app.constants.beehiiv import LEGACY_PREFERENCE_CATEGORIES

from ._coercion import as_text


def is_legacy_payload(payload: dict[str, Any]) -> bool:
    return isinstance(payload.get("preferences"), dict) and "filters" not in payload


def upgrade_legacy_payload(payload: dict[str, Any]) -> dict[str, Any]:
    """Retorna cópia do payload no formato canônico (`filters` + flags)."""
    preferences: dict[str, Any] = payload["preferences"]
    upgraded = {key: value for key, value in payload.items() if key != "preferences"}

    filters: dict[str, list[str]] = {}
    for legacy_key, category in LEGACY_PREFERENCE_CATEGORIES.items():
        text = as_text(preferences.get(legacy_key))
        if text:
            filters[category.value] = [text]

    upgraded["filters"] = filters
    upgraded.setdefault("highSalaryOnly", preferences.get("highSalaryOnly", False))
    return upgraded
