"""Builder do payload de criação de inscrito."""

from __future__ import annotations

from app.protocols.models import SubmissionRecord, SubscriptionPayload
from config.settings.beehiiv import DEFAULT_UTM_SOURCE

from .custom_fields import map_to_custom_fields


def to_custom_field_list(fields: dict[str, str]) -> list[dict[str, str]]:
    """Converte o mapa para o formato aceito pela API: [{name, value}, ...]."""
    return [{"name": name, "value": value} for name, value in fields.items()]


class SubscriptionPayloadBuilder:
    """Implementa PayloadBuilderProtocol para a API v2 do Beehiiv."""

    def __init__(self, utm_source: str = DEFAULT_UTM_SOURCE) -> None:
        self._utm_source = utm_source

    def build(self, record: SubmissionRecord) -> SubscriptionPayload:
        return SubscriptionPayload(
            email=record.email.strip(),
            custom_fields=to_custom_field_list(map_to_custom_fields(record)),
            utm_source=self._utm_source,
        )
