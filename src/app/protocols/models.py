"""Contratos canônicos do fluxo de inscrição.

Modelos imutáveis trocados entre as camadas api/ e app/:
- SubmissionRecord: formulário normalizado (inbound)
- SubscriptionPayload: corpo enviado ao provedor (outbound)
- UpstreamResponse: resposta bruta do provedor
- SubscriptionResult: resposta HTTP final (status + envelope)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class SalaryBand:
    """Faixa salarial escolhida no formulário."""

    min: int | float | None = None
    max: int | float | None = None
    currency: str = ""


@dataclass(frozen=True, slots=True)
class SubmissionRecord:
    """Submissão do formulário após normalização.

    Só `email` é obrigatório; demais campos têm defaults vazios.
    Existe apenas durante uma requisição.
    """

    email: str
    first_name: str = ""
    filters: dict[str, list[str]] = field(default_factory=dict)
    high_salary_only: bool = False
    salary_band: SalaryBand | None = None

    # Perfil e entrega
    country_of_residence: str = ""
    timezone: str = ""
    send_window: str = ""
    alerts_plan: str = ""
    asap_mode_enabled: bool = False
    instant_alerts: bool = False
    hourly_alerts: bool = False

    # Preferências livres
    frequency: str = ""
    urgency: str = ""
    exclude_keywords: str = ""
    search_term: str = ""


@dataclass(frozen=True, slots=True)
class SubscriptionPayload:
    """Payload de criação de inscrito no provedor."""

    email: str
    custom_fields: list[dict[str, str]]
    utm_source: str
    reactivate_existing: bool = True
    send_welcome_email: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "email": self.email,
            "reactivate_existing": self.reactivate_existing,
            "send_welcome_email": self.send_welcome_email,
            "utm_source": self.utm_source,
            "custom_fields": [dict(item) for item in self.custom_fields],
        }


@dataclass(frozen=True, slots=True)
class UpstreamResponse:
    """Resposta aceita do provedor (2xx ou 409 tratado como sucesso)."""

    status_code: int
    text: str

    @property
    def already_subscribed(self) -> bool:
        return self.status_code == 409


@dataclass(frozen=True, slots=True)
class SubscriptionResult:
    """Resultado final do handler, pronto para o adapter HTTP."""

    status_code: int
    body: dict[str, Any]

    @property
    def success(self) -> bool:
        return self.body.get("success") is True
