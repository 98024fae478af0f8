"""Protocolo do cliente HTTP do provedor de newsletter.

Evita dependência direta da camada api.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import SubscriptionPayload, UpstreamResponse


class SubscriberClientProtocol(Protocol):
    """Contrato mínimo para criar um inscrito no provedor.

    Implementações levantam DeliveryError (status não aceito) ou
    TransportError (falha de rede/timeout).
    """

    async def create_subscription(self, payload: SubscriptionPayload) -> UpstreamResponse: ...
