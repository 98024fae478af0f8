"""Cliente HTTP especializado para a API v2 do Beehiiv.

Estende HttpClient genérico com comportamentos específicos:
- Autenticação Bearer com segredo do servidor
- Classificação de status: 2xx sucesso, 409 sucesso (política), resto erro
- Logging estruturado sem PII (nunca loga email nem token)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.beehiiv.beehiiv_logging import (
    log_already_subscribed,
    log_delivery_error,
    log_success,
)
from api.connectors.beehiiv.http_base import HttpClient, HttpClientConfig
from app.protocols.models import UpstreamResponse
from utils.errors import ConfigurationError, DeliveryError

if TYPE_CHECKING:
    import httpx

    from app.protocols.models import SubscriptionPayload
    from config.settings import BeehiivSettings

logger: logging.Logger = logging.getLogger(__name__)

CONFLICT_STATUS = 409


def is_accepted_status(status_code: int, conflict_is_success: bool = True) -> bool:
    """True para 2xx e, se a política permitir, 409 (já inscrito)."""
    if 200 <= status_code < 300:
        return True
    return conflict_is_success and status_code == CONFLICT_STATUS


class BeehiivHttpClient(HttpClient):
    """Cliente HTTP para criação de inscritos no Beehiiv.

    Implementa SubscriberClientProtocol.
    """

    def __init__(
        self,
        settings: BeehiivSettings,
        config: HttpClientConfig | None = None,
    ) -> None:
        super().__init__(config or HttpClientConfig(timeout_seconds=settings.request_timeout_seconds))
        self._settings = settings

    async def create_subscription(self, payload: SubscriptionPayload) -> UpstreamResponse:
        """Cria (ou reativa) o inscrito na publicação configurada.

        Raises:
            ConfigurationError: Se api_key ou publication_id ausentes
            DeliveryError: Se status não aceito
            TransportError: Se falha de rede/timeout
        """
        if not self._settings.is_configured:
            raise ConfigurationError("beehiiv_not_configured")

        endpoint = self._settings.get_subscriptions_endpoint()
        response = await self.post(
            endpoint,
            json=payload.to_dict(),
            headers=self._build_headers(),
        )
        return self._process_response(response, endpoint)

    def _build_headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._settings.api_key.strip()}",
        }

    def _process_response(self, response: httpx.Response, endpoint: str) -> UpstreamResponse:
        text = response.text
        status_code = response.status_code

        if not is_accepted_status(status_code, self._settings.conflict_is_success):
            log_delivery_error(status_code, endpoint, text)
            raise DeliveryError(status_code, text)

        if status_code == CONFLICT_STATUS:
            log_already_subscribed(endpoint)
        else:
            log_success(endpoint, status_code)
        return UpstreamResponse(status_code=status_code, text=text)


def create_beehiiv_http_client(
    settings: BeehiivSettings | None = None,
) -> BeehiivHttpClient:
    """Factory para criar cliente Beehiiv com config padrão.

    Args:
        settings: BeehiivSettings opcional. Se None, carrega do ambiente.
    """
    # Import local para evitar dependência circular
    from config.settings import get_beehiiv_settings

    beehiiv = settings or get_beehiiv_settings()
    return BeehiivHttpClient(
        settings=beehiiv,
        config=HttpClientConfig(timeout_seconds=beehiiv.request_timeout_seconds),
    )
