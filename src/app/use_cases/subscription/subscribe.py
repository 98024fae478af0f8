"""Use case de inscrição na newsletter.

Pipeline linear, uma chamada outbound por requisição:
configuração -> método -> normalização -> validação -> payload -> envio.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.use_cases.subscription.responses import error_result, success_result
from utils.errors import (
    ConfigurationError,
    DeliveryError,
    MethodNotAllowedError,
    SignupError,
    TransportError,
)

if TYPE_CHECKING:
    from app.protocols.models import SubscriptionResult, UpstreamResponse
    from app.protocols.normalizer import SubmissionNormalizerProtocol
    from app.protocols.payload_builder import PayloadBuilderProtocol
    from app.protocols.subscriber_client import SubscriberClientProtocol
    from app.protocols.validator import SubmissionValidatorProtocol
    from config.settings import BeehiivSettings

logger = logging.getLogger(__name__)

ALLOWED_METHOD = "POST"


class SubscribeUseCase:
    """Orquestra validação, mapeamento e envio de uma inscrição.

    Stateless: pode ser compartilhado entre requisições concorrentes.
    """

    def __init__(
        self,
        settings: BeehiivSettings,
        normalizer: SubmissionNormalizerProtocol,
        validator: SubmissionValidatorProtocol,
        builder: PayloadBuilderProtocol,
        client: SubscriberClientProtocol,
    ) -> None:
        self._settings = settings
        self._normalizer = normalizer
        self._validator = validator
        self._builder = builder
        self._client = client

    async def execute(self, method: str, raw_body: Any) -> SubscriptionResult:
        """Processa uma requisição e devolve status + envelope JSON.

        Nunca levanta: toda falha vira envelope de erro.
        """
        try:
            upstream = await self._run(method, raw_body)
        except SignupError as exc:
            self._log_failure(exc)
            return error_result(exc)
        except Exception:
            logger.exception("subscription_unexpected_error")
            return error_result(TransportError())

        logger.info(
            "subscription_completed",
            extra={
                "upstream_status": upstream.status_code,
                "already_subscribed": upstream.already_subscribed,
            },
        )
        return success_result(upstream)

    async def _run(self, method: str, raw_body: Any) -> UpstreamResponse:
        # Configuração é checada antes de qualquer trabalho da requisição
        if not self._settings.is_configured:
            raise ConfigurationError("beehiiv_not_configured")

        if (method or "").upper() != ALLOWED_METHOD:
            raise MethodNotAllowedError(f"method_{method}")

        record = self._normalizer.normalize(raw_body)
        self._validator.validate(record)

        payload = self._builder.build(record)
        logger.debug(
            "subscription_payload_built",
            extra={"custom_field_count": len(payload.custom_fields)},
        )
        return await self._client.create_subscription(payload)

    @staticmethod
    def _log_failure(exc: SignupError) -> None:
        extra: dict[str, Any] = {
            "error_type": type(exc).__name__,
            "status_code": exc.status_code,
            "error": str(exc),
        }
        if isinstance(exc, ConfigurationError):
            logger.error("subscription_server_not_configured", extra=extra)
        elif isinstance(exc, (DeliveryError, TransportError)):
            logger.error("subscription_delivery_failed", extra=extra)
        else:
            logger.warning("subscription_rejected", extra=extra)
