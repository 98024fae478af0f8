"""Factories de wiring do use case de inscrição (composition root)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.beehiiv import create_beehiiv_http_client
from api.normalizers.signup import SignupFormNormalizer
from api.payload_builders.beehiiv import SubscriptionPayloadBuilder
from api.validators.signup import SubmissionValidator
from app.use_cases.subscription import SubscribeUseCase
from config.settings import get_beehiiv_settings

if TYPE_CHECKING:
    from app.protocols.subscriber_client import SubscriberClientProtocol
    from config.settings import BeehiivSettings


def create_subscribe_use_case(
    settings: BeehiivSettings | None = None,
    client: SubscriberClientProtocol | None = None,
) -> SubscribeUseCase:
    """Cria use case com dependências concretas.

    Args:
        settings: BeehiivSettings. Se None, carrega do ambiente.
        client: Cliente do provedor. Se None, usa BeehiivHttpClient.
    """
    beehiiv = settings or get_beehiiv_settings()
    return SubscribeUseCase(
        settings=beehiiv,
        normalizer=SignupFormNormalizer(),
        validator=SubmissionValidator(),
        builder=SubscriptionPayloadBuilder(utm_source=beehiiv.utm_source),
        client=client or create_beehiiv_http_client(beehiiv),
    )
