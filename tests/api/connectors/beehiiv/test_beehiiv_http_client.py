"""Testes para api.connectors.beehiiv (transport HTTP mockado)."""

from __future__ import annotations

import json
from collections.abc import Callable

import httpx
import pytest

from api.connectors.beehiiv import (
    BeehiivHttpClient,
    HttpClientConfig,
    create_beehiiv_http_client,
    is_accepted_status,
)
from app.protocols.models import SubscriptionPayload
from config.settings import BeehiivSettings
from utils.errors import ConfigurationError, DeliveryError, TransportError

SETTINGS = BeehiivSettings(api_key="secret-key", publication_id="pub_123")


def _payload() -> SubscriptionPayload:
    return SubscriptionPayload(
        email="a@b.com",
        custom_fields=[{"name": "first_name", "value": "Ann"}],
        utm_source="asap-jobs-landing",
    )


def _client(
    handler: Callable[[httpx.Request], httpx.Response],
    settings: BeehiivSettings = SETTINGS,
) -> BeehiivHttpClient:
    config = HttpClientConfig(timeout_seconds=5.0, transport=httpx.MockTransport(handler))
    return BeehiivHttpClient(settings=settings, config=config)


class TestIsAcceptedStatus:
    """Testes para is_accepted_status."""

    @pytest.mark.parametrize("status", [200, 201, 204, 299])
    def test_2xx_is_accepted(self, status: int) -> None:
        assert is_accepted_status(status) is True

    def test_conflict_follows_policy(self) -> None:
        assert is_accepted_status(409) is True
        assert is_accepted_status(409, conflict_is_success=False) is False

    @pytest.mark.parametrize("status", [301, 400, 401, 404, 422, 429, 500, 503])
    def test_other_statuses_are_rejected(self, status: int) -> None:
        assert is_accepted_status(status) is False


class TestBeehiivHttpClient:
    """Testes para BeehiivHttpClient.create_subscription."""

    @pytest.mark.asyncio
    async def test_sends_expected_request(self) -> None:
        captured: dict[str, object] = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["method"] = request.method
            captured["url"] = str(request.url)
            captured["headers"] = request.headers
            captured["body"] = json.loads(request.content)
            return httpx.Response(201, json={"data": {"id": "sub_1"}})

        response = await _client(handler).create_subscription(_payload())

        assert response.status_code == 201
        assert json.loads(response.text) == {"data": {"id": "sub_1"}}
        assert captured["method"] == "POST"
        assert captured["url"] == "https://api.beehiiv.com/v2/publications/pub_123/subscriptions"
        headers = captured["headers"]
        assert headers["authorization"] == "Bearer secret-key"  # type: ignore[index]
        assert headers["content-type"] == "application/json"  # type: ignore[index]
        assert captured["body"] == {
            "email": "a@b.com",
            "reactivate_existing": True,
            "send_welcome_email": True,
            "utm_source": "asap-jobs-landing",
            "custom_fields": [{"name": "first_name", "value": "Ann"}],
        }

    @pytest.mark.asyncio
    async def test_conflict_is_returned_as_success(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(409, text='{"errors": [{"message": "already subscribed"}]}')

        response = await _client(handler).create_subscription(_payload())

        assert response.status_code == 409
        assert response.already_subscribed is True

    @pytest.mark.asyncio
    async def test_conflict_raises_when_policy_disabled(self) -> None:
        settings = BeehiivSettings(
            api_key="secret-key", publication_id="pub_123", conflict_is_success=False
        )

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(409, text="exists")

        with pytest.raises(DeliveryError) as exc_info:
            await _client(handler, settings).create_subscription(_payload())

        assert exc_info.value.status_code == 409

    @pytest.mark.asyncio
    async def test_server_error_raises_delivery_error_with_raw_body(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, text="oops")

        with pytest.raises(DeliveryError) as exc_info:
            await _client(handler).create_subscription(_payload())

        assert exc_info.value.status_code == 500
        assert exc_info.value.raw_body == "oops"
        assert exc_info.value.detail == "oops"

    @pytest.mark.asyncio
    async def test_redirect_is_followed(self) -> None:
        moved = "https://api.beehiiv.com/v2/publications/pub_moved/subscriptions"
        seen: list[tuple[str, str]] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append((request.method, str(request.url)))
            if str(request.url) != moved:
                return httpx.Response(308, headers={"Location": moved})
            return httpx.Response(201, text='{"data": {"id": "sub_1"}}')

        response = await _client(handler).create_subscription(_payload())

        assert response.status_code == 201
        assert seen[-1] == ("POST", moved)
        assert len(seen) == 2

    @pytest.mark.asyncio
    async def test_timeout_raises_transport_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(TransportError) as exc_info:
            await _client(handler).create_subscription(_payload())

        assert str(exc_info.value) == "http_timeout"

    @pytest.mark.asyncio
    async def test_connection_error_raises_transport_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(TransportError) as exc_info:
            await _client(handler).create_subscription(_payload())

        assert str(exc_info.value) == "http_connection_error"

    @pytest.mark.asyncio
    async def test_missing_credentials_never_call_upstream(self) -> None:
        calls: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(201)

        with pytest.raises(ConfigurationError):
            await _client(handler, BeehiivSettings(api_key="", publication_id="pub_123")).create_subscription(
                _payload()
            )

        assert calls == []


class TestCreateBeehiivHttpClient:
    """Testes para a factory."""

    def test_factory_uses_settings_timeout(self) -> None:
        client = create_beehiiv_http_client(
            BeehiivSettings(api_key="k", publication_id="p", request_timeout_seconds=3.5)
        )

        assert isinstance(client, BeehiivHttpClient)
        assert client._config.timeout_seconds == 3.5
