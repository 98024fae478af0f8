"""Testes para a rota /api/subscribe."""

from __future__ import annotations

import json

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.routes import create_api_router
from app.bootstrap import create_subscribe_use_case
from app.observability import CORRELATION_HEADER
from config.settings import BeehiivSettings
from tests.fakes.fake_subscriber_client import FakeSubscriberClient
from utils.errors import DeliveryError

CONFIGURED = BeehiivSettings(api_key="secret-key", publication_id="pub_123")


def _client(
    fake: FakeSubscriberClient,
    settings: BeehiivSettings = CONFIGURED,
) -> TestClient:
    app = FastAPI()
    app.include_router(create_api_router())
    app.state.subscribe_use_case = create_subscribe_use_case(settings=settings, client=fake)
    return TestClient(app)


class TestSubscribeRoute:
    """Testes HTTP do endpoint de inscrição."""

    def test_post_creates_subscription(self) -> None:
        fake = FakeSubscriberClient()

        response = _client(fake).post(
            "/api/subscribe",
            json={"email": "a@b.com", "firstName": "Ann"},
        )

        assert response.status_code == 200
        assert response.json()["success"] is True
        assert len(fake.calls) == 1

    def test_conflict_returns_success(self) -> None:
        fake = FakeSubscriberClient(status_code=409, text="{}")

        response = _client(fake).post("/api/subscribe", json={"email": "a@b.com"})

        assert response.status_code == 200
        assert response.json() == {"success": True, "data": {}}

    @pytest.mark.parametrize("method", ["GET", "PUT", "DELETE", "PATCH"])
    def test_non_post_returns_405_json(self, method: str) -> None:
        fake = FakeSubscriberClient()

        response = _client(fake).request(method, "/api/subscribe")

        assert response.status_code == 405
        assert response.json() == {"error": "Method not allowed"}
        assert fake.calls == []

    def test_missing_email_returns_400(self) -> None:
        fake = FakeSubscriberClient()

        response = _client(fake).post("/api/subscribe", json={"firstName": "Ann"})

        assert response.status_code == 400
        assert response.json() == {"error": "Email is required"}
        assert fake.calls == []

    def test_invalid_json_returns_400(self) -> None:
        fake = FakeSubscriberClient()

        response = _client(fake).post(
            "/api/subscribe",
            content="{broken",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid JSON body"}

    def test_upstream_error_is_mirrored(self) -> None:
        fake = FakeSubscriberClient(error=DeliveryError(500, "oops"))

        response = _client(fake).post("/api/subscribe", json={"email": "a@b.com"})

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to subscribe", "detail": "oops"}

    def test_not_configured_returns_500(self) -> None:
        fake = FakeSubscriberClient()

        response = _client(fake, BeehiivSettings()).post(
            "/api/subscribe",
            content=json.dumps({"email": "a@b.com"}),
        )

        assert response.status_code == 500
        assert response.json() == {"error": "Server not configured"}
        assert fake.calls == []

    def test_correlation_id_is_echoed(self) -> None:
        fake = FakeSubscriberClient()

        response = _client(fake).post(
            "/api/subscribe",
            json={"email": "a@b.com"},
            headers={CORRELATION_HEADER: "corr-123"},
        )

        assert response.headers[CORRELATION_HEADER] == "corr-123"

    def test_correlation_id_is_generated(self) -> None:
        fake = FakeSubscriberClient()

        response = _client(fake).post("/api/subscribe", json={"email": "a@b.com"})

        assert response.headers[CORRELATION_HEADER]
