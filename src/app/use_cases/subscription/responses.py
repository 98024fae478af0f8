"""Envelopes de resposta do endpoint de inscrição."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from app.protocols.models import SubscriptionResult

if TYPE_CHECKING:
    from app.protocols.models import UpstreamResponse
    from utils.errors import SignupError


def decode_upstream_body(text: str) -> Any:
    """Melhor esforço: JSON do upstream ou {"raw": texto}."""
    try:
        return json.loads(text)
    except (json.JSONDecodeError, TypeError):
        return {"raw": text}


def success_result(upstream: UpstreamResponse) -> SubscriptionResult:
    return SubscriptionResult(
        status_code=200,
        body={"success": True, "data": decode_upstream_body(upstream.text)},
    )


def error_result(error: SignupError) -> SubscriptionResult:
    """Envelope de erro; `detail` só aparece quando o erro o expõe."""
    body: dict[str, Any] = {"error": error.public_message}
    if error.detail is not None:
        body["detail"] = error.detail
    return SubscriptionResult(status_code=error.status_code, body=body)
