"""Entrypoint para hosts serverless no formato function(event, context).

Evento esperado (Netlify Functions / AWS API Gateway proxy):
    {"httpMethod": "POST", "body": "<json>", "isBase64Encoded": false,
     "headers": {...}}

Resposta:
    {"statusCode": int, "headers": {...}, "body": "<json>"}

O use case é montado uma vez por container (cold start) e reutilizado.
"""

from __future__ import annotations

import asyncio
import base64
import binascii
import json
import logging
from typing import Any

from app.bootstrap import create_subscribe_use_case, initialize_app
from app.observability import CORRELATION_HEADER, correlation_scope
from app.use_cases.subscription import SubscribeUseCase, error_result
from config.settings import get_base_settings
from utils.errors import TransportError

initialize_app()

logger = logging.getLogger(__name__)

_use_case: SubscribeUseCase | None = None


def _get_use_case() -> SubscribeUseCase:
    global _use_case
    if _use_case is None:
        _use_case = create_subscribe_use_case()
    return _use_case


def _cors_origin() -> str:
    origins = get_base_settings().cors_origins
    return "*" if "*" in origins else origins[0]


def _response(status: int, body: dict[str, Any], correlation_id: str) -> dict[str, Any]:
    return {
        "statusCode": status,
        "headers": {
            "Content-Type": "application/json",
            "Access-Control-Allow-Origin": _cors_origin(),
            CORRELATION_HEADER: correlation_id,
        },
        "body": json.dumps(body),
    }


def _event_body(event: dict[str, Any]) -> Any:
    body = event.get("body")
    if body and event.get("isBase64Encoded"):
        try:
            return base64.b64decode(body)
        except (binascii.Error, ValueError):
            # Body ilegível vira JSON inválido -> 400 no use case
            return b"\xff"
    return body


def _header(event: dict[str, Any], name: str) -> str | None:
    headers = event.get("headers")
    if not isinstance(headers, dict):
        return None
    for key, value in headers.items():
        if isinstance(key, str) and key.lower() == name and isinstance(value, str):
            return value
    return None


def _event_method(event: dict[str, Any]) -> str:
    # REST API (v1) usa httpMethod; HTTP API (v2) usa requestContext.http.method
    method = event.get("httpMethod")
    if not method:
        http = (event.get("requestContext") or {}).get("http") or {}
        method = http.get("method")
    return method if isinstance(method, str) else ""


async def handle_event(event: dict[str, Any], use_case: SubscribeUseCase | None = None) -> dict[str, Any]:
    """Versão async do handler (testável com use case injetado).

    Sempre devolve uma resposta: falhas fora do use case viram 500.
    """
    with correlation_scope(_header(event, CORRELATION_HEADER)) as correlation_id:
        try:
            method = _event_method(event)
            logger.info("function_invoked", extra={"method": method})
            result = await (use_case or _get_use_case()).execute(method, _event_body(event))
        except Exception:
            logger.exception("function_unexpected_error")
            result = error_result(TransportError())
        return _response(result.status_code, result.body, correlation_id)


def handler(event: dict[str, Any], context: Any = None) -> dict[str, Any]:
    """Handler síncrono exposto ao runtime serverless."""
    return asyncio.run(handle_event(event))
