"""Decodificação do body bruto do formulário de inscrição."""

from __future__ import annotations

import json
from typing import Any

from utils.errors import ValidationError

INVALID_BODY_MESSAGE = "Invalid JSON body"


def decode_body(raw_body: Any) -> dict[str, Any]:
    """Converte o body recebido em dict.

    Hosts diferentes entregam o body já parseado (dict) ou como texto/bytes.

    Args:
        raw_body: dict, str, bytes ou None

    Raises:
        ValidationError: Se o JSON for inválido ou não for objeto

    Returns:
        Payload como dict (vazio se body ausente)
    """
    if raw_body is None:
        return {}

    if isinstance(raw_body, dict):
        return raw_body

    if isinstance(raw_body, (bytes, bytearray)):
        try:
            raw_body = raw_body.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ValidationError(INVALID_BODY_MESSAGE) from exc

    if not isinstance(raw_body, str):
        raise ValidationError(INVALID_BODY_MESSAGE)

    if not raw_body.strip():
        return {}

    try:
        payload = json.loads(raw_body)
    except json.JSONDecodeError as exc:
        raise ValidationError(INVALID_BODY_MESSAGE) from exc

    if not isinstance(payload, dict):
        raise ValidationError(INVALID_BODY_MESSAGE)

    return payload
