"""Endpoint de inscrição na newsletter.

Endpoint:
- /api/subscribe: aceita qualquer método; só POST é processado

Fluxo:
1. Define correlation_id (header x-correlation-id ou UUID novo)
2. Delega para SubscribeUseCase com método e body bruto
3. Devolve o envelope JSON com o status escolhido pelo use case
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from app.observability import CORRELATION_HEADER, correlation_scope

if TYPE_CHECKING:
    from app.use_cases.subscription import SubscribeUseCase

logger = logging.getLogger(__name__)

router = APIRouter()

# Métodos registrados para que não-POST chegue ao use case (405 com JSON próprio)
ROUTED_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]

_fallback_use_case: SubscribeUseCase | None = None


def _get_use_case(request: Request) -> SubscribeUseCase:
    """Use case criado no lifespan; lazy-loading se o app subiu sem lifespan."""
    use_case = getattr(request.app.state, "subscribe_use_case", None)
    if use_case is not None:
        return use_case

    global _fallback_use_case
    if _fallback_use_case is None:
        from app.bootstrap import create_subscribe_use_case

        _fallback_use_case = create_subscribe_use_case()
    return _fallback_use_case


@router.api_route("/subscribe", methods=ROUTED_METHODS, response_model=None)
async def subscribe(request: Request) -> JSONResponse:
    """Recebe o formulário e cria o inscrito no Beehiiv."""
    with correlation_scope(request.headers.get(CORRELATION_HEADER)) as correlation_id:
        raw_body = await request.body() if request.method == "POST" else None

        logger.info(
            "subscribe_request_received",
            extra={"method": request.method, "payload_size": len(raw_body or b"")},
        )

        result = await _get_use_case(request).execute(request.method, raw_body)

        return JSONResponse(
            content=result.body,
            status_code=result.status_code,
            headers={CORRELATION_HEADER: correlation_id},
        )
