"""Cliente HTTP base para conectores da camada API."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from utils.errors import TransportError

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP.

    `transport` permite injetar httpx.MockTransport em testes.
    """

    timeout_seconds: float = 10.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True
    follow_redirects: bool = True
    transport: httpx.AsyncBaseTransport | None = None


class HttpClient:
    """Cliente HTTP simples para uma chamada externa por requisição.

    Sem retry: falhas de rede e timeout viram TransportError imediatamente.
    """

    def __init__(self, config: HttpClientConfig | None = None) -> None:
        self._config = config or HttpClientConfig()

    async def post(
        self,
        url: str,
        json: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        merged_headers = {**self._config.default_headers, **(headers or {})}
        try:
            async with httpx.AsyncClient(
                verify=self._config.verify_ssl,
                follow_redirects=self._config.follow_redirects,
                transport=self._config.transport,
            ) as client:
                return await client.post(
                    url,
                    json=json,
                    headers=merged_headers,
                    timeout=self._config.timeout_seconds,
                )
        except httpx.TimeoutException as exc:
            logger.warning(
                "http_timeout",
                extra={"timeout_seconds": self._config.timeout_seconds},
            )
            raise TransportError("http_timeout") from exc
        except httpx.HTTPError as exc:
            logger.warning("http_connection_error", extra={"error_type": type(exc).__name__})
            raise TransportError("http_connection_error") from exc
