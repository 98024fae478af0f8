"""Settings específicas do Beehiiv.

Credenciais e parâmetros da API de criação de inscritos.
Carregadas uma única vez no startup e injetadas no use case.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Constantes da API Beehiiv
BEEHIIV_API_VERSION: str = "v2"
BEEHIIV_API_BASE_URL: str = "https://api.beehiiv.com"
DEFAULT_UTM_SOURCE: str = "asap-jobs-landing"
DEFAULT_TIMEOUT_SECONDS: float = 10.0


@dataclass(frozen=True)
class BeehiivSettings:
    """Configurações do provedor Beehiiv.

    Attributes:
        api_key: Bearer token da API (segredo do servidor)
        publication_id: ID da publicação (pub_XXXXXXXX-...)
        api_version: Versão da API (ex: v2)
        api_base_url: URL base da API
        utm_source: Tag de atribuição enviada em toda inscrição
        request_timeout_seconds: Timeout da chamada outbound
        conflict_is_success: Trata 409 (já inscrito) como sucesso
        invalid_env: Variáveis presentes mas não convertíveis
    """

    # Credenciais
    api_key: str = ""
    publication_id: str = ""

    # API
    api_version: str = BEEHIIV_API_VERSION
    api_base_url: str = BEEHIIV_API_BASE_URL
    utm_source: str = DEFAULT_UTM_SOURCE

    # Timeout
    request_timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    # Política de reinscrição idempotente
    conflict_is_success: bool = True

    # Variáveis de ambiente malformadas (substituídas pelo default)
    invalid_env: tuple[str, ...] = ()

    @property
    def is_configured(self) -> bool:
        """True quando API key e publication id estão presentes."""
        return bool(self.api_key.strip() and self.publication_id.strip())

    @property
    def api_endpoint(self) -> str:
        """URL base completa da API com versão."""
        return f"{self.api_base_url.rstrip('/')}/{self.api_version}"

    def get_subscriptions_endpoint(self, publication_id: str | None = None) -> str:
        """Retorna URL de criação de inscritos.

        Args:
            publication_id: ID da publicação. Usa self.publication_id se None.

        Returns:
            URL no formato: https://api.beehiiv.com/v2/publications/{id}/subscriptions

        Raises:
            ValueError: Se publication_id não informado e não configurado.
        """
        pid = (publication_id or self.publication_id).strip()
        if not pid:
            raise ValueError("publication_id é obrigatório")
        return f"{self.api_endpoint}/publications/{pid}/subscriptions"

    def validate(self) -> list[str]:
        """Valida configurações mínimas do Beehiiv.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_key.strip():
            errors.append("BEEHIIV_API_KEY não configurado")

        if not self.publication_id.strip():
            errors.append("BEEHIIV_PUBLICATION_ID não configurado")

        if not 0 < self.request_timeout_seconds < float("inf"):
            errors.append("BEEHIIV_REQUEST_TIMEOUT_SECONDS deve ser finito e > 0")

        if not self.api_base_url.startswith(("http://", "https://")):
            errors.append("BEEHIIV_API_BASE_URL deve começar com http(s)://")

        errors.extend(f"{name} inválido" for name in self.invalid_env)

        return errors

    def malformed_errors(self) -> list[str]:
        """Erros de valor malformado (ignora credenciais ausentes).

        Credenciais ausentes viram 500 por requisição, não falha de boot.
        """
        return [error for error in self.validate() if "não configurado" not in error]


def _load_from_env() -> BeehiivSettings:
    """Carrega BeehiivSettings a partir de variáveis de ambiente."""
    invalid: list[str] = []
    raw_timeout = os.getenv("BEEHIIV_REQUEST_TIMEOUT_SECONDS", "")
    try:
        timeout = float(raw_timeout) if raw_timeout.strip() else DEFAULT_TIMEOUT_SECONDS
    except ValueError:
        invalid.append("BEEHIIV_REQUEST_TIMEOUT_SECONDS")
        timeout = DEFAULT_TIMEOUT_SECONDS

    return BeehiivSettings(
        api_key=os.getenv("BEEHIIV_API_KEY", ""),
        publication_id=os.getenv("BEEHIIV_PUBLICATION_ID", ""),
        api_version=os.getenv("BEEHIIV_API_VERSION", BEEHIIV_API_VERSION),
        api_base_url=os.getenv("BEEHIIV_API_BASE_URL", BEEHIIV_API_BASE_URL),
        utm_source=os.getenv("BEEHIIV_UTM_SOURCE", DEFAULT_UTM_SOURCE),
        request_timeout_seconds=timeout,
        conflict_is_success=os.getenv("BEEHIIV_CONFLICT_IS_SUCCESS", "true").lower()
        in ("true", "1", "yes"),
        invalid_env=tuple(invalid),
    )


@lru_cache(maxsize=1)
def get_beehiiv_settings() -> BeehiivSettings:
    """Retorna instância cacheada de BeehiivSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
