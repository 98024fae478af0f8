"""Taxonomia de erros do fluxo de inscrição.

Cada erro carrega o status HTTP e a mensagem pública devolvida ao cliente.
Detalhes internos (corpo bruto do upstream) ficam em atributos próprios e
só são expostos em `detail` quando a classe permite.
"""

from __future__ import annotations


class SignupError(Exception):
    """Base para falhas terminais de uma requisição de inscrição."""

    status_code: int = 500
    public_message: str = "Server error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.public_message)

    @property
    def detail(self) -> str | None:
        """Texto de diagnóstico exposto ao cliente (None = omitido)."""
        return None


class ConfigurationError(SignupError):
    """Credenciais do provedor ausentes (API key ou publication id)."""

    status_code = 500
    public_message = "Server not configured"


class MethodNotAllowedError(SignupError):
    """Método HTTP diferente de POST."""

    status_code = 405
    public_message = "Method not allowed"


class ValidationError(SignupError):
    """Body não decodificável ou email ausente."""

    status_code = 400
    public_message = "Email is required"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message)
        # A mensagem de validação é sempre segura para o cliente
        self.public_message = str(self)


class DeliveryError(SignupError):
    """Upstream respondeu com status não-2xx (e não aceito como sucesso)."""

    public_message = "Failed to subscribe"

    def __init__(self, status_code: int, raw_body: str) -> None:
        super().__init__(f"upstream_status_{status_code}")
        self.status_code = status_code
        self.raw_body = raw_body

    @property
    def detail(self) -> str | None:
        return self.raw_body


class TransportError(SignupError):
    """Falha de rede/timeout independente do status do upstream."""

    status_code = 500
    public_message = "Server error"
