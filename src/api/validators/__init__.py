"""Validators — validação de payloads recebidos.

Estrutura:
- signup/: formulário de inscrição
"""

__all__: list[str] = []
