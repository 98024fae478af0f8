"""Connectors — adapters de borda para APIs externas.

Estrutura:
- beehiiv/: API v2 de inscritos do Beehiiv
"""

__all__: list[str] = []
