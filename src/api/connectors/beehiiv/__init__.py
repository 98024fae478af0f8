"""Conector Beehiiv — adapter de borda para a API v2.

Este módulo é o único ponto de IO com o provedor de newsletter.
"""

from .http_base import HttpClient, HttpClientConfig
from .http_client import BeehiivHttpClient, create_beehiiv_http_client, is_accepted_status

__all__ = [
    "BeehiivHttpClient",
    "HttpClient",
    "HttpClientConfig",
    "create_beehiiv_http_client",
    "is_accepted_status",
]
