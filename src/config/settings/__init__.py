"""Agregador de settings do asap-jobs-signup.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    DEFAULT_SERVICE_NAME,
    BaseSettings,
    Environment,
    get_base_settings,
)

# Provider settings
from config.settings.beehiiv import (
    BEEHIIV_API_BASE_URL,
    BEEHIIV_API_VERSION,
    DEFAULT_UTM_SOURCE,
    BeehiivSettings,
    get_beehiiv_settings,
)

__all__ = [
    # Constants
    "BEEHIIV_API_BASE_URL",
    "BEEHIIV_API_VERSION",
    "DEFAULT_SERVICE_NAME",
    "DEFAULT_UTM_SOURCE",
    # Base
    "BaseSettings",
    # Provider
    "BeehiivSettings",
    "Environment",
    "get_base_settings",
    "get_beehiiv_settings",
]
