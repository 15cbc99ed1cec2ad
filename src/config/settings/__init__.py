"""Agregador de settings do agenda-core.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.base import (
    REDIRECT_STATUS_CODES,
    BaseSettings,
    Environment,
    SessionSettings,
    get_base_settings,
    get_session_settings,
)

__all__ = [
    "REDIRECT_STATUS_CODES",
    "BaseSettings",
    "Environment",
    "SessionSettings",
    "get_base_settings",
    "get_session_settings",
]
