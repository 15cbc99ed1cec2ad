"""Agregador de settings base.

Re-exporta todas as settings base para uso externo.
"""

from __future__ import annotations

from config.settings.base.core import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.base.session import (
    REDIRECT_STATUS_CODES,
    SessionSettings,
    get_session_settings,
)

__all__ = [
    "REDIRECT_STATUS_CODES",
    # Core
    "BaseSettings",
    # Types
    "Environment",
    # Session
    "SessionSettings",
    "get_base_settings",
    "get_session_settings",
]
