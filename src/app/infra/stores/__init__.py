"""Stores — implementações concretas dos marcadores de sessão.

Módulos disponíveis:
    - session_markers: remoção direta (mapping) e via cookies expirados (HTTP)
"""

from __future__ import annotations

from app.infra.stores.session_markers import MappingMarkerStore, ResponseCookieMarkerStore

__all__ = [
    "MappingMarkerStore",
    "ResponseCookieMarkerStore",
]
