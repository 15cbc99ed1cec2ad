"""Módulo de sessões — invalidação (logout) dos marcadores do cliente.

Exporta a rotina única de invalidação e o ponto de entrada por ação direta.
"""

from app.sessions.invalidation import InvalidationOutcome, invalidate, logout_action

__all__ = [
    "InvalidationOutcome",
    "invalidate",
    "logout_action",
]
