"""Protocolos e contratos do core da aplicação."""

from .session_store import SessionMarkerStoreProtocol

__all__ = ["SessionMarkerStoreProtocol"]
