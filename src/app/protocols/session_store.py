"""Protocolo de escrita dos marcadores de sessão do cliente."""

from __future__ import annotations

from abc import ABC, abstractmethod


class SessionMarkerStoreProtocol(ABC):
    """Contrato mínimo para remover um marcador de sessão.

    Implementações podem mutar o contexto diretamente (ação in-process)
    ou emitir instruções para o cliente (cookies expirados na resposta).
    `clear` deve ser idempotente: marcador ausente não é erro.
    Falhas de armazenamento devem levantar SessionContextUnavailableError.
    """

    @abstractmethod
    def clear(self, name: str) -> None: ...
