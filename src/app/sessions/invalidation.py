"""Invalidação de sessão — rotina única para os dois pontos de entrada.

Pontos de entrada:
- Ação direta (in-process): muta o contexto de sessão do chamador
  (`logout_action`), usando MappingMarkerStore; remove também o token.
- Chamada HTTP: não acessa o contexto; emite cookies expirados na resposta
  (api/routes/auth), usando ResponseCookieMarkerStore.

Ambos delegam para `invalidate`, que tenta limpar cada marcador de forma
independente e SEMPRE devolve o sinal de redirect para o login. Falha de
armazenamento é registrada e não interrompe o logout.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from app.infra.stores.session_markers import MappingMarkerStore
from config.logging import log_fallback
from config.settings import get_session_settings

if TYPE_CHECKING:
    from collections.abc import MutableMapping, Sequence

    from app.protocols.session_store import SessionMarkerStoreProtocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class InvalidationOutcome:
    """Resultado da invalidação: destino do redirect e marcadores tratados."""

    redirect_to: str
    cleared: tuple[str, ...] = ()
    failed: tuple[str, ...] = ()

    @property
    def complete(self) -> bool:
        """True se todos os marcadores foram limpos."""
        return not self.failed


def invalidate(
    store: SessionMarkerStoreProtocol,
    *,
    markers: Sequence[str] | None = None,
    redirect_to: str | None = None,
) -> InvalidationOutcome:
    """Remove os marcadores de sessão e sinaliza redirect.

    Idempotente: marcadores ausentes não são erro. Qualquer exceção do
    store é registrada por marcador e não impede os demais nem o redirect.

    Args:
        store: Implementação que sabe limpar um marcador
        markers: Nomes dos marcadores (default: credencial e identidade)
        redirect_to: Destino do redirect (default: login_path)

    Returns:
        InvalidationOutcome com o destino e os marcadores limpos/falhos.
    """
    settings = get_session_settings()
    names = tuple(markers) if markers is not None else settings.markers
    target = redirect_to or settings.login_path

    cleared: list[str] = []
    failed: list[str] = []
    for name in names:
        try:
            store.clear(name)
        except Exception as exc:
            failed.append(name)
            logger.warning(
                "session_marker_clear_failed",
                extra={"marker": name, "error_type": type(exc).__name__},
            )
        else:
            cleared.append(name)

    if failed:
        log_fallback(logger, "session_invalidation", reason="marker_store_unavailable")

    logger.info(
        "session_invalidated",
        extra={
            "store": type(store).__name__,
            "cleared": cleared,
            "failed": failed,
            "redirect_to": target,
        },
    )
    return InvalidationOutcome(redirect_to=target, cleared=tuple(cleared), failed=tuple(failed))


def logout_action(session_context: MutableMapping[str, Any] | None) -> InvalidationOutcome:
    """Logout disparado por ação direta do usuário.

    Remove também o cookie de token, que a rota HTTP não toca.

    Args:
        session_context: Contexto de sessão do chamador (ex: cookie jar,
            request.session). None indica contexto inalcançável.

    Returns:
        InvalidationOutcome com redirect para o login.
    """
    settings = get_session_settings()
    return invalidate(MappingMarkerStore(session_context), markers=settings.action_markers)
