"""Stores de marcadores de sessão.

- MappingMarkerStore: muta diretamente um mapping do chamador.
- ResponseCookieMarkerStore: não acessa o cliente; escreve na resposta
  HTTP cookies vazios com Max-Age=0 no mesmo path de criação.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.protocols.session_store import SessionMarkerStoreProtocol
from utils.errors import SessionContextUnavailableError

if TYPE_CHECKING:
    from collections.abc import MutableMapping

    from starlette.responses import Response

logger = logging.getLogger(__name__)


class MappingMarkerStore(SessionMarkerStoreProtocol):
    """Remove marcadores de um mapping mutável (cookie jar, request.session).

    Args:
        context: Mapping do chamador. None = contexto inalcançável.
    """

    def __init__(self, context: MutableMapping[str, Any] | None) -> None:
        self._context = context

    def clear(self, name: str) -> None:
        if self._context is None:
            raise SessionContextUnavailableError("contexto de sessão indisponível")
        try:
            removed = self._context.pop(name, None) is not None
        except (OSError, RuntimeError) as exc:
            raise SessionContextUnavailableError(f"falha ao remover marcador {name}") from exc
        logger.debug("session_marker_removed", extra={"marker": name, "was_present": removed})


class ResponseCookieMarkerStore(SessionMarkerStoreProtocol):
    """Instrui o cliente a sobrescrever o cookie com valor vazio e expirado.

    A instrução é emitida sempre, independente do que a requisição trouxe.

    Args:
        response: Resposta HTTP que levará os Set-Cookie
        path: Path com que os cookies foram criados
    """

    def __init__(self, response: Response, path: str = "/") -> None:
        self._response = response
        self._path = path

    def clear(self, name: str) -> None:
        self._response.set_cookie(key=name, value="", max_age=0, path=self._path)
