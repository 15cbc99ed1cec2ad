"""Endpoints de logout (invalidação via resposta HTTP).

A rota não acessa o armazenamento do cliente: a resposta instrui o
navegador a sobrescrever os cookies de sessão com valor vazio e
Max-Age=0 no mesmo path em que foram criados.

- POST /logout: redirect para o login (GET delega ao POST).
- POST /auth/logout: confirmação JSON, para clientes HTTP que tratam 401.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse, RedirectResponse

from app.infra.stores import ResponseCookieMarkerStore
from app.sessions import invalidate
from config.settings import get_session_settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/logout", response_class=RedirectResponse)
async def logout() -> RedirectResponse:
    """Limpa cookies de sessão e redireciona para o login."""
    settings = get_session_settings()
    response = RedirectResponse(
        url=settings.login_path,
        status_code=settings.logout_redirect_status,
    )
    outcome = invalidate(
        ResponseCookieMarkerStore(response, path=settings.cookie_path),
        redirect_to=settings.login_path,
    )
    logger.debug("logout_redirect_built", extra={"redirect_to": outcome.redirect_to})
    return response


@router.get("/logout", response_class=RedirectResponse)
async def logout_get() -> RedirectResponse:
    """Mesmo comportamento do POST (facilita redirects server-side)."""
    return await logout()


@router.post("/auth/logout")
async def logout_ack() -> JSONResponse:
    """Limpa cookies de sessão e confirma com {"ok": true}."""
    settings = get_session_settings()
    response = JSONResponse(content={"ok": True})
    invalidate(ResponseCookieMarkerStore(response, path=settings.cookie_path))
    return response
