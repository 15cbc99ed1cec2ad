"""Settings dos marcadores de sessão e do fluxo de logout.

Os marcadores são cookies mantidos pelo cliente; não há tabela de sessão
no servidor. O logout apenas remove os marcadores e redireciona.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

REDIRECT_STATUS_CODES = frozenset({301, 302, 303, 307, 308})


@dataclass(frozen=True)
class SessionSettings:
    """Configurações de sessão.

    Attributes:
        credential_cookie: Cookie de sessão (marcador de credencial)
        identity_cookie: Cookie auxiliar de identidade do usuário
        token_cookie: Cookie httpOnly com o token de acesso, removido apenas
            pela ação direta de logout
        cookie_path: Escopo de path usado na criação dos cookies
        login_path: Ponto de entrada não autenticado
        logout_redirect_status: Status HTTP do redirect de logout
    """

    credential_cookie: str = "session"
    identity_cookie: str = "user"
    token_cookie: str = "token"
    cookie_path: str = "/"
    login_path: str = "/login"
    logout_redirect_status: int = 303

    @property
    def markers(self) -> tuple[str, ...]:
        """Cookies removidos no logout (credencial primeiro)."""
        return (self.credential_cookie, self.identity_cookie)

    @property
    def action_markers(self) -> tuple[str, ...]:
        """Cookies removidos pela ação direta (token, depois os marcadores)."""
        return (self.token_cookie, *self.markers)

    def validate(self) -> list[str]:
        """Valida configurações de sessão.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if not self.credential_cookie:
            errors.append("SESSION_COOKIE_NAME não pode ser vazio")
        if not self.identity_cookie:
            errors.append("SESSION_USER_COOKIE_NAME não pode ser vazio")
        if not self.token_cookie:
            errors.append("SESSION_TOKEN_COOKIE_NAME não pode ser vazio")
        names = [name for name in self.action_markers if name]
        if len(set(names)) != len(names):
            errors.append(
                "SESSION_COOKIE_NAME, SESSION_USER_COOKIE_NAME e SESSION_TOKEN_COOKIE_NAME "
                "devem ser distintos"
            )

        if not self.cookie_path.startswith("/"):
            errors.append(f"SESSION_COOKIE_PATH deve começar com '/': {self.cookie_path}")
        if not self.login_path.startswith("/"):
            errors.append(f"SESSION_LOGIN_PATH deve começar com '/': {self.login_path}")

        if self.logout_redirect_status not in REDIRECT_STATUS_CODES:
            errors.append(
                f"SESSION_LOGOUT_REDIRECT_STATUS inválido: {self.logout_redirect_status}"
            )

        return errors


def _load_session_from_env() -> SessionSettings:
    """Carrega SessionSettings de variáveis de ambiente."""
    return SessionSettings(
        credential_cookie=os.getenv("SESSION_COOKIE_NAME", "session"),
        identity_cookie=os.getenv("SESSION_USER_COOKIE_NAME", "user"),
        token_cookie=os.getenv("SESSION_TOKEN_COOKIE_NAME", "token"),
        cookie_path=os.getenv("SESSION_COOKIE_PATH", "/"),
        login_path=os.getenv("SESSION_LOGIN_PATH", "/login"),
        logout_redirect_status=int(os.getenv("SESSION_LOGOUT_REDIRECT_STATUS", "303")),
    )


@lru_cache(maxsize=1)
def get_session_settings() -> SessionSettings:
    """Retorna instância cacheada de SessionSettings."""
    return _load_session_from_env()
