"""Entrypoint da aplicação agenda-core.

Expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request

from api.middleware import correlation_id_middleware
from api.responses import validation_failure_response
from api.routes import create_api_router
from app.bootstrap import initialize_app, validate_runtime_settings
from config.logging import get_logger
from utils.errors import RequestValidationFailure

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from fastapi.responses import JSONResponse

# Logging antes de qualquer log de módulo
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Valida settings no startup."""
    logger.info("app_starting", extra={"service": "agenda-core"})
    validate_runtime_settings()
    yield
    logger.info("app_shutting_down", extra={"service": "agenda-core"})


async def _handle_validation_failure(
    request: Request, exc: RequestValidationFailure
) -> JSONResponse:
    logger.info(
        "request_validation_failed",
        extra={"schema": exc.schema_name, "violation_count": len(exc.violations)},
    )
    return validation_failure_response(exc)


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI."""
    fastapi_app = FastAPI(
        title="agenda-core",
        description="Contratos de validação, envelope de resposta e logout",
        version="1.0.0",
        lifespan=lifespan,
    )

    fastapi_app.middleware("http")(correlation_id_middleware)
    fastapi_app.add_exception_handler(RequestValidationFailure, _handle_validation_failure)  # type: ignore[arg-type]
    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": "agenda-core"})
    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting agenda-core in development mode")
    uvicorn.run("app.app:app", host="0.0.0.0", port=8080, reload=True)


if __name__ == "__main__":
    main()
