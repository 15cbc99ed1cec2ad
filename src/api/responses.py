"""Conversão de contratos internos em respostas HTTP JSON."""

from __future__ import annotations

from http import HTTPStatus
from typing import TYPE_CHECKING

from fastapi.responses import JSONResponse

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.contracts import SuccessResponse
    from app.validation import Violation
    from utils.errors import RequestValidationFailure


def envelope_response(envelope: SuccessResponse) -> JSONResponse:
    """Serializa o envelope; status HTTP = envelope.status."""
    return JSONResponse(content=envelope.to_payload(), status_code=envelope.status)


def violations_response(violations: Sequence[Violation]) -> JSONResponse:
    """Resposta 422 com a lista de violações por campo."""
    status = HTTPStatus.UNPROCESSABLE_ENTITY
    return JSONResponse(
        content={
            "status": status.value,
            "statusText": status.phrase,
            "errors": [violation.as_dict() for violation in violations],
        },
        status_code=status.value,
    )


def validation_failure_response(exc: RequestValidationFailure) -> JSONResponse:
    return violations_response(exc.violations)
