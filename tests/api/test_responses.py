"""Testes da conversão de contratos em respostas HTTP."""

from __future__ import annotations

import json

from api.responses import envelope_response, validation_failure_response, violations_response
from app.contracts import Pagination, wrap
from app.validation import Violation
from utils.errors import RequestValidationFailure


def test_envelope_response_uses_envelope_status() -> None:
    response = envelope_response(wrap({"id": 1}, 201, "Created"))

    assert response.status_code == 201
    assert json.loads(response.body) == {"data": {"id": 1}, "status": 201, "statusText": "Created"}


def test_envelope_response_keeps_meta_for_lists() -> None:
    meta = Pagination.from_totals(page=1, page_size=10, total_items=1)
    body = json.loads(envelope_response(wrap([{"id": 1}], 200, "OK", meta)).body)
    assert body["meta"]["totalPages"] == 1


def test_violations_response_is_422_with_field_errors() -> None:
    response = violations_response([Violation("price", "O preço deve ser um número")])

    assert response.status_code == 422
    assert json.loads(response.body)["errors"] == [
        {"field": "price", "message": "O preço deve ser um número"}
    ]


def test_validation_failure_response() -> None:
    exc = RequestValidationFailure("service-create", [Violation("name", "O nome é obrigatório")])
    response = validation_failure_response(exc)
    assert response.status_code == 422
    assert json.loads(response.body)["errors"][0]["field"] == "name"
