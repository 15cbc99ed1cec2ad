"""Testes do endpoint de validação de contratos (dry-run)."""

from __future__ import annotations

import json

import pytest
from fastapi import HTTPException
from starlette.requests import Request

from api.routes.contracts.router import list_contracts, validate_contract

VALID_UUID = "123e4567-e89b-42d3-a456-426614174000"


def _build_request(body: bytes = b"", *, method: str = "POST", query: bytes = b"") -> Request:
    path = "/contracts/x/validate" if method == "POST" else "/contracts"
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": method,
        "path": path,
        "raw_path": path.encode(),
        "query_string": query,
        "headers": [(b"content-type", b"application/json")],
    }
    sent = False

    async def _receive() -> dict[str, object]:
        nonlocal sent
        if sent:
            return {"type": "http.request", "body": b"", "more_body": False}
        sent = True
        return {"type": "http.request", "body": body, "more_body": False}

    return Request(scope, _receive)


def _json(payload: dict[str, object]) -> bytes:
    return json.dumps(payload).encode("utf-8")


@pytest.mark.asyncio
async def test_valid_payload_returns_envelope_without_meta() -> None:
    payload = {"userId": VALID_UUID, "avatar": "https://example.com/a.png"}

    response = await validate_contract("user-avatar-update", _build_request(_json(payload)))
    body = json.loads(response.body)

    assert response.status_code == 200
    assert body == {"data": payload, "status": 200, "statusText": "OK"}


@pytest.mark.asyncio
async def test_invalid_payload_returns_422_with_every_violation() -> None:
    response = await validate_contract(
        "user-avatar-update", _build_request(_json({"avatar": "not a url"}))
    )
    body = json.loads(response.body)

    assert response.status_code == 422
    assert body["status"] == 422
    assert body["statusText"] == "Unprocessable Entity"
    assert [error["field"] for error in body["errors"]] == ["userId", "avatar"]
    assert "data" not in body


@pytest.mark.asyncio
async def test_negative_price_is_rejected() -> None:
    response = await validate_contract(
        "service-create",
        _build_request(_json({"name": "Corte", "durationMinutes": 30, "price": -1})),
    )
    body = json.loads(response.body)

    assert response.status_code == 422
    assert body["errors"] == [{"field": "price", "message": "O preço não pode ser negativo"}]


@pytest.mark.asyncio
async def test_non_json_body_is_treated_as_empty_record() -> None:
    response = await validate_contract("service-create", _build_request(b"{not json"))
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_non_utf8_body_is_treated_as_empty_record() -> None:
    response = await validate_contract("service-create", _build_request(b"\xff\xfe\xfa"))
    body = json.loads(response.body)

    assert response.status_code == 422
    assert [error["field"] for error in body["errors"]][:2] == ["name", "name"]


@pytest.mark.asyncio
async def test_unknown_kind_returns_404() -> None:
    with pytest.raises(HTTPException) as exc_info:
        await validate_contract("payment", _build_request(b"{}"))
    assert exc_info.value.status_code == 404


@pytest.mark.asyncio
async def test_list_contracts_exposes_rules_in_order() -> None:
    response = await list_contracts(_build_request(method="GET"))
    body = json.loads(response.body)

    assert response.status_code == 200
    assert body["meta"] == {"page": 1, "pageSize": 12, "totalItems": 8, "totalPages": 1}
    avatar = next(item for item in body["data"] if item["kind"] == "user-avatar-update")
    assert [(rule["field"], rule["rule"]) for rule in avatar["rules"]] == [
        ("userId", "uuid4"),
        ("avatar", "string"),
        ("avatar", "url"),
    ]


@pytest.mark.asyncio
async def test_list_contracts_paginates_and_filters() -> None:
    response = await list_contracts(_build_request(method="GET", query=b"q=user&limit=2&page=2"))
    body = json.loads(response.body)

    assert response.status_code == 200
    assert [item["kind"] for item in body["data"]] == ["user-update"]
    assert body["meta"] == {"page": 2, "pageSize": 2, "totalItems": 3, "totalPages": 2}


@pytest.mark.asyncio
async def test_list_contracts_exposes_length_limits() -> None:
    response = await list_contracts(_build_request(method="GET", query=b"q=user-create"))
    body = json.loads(response.body)

    (user,) = body["data"]
    bounded = {(rule["field"], rule["rule"]): rule["limit"] for rule in user["rules"] if "limit" in rule}
    assert bounded[("fullName", "min_length")] == 3
    assert bounded[("bio", "max_length")] == 500


@pytest.mark.asyncio
async def test_list_contracts_rejects_invalid_pagination() -> None:
    response = await list_contracts(_build_request(method="GET", query=b"page=0&limit=abc"))
    body = json.loads(response.body)

    assert response.status_code == 422
    assert [error["field"] for error in body["errors"]] == ["limit", "page"]


@pytest.mark.asyncio
async def test_accepted_user_does_not_echo_password() -> None:
    payload = {
        "roleId": VALID_UUID,
        "fullName": "Ana Souza",
        "email": "ana@clinica.com.br",
        "password": "segredo123",
        "bio": "Fisioterapeuta há dez anos.",
    }

    response = await validate_contract("user-create", _build_request(_json(payload)))
    body = json.loads(response.body)

    assert response.status_code == 200
    assert "password" not in body["data"]
    assert body["data"]["fullName"] == "Ana Souza"
