"""Validação de DTOs sem efeitos colaterais (dry-run).

GET /contracts
- 200: envelope paginado (limit, page, q) com os tipos e suas regras
- 422: parâmetros de paginação inválidos

POST /contracts/{kind}/validate
- 200: envelope com o registro tipado aceito
- 422: lista de violações por campo
- 404: tipo de DTO desconhecido
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from api.responses import envelope_response, violations_response
from app.contracts import Pagination, ok, parse_pagination_params
from app.validation import Rejected, Violation, validate
from app.validation.dtos import DTO_SCHEMAS, get_schema

if TYPE_CHECKING:
    from app.validation import DtoSchema

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/contracts")
async def list_contracts(request: Request) -> JSONResponse:
    """Lista os tipos de DTO e suas regras; `q` filtra por trecho do tipo."""
    try:
        params = parse_pagination_params(request.query_params)
    except ValidationError as exc:
        return violations_response(_query_violations(exc))

    term = (params.q or "").strip().lower()
    schemas = [schema for schema in DTO_SCHEMAS.values() if term in schema.name]
    window = schemas[params.offset : params.offset + params.limit]
    meta = Pagination.from_totals(page=params.page, page_size=params.limit, total_items=len(schemas))
    return envelope_response(ok([_describe(schema) for schema in window], meta=meta))


@router.post("/contracts/{kind}/validate")
async def validate_contract(kind: str, request: Request) -> JSONResponse:
    """Valida o corpo JSON contra o schema do tipo informado."""
    schema = get_schema(kind)
    if schema is None:
        raise HTTPException(status_code=404, detail=f"Tipo de DTO desconhecido: {kind}")

    body = await request.body()
    try:
        payload = json.loads(body) if body else {}
    except ValueError:
        # Corpo ilegível equivale a registro sem campos
        logger.info("contract_body_not_json", extra={"kind": kind})
        payload = {}

    result = validate(schema, payload)
    if isinstance(result, Rejected):
        return violations_response(result.violations)
    return envelope_response(ok(result.value.model_dump(mode="json", by_alias=True, exclude_unset=True)))


def _describe(schema: DtoSchema) -> dict[str, Any]:
    rules = []
    for rule in schema.rules:
        item: dict[str, Any] = {"field": rule.field, "rule": rule.kind.value, "optional": rule.optional}
        if rule.limit is not None:
            item["limit"] = rule.limit
        rules.append(item)
    return {"kind": schema.name, "rules": rules}


def _query_violations(exc: ValidationError) -> list[Violation]:
    fields = dict.fromkeys(str(error["loc"][0]) for error in exc.errors() if error["loc"])
    return [Violation(field, f"{field} deve ser um inteiro maior ou igual a 1") for field in fields]
