"""Validador de restrições por campo.

Avalia todas as regras do schema contra o mesmo snapshot da entrada,
sem curto-circuito, e retorna Accepted ou Rejected. Função pura.

Uso:
    from app.validation import validate
    from app.validation.dtos import UPDATE_USER_AVATAR

    result = validate(UPDATE_USER_AVATAR, payload)
    if result.accepted:
        dto = result.value
    else:
        errors = [v.as_dict() for v in result.violations]
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from app.validation.rules import MISSING, Violation
from utils.errors import RequestValidationFailure

if TYPE_CHECKING:
    from pydantic import BaseModel

    from app.validation.schema import DtoSchema

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Accepted:
    """Entrada aceita; `value` é o registro tipado do DTO."""

    value: BaseModel

    @property
    def accepted(self) -> bool:
        return True

    @property
    def violations(self) -> tuple[Violation, ...]:
        return ()


@dataclass(frozen=True, slots=True)
class Rejected:
    """Entrada rejeitada com todas as violações, na ordem do schema."""

    violations: tuple[Violation, ...]

    @property
    def accepted(self) -> bool:
        return False

    def as_list(self) -> list[dict[str, str]]:
        return [violation.as_dict() for violation in self.violations]


ValidationResult = Accepted | Rejected


def validate(schema: DtoSchema, data: Any) -> ValidationResult:
    """Valida um registro não tipado contra o schema.

    Args:
        schema: Schema do DTO
        data: Registro de entrada. Entrada que não é mapping é tratada
            como registro com todas as chaves ausentes.

    Returns:
        Accepted com o modelo tipado, ou Rejected com todas as violações.
    """
    snapshot: Mapping[str, Any] = dict(data) if isinstance(data, Mapping) else {}

    violations = tuple(
        Violation(field=rule.field, message=rule.message)
        for rule in schema.rules
        if not rule.check(snapshot.get(rule.field, MISSING))
    )
    if violations:
        logger.debug(
            "dto_rejected",
            extra={
                "schema": schema.name,
                "violation_count": len(violations),
                "fields": sorted({v.field for v in violations}),
            },
        )
        return Rejected(violations=violations)

    declared = {name: snapshot[name] for name in schema.fields if name in snapshot}
    return Accepted(value=schema.model.model_validate(declared))


def validate_or_raise(schema: DtoSchema, data: Any) -> BaseModel:
    """Igual a validate(), mas levanta RequestValidationFailure na rejeição.

    Raises:
        RequestValidationFailure: Com todas as violações encontradas.
    """
    result = validate(schema, data)
    if isinstance(result, Rejected):
        raise RequestValidationFailure(schema.name, result.violations)
    return result.value
