"""Schemas de DTO como dados inspecionáveis.

Um schema é uma sequência ordenada de FieldRule montada em tempo de import,
independente de qualquer instância. Defeitos de definição (par campo+tipo
duplicado, campo ou mensagem vazios, regra de tamanho sem limite) levantam
SchemaDefinitionError no próprio import do módulo que declara o schema.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pydantic import BaseModel

from app.validation.rules import BOUNDED_KINDS, FieldRule, RuleKind
from utils.errors import SchemaDefinitionError

if TYPE_CHECKING:
    from collections.abc import Iterable


@dataclass(frozen=True, slots=True)
class DtoSchema:
    """Schema nomeado de um tipo de DTO.

    Attributes:
        name: Identificador do tipo de DTO (usado em logs e erros)
        rules: Regras em ordem de declaração (define a ordem das violações)
        model: Modelo pydantic que representa o registro tipado aceito
    """

    name: str
    rules: tuple[FieldRule, ...]
    model: type[BaseModel]
    fields: tuple[str, ...] = field(init=False)

    def __post_init__(self) -> None:
        _check_definition(self.name, self.rules)
        ordered = tuple(dict.fromkeys(rule.field for rule in self.rules))
        object.__setattr__(self, "fields", ordered)

    def rules_for(self, field_name: str) -> tuple[FieldRule, ...]:
        """Retorna as regras declaradas para um campo."""
        return tuple(rule for rule in self.rules if rule.field == field_name)

    def kinds_for(self, field_name: str) -> tuple[RuleKind, ...]:
        return tuple(rule.kind for rule in self.rules_for(field_name))


def define_schema(name: str, model: type[BaseModel], rules: Iterable[FieldRule]) -> DtoSchema:
    """Cria um DtoSchema validando a definição (fail-fast)."""
    return DtoSchema(name=name, rules=tuple(rules), model=model)


def _check_definition(name: str, rules: tuple[FieldRule, ...]) -> None:
    if not name:
        raise SchemaDefinitionError("schema sem nome")
    if not rules:
        raise SchemaDefinitionError(f"{name}: schema sem regras")

    seen: set[tuple[str, RuleKind]] = set()
    for rule in rules:
        if not rule.field:
            raise SchemaDefinitionError(f"{name}: regra {rule.kind.value} sem campo")
        if not rule.message:
            raise SchemaDefinitionError(f"{name}: regra {rule.kind.value} de '{rule.field}' sem mensagem")
        if rule.kind in BOUNDED_KINDS and (rule.limit is None or rule.limit < 0):
            raise SchemaDefinitionError(
                f"{name}: regra {rule.kind.value} de '{rule.field}' exige limite >= 0"
            )
        if rule.kind not in BOUNDED_KINDS and rule.limit is not None:
            raise SchemaDefinitionError(
                f"{name}: regra {rule.kind.value} de '{rule.field}' não aceita limite"
            )
        key = (rule.field, rule.kind)
        if key in seen:
            raise SchemaDefinitionError(
                f"{name}: regra duplicada {rule.kind.value} para o campo '{rule.field}'"
            )
        seen.add(key)
