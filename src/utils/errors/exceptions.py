"""Exceções compartilhadas da camada de contratos."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.validation.rules import Violation


class ContractError(Exception):
    """Base para erros da camada de contratos."""


class SchemaDefinitionError(ContractError, ValueError):
    """Schema de DTO mal definido (defeito de configuração, falha no import)."""


class RequestValidationFailure(ContractError):
    """Entrada rejeitada pelas regras do schema.

    Carrega a lista completa de violações para renderização por campo.
    """

    def __init__(self, schema_name: str, violations: Sequence[Violation]) -> None:
        self.schema_name = schema_name
        self.violations = tuple(violations)
        fields = ", ".join(v.field for v in self.violations)
        super().__init__(f"{schema_name}: {len(self.violations)} violação(ões) em [{fields}]")


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura transitórias."""


class SessionContextUnavailableError(InfrastructureError):
    """Armazenamento dos marcadores de sessão indisponível (leitura/escrita)."""
