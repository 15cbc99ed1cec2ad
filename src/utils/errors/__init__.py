"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ContractError,
    InfrastructureError,
    RequestValidationFailure,
    SchemaDefinitionError,
    SessionContextUnavailableError,
)

__all__ = [
    "ContractError",
    "InfrastructureError",
    "RequestValidationFailure",
    "SchemaDefinitionError",
    "SessionContextUnavailableError",
]
