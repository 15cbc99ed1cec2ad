"""Validação declarativa de DTOs de entrada.

Uso:
    from app.validation import validate
    from app.validation.dtos import CREATE_SERVICE

    result = validate(CREATE_SERVICE, payload)
"""

from app.validation.rules import MISSING, FieldRule, RuleKind, Violation
from app.validation.schema import DtoSchema, define_schema
from app.validation.validator import (
    Accepted,
    Rejected,
    ValidationResult,
    validate,
    validate_or_raise,
)

__all__ = [
    "MISSING",
    "Accepted",
    "DtoSchema",
    "FieldRule",
    "Rejected",
    "RuleKind",
    "ValidationResult",
    "Violation",
    "define_schema",
    "validate",
    "validate_or_raise",
]
