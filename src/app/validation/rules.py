"""Regras de campo e predicados do validador declarativo.

Cada regra é um dado imutável (campo, tipo de predicado, mensagem).
Os predicados são funções puras sobre o valor bruto do campo; o valor
ausente é representado pelo sentinel `MISSING`.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Final

from pydantic import AnyUrl, EmailStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

if TYPE_CHECKING:
    from collections.abc import Callable


class _Missing:
    """Marca de chave ausente no registro de entrada."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing()


class RuleKind(str, Enum):
    """Tipos de predicado suportados."""

    PRESENCE = "presence"
    STRING = "string"
    UUID4 = "uuid4"
    URL = "url"
    NUMBER = "number"
    NON_NEGATIVE = "non_negative"
    STRING_LIST = "string_list"
    BOOLEAN = "boolean"
    EMAIL = "email"
    MIN_LENGTH = "min_length"
    MAX_LENGTH = "max_length"


# Tipos que exigem `limit` na regra
BOUNDED_KINDS = frozenset({RuleKind.MIN_LENGTH, RuleKind.MAX_LENGTH})


@dataclass(frozen=True, slots=True)
class FieldRule:
    """Restrição nomeada aplicada a um campo do DTO.

    Attributes:
        field: Nome do campo no registro de entrada (camelCase do contrato)
        kind: Tipo de predicado
        message: Mensagem legível exibida ao usuário quando a regra falha
        optional: Se True, valor ausente ou None não é avaliado
        limit: Limite de tamanho (apenas min_length/max_length)
    """

    field: str
    kind: RuleKind
    message: str
    optional: bool = False
    limit: int | None = None

    def check(self, value: Any) -> bool:
        """Retorna True se o valor satisfaz a regra."""
        if self.optional and (value is MISSING or value is None):
            return True
        if self.kind in BOUNDED_KINDS:
            return BOUNDED_PREDICATES[self.kind](value, self.limit or 0)
        return PREDICATES[self.kind](value)


@dataclass(frozen=True, slots=True)
class Violation:
    """Falha de uma regra sobre um campo."""

    field: str
    message: str

    def as_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


# 8-4-4-4-12, versão 4, variante RFC 4122 (8, 9, a, b)
UUID4_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)

ALLOWED_URL_SCHEMES = frozenset({"http", "https", "ftp"})

_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)
_EMAIL_ADAPTER: TypeAdapter[str] = TypeAdapter(EmailStr)


def is_present(value: Any) -> bool:
    return value is not MISSING and value is not None and value != ""


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_uuid4(value: Any) -> bool:
    return isinstance(value, str) and UUID4_PATTERN.match(value) is not None


def is_url(value: Any) -> bool:
    """URL absoluta com esquema reconhecido e host."""
    if not isinstance(value, str) or not value or value != value.strip():
        return False
    try:
        url = _URL_ADAPTER.validate_python(value)
    except PydanticValidationError:
        return False
    return url.scheme in ALLOWED_URL_SCHEMES and bool(url.host)


def is_number(value: Any) -> bool:
    # bool é subclasse de int, mas não é número no contrato
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


def is_non_negative(value: Any) -> bool:
    # Tipo é responsabilidade de NUMBER
    if not is_number(value):
        return True
    return value >= 0


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_string_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


def is_email(value: Any) -> bool:
    if not isinstance(value, str) or not value:
        return False
    try:
        _EMAIL_ADAPTER.validate_python(value)
    except PydanticValidationError:
        return False
    return True


# Tamanho só se aplica a texto; o tipo é responsabilidade de STRING
def has_min_length(value: Any, limit: int) -> bool:
    return not isinstance(value, str) or len(value) >= limit


def has_max_length(value: Any, limit: int) -> bool:
    return not isinstance(value, str) or len(value) <= limit


PREDICATES: dict[RuleKind, Callable[[Any], bool]] = {
    RuleKind.PRESENCE: is_present,
    RuleKind.STRING: is_string,
    RuleKind.UUID4: is_uuid4,
    RuleKind.URL: is_url,
    RuleKind.NUMBER: is_number,
    RuleKind.NON_NEGATIVE: is_non_negative,
    RuleKind.STRING_LIST: is_string_list,
    RuleKind.BOOLEAN: is_boolean,
    RuleKind.EMAIL: is_email,
}

BOUNDED_PREDICATES: dict[RuleKind, Callable[[Any, int], bool]] = {
    RuleKind.MIN_LENGTH: has_min_length,
    RuleKind.MAX_LENGTH: has_max_length,
}
