"""Envelope genérico de resposta de sucesso.

Formato serializado:
    {"data": ..., "status": 200, "statusText": "OK", "meta": {...}}

`meta` só existe para dados em coleção e, quando ausente, a chave é
omitida (não null): consumidores usam a ausência para saber que o
recurso não é uma lista.

`status` deve espelhar o status HTTP usado pelo chamador; o envelope não
valida a faixa, exceto para impedir que uma rejeição de validação seja
embrulhada como 2xx.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from app.contracts.pagination import Pagination
from app.validation import Rejected

T = TypeVar("T")

_COLLECTION_TYPES = (list, tuple, set, frozenset)


class SuccessResponse(BaseModel, Generic[T]):
    """Payload + status + paginação opcional."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    data: T
    status: int
    status_text: str = Field(alias="statusText")
    meta: Pagination | None = None

    def to_payload(self) -> dict[str, Any]:
        """Serializa para JSON (camelCase), omitindo `meta` quando ausente."""
        exclude = {"meta"} if self.meta is None else None
        return self.model_dump(mode="json", by_alias=True, exclude=exclude)


def wrap(
    data: T,
    status: int,
    status_text: str,
    meta: Pagination | None = None,
) -> SuccessResponse[T]:
    """Monta o envelope de sucesso.

    Args:
        data: Payload já validado/produzido
        status: Status HTTP da resposta
        status_text: Texto do status (ex: "OK")
        meta: Paginação, somente para coleções

    Raises:
        ValueError: Se `meta` for informado para recurso singular, ou se
            `data` for uma rejeição de validação com status 2xx.
    """
    if isinstance(data, Rejected) and 200 <= status < 300:
        raise ValueError("rejeição de validação não pode ser embrulhada com status 2xx")
    if meta is not None and not _is_collection(data):
        raise ValueError("meta de paginação só é permitido para coleções")
    return SuccessResponse(data=data, status=status, status_text=status_text, meta=meta)


def ok(data: T, meta: Pagination | None = None) -> SuccessResponse[T]:
    """Atalho para wrap(data, 200, "OK", meta)."""
    return wrap(data, 200, "OK", meta)


def _is_collection(data: Any) -> bool:
    return isinstance(data, _COLLECTION_TYPES) and not isinstance(data, Mapping)
