"""Paginação de listas: metadados de resposta e parâmetros de consulta."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 12


class Pagination(BaseModel):
    """Metadados de paginação anexados a respostas de lista."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    page: int = Field(ge=1)
    page_size: int = Field(alias="pageSize", ge=1)
    total_items: int = Field(alias="totalItems", ge=0)
    total_pages: int = Field(alias="totalPages", ge=0)

    @classmethod
    def from_totals(cls, page: int, page_size: int, total_items: int) -> Pagination:
        """Calcula total_pages a partir do total de itens.

        Args:
            page: Página atual (1-based)
            page_size: Itens por página
            total_items: Total de itens da consulta

        Returns:
            Pagination com total_pages = ceil(total_items / page_size).
        """
        total_pages = math.ceil(total_items / page_size) if page_size > 0 else 0
        return cls(
            page=page,
            page_size=page_size,
            total_items=total_items,
            total_pages=total_pages,
        )


class PaginationParams(BaseModel):
    """Parâmetros de paginação vindos da query string (com coerção)."""

    limit: int = Field(default=DEFAULT_LIMIT, ge=1)
    page: int = Field(default=DEFAULT_PAGE, ge=1)
    q: str | None = None

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def parse_pagination_params(query: Mapping[str, Any] | None) -> PaginationParams:
    """Converte query params em PaginationParams.

    Raises:
        pydantic.ValidationError: Se limit/page não forem inteiros >= 1.
    """
    return PaginationParams.model_validate(dict(query or {}))
