"""Contratos de resposta: envelope de sucesso e paginação."""

from app.contracts.envelope import SuccessResponse, ok, wrap
from app.contracts.pagination import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    Pagination,
    PaginationParams,
    parse_pagination_params,
)

__all__ = [
    "DEFAULT_LIMIT",
    "DEFAULT_PAGE",
    "Pagination",
    "PaginationParams",
    "SuccessResponse",
    "ok",
    "parse_pagination_params",
    "wrap",
]
