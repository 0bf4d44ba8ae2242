"""Opciones de consulta y respuestas paginadas compartidas por los repositorios."""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Generic, Sequence, TypeVar

from ecomove.domain.value_objects.coordinate import Coordinate

T = TypeVar("T")
R = TypeVar("R")


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class QueryOptions:
    page: int | None = None
    limit: int | None = None
    sort_by: str | None = None
    sort_order: SortOrder | None = None

    def to_params(self) -> dict[str, str]:
        """Parámetros de query string con las claves del backend; omite los vacíos."""
        params: dict[str, str] = {}
        if self.page:
            params["page"] = str(self.page)
        if self.limit:
            params["limit"] = str(self.limit)
        if self.sort_by:
            params["sortBy"] = self.sort_by
        if self.sort_order:
            params["sortOrder"] = self.sort_order.value
        return params


@dataclass(frozen=True)
class FindNearbyOptions:
    center: Coordinate
    radius_km: float
    limit: int | None = None


@dataclass(frozen=True)
class PaginatedResponse(Generic[T]):
    data: list[T] = field(default_factory=list)
    total: int = 0
    page: int = 1
    limit: int = 10
    total_pages: int = 0

    def map(self, fn: Callable[[T], R]) -> "PaginatedResponse[R]":
        return PaginatedResponse(
            data=[fn(item) for item in self.data],
            total=self.total,
            page=self.page,
            limit=self.limit,
            total_pages=self.total_pages,
        )

    @classmethod
    def paginate(cls, items: Sequence[T], options: QueryOptions | None = None) -> "PaginatedResponse[T]":
        """Pagina una secuencia ya ordenada (usado por los repositorios en memoria)."""
        options = options or QueryOptions()
        page = options.page or 1
        limit = options.limit or 10
        start = (page - 1) * limit
        return cls(
            data=list(items[start : start + limit]),
            total=len(items),
            page=page,
            limit=limit,
            total_pages=math.ceil(len(items) / limit) if items else 0,
        )
