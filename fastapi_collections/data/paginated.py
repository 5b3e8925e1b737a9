"""Data provider that slices an in-memory sequence with a pagination strategy."""

from __future__ import annotations

from typing import Any, Protocol, Sequence, runtime_checkable

from fastapi_collections.pagination.base import PaginationBase


@runtime_checkable
class DataProviderInterface(Protocol):
    """A paginated data source that also owns its pagination strategy."""

    def get_models(self) -> list[Any]: ...

    def get_total_count(self) -> int: ...

    def get_pagination(self) -> PaginationBase: ...


class PaginatedDataProvider:
    """Expose the current page of ``items`` according to ``pagination``."""

    def __init__(self, items: Sequence[Any], pagination: PaginationBase) -> None:
        self.items = list(items)
        self.pagination = pagination

    def get_models(self) -> list[Any]:
        return self.pagination.paginate(self.items)

    def get_total_count(self) -> int:
        return len(self.items)

    def get_pagination(self) -> PaginationBase:
        return self.pagination
