"""Pagination strategy interface."""

from typing import Any


class PaginationBase:
    """Define how a collection is sliced and described."""

    def paginate(self, items: list[Any]) -> list[Any]:
        """Return the slice of items belonging to the current page."""
        raise NotImplementedError

    def get_links(self, *, total: int) -> dict[str, str]:
        """Return navigation links (self, first, last, prev, next)."""
        raise NotImplementedError

    def get_meta(self, *, total: int) -> dict[str, Any]:
        """Return pagination metadata (totalCount, pageCount, currentPage, perPage)."""
        raise NotImplementedError
