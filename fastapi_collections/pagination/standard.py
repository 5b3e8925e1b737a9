"""Offset/limit pagination."""

from __future__ import annotations

from typing import Any, Mapping
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from .base import PaginationBase

DEFAULT_LIMIT = 20


class StandardPagination(PaginationBase):
    """Paginate with ``page[offset]`` and ``page[limit]`` query parameters."""

    def __init__(
        self,
        *,
        offset: int = 0,
        limit: int = DEFAULT_LIMIT,
        base_url: str | None = None,
    ) -> None:
        self.offset = max(offset, 0)
        self.limit = limit if limit >= 1 else DEFAULT_LIMIT
        self.base_url = base_url

    @classmethod
    def from_params(
        cls, params: Mapping[str, Any], *, base_url: str | None = None
    ) -> StandardPagination:
        """Read ``page[offset]`` and ``page[limit]``, ignoring malformed values."""

        def read(name: str, default: int) -> int:
            try:
                return int(params.get(name, default))
            except (TypeError, ValueError):
                return default

        return cls(
            offset=read("page[offset]", 0),
            limit=read("page[limit]", DEFAULT_LIMIT),
            base_url=base_url,
        )

    def paginate(self, items: list[Any]) -> list[Any]:
        return items[self.offset : self.offset + self.limit]

    def get_links(self, *, total: int) -> dict[str, str]:
        """Build pagination links relative to ``base_url`` (empty without one)."""
        if not self.base_url:
            return {}

        def build_url(page_offset: int) -> str:
            split = urlsplit(self.base_url)
            query = [
                (key, value)
                for key, value in parse_qsl(split.query, keep_blank_values=True)
                if key not in ("page[offset]", "page[limit]")
            ]
            query += [("page[offset]", str(page_offset)), ("page[limit]", str(self.limit))]
            return urlunsplit(
                (split.scheme, split.netloc, split.path, urlencode(query), split.fragment)
            )

        last_offset = max(0, (max(total - 1, 0) // self.limit) * self.limit)
        links = {
            "self": build_url(self.offset),
            "first": build_url(0),
            "last": build_url(last_offset),
        }
        prev_offset = self.offset - self.limit
        if prev_offset >= 0:
            links["prev"] = build_url(prev_offset)
        next_offset = self.offset + self.limit
        if next_offset <= last_offset:
            links["next"] = build_url(next_offset)
        return links

    def get_meta(self, *, total: int) -> dict[str, Any]:
        page_count = (total + self.limit - 1) // self.limit
        return {
            "totalCount": total,
            "pageCount": page_count,
            "currentPage": self.offset // self.limit + 1,
            "perPage": self.limit,
        }
