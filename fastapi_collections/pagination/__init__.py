"""Pagination strategies."""

from .base import PaginationBase
from .standard import StandardPagination

__all__ = ["PaginationBase", "StandardPagination"]
