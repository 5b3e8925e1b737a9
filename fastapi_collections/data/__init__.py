"""Collection providers and sort definitions."""

from .array import ListCollectionProvider
from .base import UNSET, BaseCollectionProvider
from .factory import create_object
from .interface import CollectionProviderInterface
from .paginated import DataProviderInterface, PaginatedDataProvider
from .sort import Sort

__all__ = [
    "BaseCollectionProvider",
    "CollectionProviderInterface",
    "DataProviderInterface",
    "ListCollectionProvider",
    "PaginatedDataProvider",
    "Sort",
    "UNSET",
    "create_object",
]
