"""Collection providers and an envelope-aware serializer for FastAPI."""

from .data import (
    UNSET,
    BaseCollectionProvider,
    CollectionProviderInterface,
    DataProviderInterface,
    ListCollectionProvider,
    PaginatedDataProvider,
    Sort,
    create_object,
)
from .dependencies import SerializerDep, SettingsDep, get_serializer, get_settings
from .exceptions import InvalidArgumentError, invalid_argument_handler
from .pagination import PaginationBase, StandardPagination
from .serializers import Serializer
from .settings import SerializerSettings

__all__ = [
    # Providers
    "BaseCollectionProvider",
    "CollectionProviderInterface",
    "DataProviderInterface",
    "ListCollectionProvider",
    "PaginatedDataProvider",
    "UNSET",
    # Sort
    "Sort",
    "create_object",
    # Pagination
    "PaginationBase",
    "StandardPagination",
    # Serializer
    "Serializer",
    "SerializerSettings",
    "get_settings",
    "get_serializer",
    "SettingsDep",
    "SerializerDep",
    # Exceptions
    "InvalidArgumentError",
    "invalid_argument_handler",
]
