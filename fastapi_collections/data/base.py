"""Abstract collection provider with lazily cached page data."""

from __future__ import annotations

import enum
import logging
from abc import ABC, abstractmethod
from typing import Any, Literal, Mapping

from fastapi_collections.data.factory import create_object
from fastapi_collections.data.sort import Sort
from fastapi_collections.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


class _Unset(enum.Enum):
    UNSET = "UNSET"

    def __repr__(self) -> str:
        return "UNSET"


UNSET = _Unset.UNSET
"""Marks a cached field that has not been computed or assigned yet."""


class BaseCollectionProvider(ABC):
    """Base class for collection providers.

    Subclasses implement ``prepare_models()``, ``prepare_keys()`` and
    ``prepare_total_count()``. Each result is computed on first access and
    kept until ``refresh()``. Empty pages and a zero total are cached like
    any other value.

    ``id`` identifies the provider among several on the same page. Set it
    in that case so each provider reads its own sort parameter
    (``"<id>-sort"``).
    """

    def __init__(
        self,
        *,
        id: str | None = None,
        sort: Mapping[str, Any] | Sort | Literal[False] | _Unset = UNSET,
    ) -> None:
        self.id = id
        self._models: list[Any] | _Unset = UNSET
        self._keys: list[Any] | _Unset = UNSET
        self._total_count: int | _Unset = UNSET
        self._sort: Sort | Literal[False] | _Unset = UNSET
        if sort is not UNSET:
            self.set_sort(sort)

    @abstractmethod
    def prepare_models(self) -> list[Any]:
        """Return the models of the current page."""

    @abstractmethod
    def prepare_keys(self, models: list[Any]) -> list[Any]:
        """Return the key of each of ``models``, in the same order."""

    @abstractmethod
    def prepare_total_count(self) -> int:
        """Return the number of models across all pages."""

    def prepare(self, force_prepare: bool = False) -> None:
        """Compute models and keys that are missing, or all of them if forced.

        Keys are always derived from the currently cached models.
        """
        if force_prepare or self._models is UNSET:
            logger.debug("Preparing models for %s", self._label())
            self._models = self.prepare_models()
        if force_prepare or self._keys is UNSET:
            logger.debug("Preparing keys for %s", self._label())
            self._keys = self.prepare_keys(self._models)

    def get_models(self) -> list[Any]:
        self.prepare()
        return self._models

    def set_models(self, models: list[Any]) -> None:
        self._models = models

    def get_keys(self) -> list[Any]:
        self.prepare()
        return self._keys

    def set_keys(self, keys: list[Any]) -> None:
        self._keys = keys

    def get_count(self) -> int:
        return len(self.get_models())

    def get_total_count(self) -> int:
        if self._total_count is UNSET:
            logger.debug("Preparing total count for %s", self._label())
            self._total_count = self.prepare_total_count()
        return self._total_count

    def set_total_count(self, value: int) -> None:
        self._total_count = value

    def get_sort(self) -> Sort | Literal[False]:
        """Return the sort definition, creating the default one on first access.

        False means sorting is disabled.
        """
        if self._sort is UNSET:
            self.set_sort({})
        return self._sort

    def set_sort(self, value: Mapping[str, Any] | Sort | Literal[False]) -> None:
        """Set the sort definition.

        ``value`` is one of:

        - a configuration mapping for ``create_object()``; ``class`` defaults
          to ``Sort`` and ``sort_param`` to ``"<id>-sort"`` when ``id`` is set.
        - a ``Sort`` instance, stored as is.
        - False, to disable sorting.
        """
        if isinstance(value, Mapping):
            config: dict[str, Any] = {"class": Sort}
            if self.id is not None:
                config["sort_param"] = f"{self.id}-sort"
            sort = create_object({**config, **value})
            if not isinstance(sort, Sort):
                raise InvalidArgumentError(
                    f"Sort configuration must build a Sort, got {type(sort).__name__}."
                )
            self._sort = sort
        elif value is False or isinstance(value, Sort):
            self._sort = value
        else:
            raise InvalidArgumentError(
                "Only Sort instance, configuration mapping or False is allowed."
            )

    def refresh(self) -> None:
        """Drop cached models, keys and total count; the sort definition is kept."""
        self._total_count = UNSET
        self._models = UNSET
        self._keys = UNSET

    def _label(self) -> str:
        name = type(self).__name__
        return name if self.id is None else f"{name}({self.id})"
