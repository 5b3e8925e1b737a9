"""Contract shared by every collection provider."""

from __future__ import annotations

from typing import Any, Literal, Protocol, runtime_checkable

from fastapi_collections.data.sort import Sort


@runtime_checkable
class CollectionProviderInterface(Protocol):
    """A source of one page of models, their keys and count metadata.

    Any object exposing these methods satisfies the contract; inheriting
    from this class is not required.
    """

    def prepare(self, force_prepare: bool = False) -> None:
        """Prepare the models and keys of the current page.

        Called implicitly by ``get_models()`` and ``get_keys()``. When
        ``force_prepare`` is True the data is fetched again even if it was
        prepared before.
        """
        ...

    def get_count(self) -> int:
        """Return the number of models in the current page."""
        ...

    def get_total_count(self) -> int:
        """Return the number of models across all pages."""
        ...

    def get_models(self) -> list[Any]:
        """Return the models in the current page."""
        ...

    def get_keys(self) -> list[Any]:
        """Return the keys of ``get_models()``, in the same order."""
        ...

    def get_sort(self) -> Sort | Literal[False]:
        """Return the sort definition, or False if sorting is disabled."""
        ...
