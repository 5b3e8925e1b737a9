"""Collection provider over an in-memory sequence."""

from __future__ import annotations

from typing import Any, Callable, Mapping, Sequence

from fastapi_collections.data.base import UNSET, BaseCollectionProvider


def _read(model: Any, name: str) -> Any:
    if isinstance(model, Mapping):
        return model.get(name)
    return getattr(model, name, None)


class ListCollectionProvider(BaseCollectionProvider):
    """Serve a page of ``all_models``, sorted by the provider's sort definition.

    ``key`` is an attribute name (or mapping key) or a callable returning the
    key of a model. Without it the position in ``all_models`` is the key, so
    repeated entries still get distinct keys.
    """

    def __init__(
        self,
        all_models: Sequence[Any],
        *,
        key: str | Callable[[Any], Any] | None = None,
        offset: int = 0,
        limit: int | None = None,
        id: str | None = None,
        sort: Any = UNSET,
    ) -> None:
        super().__init__(id=id, sort=sort)
        self.all_models = list(all_models)
        self.key = key
        self.offset = offset
        self.limit = limit
        self._page: tuple[list[Any], list[int]] = ([], [])

    def prepare_models(self) -> list[Any]:
        positions = self._sorted(list(range(len(self.all_models))))
        end = None if self.limit is None else self.offset + self.limit
        positions = positions[self.offset : end]
        models = [self.all_models[index] for index in positions]
        self._page = (models, positions)
        return models

    def prepare_keys(self, models: list[Any]) -> list[Any]:
        if self.key is None:
            page_models, positions = self._page
            if models is page_models:
                return list(positions)
            # injected through set_models(), positions relative to the offset
            return list(range(self.offset, self.offset + len(models)))
        if callable(self.key):
            return [self.key(model) for model in models]
        return [_read(model, self.key) for model in models]

    def prepare_total_count(self) -> int:
        return len(self.all_models)

    def _sorted(self, positions: list[int]) -> list[int]:
        """Order positions of ``all_models``; models lacking a value sort last."""
        sort = self.get_sort()
        if sort is False:
            return positions
        result = positions
        # Stable sorts applied from the least significant order
        for name, direction in reversed(list(sort.get_attribute_orders().items())):
            present = [i for i in result if _read(self.all_models[i], name) is not None]
            if not present:
                continue
            missing = [i for i in result if _read(self.all_models[i], name) is None]
            present.sort(
                key=lambda i: _read(self.all_models[i], name),
                reverse=direction == "desc",
            )
            result = present + missing
        return result
