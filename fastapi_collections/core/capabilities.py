"""Capability protocols the serializer dispatches on."""

from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence, runtime_checkable


@runtime_checkable
class Validatable(Protocol):
    """A model that can hold validation errors."""

    def has_errors(self) -> bool: ...

    def get_errors(self) -> Mapping[str, Sequence[str]]: ...


@runtime_checkable
class Arrayable(Protocol):
    """A value that knows how to turn itself into plain data.

    ``fields`` restricts the returned attributes; ``expand`` names extra
    attributes to add on request.
    """

    def to_array(
        self,
        fields: Sequence[str] | None = None,
        expand: Sequence[str] | None = None,
    ) -> dict[str, Any]: ...
