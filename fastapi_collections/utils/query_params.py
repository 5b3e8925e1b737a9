"""Helpers for query parameter parsing."""

from __future__ import annotations

from typing import Any, Mapping


def split_csv(value: str) -> list[str]:
    return [item for item in (part.strip() for part in value.split(",")) if item]


def split_sort(value: str, separator: str = ",") -> list[tuple[str, str]]:
    """Split a sort parameter into ``(attribute, direction)`` pairs.

    A leading ``-`` marks descending order: ``"-created,name"`` yields
    ``[("created", "desc"), ("name", "asc")]``.
    """
    orders: list[tuple[str, str]] = []
    for part in value.split(separator):
        part = part.strip()
        if not part or part == "-":
            continue
        if part.startswith("-"):
            orders.append((part[1:], "desc"))
        else:
            orders.append((part, "asc"))
    return orders


def get_csv_param(params: Mapping[str, Any] | None, name: str) -> list[str]:
    """Return the comma separated values of ``params[name]`` (empty when absent)."""
    if not params:
        return []
    value = params.get(name)
    if value is None:
        return []
    return split_csv(str(value))
