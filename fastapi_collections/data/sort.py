"""Sort configuration parsed from request query parameters."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from fastapi_collections.exceptions import InvalidArgumentError
from fastapi_collections.utils.query_params import split_sort

ASC = "asc"
DESC = "desc"


class Sort:
    """Describe the requested ordering and the query parameter carrying it.

    ``attributes`` lists the attributes a client may sort by. A mapping
    translates public attribute names to column names; ``None`` accepts any
    attribute. ``params`` is the query parameter mapping to read from,
    typically ``request.query_params``.
    """

    def __init__(
        self,
        *,
        sort_param: str = "sort",
        attributes: Iterable[str] | Mapping[str, str] | None = None,
        default_order: Mapping[str, str] | None = None,
        enable_multi_sort: bool = False,
        separator: str = ",",
        params: Mapping[str, Any] | None = None,
    ) -> None:
        self.sort_param = sort_param
        self.attributes = self._normalize_attributes(attributes)
        self.default_order = dict(default_order or {})
        self.enable_multi_sort = enable_multi_sort
        self.separator = separator
        self.params = params
        for direction in self.default_order.values():
            if direction not in (ASC, DESC):
                raise InvalidArgumentError(f"Unknown sort direction {direction!r}.")

    @staticmethod
    def _normalize_attributes(
        attributes: Iterable[str] | Mapping[str, str] | None,
    ) -> dict[str, str] | None:
        if attributes is None:
            return None
        if isinstance(attributes, Mapping):
            return dict(attributes)
        return {name: name for name in attributes}

    def has_attribute(self, name: str) -> bool:
        """Return True if clients may sort by ``name``."""
        return self.attributes is None or name in self.attributes

    def get_orders(self) -> dict[str, str]:
        """Return the requested orders as ``{attribute: "asc" | "desc"}``.

        Unknown attributes are dropped. Only the first order is kept unless
        multi-sort is enabled. Falls back to ``default_order`` when the
        request carries no usable order.
        """
        raw = self.params.get(self.sort_param) if self.params else None
        orders: dict[str, str] = {}
        if raw:
            for attribute, direction in split_sort(str(raw), self.separator):
                if not self.has_attribute(attribute) or attribute in orders:
                    continue
                orders[attribute] = direction
                if not self.enable_multi_sort:
                    break
        if not orders:
            return dict(self.default_order)
        return orders

    def get_attribute_orders(self) -> dict[str, str]:
        """Return the orders keyed by column name instead of public name."""
        orders = self.get_orders()
        if self.attributes is None:
            return orders
        return {self.attributes.get(name, name): direction for name, direction in orders.items()}

    def get_order(self, attribute: str) -> str | None:
        return self.get_orders().get(attribute)

    def create_sort_param(self, attribute: str) -> str:
        """Return the parameter value that toggles sorting by ``attribute``.

        The toggled attribute moves to the front; other requested orders are
        kept only when multi-sort is enabled.
        """
        if not self.has_attribute(attribute):
            raise InvalidArgumentError(f"Unknown sort attribute {attribute!r}.")
        orders = self.get_orders()
        direction = DESC if orders.get(attribute) == ASC else ASC
        new_orders = {attribute: direction}
        if self.enable_multi_sort:
            for name, current in orders.items():
                if name != attribute:
                    new_orders[name] = current
        return self.separator.join(
            f"-{name}" if current == DESC else name for name, current in new_orders.items()
        )

    def __repr__(self) -> str:
        return f"Sort(sort_param={self.sort_param!r}, orders={self.get_orders()!r})"
