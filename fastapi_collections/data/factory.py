"""Build objects from configuration mappings."""

from __future__ import annotations

import importlib
from typing import Any, Mapping

from fastapi_collections.exceptions import InvalidArgumentError


def _resolve_class(target: Any) -> Any:
    if isinstance(target, str):
        module_name, _, attr = target.rpartition(".")
        if not module_name:
            raise InvalidArgumentError(f"Class path must be dotted: {target!r}.")
        try:
            module = importlib.import_module(module_name)
        except ImportError as exc:
            raise InvalidArgumentError(f"Cannot import {module_name!r}.") from exc
        try:
            return getattr(module, attr)
        except AttributeError as exc:
            raise InvalidArgumentError(f"{module_name!r} has no attribute {attr!r}.") from exc
    return target


def create_object(config: Mapping[str, Any], **overrides: Any) -> Any:
    """Instantiate ``config["class"]`` with the remaining entries as keyword arguments.

    ``class`` may be a class object or a dotted import path. ``overrides``
    take precedence over entries of ``config``.
    """
    options = {**config, **overrides}
    if "class" not in options:
        raise InvalidArgumentError("Object configuration must contain a 'class' element.")
    cls = _resolve_class(options.pop("class"))
    if not callable(cls):
        raise InvalidArgumentError(f"{cls!r} is not callable.")
    return cls(**options)
