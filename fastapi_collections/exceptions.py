"""Exceptions raised by collection providers and serializers."""

from __future__ import annotations

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse

from fastapi_collections.core.errors import ErrorBuilder


class InvalidArgumentError(ValueError):
    """An argument has an unsupported shape (e.g. a bad sort definition)."""


async def invalid_argument_handler(_request: Request, exc: Exception) -> JSONResponse:
    """Render an InvalidArgumentError as a server error body."""
    if not isinstance(exc, InvalidArgumentError):
        raise TypeError(f"Expected InvalidArgumentError, got {type(exc).__name__}")
    builder = ErrorBuilder()
    content: dict[str, Any] = builder.error_document(
        [
            builder.error_object(
                status="500",
                title="Internal Server Error",
                detail=str(exc),
            )
        ]
    )
    return JSONResponse(content, status_code=500)
