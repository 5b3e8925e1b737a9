"""Error object builders for serialized responses."""

from typing import Any, Iterable, Mapping


class ErrorBuilder:
    """Build error objects and error documents."""

    def error_object(
        self,
        *,
        status: str | None = None,
        title: str | None = None,
        detail: str | None = None,
        meta: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Return an error object holding the given members."""
        error: dict[str, Any] = {}
        if status is not None:
            error["status"] = status
        if title is not None:
            error["title"] = title
        if detail is not None:
            error["detail"] = detail
        if meta is not None:
            error["meta"] = meta
        if not error:
            raise ValueError("Error object must include at least one field.")
        return error

    def field_errors(self, errors: Mapping[str, Iterable[str]]) -> list[dict[str, str]]:
        """Return one ``{"field", "message"}`` entry per attribute, first message only."""
        result = []
        for name, messages in errors.items():
            first = next(iter(messages), None)
            if first is None:
                continue
            result.append({"field": name, "message": first})
        return result

    def error_document(self, errors: list[dict[str, Any]]) -> dict[str, Any]:
        """Return a document with an errors array."""
        return {"errors": errors}
