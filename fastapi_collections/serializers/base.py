"""Serializer turning models and providers into plain response data."""

from __future__ import annotations

import logging
from typing import Any, Iterable

from pydantic import BaseModel
from starlette.requests import Request
from starlette.responses import Response

from fastapi_collections.core.capabilities import Arrayable, Validatable
from fastapi_collections.core.envelope import EnvelopeBuilder
from fastapi_collections.core.errors import ErrorBuilder
from fastapi_collections.data.interface import CollectionProviderInterface
from fastapi_collections.data.paginated import DataProviderInterface
from fastapi_collections.pagination.base import PaginationBase
from fastapi_collections.settings import SerializerSettings
from fastapi_collections.utils.query_params import get_csv_param

logger = logging.getLogger(__name__)


class Serializer:
    """Convert objects of recognized types into plain data.

    Checks run in a fixed order and the first match wins: a validatable
    model holding errors, an array-representable value, a paginated data
    provider, a collection provider. Anything else is returned unchanged.

    ``request`` is read for the HEAD method and the ``fields``/``expand``
    query parameters. ``response``, when bound, receives the 422 status of
    model errors and the pagination headers of data providers.
    """

    total_count_header = "X-Pagination-Total-Count"
    page_count_header = "X-Pagination-Page-Count"
    current_page_header = "X-Pagination-Current-Page"
    per_page_header = "X-Pagination-Per-Page"

    def __init__(
        self,
        *,
        request: Request | None = None,
        response: Response | None = None,
        collection_envelope: str | None = None,
        meta_envelope: str = "_meta",
        links_envelope: str = "_links",
        fields_param: str = "fields",
        expand_param: str = "expand",
    ) -> None:
        self.request = request
        self.response = response
        self.collection_envelope = collection_envelope
        self.meta_envelope = meta_envelope
        self.links_envelope = links_envelope
        self.fields_param = fields_param
        self.expand_param = expand_param
        self.envelope_builder = EnvelopeBuilder()
        self.error_builder = ErrorBuilder()

    @classmethod
    def from_settings(
        cls,
        settings: SerializerSettings,
        *,
        request: Request | None = None,
        response: Response | None = None,
    ) -> Serializer:
        return cls(
            request=request,
            response=response,
            collection_envelope=settings.collection_envelope,
            meta_envelope=settings.meta_envelope,
            links_envelope=settings.links_envelope,
            fields_param=settings.fields_param,
            expand_param=settings.expand_param,
        )

    def serialize(self, data: Any) -> Any:
        """Serialize ``data`` into a form that can be rendered as JSON."""
        if isinstance(data, Validatable) and data.has_errors():
            return self.serialize_model_errors(data)
        if isinstance(data, (Arrayable, BaseModel)):
            return self.serialize_model(data)
        if isinstance(data, DataProviderInterface):
            return self.serialize_data_provider(data)
        if isinstance(data, CollectionProviderInterface):
            return self.serialize_collection_provider(data)
        return data

    def is_head(self) -> bool:
        return self.request is not None and self.request.method.upper() == "HEAD"

    def get_requested_fields(self) -> tuple[list[str], list[str]]:
        """Return the ``(fields, expand)`` lists requested by the client."""
        params = self.request.query_params if self.request is not None else None
        return (
            get_csv_param(params, self.fields_param),
            get_csv_param(params, self.expand_param),
        )

    def serialize_model_errors(self, model: Validatable) -> list[dict[str, str]]:
        """Return the first error of each invalid attribute; status becomes 422."""
        if self.response is not None:
            self.response.status_code = 422
        return self.error_builder.field_errors(model.get_errors())

    def serialize_model(self, model: Arrayable | BaseModel) -> dict[str, Any] | None:
        if self.is_head():
            return None
        fields, expand = self.get_requested_fields()
        if isinstance(model, Arrayable):
            return model.to_array(fields or None, expand or None)
        return model.model_dump(mode="json", include=set(fields) or None)

    def serialize_models(self, models: Iterable[Any]) -> list[Any]:
        """Serialize each model with the same rules as ``serialize()``."""
        return [self.serialize(model) for model in models]

    def serialize_data_provider(self, provider: DataProviderInterface) -> Any:
        """Serialize a paginated data provider, adding links, meta and headers."""
        models = self.serialize_models(provider.get_models())
        pagination = provider.get_pagination()
        total = provider.get_total_count()
        if self.response is not None:
            self.add_pagination_headers(pagination, total)

        if self.is_head():
            return None
        if self.collection_envelope is None:
            return models
        return self.envelope_builder.build_collection(
            models,
            collection_envelope=self.collection_envelope,
            meta_envelope=self.meta_envelope,
            meta=pagination.get_meta(total=total),
            links_envelope=self.links_envelope,
            links=pagination.get_links(total=total),
        )

    def serialize_collection_provider(
        self, provider: CollectionProviderInterface
    ) -> list[Any] | dict[str, Any] | None:
        """Serialize a collection provider, wrapped in an envelope when configured."""
        models = self.serialize_models(provider.get_models())

        if self.is_head():
            logger.debug("HEAD request, dropping collection body")
            return None
        if self.collection_envelope is None:
            return models
        return self.envelope_builder.build_collection(
            models,
            collection_envelope=self.collection_envelope,
            meta_envelope=self.meta_envelope,
            meta={
                "count": provider.get_count(),
                "totalCount": provider.get_total_count(),
            },
        )

    def add_pagination_headers(self, pagination: PaginationBase, total: int) -> None:
        meta = pagination.get_meta(total=total)
        headers = self.response.headers
        headers[self.total_count_header] = str(meta["totalCount"])
        headers[self.page_count_header] = str(meta["pageCount"])
        headers[self.current_page_header] = str(meta["currentPage"])
        headers[self.per_page_header] = str(meta["perPage"])
        links = pagination.get_links(total=total)
        if links:
            headers["Link"] = ", ".join(f'<{url}>; rel="{rel}"' for rel, url in links.items())
