"""Response envelope construction."""

from typing import Any, Mapping


class EnvelopeBuilder:
    """Wrap serialized collections with their metadata."""

    def build_collection(
        self,
        items: list[Any],
        *,
        collection_envelope: str,
        meta_envelope: str,
        meta: Mapping[str, Any],
        links_envelope: str | None = None,
        links: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Return ``{collection_envelope: items, [links_envelope: links,] meta_envelope: meta}``."""
        document: dict[str, Any] = {collection_envelope: items}
        if links_envelope and links:
            document[links_envelope] = dict(links)
        document[meta_envelope] = dict(meta)
        return document
