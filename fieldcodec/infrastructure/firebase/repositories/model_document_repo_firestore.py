"""Firestore-backed model document repository.

Runs whole documents through both converter layers:
load = get -> firestore_from -> model_from; save = model_to -> firestore_to -> set.
"""

from __future__ import annotations

from typing import Any

from fieldcodec.application.services.converter_registry import ConverterRegistry
from fieldcodec.infrastructure.firebase._rest_client import FirestoreRESTClient
from fieldcodec.infrastructure.firebase.client import require_firestore_client
from fieldcodec.infrastructure.firebase.registry import get_converter_registry
from fieldcodec.shared.telemetry import add_span_attributes, get_logger, traced

logger = get_logger(__name__)


class FirestoreModelDocumentRepository:
    """Loads and saves documents of tagged values.

    Uses the client from init_firebase() and the default registry unless
    others are injected.
    """

    def __init__(
        self,
        client: FirestoreRESTClient | None = None,
        registry: ConverterRegistry | None = None,
    ) -> None:
        self._client = client
        self._registry = registry

    @property
    def client(self) -> FirestoreRESTClient:
        """Injected client, else the global one (raises StoreNotConfiguredException)."""
        return self._client or require_firestore_client()

    @property
    def registry(self) -> ConverterRegistry:
        return self._registry or get_converter_registry()

    def _decode(self, raw: dict[str, Any]) -> dict[str, Any]:
        wire = self.registry.firestore_from(raw, self.client)
        return self.registry.model_from(wire)

    @traced("firestore.model_document.load")
    async def load(self, path: str) -> dict[str, Any] | None:
        """Return the document as tagged values, or None if it does not exist."""
        raw = await self.client.get(path)
        if raw is None:
            return None
        return self._decode(raw)

    @traced("firestore.model_document.save")
    async def save(
        self,
        path: str,
        data: dict[str, Any],
        merge: bool = False,
        original: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Write tagged values; return the native fields sent to the store.

        Args:
            path: Document path (e.g. 'users/alice').
            data: Record of tagged and plain values.
            merge: Update only the given fields instead of replacing the document.
            original: Previously loaded record; map keys missing from data are
                deleted relative to it.
        """
        registry = self.registry
        wire = registry.model_to(data)
        previous = registry.model_to(original) if original is not None else None
        native = registry.firestore_to(wire, self.client, original=previous)
        await self.client.set(path, native, merge=merge)
        add_span_attributes(field_count=len(native))
        logger.debug("Saved model document %s (%d fields)", path, len(native))
        return native

    @traced("firestore.model_document.load_collection")
    async def load_collection(self, collection_path: str) -> dict[str, dict[str, Any]]:
        """Return every document of a collection as {document_id: tagged record}."""
        results: dict[str, dict[str, Any]] = {}
        async for snapshot in self.client.collection(collection_path).stream():
            results[snapshot.id] = self._decode(snapshot.to_dict())
        add_span_attributes(count=len(results))
        return results
