"""Shared template for store-side converters that keep metadata in a shadow field.

A field 'key' whose value Firestore cannot hold natively is written as a
native primary value plus a companion field '#key' carrying the type tag
and metadata. The shadow's shape mirrors the primary:

- scalar: '#key' is one tagged entry;
- array:  '#key' is a positionally aligned list; None marks a plain element;
- map:    '#key' is a map of tagged entries; keys without an entry are plain.

On read the shadow is consumed (DELETE_FIELD in the result); on every write
it is rewritten.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, ClassVar

from fieldcodec.application.interfaces.converters import (
    FirestoreModelFieldValueConverter,
)
from fieldcodec.application.interfaces.store import IDocumentStore
from fieldcodec.core.constants import SHADOW_PREFIX, SOURCE_KEY, TARGET_KEY, TYPE_KEY
from fieldcodec.domain.enums import ValueSource
from fieldcodec.domain.exceptions import TopLevelOnlyFieldException
from fieldcodec.infrastructure.firebase.types import DELETE_FIELD
from fieldcodec.shared.telemetry import get_logger
from fieldcodec.shared.utils.shapes import is_dynamic_map, is_tagged, type_of

logger = get_logger(__name__)


class ShadowedField:
    """Paired accessors for a field and its '#field' companion."""

    def __init__(self, key: str) -> None:
        self.key = key
        self.shadow_key = f"{SHADOW_PREFIX}{key}"

    def metadata(self, original: dict[str, Any] | None) -> Any:
        """Return the shadow value stored next to the field, or None."""
        if not original:
            return None
        return original.get(self.shadow_key)

    def consumed(self, value: Any) -> dict[str, Any]:
        """Read result: the decoded value with the shadow cleared."""
        return {self.key: value, self.shadow_key: DELETE_FIELD}

    def written(self, value: Any, metadata: Any) -> dict[str, Any]:
        """Write result: the native value with a fresh shadow."""
        return {self.key: value, self.shadow_key: metadata}


def is_user_sourced(wire: Any) -> bool:
    """Return True if a wire shape was built by application code."""
    return ValueSource.parse(wire.get(SOURCE_KEY)) == ValueSource.USER


class ShadowedFieldConverter(FirestoreModelFieldValueConverter):
    """Template for store-side converters of one '@type'.

    Subclasses implement is_native, decode and encode for a single element;
    this class handles scalar, array and map fields symmetrically. Types
    marked top_level_only raise TopLevelOnlyFieldException when found in an
    array or map, in either direction.
    """

    top_level_only: ClassVar[bool] = False

    @abstractmethod
    def is_native(self, value: Any) -> bool:
        """Return True if value has the native shape this type is stored as."""

    @abstractmethod
    def decode(
        self, native: Any, metadata: dict[str, Any], store: IDocumentStore | None
    ) -> dict[str, Any] | None:
        """Native value + its shadow entry -> wire shape (None if malformed)."""

    @abstractmethod
    def encode(
        self, wire: dict[str, Any], store: IDocumentStore | None
    ) -> tuple[Any, dict[str, Any]]:
        """Wire shape -> (native value, metadata for the shadow entry)."""

    def entry(self, key: str, metadata: dict[str, Any]) -> dict[str, Any]:
        """Return a complete shadow entry for metadata."""
        return {TYPE_KEY: self.type, **metadata, TARGET_KEY: key}

    def _reject_nested(self, key: str) -> None:
        if self.top_level_only:
            raise TopLevelOnlyFieldException(self.type, key)

    def convert_from(
        self,
        key: str,
        value: Any,
        original: dict[str, Any],
        store: IDocumentStore | None = None,
    ) -> dict[str, Any] | None:
        field = ShadowedField(key)
        metadata = field.metadata(original)
        if is_tagged(metadata):
            if type_of(metadata) != self.type or not self.is_native(value):
                return None
            wire = self.decode(value, metadata, store)
            if wire is None:
                return None
            return field.consumed(wire)
        if isinstance(value, list) and isinstance(metadata, list):
            return self._list_from(field, value, metadata, store)
        if is_dynamic_map(value) and is_dynamic_map(metadata):
            return self._map_from(field, value, metadata, store)
        return None

    def _claims(self, key: str, entries: list[Any]) -> bool:
        """True if every present entry carries this type (raises for top-level-only)."""
        present = [e for e in entries if e is not None]
        if not present:
            return False
        if self.top_level_only and any(type_of(e) == self.type for e in present):
            self._reject_nested(key)
        return all(type_of(e) == self.type for e in present)

    def _decode_element(
        self, element: Any, entry: Any, store: IDocumentStore | None
    ) -> Any:
        if entry is None:
            return element
        if not self.is_native(element):
            logger.debug("Keeping %s element with unexpected shape: %r", self.type, element)
            return element
        wire = self.decode(element, entry, store)
        return element if wire is None else wire

    def _list_from(
        self,
        field: ShadowedField,
        value: list[Any],
        metadata: list[Any],
        store: IDocumentStore | None,
    ) -> dict[str, Any] | None:
        if not self._claims(field.key, metadata):
            return None
        result = [
            self._decode_element(
                element, metadata[i] if i < len(metadata) else None, store
            )
            for i, element in enumerate(value)
        ]
        return field.consumed(result)

    def _map_from(
        self,
        field: ShadowedField,
        value: dict[str, Any],
        metadata: dict[str, Any],
        store: IDocumentStore | None,
    ) -> dict[str, Any] | None:
        if not self._claims(field.key, list(metadata.values())):
            return None
        result = {
            k: self._decode_element(element, metadata.get(k), store)
            for k, element in value.items()
        }
        return field.consumed(result)

    def convert_to(
        self,
        key: str,
        value: Any,
        original: dict[str, Any],
        store: IDocumentStore | None = None,
    ) -> dict[str, Any] | None:
        field = ShadowedField(key)
        if is_tagged(value):
            if type_of(value) != self.type:
                return None
            native, metadata = self.encode(value, store)
            return field.written(native, self.entry(key, metadata))
        if isinstance(value, (list, tuple)):
            return self._list_to(field, list(value), store)
        if is_dynamic_map(value):
            return self._map_to(field, value, store)
        return None

    def _claims_wire(self, key: str, elements: list[Any]) -> bool:
        tagged = [e for e in elements if is_tagged(e)]
        if not tagged:
            return False
        if self.top_level_only and any(type_of(e) == self.type for e in tagged):
            self._reject_nested(key)
        return all(type_of(e) == self.type for e in tagged)

    def _encode_element(
        self, key: str, element: Any, store: IDocumentStore | None
    ) -> tuple[Any, dict[str, Any] | None]:
        if not is_tagged(element):
            return element, None
        native, metadata = self.encode(element, store)
        return native, self.entry(key, metadata)

    def _list_to(
        self, field: ShadowedField, value: list[Any], store: IDocumentStore | None
    ) -> dict[str, Any] | None:
        if not self._claims_wire(field.key, value):
            return None
        natives: list[Any] = []
        entries: list[Any] = []
        for element in value:
            native, entry = self._encode_element(field.key, element, store)
            natives.append(native)
            entries.append(entry)
        return field.written(natives, entries)

    def _map_to(
        self, field: ShadowedField, value: dict[str, Any], store: IDocumentStore | None
    ) -> dict[str, Any] | None:
        if not self._claims_wire(field.key, list(value.values())):
            return None
        natives: dict[str, Any] = {}
        entries: dict[str, Any] = {}
        for k, element in value.items():
            native, entry = self._encode_element(field.key, element, store)
            natives[k] = native
            if entry is not None:
                entries[k] = entry
        return field.written(natives, entries)
