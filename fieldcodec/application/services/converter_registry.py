"""Converter registry: ordered (application, store) converter pairs.

Dispatch is a linear scan in registration order; the first converter that
returns a result claims the field and fields nobody claims pass through
unchanged. The registry is read-only after construction and safe to share.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from fieldcodec.application.interfaces.converters import (
    FirestoreModelFieldValueConverter,
    ModelFieldValueConverter,
)
from fieldcodec.application.interfaces.store import IDocumentStore
from fieldcodec.core.constants import SHADOW_PREFIX
from fieldcodec.shared.telemetry import get_logger
from fieldcodec.shared.utils.shapes import is_dynamic_map, is_tagged

logger = get_logger(__name__)


@dataclass(frozen=True)
class ConverterPair:
    """Application-side and store-side converter of one type."""

    model: ModelFieldValueConverter
    firestore: FirestoreModelFieldValueConverter


def _is_shadow(key: str) -> bool:
    return key.startswith(SHADOW_PREFIX)


class ConverterRegistry:
    """Runs documents through both converter layers.

    Read:  firestore_from (native -> wire) then model_from (wire -> tagged).
    Write: model_to (tagged -> wire) then firestore_to (wire -> native).
    """

    def __init__(self, pairs: Iterable[ConverterPair], *, delete_marker: object) -> None:
        """Create a registry.

        Args:
            pairs: Converter pairs in dispatch order.
            delete_marker: Store sentinel a converter returns for a consumed shadow field.
        """
        self._pairs = tuple(pairs)
        self._delete_marker = delete_marker

    @property
    def pairs(self) -> tuple[ConverterPair, ...]:
        return self._pairs

    # Application layer

    def model_from(self, data: dict[str, Any]) -> dict[str, Any]:
        """Wire record -> record of tagged values.

        Leftover shadow fields with a falsy value are dropped.
        """
        result: dict[str, Any] = {}
        for key, value in data.items():
            if _is_shadow(key):
                if value:
                    result[key] = value
                continue
            result[key] = self._model_value_from(key, value, data)
        return result

    def model_to(self, data: dict[str, Any]) -> dict[str, Any]:
        """Record of tagged values -> wire record."""
        return {
            key: self._model_value_to(key, value, data) for key, value in data.items()
        }

    def _model_value_from(self, key: str, value: Any, original: dict[str, Any]) -> Any:
        for pair in self._pairs:
            converted = pair.model.convert_from(key, value, original)
            if converted is not None:
                logger.debug("model_from(%s): %s", type(pair.model).__name__, key)
                return converted.get(key)
        if isinstance(value, list):
            return [self._model_value_from(key, v, original) for v in value]
        if is_dynamic_map(value) and not is_tagged(value):
            return {k: self._model_value_from(key, v, original) for k, v in value.items()}
        return value

    def _model_value_to(self, key: str, value: Any, original: dict[str, Any]) -> Any:
        for pair in self._pairs:
            converted = pair.model.convert_to(key, value, original)
            if converted is not None:
                logger.debug("model_to(%s): %s", type(pair.model).__name__, key)
                return converted.get(key)
        if isinstance(value, (list, tuple)):
            return [self._model_value_to(key, v, original) for v in value]
        if is_dynamic_map(value):
            return {k: self._model_value_to(key, v, original) for k, v in value.items()}
        return value

    # Store layer

    def firestore_from(
        self, data: dict[str, Any], store: IDocumentStore | None = None
    ) -> dict[str, Any]:
        """Native record (with shadow fields) -> wire record.

        Shadow fields consumed by a converter are removed from the result;
        unconsumed ones pass through.
        """
        result: dict[str, Any] = {}
        consumed: set[str] = set()
        for key, value in data.items():
            if _is_shadow(key):
                continue
            for k, v in self._firestore_field_from(key, value, data, store).items():
                if v is self._delete_marker:
                    consumed.add(k)
                else:
                    result[k] = v
        for key, value in data.items():
            if _is_shadow(key) and key not in consumed and key not in result:
                result[key] = value
        return result

    def firestore_to(
        self,
        data: dict[str, Any],
        store: IDocumentStore | None = None,
        original: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Wire record -> native record with fresh shadow fields.

        original is the record the write replaces (defaults to data); the
        null converter diffs maps against it. Stale shadow fields in data
        are not written when their primary field is present.
        """
        if original is None:
            original = data
        result: dict[str, Any] = {}
        for key, value in data.items():
            if _is_shadow(key):
                if key[len(SHADOW_PREFIX):] not in data:
                    result.setdefault(key, value)
                continue
            result.update(self._firestore_field_to(key, value, original, store))
        return result

    def _firestore_field_from(
        self,
        key: str,
        value: Any,
        original: dict[str, Any],
        store: IDocumentStore | None,
    ) -> dict[str, Any]:
        for pair in self._pairs:
            converted = pair.firestore.convert_from(key, value, original, store)
            if converted is not None:
                logger.debug("firestore_from(%s): %s", type(pair.firestore).__name__, key)
                return converted
        return {key: value}

    def _firestore_field_to(
        self,
        key: str,
        value: Any,
        original: dict[str, Any],
        store: IDocumentStore | None,
    ) -> dict[str, Any]:
        for pair in self._pairs:
            converted = pair.firestore.convert_to(key, value, original, store)
            if converted is not None:
                logger.debug("firestore_to(%s): %s", type(pair.firestore).__name__, key)
                return converted
        return {key: value}
