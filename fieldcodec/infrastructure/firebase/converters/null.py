"""Null and map-key deletion on write.

None deletes the field, and its shadow when the original has one or held
a tagged value there. A plain map is diffed against the original map: keys
that disappeared or are set to None are deleted, other keys are left to the
merge.
"""

from typing import Any

from fieldcodec.application.interfaces.converters import (
    FirestoreModelFieldValueConverter,
)
from fieldcodec.application.interfaces.store import IDocumentStore
from fieldcodec.infrastructure.firebase.converters.base import ShadowedField
from fieldcodec.infrastructure.firebase.types import DELETE_FIELD, is_native_store_value
from fieldcodec.shared.utils.shapes import is_dynamic_map, is_tagged


class FirestoreNullConverter(FirestoreModelFieldValueConverter):
    def convert_from(
        self,
        key: str,
        value: Any,
        original: dict[str, Any],
        store: IDocumentStore | None = None,
    ) -> dict[str, Any] | None:
        return None

    def convert_to(
        self,
        key: str,
        value: Any,
        original: dict[str, Any],
        store: IDocumentStore | None = None,
    ) -> dict[str, Any] | None:
        if is_native_store_value(value):
            return None
        if value is None:
            field = ShadowedField(key)
            result: dict[str, Any] = {key: DELETE_FIELD}
            if original and (
                field.shadow_key in original or is_tagged(original.get(key))
            ):
                result[field.shadow_key] = DELETE_FIELD
            return result
        if is_dynamic_map(value) and not is_tagged(value):
            previous = original.get(key) if original else None
            if not is_dynamic_map(previous):
                return None
            updated = dict(value)
            for k in previous:
                if k not in value:
                    updated[k] = DELETE_FIELD
            for k, v in value.items():
                if v is None:
                    updated[k] = DELETE_FIELD
            return {key: updated}
        return None
