"""Vectors stored as native Firestore vectors. Top-level only."""

from typing import Any

from fieldcodec.application.interfaces.store import IDocumentStore
from fieldcodec.core.constants import VECTOR_KEY
from fieldcodec.domain.enums import ModelFieldValueType
from fieldcodec.infrastructure.firebase.converters.base import ShadowedFieldConverter
from fieldcodec.infrastructure.firebase.types import VectorValue
from fieldcodec.shared.utils.shapes import field_or_default


class FirestoreModelVectorValueConverter(ShadowedFieldConverter):
    type = ModelFieldValueType.VECTOR_VALUE.value
    top_level_only = True

    def is_native(self, value: Any) -> bool:
        return isinstance(value, VectorValue)

    def decode(
        self, native: Any, metadata: dict[str, Any], store: IDocumentStore | None
    ) -> dict[str, Any]:
        return {**self.header(), VECTOR_KEY: list(native.values)}

    def encode(
        self, wire: dict[str, Any], store: IDocumentStore | None
    ) -> tuple[Any, dict[str, Any]]:
        components = field_or_default(wire, VECTOR_KEY, (list, tuple), [])
        return VectorValue(tuple(components)), {}
