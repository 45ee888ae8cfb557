"""Search terms and tokens stored as string lists (for array-contains queries).

Top-level only: the stored value is itself a list.
"""

from typing import Any

from fieldcodec.application.interfaces.store import IDocumentStore
from fieldcodec.core.constants import LIST_KEY
from fieldcodec.domain.enums import ModelFieldValueType
from fieldcodec.infrastructure.firebase.converters.base import ShadowedFieldConverter
from fieldcodec.shared.utils.shapes import field_or_default


class FirestoreModelSearchConverter(ShadowedFieldConverter):
    type = ModelFieldValueType.SEARCH.value
    top_level_only = True

    def is_native(self, value: Any) -> bool:
        return isinstance(value, list) and all(isinstance(v, str) for v in value)

    def decode(
        self, native: Any, metadata: dict[str, Any], store: IDocumentStore | None
    ) -> dict[str, Any]:
        return {**self.header(), LIST_KEY: list(native)}

    def encode(
        self, wire: dict[str, Any], store: IDocumentStore | None
    ) -> tuple[Any, dict[str, Any]]:
        values = [v for v in field_or_default(wire, LIST_KEY, (list, tuple), []) if isinstance(v, str)]
        return values, {LIST_KEY: list(values)}


class FirestoreModelTokenConverter(FirestoreModelSearchConverter):
    type = ModelFieldValueType.TOKEN.value
