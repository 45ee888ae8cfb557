"""Counter stored as a number; user increments become atomic Increment transforms."""

from typing import Any

from fieldcodec.application.interfaces.store import IDocumentStore
from fieldcodec.core.constants import INCREMENT_KEY, VALUE_KEY
from fieldcodec.domain.enums import ModelFieldValueType
from fieldcodec.infrastructure.firebase.converters.base import (
    ShadowedFieldConverter,
    is_user_sourced,
)
from fieldcodec.infrastructure.firebase.types import Increment
from fieldcodec.shared.utils.shapes import field_or_default

_NUMBER = (int, float)


def _is_number(value: Any) -> bool:
    return isinstance(value, _NUMBER) and not isinstance(value, bool)


class FirestoreModelCounterConverter(ShadowedFieldConverter):
    type = ModelFieldValueType.COUNTER.value

    def is_native(self, value: Any) -> bool:
        return _is_number(value)

    def decode(
        self, native: Any, metadata: dict[str, Any], store: IDocumentStore | None
    ) -> dict[str, Any]:
        return {
            **self.header(),
            VALUE_KEY: native,
            INCREMENT_KEY: field_or_default(metadata, INCREMENT_KEY, _NUMBER, 0),
        }

    def encode(
        self, wire: dict[str, Any], store: IDocumentStore | None
    ) -> tuple[Any, dict[str, Any]]:
        count = field_or_default(wire, VALUE_KEY, _NUMBER, 0)
        increment = field_or_default(wire, INCREMENT_KEY, _NUMBER, 0)
        metadata = {VALUE_KEY: count, INCREMENT_KEY: increment}
        # Server values are written back literally; only a pending user delta increments.
        if is_user_sourced(wire) and increment:
            return Increment(increment), metadata
        return count, metadata
