"""Timestamp, date and time stored as Firestore timestamps.

A user value with '@now' is written as SERVER_TIMESTAMP. Numeric native
values are read as milliseconds since epoch.
"""

from datetime import datetime
from typing import Any

from fieldcodec.application.interfaces.store import IDocumentStore
from fieldcodec.core.constants import NOW_KEY, TIME_KEY
from fieldcodec.domain.enums import ModelFieldValueType
from fieldcodec.infrastructure.firebase.converters.base import (
    ShadowedFieldConverter,
    is_user_sourced,
)
from fieldcodec.infrastructure.firebase.types import SERVER_TIMESTAMP
from fieldcodec.shared.utils.datetime import (
    from_microseconds,
    from_timestamp_ms_utc,
    to_microseconds,
)
from fieldcodec.shared.utils.shapes import field_or_default

_NUMBER = (int, float)


class FirestoreModelTimestampConverter(ShadowedFieldConverter):
    type = ModelFieldValueType.TIMESTAMP.value

    def is_native(self, value: Any) -> bool:
        if isinstance(value, datetime):
            return True
        return isinstance(value, _NUMBER) and not isinstance(value, bool)

    def decode(
        self, native: Any, metadata: dict[str, Any], store: IDocumentStore | None
    ) -> dict[str, Any]:
        moment = native if isinstance(native, datetime) else from_timestamp_ms_utc(native)
        return {**self.header(), TIME_KEY: to_microseconds(moment), NOW_KEY: False}

    def encode(
        self, wire: dict[str, Any], store: IDocumentStore | None
    ) -> tuple[Any, dict[str, Any]]:
        micros = int(field_or_default(wire, TIME_KEY, _NUMBER, 0))
        use_now = field_or_default(wire, NOW_KEY, bool, False)
        metadata = {TIME_KEY: micros}
        if is_user_sourced(wire) and use_now:
            return SERVER_TIMESTAMP, metadata
        return from_microseconds(micros), metadata


class FirestoreModelDateConverter(FirestoreModelTimestampConverter):
    type = ModelFieldValueType.DATE.value


class FirestoreModelTimeConverter(FirestoreModelTimestampConverter):
    type = ModelFieldValueType.TIME.value
