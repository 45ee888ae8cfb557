"""Ranges stored as '<start ISO>|<end ISO>' strings (millisecond precision).

The shadow keeps microsecond '@start'/'@end'; they are used on read when
they agree with the stored string at millisecond precision.
"""

from typing import Any

from fieldcodec.application.interfaces.store import IDocumentStore
from fieldcodec.core.constants import END_KEY, RANGE_SEP, START_KEY
from fieldcodec.domain.enums import ModelFieldValueType
from fieldcodec.infrastructure.firebase.converters.base import ShadowedFieldConverter
from fieldcodec.shared.utils.datetime import (
    from_microseconds,
    parse_iso_utc,
    to_iso_millis,
    to_microseconds,
)
from fieldcodec.shared.utils.shapes import field_or_default

_NUMBER = (int, float)


def _precise(parsed_micros: int, shadow: Any) -> int:
    if isinstance(shadow, _NUMBER) and not isinstance(shadow, bool):
        if int(shadow) // 1000 == parsed_micros // 1000:
            return int(shadow)
    return parsed_micros


class FirestoreModelTimeRangeConverter(ShadowedFieldConverter):
    type = ModelFieldValueType.TIME_RANGE.value

    def is_native(self, value: Any) -> bool:
        return isinstance(value, str) and RANGE_SEP in value

    def decode(
        self, native: Any, metadata: dict[str, Any], store: IDocumentStore | None
    ) -> dict[str, Any] | None:
        start_text, _, end_text = native.partition(RANGE_SEP)
        start = parse_iso_utc(start_text)
        end = parse_iso_utc(end_text)
        if start is None or end is None:
            return None
        return {
            **self.header(),
            START_KEY: _precise(to_microseconds(start), metadata.get(START_KEY)),
            END_KEY: _precise(to_microseconds(end), metadata.get(END_KEY)),
        }

    def encode(
        self, wire: dict[str, Any], store: IDocumentStore | None
    ) -> tuple[Any, dict[str, Any]]:
        start = int(field_or_default(wire, START_KEY, _NUMBER, 0))
        end = int(field_or_default(wire, END_KEY, _NUMBER, 0))
        native = (
            f"{to_iso_millis(from_microseconds(start))}"
            f"{RANGE_SEP}{to_iso_millis(from_microseconds(end))}"
        )
        return native, {START_KEY: start, END_KEY: end}


class FirestoreModelDateRangeConverter(FirestoreModelTimeRangeConverter):
    type = ModelFieldValueType.DATE_RANGE.value


class FirestoreModelTimestampRangeConverter(FirestoreModelTimeRangeConverter):
    type = ModelFieldValueType.TIMESTAMP_RANGE.value
