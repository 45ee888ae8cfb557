"""Shared utilities: datetime, shape predicates, geohash."""

from fieldcodec.shared.utils.datetime import (
    ensure_utc,
    from_microseconds,
    from_timestamp_ms_utc,
    parse_iso_utc,
    to_iso_millis,
    to_microseconds,
    utc_now,
)
from fieldcodec.shared.utils.geohash import encode_geohash
from fieldcodec.shared.utils.shapes import (
    field_or_default,
    is_dynamic_map,
    is_tagged,
    type_of,
)

__all__ = [
    "utc_now",
    "ensure_utc",
    "to_microseconds",
    "from_microseconds",
    "from_timestamp_ms_utc",
    "to_iso_millis",
    "parse_iso_utc",
    "encode_geohash",
    "field_or_default",
    "is_dynamic_map",
    "is_tagged",
    "type_of",
]
