"""Application DTOs: wire shapes of tagged values."""

from fieldcodec.application.dtos.wire import (
    CounterWire,
    GeoValueWire,
    ListWire,
    LocaleWire,
    LocalizedValueWire,
    RefWire,
    ServerCommandWire,
    TimeRangeWire,
    TimestampWire,
    UriWire,
    VectorValueWire,
)

__all__ = [
    "CounterWire",
    "TimestampWire",
    "TimeRangeWire",
    "LocaleWire",
    "LocalizedValueWire",
    "UriWire",
    "GeoValueWire",
    "RefWire",
    "VectorValueWire",
    "ListWire",
    "ServerCommandWire",
]
