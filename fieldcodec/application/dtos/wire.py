"""Wire shapes exchanged between the two codec layers (no dependency on store types).

Every shape is a plain dict keyed by '@'-prefixed names, so the TypedDicts
use the functional syntax. All keys are optional on read; converters fall
back to empty defaults.
"""

from typing import Any, TypedDict

CounterWire = TypedDict(
    "CounterWire",
    {"@type": str, "@source": str, "@value": float, "@increment": float},
    total=False,
)

TimestampWire = TypedDict(
    "TimestampWire",
    {"@type": str, "@source": str, "@time": int, "@now": bool},
    total=False,
)

TimeRangeWire = TypedDict(
    "TimeRangeWire",
    {"@type": str, "@source": str, "@start": int, "@end": int},
    total=False,
)

LocaleWire = TypedDict(
    "LocaleWire",
    {"@type": str, "@source": str, "@language": str, "@country": str},
    total=False,
)

LocalizedValueWire = TypedDict(
    "LocalizedValueWire",
    {"@type": str, "@source": str, "@localized": dict[str, Any]},
    total=False,
)

UriWire = TypedDict(
    "UriWire",
    {"@type": str, "@source": str, "@uri": str},
    total=False,
)

GeoValueWire = TypedDict(
    "GeoValueWire",
    {
        "@type": str,
        "@source": str,
        "@latitude": float,
        "@longitude": float,
        "@geoHash": str,
    },
    total=False,
)

RefWire = TypedDict(
    "RefWire",
    {"@type": str, "@source": str, "@ref": str, "@doc": Any},
    total=False,
)

VectorValueWire = TypedDict(
    "VectorValueWire",
    {"@type": str, "@source": str, "@vector": list[float]},
    total=False,
)

ListWire = TypedDict(
    "ListWire",
    {"@type": str, "@source": str, "@list": list[str]},
    total=False,
)

ServerCommandWire = TypedDict(
    "ServerCommandWire",
    {
        "@type": str,
        "@source": str,
        "@command": str,
        "@public": dict[str, Any],
        "@private": dict[str, Any],
    },
    total=False,
)
