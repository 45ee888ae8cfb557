"""Geo values stored as a geohash string (or a legacy GeoPoint).

A user value gets a geohash derived from its coordinates at the configured
precision. A server value writes back the geohash it carries and never
recomputes it; with none carried (a value read from a legacy GeoPoint) the
coordinates are written back as a GeoPoint.
"""

from typing import Any

from fieldcodec.application.interfaces.store import IDocumentStore
from fieldcodec.core.constants import GEOHASH_KEY, LATITUDE_KEY, LONGITUDE_KEY
from fieldcodec.domain.enums import ModelFieldValueType
from fieldcodec.infrastructure.firebase.converters.base import (
    ShadowedFieldConverter,
    is_user_sourced,
)
from fieldcodec.infrastructure.firebase.types import GeoPoint
from fieldcodec.shared.utils.geohash import encode_geohash
from fieldcodec.shared.utils.shapes import field_or_default

_NUMBER = (int, float)


class FirestoreModelGeoValueConverter(ShadowedFieldConverter):
    type = ModelFieldValueType.GEO_VALUE.value

    def __init__(self, precision: int = 11) -> None:
        self._precision = precision

    def is_native(self, value: Any) -> bool:
        return isinstance(value, (str, GeoPoint))

    def decode(
        self, native: Any, metadata: dict[str, Any], store: IDocumentStore | None
    ) -> dict[str, Any]:
        if isinstance(native, GeoPoint):
            latitude, longitude = native.latitude, native.longitude
            geohash = field_or_default(metadata, GEOHASH_KEY, str, "")
        else:
            latitude = field_or_default(metadata, LATITUDE_KEY, _NUMBER, 0.0)
            longitude = field_or_default(metadata, LONGITUDE_KEY, _NUMBER, 0.0)
            geohash = native
        return {
            **self.header(),
            LATITUDE_KEY: latitude,
            LONGITUDE_KEY: longitude,
            GEOHASH_KEY: geohash,
        }

    def encode(
        self, wire: dict[str, Any], store: IDocumentStore | None
    ) -> tuple[Any, dict[str, Any]]:
        latitude = field_or_default(wire, LATITUDE_KEY, _NUMBER, 0.0)
        longitude = field_or_default(wire, LONGITUDE_KEY, _NUMBER, 0.0)
        if is_user_sourced(wire):
            geohash = encode_geohash(latitude, longitude, self._precision)
        else:
            geohash = field_or_default(wire, GEOHASH_KEY, str, "")
        metadata = {LATITUDE_KEY: latitude, LONGITUDE_KEY: longitude, GEOHASH_KEY: geohash}
        if not geohash:
            return GeoPoint(latitude, longitude), metadata
        return geohash, metadata
