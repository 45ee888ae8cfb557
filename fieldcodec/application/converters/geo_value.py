"""ModelGeoValue <-> wire shape."""

from typing import Any

from fieldcodec.application.converters.base import NUMBER, TaggedValueConverter
from fieldcodec.application.dtos.wire import GeoValueWire
from fieldcodec.core.constants import GEOHASH_KEY, LATITUDE_KEY, LONGITUDE_KEY
from fieldcodec.domain.enums import ModelFieldValueType
from fieldcodec.domain.value_objects import ModelGeoValue
from fieldcodec.shared.utils.shapes import field_or_default


class ModelGeoValueConverter(TaggedValueConverter):
    type = ModelFieldValueType.GEO_VALUE.value
    value_class = ModelGeoValue

    def decode(self, wire: dict[str, Any]) -> ModelGeoValue:
        return ModelGeoValue(
            float(field_or_default(wire, LATITUDE_KEY, NUMBER, 0.0)),
            float(field_or_default(wire, LONGITUDE_KEY, NUMBER, 0.0)),
            geohash=field_or_default(wire, GEOHASH_KEY, str, "") or None,
            source=self.source(),
        )

    def encode(self, value: ModelGeoValue) -> GeoValueWire:
        return {
            LATITUDE_KEY: value.latitude,
            LONGITUDE_KEY: value.longitude,
            GEOHASH_KEY: value.geohash or "",
        }
