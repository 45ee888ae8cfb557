"""ModelUri, ModelImageUri and ModelVideoUri <-> wire shape."""

from typing import Any

from fieldcodec.application.converters.base import TaggedValueConverter
from fieldcodec.application.dtos.wire import UriWire
from fieldcodec.core.constants import URI_KEY
from fieldcodec.domain.enums import ModelFieldValueType
from fieldcodec.domain.value_objects import ModelImageUri, ModelUri, ModelVideoUri
from fieldcodec.shared.utils.shapes import field_or_default


class ModelUriConverter(TaggedValueConverter):
    type = ModelFieldValueType.URI.value
    value_class = ModelUri

    def decode(self, wire: dict[str, Any]) -> ModelUri:
        return self.value_class(field_or_default(wire, URI_KEY, str, ""), source=self.source())

    def encode(self, value: ModelUri) -> UriWire:
        return {URI_KEY: value.uri}


class ModelImageUriConverter(ModelUriConverter):
    type = ModelFieldValueType.IMAGE_URI.value
    value_class = ModelImageUri


class ModelVideoUriConverter(ModelUriConverter):
    type = ModelFieldValueType.VIDEO_URI.value
    value_class = ModelVideoUri
