"""ModelVectorValue <-> wire shape."""

from typing import Any

from fieldcodec.application.converters.base import TaggedValueConverter
from fieldcodec.application.dtos.wire import VectorValueWire
from fieldcodec.core.constants import VECTOR_KEY
from fieldcodec.domain.enums import ModelFieldValueType
from fieldcodec.domain.value_objects import ModelVectorValue
from fieldcodec.shared.utils.shapes import field_or_default


class ModelVectorValueConverter(TaggedValueConverter):
    type = ModelFieldValueType.VECTOR_VALUE.value
    value_class = ModelVectorValue

    def decode(self, wire: dict[str, Any]) -> ModelVectorValue:
        components = field_or_default(wire, VECTOR_KEY, (list, tuple), [])
        return ModelVectorValue(
            tuple(c for c in components if isinstance(c, (int, float))),
            source=self.source(),
        )

    def encode(self, value: ModelVectorValue) -> VectorValueWire:
        return {VECTOR_KEY: list(value.components)}
