"""ModelCounter <-> wire shape."""

from typing import Any

from fieldcodec.application.converters.base import NUMBER, TaggedValueConverter
from fieldcodec.application.dtos.wire import CounterWire
from fieldcodec.core.constants import INCREMENT_KEY, VALUE_KEY
from fieldcodec.domain.enums import ModelFieldValueType
from fieldcodec.domain.value_objects import ModelCounter
from fieldcodec.shared.utils.shapes import field_or_default


class ModelCounterConverter(TaggedValueConverter):
    type = ModelFieldValueType.COUNTER.value
    value_class = ModelCounter

    def decode(self, wire: dict[str, Any]) -> ModelCounter:
        return ModelCounter(
            field_or_default(wire, VALUE_KEY, NUMBER, 0),
            field_or_default(wire, INCREMENT_KEY, NUMBER, 0),
            source=self.source(),
        )

    def encode(self, value: ModelCounter) -> CounterWire:
        return {VALUE_KEY: value.value, INCREMENT_KEY: value.increment}
