"""ModelTimestamp, ModelDate and ModelTime <-> wire shape ('@time' in microseconds)."""

from typing import Any

from fieldcodec.application.converters.base import NUMBER, TaggedValueConverter
from fieldcodec.application.dtos.wire import TimestampWire
from fieldcodec.core.constants import NOW_KEY, TIME_KEY
from fieldcodec.domain.enums import ModelFieldValueType
from fieldcodec.domain.value_objects import ModelDate, ModelTime, ModelTimestamp
from fieldcodec.shared.utils.shapes import field_or_default


class ModelTimestampConverter(TaggedValueConverter):
    type = ModelFieldValueType.TIMESTAMP.value
    value_class = ModelTimestamp

    def decode(self, wire: dict[str, Any]) -> ModelTimestamp:
        return self.value_class.from_microseconds(
            field_or_default(wire, TIME_KEY, NUMBER, 0),
            use_now=field_or_default(wire, NOW_KEY, bool, False),
            source=self.source(),
        )

    def encode(self, value: ModelTimestamp) -> TimestampWire:
        return {TIME_KEY: value.microseconds, NOW_KEY: value.use_now}


class ModelDateConverter(ModelTimestampConverter):
    type = ModelFieldValueType.DATE.value
    value_class = ModelDate


class ModelTimeConverter(ModelTimestampConverter):
    type = ModelFieldValueType.TIME.value
    value_class = ModelTime
