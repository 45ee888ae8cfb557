"""Time, date and timestamp ranges <-> wire shape ('@start'/'@end' in microseconds)."""

from typing import Any

from fieldcodec.application.converters.base import NUMBER, TaggedValueConverter
from fieldcodec.application.dtos.wire import TimeRangeWire
from fieldcodec.core.constants import END_KEY, START_KEY
from fieldcodec.domain.enums import ModelFieldValueType
from fieldcodec.domain.value_objects import (
    ModelDateRange,
    ModelTimeRange,
    ModelTimestampRange,
)
from fieldcodec.shared.utils.shapes import field_or_default


class ModelTimeRangeConverter(TaggedValueConverter):
    type = ModelFieldValueType.TIME_RANGE.value
    value_class = ModelTimeRange

    def decode(self, wire: dict[str, Any]) -> ModelTimeRange:
        return self.value_class.from_microseconds(
            field_or_default(wire, START_KEY, NUMBER, 0),
            field_or_default(wire, END_KEY, NUMBER, 0),
            source=self.source(),
        )

    def encode(self, value: ModelTimeRange) -> TimeRangeWire:
        return {START_KEY: value.start_microseconds, END_KEY: value.end_microseconds}


class ModelDateRangeConverter(ModelTimeRangeConverter):
    type = ModelFieldValueType.DATE_RANGE.value
    value_class = ModelDateRange


class ModelTimestampRangeConverter(ModelTimeRangeConverter):
    type = ModelFieldValueType.TIMESTAMP_RANGE.value
    value_class = ModelTimestampRange
