"""ModelLocalizedValue <-> wire shape ('@localized' map keyed by locale)."""

from typing import Any

from fieldcodec.application.converters.base import TaggedValueConverter
from fieldcodec.application.dtos.wire import LocalizedValueWire
from fieldcodec.core.constants import LOCALIZED_KEY
from fieldcodec.domain.enums import ModelFieldValueType
from fieldcodec.domain.value_objects import ModelLocalizedValue
from fieldcodec.shared.utils.shapes import field_or_default, is_dynamic_map


class ModelLocalizedValueConverter(TaggedValueConverter):
    type = ModelFieldValueType.LOCALIZED_VALUE.value
    value_class = ModelLocalizedValue

    def decode(self, wire: dict[str, Any]) -> ModelLocalizedValue:
        localized = field_or_default(wire, LOCALIZED_KEY, dict, {})
        if not is_dynamic_map(localized):
            localized = {}
        return ModelLocalizedValue.from_map(localized, source=self.source())

    def encode(self, value: ModelLocalizedValue) -> LocalizedValueWire:
        return {LOCALIZED_KEY: value.to_map()}
