"""ModelSearch and ModelToken <-> wire shape ('@list' of strings)."""

from typing import Any

from fieldcodec.application.converters.base import TaggedValueConverter
from fieldcodec.application.dtos.wire import ListWire
from fieldcodec.core.constants import LIST_KEY
from fieldcodec.domain.enums import ModelFieldValueType
from fieldcodec.domain.value_objects import ModelSearch, ModelToken
from fieldcodec.shared.utils.shapes import field_or_default


class ModelSearchConverter(TaggedValueConverter):
    type = ModelFieldValueType.SEARCH.value
    value_class = ModelSearch

    def decode(self, wire: dict[str, Any]) -> ModelSearch:
        values = field_or_default(wire, LIST_KEY, (list, tuple), [])
        return self.value_class(
            tuple(v for v in values if isinstance(v, str)), source=self.source()
        )

    def encode(self, value: ModelSearch) -> ListWire:
        return {LIST_KEY: list(value.values)}


class ModelTokenConverter(ModelSearchConverter):
    type = ModelFieldValueType.TOKEN.value
    value_class = ModelToken
