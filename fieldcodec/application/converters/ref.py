"""ModelRefBase <-> wire shape ('@ref' path, '@doc' resolved reference)."""

from typing import Any

from fieldcodec.application.converters.base import TaggedValueConverter
from fieldcodec.application.dtos.wire import RefWire
from fieldcodec.core.constants import DOC_KEY, REF_KEY
from fieldcodec.domain.enums import ModelFieldValueType
from fieldcodec.domain.value_objects import ModelRefBase
from fieldcodec.shared.utils.shapes import field_or_default


class ModelRefBaseConverter(TaggedValueConverter):
    type = ModelFieldValueType.REF.value
    value_class = ModelRefBase

    def decode(self, wire: dict[str, Any]) -> ModelRefBase:
        return ModelRefBase(
            field_or_default(wire, REF_KEY, str, ""),
            doc=wire.get(DOC_KEY),
            source=self.source(),
        )

    def encode(self, value: ModelRefBase) -> RefWire:
        return {REF_KEY: value.path}
