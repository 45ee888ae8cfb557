"""ModelLocale <-> wire shape."""

from typing import Any

from fieldcodec.application.converters.base import TaggedValueConverter
from fieldcodec.application.dtos.wire import LocaleWire
from fieldcodec.core.constants import COUNTRY_KEY, LANGUAGE_KEY
from fieldcodec.domain.enums import ModelFieldValueType
from fieldcodec.domain.value_objects import ModelLocale
from fieldcodec.shared.utils.shapes import field_or_default


class ModelLocaleConverter(TaggedValueConverter):
    type = ModelFieldValueType.LOCALE.value
    value_class = ModelLocale

    def __init__(self, default_language: str = "en") -> None:
        self._default_language = default_language

    def decode(self, wire: dict[str, Any]) -> ModelLocale:
        language = field_or_default(wire, LANGUAGE_KEY, str, "") or self._default_language
        return ModelLocale(
            language,
            field_or_default(wire, COUNTRY_KEY, str, ""),
            source=self.source(),
        )

    def encode(self, value: ModelLocale) -> LocaleWire:
        return {LANGUAGE_KEY: value.language, COUNTRY_KEY: value.country}
