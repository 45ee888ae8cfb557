"""Localized values stored as a list of 'locale:value' strings. Top-level only.

The shadow keeps the '@localized' map so non-string values survive the
round trip; without it the stored list (or a legacy map) is parsed.
"""

from typing import Any

from fieldcodec.application.interfaces.store import IDocumentStore
from fieldcodec.core.constants import LOCALIZED_ENTRY_SEP, LOCALIZED_KEY
from fieldcodec.domain.enums import ModelFieldValueType
from fieldcodec.infrastructure.firebase.converters.base import ShadowedFieldConverter
from fieldcodec.shared.utils.shapes import field_or_default, is_dynamic_map


class FirestoreModelLocalizedValueConverter(ShadowedFieldConverter):
    type = ModelFieldValueType.LOCALIZED_VALUE.value
    top_level_only = True

    def __init__(self, default_language: str = "en") -> None:
        self._default_language = default_language

    def is_native(self, value: Any) -> bool:
        return isinstance(value, list) or is_dynamic_map(value)

    def _parse(self, native: Any) -> dict[str, Any]:
        if is_dynamic_map(native):
            return dict(native)
        localized: dict[str, Any] = {}
        for item in native:
            if not isinstance(item, str):
                continue
            locale, sep, text = item.partition(LOCALIZED_ENTRY_SEP)
            if not sep:
                locale, text = self._default_language, item
            localized[locale] = text
        return localized

    def decode(
        self, native: Any, metadata: dict[str, Any], store: IDocumentStore | None
    ) -> dict[str, Any]:
        localized = field_or_default(metadata, LOCALIZED_KEY, dict, None)
        if localized is None:
            localized = self._parse(native)
        return {**self.header(), LOCALIZED_KEY: dict(localized)}

    def encode(
        self, wire: dict[str, Any], store: IDocumentStore | None
    ) -> tuple[Any, dict[str, Any]]:
        localized = dict(field_or_default(wire, LOCALIZED_KEY, dict, {}))
        native = [f"{locale}{LOCALIZED_ENTRY_SEP}{text}" for locale, text in localized.items()]
        return native, {LOCALIZED_KEY: localized}
