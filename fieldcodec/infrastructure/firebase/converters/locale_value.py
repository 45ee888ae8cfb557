"""Locale stored as 'en' or 'en_US'."""

from typing import Any

from fieldcodec.application.interfaces.store import IDocumentStore
from fieldcodec.core.constants import COUNTRY_KEY, LANGUAGE_KEY, LOCALE_SEP
from fieldcodec.domain.enums import ModelFieldValueType
from fieldcodec.infrastructure.firebase.converters.base import ShadowedFieldConverter
from fieldcodec.shared.utils.shapes import field_or_default


class FirestoreModelLocaleConverter(ShadowedFieldConverter):
    type = ModelFieldValueType.LOCALE.value

    def is_native(self, value: Any) -> bool:
        return isinstance(value, str)

    def decode(
        self, native: Any, metadata: dict[str, Any], store: IDocumentStore | None
    ) -> dict[str, Any] | None:
        language, _, country = native.strip().partition(LOCALE_SEP)
        if not language:
            return None
        return {**self.header(), LANGUAGE_KEY: language, COUNTRY_KEY: country}

    def encode(
        self, wire: dict[str, Any], store: IDocumentStore | None
    ) -> tuple[Any, dict[str, Any]]:
        language = field_or_default(wire, LANGUAGE_KEY, str, "")
        country = field_or_default(wire, COUNTRY_KEY, str, "")
        native = f"{language}{LOCALE_SEP}{country}" if country else language
        return native, {LANGUAGE_KEY: language, COUNTRY_KEY: country}
