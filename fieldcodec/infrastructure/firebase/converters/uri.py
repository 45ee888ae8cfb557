"""URIs (plain, image, video) stored as strings."""

from typing import Any

from fieldcodec.application.interfaces.store import IDocumentStore
from fieldcodec.core.constants import URI_KEY
from fieldcodec.domain.enums import ModelFieldValueType
from fieldcodec.infrastructure.firebase.converters.base import ShadowedFieldConverter
from fieldcodec.shared.utils.shapes import field_or_default


class FirestoreModelUriConverter(ShadowedFieldConverter):
    type = ModelFieldValueType.URI.value

    def is_native(self, value: Any) -> bool:
        return isinstance(value, str)

    def decode(
        self, native: Any, metadata: dict[str, Any], store: IDocumentStore | None
    ) -> dict[str, Any]:
        return {**self.header(), URI_KEY: native}

    def encode(
        self, wire: dict[str, Any], store: IDocumentStore | None
    ) -> tuple[Any, dict[str, Any]]:
        uri = field_or_default(wire, URI_KEY, str, "")
        return uri, {URI_KEY: uri}


class FirestoreModelImageUriConverter(FirestoreModelUriConverter):
    type = ModelFieldValueType.IMAGE_URI.value


class FirestoreModelVideoUriConverter(FirestoreModelUriConverter):
    type = ModelFieldValueType.VIDEO_URI.value
