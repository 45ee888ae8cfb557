"""Server commands stored as the command name. Top-level only.

Public parameters are also written as top-level document fields so
server-side handlers can query them; both parameter maps live in the shadow.
"""

from typing import Any

from fieldcodec.application.interfaces.store import IDocumentStore
from fieldcodec.core.constants import COMMAND_KEY, PRIVATE_KEY, PUBLIC_KEY
from fieldcodec.domain.enums import ModelFieldValueType
from fieldcodec.infrastructure.firebase.converters.base import ShadowedFieldConverter
from fieldcodec.shared.utils.shapes import field_or_default, type_of


class FirestoreModelServerCommandBaseConverter(ShadowedFieldConverter):
    type = ModelFieldValueType.SERVER_COMMAND.value
    top_level_only = True

    def is_native(self, value: Any) -> bool:
        return isinstance(value, str)

    def decode(
        self, native: Any, metadata: dict[str, Any], store: IDocumentStore | None
    ) -> dict[str, Any]:
        return {
            **self.header(),
            COMMAND_KEY: native,
            PUBLIC_KEY: dict(field_or_default(metadata, PUBLIC_KEY, dict, {})),
            PRIVATE_KEY: dict(field_or_default(metadata, PRIVATE_KEY, dict, {})),
        }

    def encode(
        self, wire: dict[str, Any], store: IDocumentStore | None
    ) -> tuple[Any, dict[str, Any]]:
        command = field_or_default(wire, COMMAND_KEY, str, "")
        return command, {
            COMMAND_KEY: command,
            PUBLIC_KEY: dict(field_or_default(wire, PUBLIC_KEY, dict, {})),
            PRIVATE_KEY: dict(field_or_default(wire, PRIVATE_KEY, dict, {})),
        }

    def convert_to(
        self,
        key: str,
        value: Any,
        original: dict[str, Any],
        store: IDocumentStore | None = None,
    ) -> dict[str, Any] | None:
        result = super().convert_to(key, value, original, store)
        if result is None or type_of(value) != self.type:
            return result
        public = field_or_default(value, PUBLIC_KEY, dict, {})
        return {**public, **result}
