"""Document references stored as native Firestore references (no shadow field).

References are self-describing, so scalar, list and map fields are
recognised from the native values alone; plain elements pass through.
"""

from typing import Any

from fieldcodec.application.interfaces.converters import (
    FirestoreModelFieldValueConverter,
)
from fieldcodec.application.interfaces.store import IDocumentStore
from fieldcodec.core.constants import DOC_KEY, REF_KEY
from fieldcodec.domain.enums import ModelFieldValueType
from fieldcodec.infrastructure.firebase.types import DocumentReferenceBase
from fieldcodec.shared.utils.shapes import field_or_default, is_dynamic_map, is_tagged, type_of


class FirestoreModelRefBaseConverter(FirestoreModelFieldValueConverter):
    type = ModelFieldValueType.REF.value

    def _decode(self, ref: DocumentReferenceBase, store: IDocumentStore | None) -> dict[str, Any]:
        path = ref.path.rstrip("/")
        doc = store.resolve_reference(path) if store is not None else ref
        return {**self.header(), REF_KEY: path, DOC_KEY: doc}

    def _encode(self, wire: dict[str, Any], store: IDocumentStore | None) -> Any:
        path = field_or_default(wire, REF_KEY, str, "").rstrip("/")
        if store is not None:
            return store.resolve_reference(path)
        return DocumentReferenceBase(path)

    def convert_from(
        self,
        key: str,
        value: Any,
        original: dict[str, Any],
        store: IDocumentStore | None = None,
    ) -> dict[str, Any] | None:
        if isinstance(value, DocumentReferenceBase):
            return {key: self._decode(value, store)}
        if isinstance(value, list):
            if not any(isinstance(e, DocumentReferenceBase) for e in value):
                return None
            return {
                key: [
                    self._decode(e, store) if isinstance(e, DocumentReferenceBase) else e
                    for e in value
                ]
            }
        if is_dynamic_map(value):
            if not any(isinstance(e, DocumentReferenceBase) for e in value.values()):
                return None
            return {
                key: {
                    k: self._decode(e, store) if isinstance(e, DocumentReferenceBase) else e
                    for k, e in value.items()
                }
            }
        return None

    def _claims(self, elements: list[Any]) -> bool:
        tagged = [e for e in elements if is_tagged(e)]
        return bool(tagged) and all(type_of(e) == self.type for e in tagged)

    def convert_to(
        self,
        key: str,
        value: Any,
        original: dict[str, Any],
        store: IDocumentStore | None = None,
    ) -> dict[str, Any] | None:
        if is_tagged(value):
            if type_of(value) != self.type:
                return None
            return {key: self._encode(value, store)}
        if isinstance(value, (list, tuple)):
            if not self._claims(list(value)):
                return None
            return {
                key: [self._encode(e, store) if is_tagged(e) else e for e in value]
            }
        if is_dynamic_map(value):
            if not self._claims(list(value.values())):
                return None
            return {
                key: {
                    k: self._encode(e, store) if is_tagged(e) else e
                    for k, e in value.items()
                }
            }
        return None
