"""Enum members written as their value (in case the application layer was bypassed)."""

from enum import Enum
from typing import Any

from fieldcodec.application.interfaces.converters import (
    FirestoreModelFieldValueConverter,
)
from fieldcodec.application.interfaces.store import IDocumentStore


class FirestoreEnumConverter(FirestoreModelFieldValueConverter):
    def convert_from(
        self,
        key: str,
        value: Any,
        original: dict[str, Any],
        store: IDocumentStore | None = None,
    ) -> dict[str, Any] | None:
        return None

    def convert_to(
        self,
        key: str,
        value: Any,
        original: dict[str, Any],
        store: IDocumentStore | None = None,
    ) -> dict[str, Any] | None:
        if isinstance(value, Enum):
            return {key: value.value}
        return None
