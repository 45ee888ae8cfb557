"""Converter interfaces for both codec layers.

A converter returns a dict of fields to merge into the converted record, or
None to decline so the registry tries the next converter. Converters are
stateless and must not mutate their inputs.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar

from fieldcodec.core.constants import SOURCE_KEY, TYPE_KEY
from fieldcodec.domain.enums import ValueSource

if TYPE_CHECKING:
    from fieldcodec.application.interfaces.store import IDocumentStore


class ModelFieldValueConverter(ABC):
    """Application-side codec: tagged value <-> wire shape."""

    type: ClassVar[str] = ""

    def header(self, source: ValueSource = ValueSource.SERVER) -> dict[str, Any]:
        """Return the common wire keys ('@type', '@source')."""
        return {TYPE_KEY: self.type, SOURCE_KEY: source.value}

    @abstractmethod
    def convert_from(
        self, key: str, value: Any, original: dict[str, Any]
    ) -> dict[str, Any] | None:
        """Wire shape -> tagged value."""

    @abstractmethod
    def convert_to(
        self, key: str, value: Any, original: dict[str, Any]
    ) -> dict[str, Any] | None:
        """Tagged value -> wire shape."""


class FirestoreModelFieldValueConverter(ABC):
    """Store-side codec: wire shape <-> native value plus '#key' shadow field."""

    type: ClassVar[str] = ""

    def header(self) -> dict[str, Any]:
        """Return the common wire keys of a value read back from the store."""
        return {TYPE_KEY: self.type, SOURCE_KEY: ValueSource.SERVER.value}

    @abstractmethod
    def convert_from(
        self,
        key: str,
        value: Any,
        original: dict[str, Any],
        store: IDocumentStore | None = None,
    ) -> dict[str, Any] | None:
        """Native value (+ shadow in original) -> wire shape; clears the shadow."""

    @abstractmethod
    def convert_to(
        self,
        key: str,
        value: Any,
        original: dict[str, Any],
        store: IDocumentStore | None = None,
    ) -> dict[str, Any] | None:
        """Wire shape -> native value; writes a fresh shadow."""
