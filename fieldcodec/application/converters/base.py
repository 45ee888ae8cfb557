"""Shared template for application-side converters of tagged values."""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, ClassVar

from fieldcodec.application.interfaces.converters import ModelFieldValueConverter
from fieldcodec.domain.enums import ValueSource
from fieldcodec.domain.value_objects import ModelFieldValue
from fieldcodec.shared.utils.shapes import type_of

NUMBER = (int, float)


class TaggedValueConverter(ModelFieldValueConverter):
    """Converts one tagged value class to and from its wire shape.

    Handles a single value; the registry fans out over lists and maps.
    Subclasses implement decode (wire -> value) and encode (value -> wire
    without header).
    """

    value_class: ClassVar[type[ModelFieldValue]]

    def convert_from(
        self, key: str, value: Any, original: dict[str, Any]
    ) -> dict[str, Any] | None:
        if not self.type or type_of(value) != self.type:
            return None
        return {key: self.decode(value)}

    def convert_to(
        self, key: str, value: Any, original: dict[str, Any]
    ) -> dict[str, Any] | None:
        if not isinstance(value, ModelFieldValue) or value.value_type != self.type:
            return None
        return {key: {**self.header(value.source), **self.encode(value)}}

    @abstractmethod
    def decode(self, wire: dict[str, Any]) -> ModelFieldValue:
        """Build the server-sourced value from a wire shape."""

    @abstractmethod
    def encode(self, value: Any) -> dict[str, Any]:
        """Return the type-specific wire keys of value."""

    @staticmethod
    def source() -> ValueSource:
        """Source of every value produced by decode."""
        return ValueSource.SERVER
