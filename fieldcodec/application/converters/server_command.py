"""ModelServerCommandBase <-> wire shape.

Parameter maps may hold tagged values themselves; they are converted
through the registry supplied by nested (the default registry when built
by build_default_registry). Without one they pass through untouched.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from fieldcodec.application.converters.base import TaggedValueConverter
from fieldcodec.application.dtos.wire import ServerCommandWire
from fieldcodec.core.constants import COMMAND_KEY, PRIVATE_KEY, PUBLIC_KEY
from fieldcodec.domain.enums import ModelFieldValueType
from fieldcodec.domain.value_objects import ModelServerCommandBase
from fieldcodec.shared.utils.shapes import field_or_default

if TYPE_CHECKING:
    from fieldcodec.application.services.converter_registry import ConverterRegistry


class ModelServerCommandBaseConverter(TaggedValueConverter):
    type = ModelFieldValueType.SERVER_COMMAND.value
    value_class = ModelServerCommandBase

    def __init__(self, nested: Callable[[], ConverterRegistry] | None = None) -> None:
        self._nested = nested

    def decode(self, wire: dict[str, Any]) -> ModelServerCommandBase:
        public = field_or_default(wire, PUBLIC_KEY, dict, {})
        private = field_or_default(wire, PRIVATE_KEY, dict, {})
        if self._nested is not None:
            registry = self._nested()
            public = registry.model_from(public)
            private = registry.model_from(private)
        return ModelServerCommandBase(
            field_or_default(wire, COMMAND_KEY, str, ""),
            dict(public),
            dict(private),
            source=self.source(),
        )

    def encode(self, value: ModelServerCommandBase) -> ServerCommandWire:
        public = value.public_parameters
        private = value.private_parameters
        if self._nested is not None:
            registry = self._nested()
            public = registry.model_to(public)
            private = registry.model_to(private)
        return {
            COMMAND_KEY: value.command,
            PUBLIC_KEY: dict(public),
            PRIVATE_KEY: dict(private),
        }
