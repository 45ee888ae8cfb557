"""Python Enum members are written as their value; reading is a pass-through."""

from enum import Enum
from typing import Any

from fieldcodec.application.interfaces.converters import ModelFieldValueConverter


class ModelEnumConverter(ModelFieldValueConverter):
    def convert_from(
        self, key: str, value: Any, original: dict[str, Any]
    ) -> dict[str, Any] | None:
        return None

    def convert_to(
        self, key: str, value: Any, original: dict[str, Any]
    ) -> dict[str, Any] | None:
        if isinstance(value, Enum):
            return {key: value.value}
        return None
