"""Application-side half of the null/deletion pair.

None is passed to the store layer unchanged, where it becomes a delete.
"""

from typing import Any

from fieldcodec.application.interfaces.converters import ModelFieldValueConverter


class ModelNullConverter(ModelFieldValueConverter):
    def convert_from(
        self, key: str, value: Any, original: dict[str, Any]
    ) -> dict[str, Any] | None:
        return None

    def convert_to(
        self, key: str, value: Any, original: dict[str, Any]
    ) -> dict[str, Any] | None:
        return None
