"""Tagged field values."""

from fieldcodec.domain.value_objects.model_field_value import (
    ModelCounter,
    ModelDate,
    ModelDateRange,
    ModelFieldValue,
    ModelGeoValue,
    ModelImageUri,
    ModelLocale,
    ModelLocalizedLocaleValue,
    ModelLocalizedValue,
    ModelRefBase,
    ModelSearch,
    ModelServerCommandBase,
    ModelTime,
    ModelTimeRange,
    ModelTimestamp,
    ModelTimestampRange,
    ModelToken,
    ModelUri,
    ModelVectorValue,
    ModelVideoUri,
)

__all__ = [
    "ModelFieldValue",
    "ModelCounter",
    "ModelTimestamp",
    "ModelDate",
    "ModelTime",
    "ModelTimeRange",
    "ModelDateRange",
    "ModelTimestampRange",
    "ModelLocale",
    "ModelLocalizedLocaleValue",
    "ModelLocalizedValue",
    "ModelUri",
    "ModelImageUri",
    "ModelVideoUri",
    "ModelGeoValue",
    "ModelRefBase",
    "ModelVectorValue",
    "ModelSearch",
    "ModelToken",
    "ModelServerCommandBase",
]
