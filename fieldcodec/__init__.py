"""Firestore model field-value codec.

Converts records of rich tagged values (counters, timestamps, locales,
geo values, references, ...) to native Firestore fields plus '#field'
shadow metadata, and back.
"""

from fieldcodec.application.services.converter_registry import (
    ConverterPair,
    ConverterRegistry,
)
from fieldcodec.domain.enums import ModelFieldValueType, ValueSource
from fieldcodec.domain.exceptions import (
    FieldValueException,
    StoreNotConfiguredException,
    TopLevelOnlyFieldException,
    UnsupportedFieldTransformException,
)
from fieldcodec.domain.value_objects import (
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
from fieldcodec.infrastructure.firebase.registry import (
    build_default_registry,
    get_converter_registry,
)
from fieldcodec.shared.utils.shapes import is_dynamic_map

__version__ = "1.0.0"

__all__ = [
    "ConverterPair",
    "ConverterRegistry",
    "build_default_registry",
    "get_converter_registry",
    "is_dynamic_map",
    "ValueSource",
    "ModelFieldValueType",
    "FieldValueException",
    "TopLevelOnlyFieldException",
    "UnsupportedFieldTransformException",
    "StoreNotConfiguredException",
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
