"""Default converter registry wiring both layers for Firestore.

Order matters: dispatch is first match wins. Null comes last so typed
converters claim their values before a plain map is diffed for deletions.
"""

from __future__ import annotations

from functools import lru_cache

from fieldcodec.application.converters import (
    ModelCounterConverter,
    ModelDateConverter,
    ModelDateRangeConverter,
    ModelEnumConverter,
    ModelGeoValueConverter,
    ModelImageUriConverter,
    ModelLocaleConverter,
    ModelLocalizedValueConverter,
    ModelNullConverter,
    ModelRefBaseConverter,
    ModelSearchConverter,
    ModelServerCommandBaseConverter,
    ModelTimeConverter,
    ModelTimeRangeConverter,
    ModelTimestampConverter,
    ModelTimestampRangeConverter,
    ModelTokenConverter,
    ModelUriConverter,
    ModelVectorValueConverter,
    ModelVideoUriConverter,
)
from fieldcodec.application.services.converter_registry import (
    ConverterPair,
    ConverterRegistry,
)
from fieldcodec.core.config import Settings, get_settings
from fieldcodec.infrastructure.firebase.converters import (
    FirestoreEnumConverter,
    FirestoreModelCounterConverter,
    FirestoreModelDateConverter,
    FirestoreModelDateRangeConverter,
    FirestoreModelGeoValueConverter,
    FirestoreModelImageUriConverter,
    FirestoreModelLocaleConverter,
    FirestoreModelLocalizedValueConverter,
    FirestoreModelRefBaseConverter,
    FirestoreModelSearchConverter,
    FirestoreModelServerCommandBaseConverter,
    FirestoreModelTimeConverter,
    FirestoreModelTimeRangeConverter,
    FirestoreModelTimestampConverter,
    FirestoreModelTimestampRangeConverter,
    FirestoreModelTokenConverter,
    FirestoreModelUriConverter,
    FirestoreModelVectorValueConverter,
    FirestoreModelVideoUriConverter,
    FirestoreNullConverter,
)
from fieldcodec.infrastructure.firebase.types import DELETE_FIELD


def build_default_registry(settings: Settings | None = None) -> ConverterRegistry:
    """Build the registry of every supported type in dispatch order.

    Args:
        settings: Source of geohash precision and default locale language;
            defaults to get_settings().

    Returns:
        A new ConverterRegistry. Server command parameters are converted
        through this same registry.
    """
    settings = settings or get_settings()
    registry: ConverterRegistry

    def nested() -> ConverterRegistry:
        return registry

    registry = ConverterRegistry(
        [
            ConverterPair(
                ModelServerCommandBaseConverter(nested),
                FirestoreModelServerCommandBaseConverter(),
            ),
            ConverterPair(ModelCounterConverter(), FirestoreModelCounterConverter()),
            ConverterPair(ModelTimestampConverter(), FirestoreModelTimestampConverter()),
            ConverterPair(
                ModelTimestampRangeConverter(), FirestoreModelTimestampRangeConverter()
            ),
            ConverterPair(ModelDateConverter(), FirestoreModelDateConverter()),
            ConverterPair(ModelDateRangeConverter(), FirestoreModelDateRangeConverter()),
            ConverterPair(ModelTimeConverter(), FirestoreModelTimeConverter()),
            ConverterPair(ModelTimeRangeConverter(), FirestoreModelTimeRangeConverter()),
            ConverterPair(
                ModelLocaleConverter(settings.default_locale_language),
                FirestoreModelLocaleConverter(),
            ),
            ConverterPair(
                ModelLocalizedValueConverter(),
                FirestoreModelLocalizedValueConverter(settings.default_locale_language),
            ),
            ConverterPair(ModelUriConverter(), FirestoreModelUriConverter()),
            ConverterPair(ModelImageUriConverter(), FirestoreModelImageUriConverter()),
            ConverterPair(ModelVideoUriConverter(), FirestoreModelVideoUriConverter()),
            ConverterPair(ModelSearchConverter(), FirestoreModelSearchConverter()),
            ConverterPair(ModelTokenConverter(), FirestoreModelTokenConverter()),
            ConverterPair(
                ModelGeoValueConverter(),
                FirestoreModelGeoValueConverter(settings.geohash_precision),
            ),
            ConverterPair(
                ModelVectorValueConverter(), FirestoreModelVectorValueConverter()
            ),
            ConverterPair(ModelRefBaseConverter(), FirestoreModelRefBaseConverter()),
            ConverterPair(ModelEnumConverter(), FirestoreEnumConverter()),
            ConverterPair(ModelNullConverter(), FirestoreNullConverter()),
        ],
        delete_marker=DELETE_FIELD,
    )
    return registry


@lru_cache
def get_converter_registry() -> ConverterRegistry:
    """Return the process-wide default registry (built on first call).

    In tests, call get_converter_registry.cache_clear() after changing
    settings so the next call picks them up.
    """
    return build_default_registry()
