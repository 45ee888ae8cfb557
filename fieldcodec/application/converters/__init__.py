"""Application-side converters: tagged value <-> wire shape."""

from fieldcodec.application.converters.base import TaggedValueConverter
from fieldcodec.application.converters.counter import ModelCounterConverter
from fieldcodec.application.converters.enum_member import ModelEnumConverter
from fieldcodec.application.converters.geo_value import ModelGeoValueConverter
from fieldcodec.application.converters.locale_value import ModelLocaleConverter
from fieldcodec.application.converters.localized_value import (
    ModelLocalizedValueConverter,
)
from fieldcodec.application.converters.null import ModelNullConverter
from fieldcodec.application.converters.ref import ModelRefBaseConverter
from fieldcodec.application.converters.search import (
    ModelSearchConverter,
    ModelTokenConverter,
)
from fieldcodec.application.converters.server_command import (
    ModelServerCommandBaseConverter,
)
from fieldcodec.application.converters.time_range import (
    ModelDateRangeConverter,
    ModelTimeRangeConverter,
    ModelTimestampRangeConverter,
)
from fieldcodec.application.converters.timestamp import (
    ModelDateConverter,
    ModelTimeConverter,
    ModelTimestampConverter,
)
from fieldcodec.application.converters.uri import (
    ModelImageUriConverter,
    ModelUriConverter,
    ModelVideoUriConverter,
)
from fieldcodec.application.converters.vector_value import ModelVectorValueConverter

__all__ = [
    "TaggedValueConverter",
    "ModelServerCommandBaseConverter",
    "ModelCounterConverter",
    "ModelTimestampConverter",
    "ModelTimestampRangeConverter",
    "ModelDateConverter",
    "ModelDateRangeConverter",
    "ModelTimeConverter",
    "ModelTimeRangeConverter",
    "ModelLocaleConverter",
    "ModelLocalizedValueConverter",
    "ModelUriConverter",
    "ModelImageUriConverter",
    "ModelVideoUriConverter",
    "ModelSearchConverter",
    "ModelTokenConverter",
    "ModelGeoValueConverter",
    "ModelVectorValueConverter",
    "ModelRefBaseConverter",
    "ModelEnumConverter",
    "ModelNullConverter",
]
