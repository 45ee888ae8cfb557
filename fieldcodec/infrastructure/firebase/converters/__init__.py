"""Store-side converters: wire shape <-> native Firestore value + '#key' shadow."""

from fieldcodec.infrastructure.firebase.converters.base import (
    ShadowedField,
    ShadowedFieldConverter,
)
from fieldcodec.infrastructure.firebase.converters.counter import (
    FirestoreModelCounterConverter,
)
from fieldcodec.infrastructure.firebase.converters.enum_member import (
    FirestoreEnumConverter,
)
from fieldcodec.infrastructure.firebase.converters.geo_value import (
    FirestoreModelGeoValueConverter,
)
from fieldcodec.infrastructure.firebase.converters.locale_value import (
    FirestoreModelLocaleConverter,
)
from fieldcodec.infrastructure.firebase.converters.localized_value import (
    FirestoreModelLocalizedValueConverter,
)
from fieldcodec.infrastructure.firebase.converters.null import FirestoreNullConverter
from fieldcodec.infrastructure.firebase.converters.ref import (
    FirestoreModelRefBaseConverter,
)
from fieldcodec.infrastructure.firebase.converters.search import (
    FirestoreModelSearchConverter,
    FirestoreModelTokenConverter,
)
from fieldcodec.infrastructure.firebase.converters.server_command import (
    FirestoreModelServerCommandBaseConverter,
)
from fieldcodec.infrastructure.firebase.converters.time_range import (
    FirestoreModelDateRangeConverter,
    FirestoreModelTimeRangeConverter,
    FirestoreModelTimestampRangeConverter,
)
from fieldcodec.infrastructure.firebase.converters.timestamp import (
    FirestoreModelDateConverter,
    FirestoreModelTimeConverter,
    FirestoreModelTimestampConverter,
)
from fieldcodec.infrastructure.firebase.converters.uri import (
    FirestoreModelImageUriConverter,
    FirestoreModelUriConverter,
    FirestoreModelVideoUriConverter,
)
from fieldcodec.infrastructure.firebase.converters.vector_value import (
    FirestoreModelVectorValueConverter,
)

__all__ = [
    "ShadowedField",
    "ShadowedFieldConverter",
    "FirestoreModelServerCommandBaseConverter",
    "FirestoreModelCounterConverter",
    "FirestoreModelTimestampConverter",
    "FirestoreModelTimestampRangeConverter",
    "FirestoreModelDateConverter",
    "FirestoreModelDateRangeConverter",
    "FirestoreModelTimeConverter",
    "FirestoreModelTimeRangeConverter",
    "FirestoreModelLocaleConverter",
    "FirestoreModelLocalizedValueConverter",
    "FirestoreModelUriConverter",
    "FirestoreModelImageUriConverter",
    "FirestoreModelVideoUriConverter",
    "FirestoreModelSearchConverter",
    "FirestoreModelTokenConverter",
    "FirestoreModelGeoValueConverter",
    "FirestoreModelVectorValueConverter",
    "FirestoreModelRefBaseConverter",
    "FirestoreEnumConverter",
    "FirestoreNullConverter",
]
