"""Domain enumerations for the field-value codec.

Enums represent fixed sets of domain values (value origin, type tags).
"""

from enum import Enum


class _ValuesMixin:
    """Adds values() for str enums (e.g. validation or serialization)."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all enum values as strings."""
        return [member.value for member in cls]  # type: ignore[attr-defined]


class ValueSource(_ValuesMixin, str, Enum):
    """Origin of a tagged value.

    USER values are constructed by application code and may trigger live
    store semantics on write (server clock, atomic increment, fresh geohash).
    SERVER values were read back from the store and are written back literally.
    """

    USER = "user"
    SERVER = "server"

    @classmethod
    def parse(cls, value: object) -> "ValueSource":
        """Return the source for a wire '@source' value; anything unknown is USER."""
        if value == cls.SERVER.value:
            return cls.SERVER
        return cls.USER


class ModelFieldValueType(_ValuesMixin, str, Enum):
    """'@type' discriminator of every tagged wire shape."""

    COUNTER = "ModelCounter"
    TIMESTAMP = "ModelTimestamp"
    DATE = "ModelDate"
    TIME = "ModelTime"
    TIME_RANGE = "ModelTimeRange"
    DATE_RANGE = "ModelDateRange"
    TIMESTAMP_RANGE = "ModelTimestampRange"
    LOCALE = "ModelLocale"
    LOCALIZED_VALUE = "ModelLocalizedValue"
    URI = "ModelUri"
    IMAGE_URI = "ModelImageUri"
    VIDEO_URI = "ModelVideoUri"
    GEO_VALUE = "ModelGeoValue"
    REF = "ModelRefBase"
    VECTOR_VALUE = "ModelVectorValue"
    SEARCH = "ModelSearch"
    TOKEN = "ModelToken"
    SERVER_COMMAND = "ModelServerCommandBase"
