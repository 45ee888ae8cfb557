"""Tagged field values.

Each class is an immutable value object for one rich type that Firestore
cannot hold natively. Values built by application code carry
source=ValueSource.USER; values produced by the read path carry
ValueSource.SERVER so the write path can tell a literal echo from a live
request (server clock, atomic increment, fresh geohash).
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, ClassVar

from fieldcodec.core.constants import LOCALE_SEP
from fieldcodec.domain.enums import ModelFieldValueType, ValueSource
from fieldcodec.shared.utils.datetime import (
    ensure_utc,
    from_microseconds,
    to_microseconds,
    utc_now,
)
from fieldcodec.shared.utils.geohash import encode_geohash


@dataclass(frozen=True)
class ModelFieldValue:
    """Base for every tagged value.

    Subclasses set value_type, the '@type' discriminator written to the wire.
    """

    value_type: ClassVar[ModelFieldValueType]

    source: ValueSource = field(default=ValueSource.USER, kw_only=True)

    @property
    def from_server(self) -> bool:
        return self.source == ValueSource.SERVER


@dataclass(frozen=True)
class ModelCounter(ModelFieldValue):
    """Counter stored as a number and updated with atomic increments.

    value is the last known total; increment is the pending delta that a
    user-sourced write sends as an atomic increment.
    """

    value_type: ClassVar[ModelFieldValueType] = ModelFieldValueType.COUNTER

    value: int | float = 0
    increment: int | float = 0

    def add(self, delta: int | float) -> "ModelCounter":
        """Return a user counter with delta applied to value and pending increment.

        A counter read from the server has no pending increment, so the
        increment restarts from zero.
        """
        pending = 0 if self.from_server else self.increment
        return ModelCounter(self.value + delta, pending + delta, source=ValueSource.USER)


@dataclass(frozen=True)
class ModelTimestamp(ModelFieldValue):
    """Point in time (UTC). use_now asks the store to write its own clock."""

    value_type: ClassVar[ModelFieldValueType] = ModelFieldValueType.TIMESTAMP

    value: datetime | None = None
    use_now: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", ensure_utc(self.value) or utc_now())

    @classmethod
    def now(cls, *, source: ValueSource = ValueSource.USER):
        """Return a value resolved by the server clock on write."""
        return cls(utc_now(), use_now=True, source=source)

    @classmethod
    def from_microseconds(
        cls,
        micros: int | float,
        *,
        use_now: bool = False,
        source: ValueSource = ValueSource.USER,
    ):
        return cls(from_microseconds(micros), use_now=use_now, source=source)

    @property
    def microseconds(self) -> int:
        """Microseconds since epoch."""
        return to_microseconds(self.value)


@dataclass(frozen=True)
class ModelDate(ModelTimestamp):
    """Calendar date held as a UTC datetime."""

    value_type: ClassVar[ModelFieldValueType] = ModelFieldValueType.DATE


@dataclass(frozen=True)
class ModelTime(ModelTimestamp):
    """Time of day held as a UTC datetime."""

    value_type: ClassVar[ModelFieldValueType] = ModelFieldValueType.TIME


@dataclass(frozen=True)
class ModelTimeRange(ModelFieldValue):
    """Closed time interval. A reversed pair is swapped so start <= end."""

    value_type: ClassVar[ModelFieldValueType] = ModelFieldValueType.TIME_RANGE

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        start = ensure_utc(self.start)
        end = ensure_utc(self.end)
        if start > end:
            start, end = end, start
        object.__setattr__(self, "start", start)
        object.__setattr__(self, "end", end)

    @classmethod
    def from_microseconds(
        cls,
        start: int | float,
        end: int | float,
        *,
        source: ValueSource = ValueSource.USER,
    ):
        return cls(from_microseconds(start), from_microseconds(end), source=source)

    @property
    def start_microseconds(self) -> int:
        return to_microseconds(self.start)

    @property
    def end_microseconds(self) -> int:
        return to_microseconds(self.end)

    @property
    def duration_microseconds(self) -> int:
        return self.end_microseconds - self.start_microseconds


@dataclass(frozen=True)
class ModelDateRange(ModelTimeRange):
    value_type: ClassVar[ModelFieldValueType] = ModelFieldValueType.DATE_RANGE


@dataclass(frozen=True)
class ModelTimestampRange(ModelTimeRange):
    value_type: ClassVar[ModelFieldValueType] = ModelFieldValueType.TIMESTAMP_RANGE


@dataclass(frozen=True)
class ModelLocale(ModelFieldValue):
    """Language with optional country; canonical string form is 'en' or 'en_US'."""

    value_type: ClassVar[ModelFieldValueType] = ModelFieldValueType.LOCALE

    language: str
    country: str = ""

    def __post_init__(self) -> None:
        if not self.language:
            raise ValueError("Locale language must be a non-empty string")
        object.__setattr__(self, "country", self.country or "")

    def __str__(self) -> str:
        if self.country:
            return f"{self.language}{LOCALE_SEP}{self.country}"
        return self.language

    @classmethod
    def parse(cls, value: str, *, source: ValueSource = ValueSource.USER) -> "ModelLocale":
        """Parse 'en', 'en_US' or 'en-US'.

        Raises:
            ValueError: If the language part is empty.
        """
        language, _, country = value.strip().replace("-", LOCALE_SEP).partition(LOCALE_SEP)
        return cls(language, country, source=source)


@dataclass(frozen=True)
class ModelLocalizedLocaleValue:
    """One (locale, value) entry of a ModelLocalizedValue."""

    locale: ModelLocale
    value: Any


@dataclass(frozen=True)
class ModelLocalizedValue(ModelFieldValue):
    """Values keyed by locale. Top-level only: never nested in a list or map."""

    value_type: ClassVar[ModelFieldValueType] = ModelFieldValueType.LOCALIZED_VALUE

    entries: tuple[ModelLocalizedLocaleValue, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", tuple(self.entries))

    @classmethod
    def from_map(
        cls,
        localized: Mapping[str, Any],
        *,
        source: ValueSource = ValueSource.USER,
    ) -> "ModelLocalizedValue":
        """Build from a {'en_US': value} map. Keys with an empty language are skipped."""
        entries = []
        for key, value in localized.items():
            try:
                locale = ModelLocale.parse(str(key))
            except ValueError:
                continue
            entries.append(ModelLocalizedLocaleValue(locale, value))
        return cls(tuple(entries), source=source)

    def to_map(self) -> dict[str, Any]:
        """Return {'en_US': value}; a later entry for the same locale wins."""
        return {str(entry.locale): entry.value for entry in self.entries}

    def value_for(self, locale: ModelLocale | str, default: Any = None) -> Any:
        """Return the value for locale, falling back to the language alone."""
        if isinstance(locale, str):
            locale = ModelLocale.parse(locale)
        fallback = default
        for entry in self.entries:
            if entry.locale.language != locale.language:
                continue
            if entry.locale.country == locale.country:
                return entry.value
            if fallback is default:
                fallback = entry.value
        return fallback


@dataclass(frozen=True)
class ModelUri(ModelFieldValue):
    value_type: ClassVar[ModelFieldValueType] = ModelFieldValueType.URI

    uri: str = ""


@dataclass(frozen=True)
class ModelImageUri(ModelUri):
    value_type: ClassVar[ModelFieldValueType] = ModelFieldValueType.IMAGE_URI


@dataclass(frozen=True)
class ModelVideoUri(ModelUri):
    value_type: ClassVar[ModelFieldValueType] = ModelFieldValueType.VIDEO_URI


@dataclass(frozen=True)
class ModelGeoValue(ModelFieldValue):
    """Geographic point.

    geohash is the index string last written by the store; it is carried
    through server round trips and is not part of equality.
    """

    value_type: ClassVar[ModelFieldValueType] = ModelFieldValueType.GEO_VALUE

    latitude: float = 0.0
    longitude: float = 0.0
    geohash: str | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"latitude must be between -90 and 90, got: {self.latitude}")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError(f"longitude must be between -180 and 180, got: {self.longitude}")

    def geo_hash(self, precision: int = 11) -> str:
        """Return the geohash of this point at the given precision (1-12)."""
        return encode_geohash(self.latitude, self.longitude, precision)


@dataclass(frozen=True)
class ModelRefBase(ModelFieldValue):
    """Reference to another document by path.

    doc is the resolved store reference attached on read; it does not take
    part in equality.
    """

    value_type: ClassVar[ModelFieldValueType] = ModelFieldValueType.REF

    path: str
    doc: Any = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", self.path.rstrip("/"))

    @property
    def id(self) -> str:
        """Document ID (last path segment)."""
        return self.path.rsplit("/", 1)[-1]

    @property
    def collection_path(self) -> str:
        return self.path.rsplit("/", 1)[0] if "/" in self.path else ""


@dataclass(frozen=True)
class ModelVectorValue(ModelFieldValue):
    """Embedding vector. Top-level only: never nested in a list or map."""

    value_type: ClassVar[ModelFieldValueType] = ModelFieldValueType.VECTOR_VALUE

    components: tuple[float, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "components", tuple(float(c) for c in self.components))

    @property
    def dimensions(self) -> int:
        return len(self.components)


@dataclass(frozen=True)
class ModelSearch(ModelFieldValue):
    """Search terms stored as a string list for array-contains queries."""

    value_type: ClassVar[ModelFieldValueType] = ModelFieldValueType.SEARCH

    values: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(str(v) for v in self.values))

    @classmethod
    def of(cls, values: Iterable[Any], *, source: ValueSource = ValueSource.USER):
        """Build from any iterable, dropping empty and duplicate terms (order kept)."""
        seen: dict[str, None] = {}
        for value in values:
            text = str(value)
            if text:
                seen.setdefault(text, None)
        return cls(tuple(seen), source=source)


@dataclass(frozen=True)
class ModelToken(ModelSearch):
    """Tokens stored as a string list."""

    value_type: ClassVar[ModelFieldValueType] = ModelFieldValueType.TOKEN


@dataclass(frozen=True)
class ModelServerCommandBase(ModelFieldValue):
    """Command for server-side processing.

    The command name is stored in the field; public parameters are also
    written as top-level document fields so the server can query them.
    """

    value_type: ClassVar[ModelFieldValueType] = ModelFieldValueType.SERVER_COMMAND

    command: str
    public_parameters: dict[str, Any] = field(default_factory=dict)
    private_parameters: dict[str, Any] = field(default_factory=dict)
