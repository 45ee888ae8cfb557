"""Native Firestore value types and write sentinels.

These are the values the store-side converters produce and consume, and
the values the REST encoder understands beyond plain JSON types.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from fieldcodec.domain.enums import ValueSource
from fieldcodec.domain.value_objects import ModelGeoValue, ModelRefBase, ModelVectorValue


@dataclass(frozen=True)
class GeoPoint:
    """Latitude/longitude pair stored as a Firestore geoPointValue."""

    latitude: float
    longitude: float

    def to_model_geo_value(self, *, source: ValueSource = ValueSource.SERVER) -> ModelGeoValue:
        return ModelGeoValue(self.latitude, self.longitude, source=source)


@dataclass(frozen=True)
class VectorValue:
    """Embedding vector stored as a Firestore vector (map with __type__ '__vector__')."""

    values: tuple[float, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(float(v) for v in self.values))

    def to_model_vector_value(
        self, *, source: ValueSource = ValueSource.SERVER
    ) -> ModelVectorValue:
        return ModelVectorValue(self.values, source=source)


class DocumentReferenceBase:
    """Path of a document relative to the database documents root.

    name is the full resource name (projects/.../documents/<path>) when known.
    Two references are equal when their paths are equal.
    """

    def __init__(self, path: str, name: str | None = None) -> None:
        self._path = path.strip("/")
        self._name = name

    @property
    def path(self) -> str:
        return self._path

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def id(self) -> str:
        """Document ID (last path segment)."""
        return self._path.rsplit("/", 1)[-1]

    def to_model_ref(self, *, source: ValueSource = ValueSource.SERVER) -> ModelRefBase:
        return ModelRefBase(self._path, doc=self, source=source)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DocumentReferenceBase):
            return NotImplemented
        return self._path == other._path

    def __hash__(self) -> int:
        return hash(self._path)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._path!r})"


class _Sentinel:
    """Write-only marker understood by the REST encoder."""

    __slots__ = ("_label",)

    def __init__(self, label: str) -> None:
        self._label = label

    def __repr__(self) -> str:
        return self._label


# Removes the field (merge writes only).
DELETE_FIELD = _Sentinel("DELETE_FIELD")
# Replaced by the server's commit time.
SERVER_TIMESTAMP = _Sentinel("SERVER_TIMESTAMP")


@dataclass(frozen=True)
class Increment:
    """Atomic numeric increment applied by the server."""

    amount: int | float


def is_transform(value: Any) -> bool:
    """Return True for write sentinels (delete, server timestamp, increment)."""
    return isinstance(value, (_Sentinel, Increment))


def is_native_store_value(value: Any) -> bool:
    """Return True for values only the store layer produces (never a plain map or None)."""
    return isinstance(
        value, (datetime, GeoPoint, VectorValue, DocumentReferenceBase, _Sentinel, Increment)
    )
