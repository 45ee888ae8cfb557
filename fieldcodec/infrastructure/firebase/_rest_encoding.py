"""Encode/decode Python values to/from Firestore REST API 'fields' format."""

from __future__ import annotations

import base64
import re
from collections.abc import Callable
from datetime import datetime
from typing import Any

from fieldcodec.domain.exceptions import UnsupportedFieldTransformException
from fieldcodec.infrastructure.firebase.types import (
    DELETE_FIELD,
    SERVER_TIMESTAMP,
    DocumentReferenceBase,
    GeoPoint,
    Increment,
    VectorValue,
    is_transform,
)
from fieldcodec.shared.utils.datetime import ensure_utc

_VECTOR_TYPE = "__vector__"
_SIMPLE_SEGMENT_RE = re.compile(r"^[_a-zA-Z][_a-zA-Z0-9]*$")
# Firestore returns up to nanosecond precision; datetime keeps microseconds.
_TIMESTAMP_RE = re.compile(
    r"^(?P<base>\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})(?:\.(?P<frac>\d+))?(?P<tz>Z|[+-]\d{2}:\d{2})?$"
)

ReferenceFactory = Callable[[str], DocumentReferenceBase]


def _encode_value(v: Any, root: str = "") -> dict:
    if v is None:
        return {"nullValue": None}
    if isinstance(v, bool):
        return {"booleanValue": v}
    if isinstance(v, int):
        return {"integerValue": str(v)}
    if isinstance(v, float):
        return {"doubleValue": v}
    if isinstance(v, datetime):
        return {"timestampValue": ensure_utc(v).strftime("%Y-%m-%dT%H:%M:%S.%fZ")}
    if isinstance(v, str):
        return {"stringValue": v}
    if isinstance(v, bytes):
        return {"bytesValue": base64.standard_b64encode(v).decode("ascii")}
    if isinstance(v, GeoPoint):
        return {"geoPointValue": {"latitude": v.latitude, "longitude": v.longitude}}
    if isinstance(v, DocumentReferenceBase):
        return {"referenceValue": v.name or f"{root}/{v.path}"}
    if isinstance(v, VectorValue):
        return {
            "mapValue": {
                "fields": {
                    "__type__": {"stringValue": _VECTOR_TYPE},
                    "value": {
                        "arrayValue": {"values": [{"doubleValue": x} for x in v.values]}
                    },
                }
            }
        }
    if isinstance(v, (list, tuple)):
        return {"arrayValue": {"values": [_encode_value(x, root) for x in v]}}
    if isinstance(v, dict):
        return {"mapValue": {"fields": {k: _encode_value(x, root) for k, x in v.items()}}}
    raise TypeError(f"Unsupported Firestore value type: {type(v)}")


def encode_document(data: dict[str, Any], root: str = "") -> dict:
    """Convert a Python dict to Firestore REST Document.fields format."""
    return {"fields": {k: _encode_value(v, root) for k, v in data.items()}}


def _parse_timestamp(raw: str) -> datetime:
    match = _TIMESTAMP_RE.match(raw)
    if not match:
        return datetime.fromisoformat(raw.replace("Z", "+00:00"))
    frac = (match.group("frac") or "")[:6].ljust(6, "0")
    tz = match.group("tz") or "Z"
    parsed = datetime.fromisoformat(
        f"{match.group('base')}.{frac}{'+00:00' if tz == 'Z' else tz}"
    )
    return ensure_utc(parsed)


def path_from_name(name: str) -> str:
    """Return the document path below '/documents/' of a full resource name."""
    _, sep, path = name.partition("/documents/")
    return path if sep else name


def _decode_value(obj: dict, reference_factory: ReferenceFactory | None = None) -> Any:
    if "nullValue" in obj:
        return None
    if "booleanValue" in obj:
        return obj["booleanValue"]
    if "integerValue" in obj:
        return int(obj["integerValue"])
    if "doubleValue" in obj:
        return float(obj["doubleValue"])
    if "timestampValue" in obj:
        return _parse_timestamp(obj["timestampValue"])
    if "stringValue" in obj:
        return obj["stringValue"]
    if "bytesValue" in obj:
        return base64.standard_b64decode(obj["bytesValue"])
    if "geoPointValue" in obj:
        point = obj["geoPointValue"] or {}
        return GeoPoint(
            float(point.get("latitude", 0.0)), float(point.get("longitude", 0.0))
        )
    if "referenceValue" in obj:
        name = obj["referenceValue"]
        if reference_factory is not None:
            return reference_factory(name)
        return DocumentReferenceBase(path_from_name(name), name)
    if "arrayValue" in obj:
        vals = obj.get("arrayValue", {}).get("values") or []
        return [_decode_value(x, reference_factory) for x in vals]
    if "mapValue" in obj:
        fields = obj["mapValue"].get("fields") or {}
        if fields.get("__type__", {}).get("stringValue") == _VECTOR_TYPE:
            vals = fields.get("value", {}).get("arrayValue", {}).get("values") or []
            return VectorValue(tuple(_decode_value(x) for x in vals))
        return {k: _decode_value(x, reference_factory) for k, x in fields.items()}
    return None


def decode_document(
    fields: dict | None, reference_factory: ReferenceFactory | None = None
) -> dict:
    """Convert Firestore REST Document.fields to a Python dict."""
    if not fields:
        return {}
    return {k: _decode_value(v, reference_factory) for k, v in fields.items()}


def quote_field_path_segment(segment: str) -> str:
    """Back-quote a field name that is not a simple identifier (e.g. '#count')."""
    if _SIMPLE_SEGMENT_RE.match(segment):
        return segment
    escaped = segment.replace("\\", "\\\\").replace("`", "\\`")
    return f"`{escaped}`"


def field_path(segments: list[str]) -> str:
    return ".".join(quote_field_path_segment(s) for s in segments)


def _reject_transforms(value: Any, segments: list[str]) -> None:
    if is_transform(value):
        raise UnsupportedFieldTransformException(field_path(segments))
    if isinstance(value, (list, tuple)):
        for item in value:
            _reject_transforms(item, segments)
    elif isinstance(value, dict):
        for k, item in value.items():
            _reject_transforms(item, [*segments, k])


def _split_write(
    data: dict[str, Any],
    segments: list[str],
    mask: list[str],
    transforms: list[dict],
    merge: bool,
) -> dict[str, Any]:
    """Separate sentinels from plain values.

    Returns the plain values; fills mask with leaf field paths (merge only)
    and transforms with server-side field transforms.
    """
    plain: dict[str, Any] = {}
    for key, value in data.items():
        path = [*segments, key]
        if value is DELETE_FIELD:
            if merge:
                mask.append(field_path(path))
            continue
        if value is SERVER_TIMESTAMP:
            transforms.append(
                {"fieldPath": field_path(path), "setToServerValue": "REQUEST_TIME"}
            )
            continue
        if isinstance(value, Increment):
            transforms.append(
                {"fieldPath": field_path(path), "increment": _encode_value(value.amount)}
            )
            continue
        if isinstance(value, dict) and value:
            nested = _split_write(value, path, mask, transforms, merge)
            if nested or not merge:
                plain[key] = nested
            continue
        if isinstance(value, (list, tuple)):
            _reject_transforms(value, path)
        plain[key] = value
        if merge:
            mask.append(field_path(path))
    return plain


def encode_write(
    name: str, data: dict[str, Any], *, merge: bool = False, root: str = ""
) -> dict:
    """Build one Firestore REST Write for a set/merge of data on document name.

    merge=False replaces the document. merge=True updates only the leaf
    paths present in data (DELETE_FIELD removes a path). SERVER_TIMESTAMP
    and Increment become updateTransforms.

    Raises:
        UnsupportedFieldTransformException: If a sentinel is inside an array.
        TypeError: If a value has no Firestore representation.
    """
    mask: list[str] = []
    transforms: list[dict] = []
    plain = _split_write(data, [], mask, transforms, merge)
    write: dict[str, Any] = {"update": {"name": name, **encode_document(plain, root)}}
    if merge:
        write["updateMask"] = {"fieldPaths": mask}
    if transforms:
        write["updateTransforms"] = transforms
    return write
