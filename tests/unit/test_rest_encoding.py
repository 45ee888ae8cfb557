"""Tests for Firestore REST value encoding, decoding and write building."""

from datetime import UTC, datetime

import pytest

from fieldcodec.domain.exceptions import UnsupportedFieldTransformException
from fieldcodec.infrastructure.firebase._rest_encoding import (
    decode_document,
    encode_document,
    encode_write,
    field_path,
    path_from_name,
    quote_field_path_segment,
)
from fieldcodec.infrastructure.firebase.types import (
    DELETE_FIELD,
    SERVER_TIMESTAMP,
    DocumentReferenceBase,
    GeoPoint,
    Increment,
    VectorValue,
)

ROOT = "projects/p/databases/(default)/documents"
NAME = f"{ROOT}/trips/t1"


class TestValues:
    def test_scalars(self) -> None:
        fields = encode_document(
            {"n": None, "b": True, "i": 5, "f": 1.5, "s": "x", "raw": b"\x00\x01"}
        )["fields"]
        assert fields == {
            "n": {"nullValue": None},
            "b": {"booleanValue": True},
            "i": {"integerValue": "5"},
            "f": {"doubleValue": 1.5},
            "s": {"stringValue": "x"},
            "raw": {"bytesValue": "AAE="},
        }
        assert decode_document(fields) == {
            "n": None,
            "b": True,
            "i": 5,
            "f": 1.5,
            "s": "x",
            "raw": b"\x00\x01",
        }

    def test_timestamp(self) -> None:
        dt = datetime(2024, 1, 1, 0, 0, 0, 123456, tzinfo=UTC)
        fields = encode_document({"at": dt})["fields"]
        assert fields == {"at": {"timestampValue": "2024-01-01T00:00:00.123456Z"}}
        assert decode_document(fields) == {"at": dt}

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("2024-01-01T00:00:00Z", datetime(2024, 1, 1, tzinfo=UTC)),
            ("2024-01-01T00:00:00.123456789Z", datetime(2024, 1, 1, 0, 0, 0, 123456, tzinfo=UTC)),
            ("2024-01-01T00:00:00.5Z", datetime(2024, 1, 1, 0, 0, 0, 500000, tzinfo=UTC)),
            ("2024-01-01T03:00:00+03:00", datetime(2024, 1, 1, tzinfo=UTC)),
        ],
    )
    def test_timestamp_precision_and_offsets(self, raw: str, expected: datetime) -> None:
        assert decode_document({"at": {"timestampValue": raw}}) == {"at": expected}

    def test_geopoint(self) -> None:
        fields = encode_document({"p": GeoPoint(1.5, -2.5)})["fields"]
        assert fields == {"p": {"geoPointValue": {"latitude": 1.5, "longitude": -2.5}}}
        assert decode_document(fields) == {"p": GeoPoint(1.5, -2.5)}

    def test_vector(self) -> None:
        fields = encode_document({"v": VectorValue((1, 2.5))})["fields"]
        assert fields == {
            "v": {
                "mapValue": {
                    "fields": {
                        "__type__": {"stringValue": "__vector__"},
                        "value": {
                            "arrayValue": {
                                "values": [{"doubleValue": 1.0}, {"doubleValue": 2.5}]
                            }
                        },
                    }
                }
            }
        }
        assert decode_document(fields) == {"v": VectorValue((1.0, 2.5))}

    def test_reference_uses_root_when_name_unknown(self) -> None:
        fields = encode_document({"r": DocumentReferenceBase("users/a")}, ROOT)["fields"]
        assert fields == {"r": {"referenceValue": f"{ROOT}/users/a"}}

        decoded = decode_document(fields)["r"]
        assert decoded == DocumentReferenceBase("users/a")
        assert decoded.name == f"{ROOT}/users/a"

    def test_reference_factory(self) -> None:
        seen: list[str] = []

        def factory(name: str) -> DocumentReferenceBase:
            seen.append(name)
            return DocumentReferenceBase(path_from_name(name), name)

        decode_document({"r": {"referenceValue": f"{ROOT}/users/a"}}, factory)
        assert seen == [f"{ROOT}/users/a"]

    def test_nested_arrays_and_maps(self) -> None:
        data = {"xs": [1, "a", {"k": [True]}], "m": {}}
        assert decode_document(encode_document(data)["fields"]) == data

    def test_unsupported_type(self) -> None:
        with pytest.raises(TypeError, match="Unsupported Firestore value type"):
            encode_document({"x": object()})

    def test_empty_fields(self) -> None:
        assert decode_document(None) == {}
        assert decode_document({}) == {}

    def test_path_from_name(self) -> None:
        assert path_from_name(f"{ROOT}/users/a") == "users/a"
        assert path_from_name("users/a") == "users/a"


class TestFieldPaths:
    @pytest.mark.parametrize(
        ("segment", "quoted"),
        [
            ("count", "count"),
            ("_private2", "_private2"),
            ("#count", "`#count`"),
            ("@type", "`@type`"),
            ("2nd", "`2nd`"),
            ("a`b", "`a\\`b`"),
        ],
    )
    def test_quote_segment(self, segment: str, quoted: str) -> None:
        assert quote_field_path_segment(segment) == quoted

    def test_field_path(self) -> None:
        assert field_path(["#names", "en"]) == "`#names`.en"


class TestWrites:
    def test_replace_write_has_no_mask(self) -> None:
        write = encode_write(NAME, {"a": 1, "gone": DELETE_FIELD})
        assert write == {"update": {"name": NAME, "fields": {"a": {"integerValue": "1"}}}}

    def test_merge_write_masks_leaf_paths(self) -> None:
        write = encode_write(
            NAME,
            {"a": 1, "gone": DELETE_FIELD, "m": {"x": 2, "y": DELETE_FIELD}},
            merge=True,
        )
        assert write["update"]["fields"] == {
            "a": {"integerValue": "1"},
            "m": {"mapValue": {"fields": {"x": {"integerValue": "2"}}}},
        }
        assert write["updateMask"] == {"fieldPaths": ["a", "gone", "m.x", "m.y"]}
        assert "updateTransforms" not in write

    def test_shadow_field_paths_are_quoted(self) -> None:
        write = encode_write(
            NAME,
            {"count": Increment(5), "#count": {"@type": "ModelCounter", "@increment": 5}},
            merge=True,
        )
        assert write["updateMask"] == {"fieldPaths": ["`#count`.`@type`", "`#count`.`@increment`"]}
        assert write["updateTransforms"] == [
            {"fieldPath": "count", "increment": {"integerValue": "5"}}
        ]

    def test_server_timestamp_transform(self) -> None:
        write = encode_write(NAME, {"at": SERVER_TIMESTAMP, "n": 1})
        assert write["update"]["fields"] == {"n": {"integerValue": "1"}}
        assert write["updateTransforms"] == [
            {"fieldPath": "at", "setToServerValue": "REQUEST_TIME"}
        ]

    def test_float_increment(self) -> None:
        write = encode_write(NAME, {"score": Increment(0.5)})
        assert write["updateTransforms"] == [
            {"fieldPath": "score", "increment": {"doubleValue": 0.5}}
        ]

    def test_transform_inside_array_rejected(self) -> None:
        with pytest.raises(UnsupportedFieldTransformException) as exc_info:
            encode_write(NAME, {"xs": [1, Increment(1)]})
        assert exc_info.value.details == {"field_path": "xs"}

    def test_references_encoded_against_root(self) -> None:
        write = encode_write(NAME, {"r": DocumentReferenceBase("users/a")}, root=ROOT)
        assert write["update"]["fields"] == {"r": {"referenceValue": f"{ROOT}/users/a"}}
