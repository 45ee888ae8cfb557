"""Tests for shared utilities (datetime, shapes, geohash)."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from fieldcodec.shared.utils.datetime import (
    ensure_utc,
    from_microseconds,
    from_timestamp_ms_utc,
    parse_iso_utc,
    to_iso_millis,
    to_microseconds,
    utc_now,
)
from fieldcodec.shared.utils.geohash import encode_geohash
from fieldcodec.shared.utils.shapes import (
    field_or_default,
    is_dynamic_map,
    is_tagged,
    type_of,
)


class TestDatetimeUtils:
    def test_utc_now_is_aware(self) -> None:
        now = utc_now()
        assert now.tzinfo is not None
        assert now.utcoffset() == timedelta(0)

    def test_ensure_utc(self) -> None:
        assert ensure_utc(None) is None
        assert ensure_utc(datetime(2024, 1, 1)) == datetime(2024, 1, 1, tzinfo=UTC)
        minus_five = timezone(timedelta(hours=-5))
        converted = ensure_utc(datetime(2024, 1, 1, 7, tzinfo=minus_five))
        assert converted == datetime(2024, 1, 1, 12, tzinfo=UTC)

    def test_microseconds_are_exact(self) -> None:
        dt = datetime(2024, 1, 1, 0, 0, 0, 123456, tzinfo=UTC)
        assert to_microseconds(dt) == 1_704_067_200_123_456
        assert from_microseconds(1_704_067_200_123_456) == dt

    def test_from_timestamp_ms(self) -> None:
        assert from_timestamp_ms_utc(1_704_067_200_000) == datetime(2024, 1, 1, tzinfo=UTC)

    def test_to_iso_millis_truncates_to_milliseconds(self) -> None:
        dt = datetime(2024, 1, 1, 0, 0, 0, 123999, tzinfo=UTC)
        assert to_iso_millis(dt) == "2024-01-01T00:00:00.123Z"
        assert to_iso_millis(datetime(2024, 1, 1, tzinfo=UTC)) == "2024-01-01T00:00:00.000Z"

    def test_parse_iso_utc(self) -> None:
        assert parse_iso_utc("2024-01-01T00:00:00.000Z") == datetime(2024, 1, 1, tzinfo=UTC)
        assert parse_iso_utc("2024-01-01T03:00:00+03:00") == datetime(2024, 1, 1, tzinfo=UTC)

    def test_parse_iso_utc_invalid_returns_none(self) -> None:
        assert parse_iso_utc("not a date") is None


class TestShapes:
    def test_is_dynamic_map(self) -> None:
        assert is_dynamic_map({})
        assert is_dynamic_map({"a": 1})
        assert not is_dynamic_map(None)
        assert not is_dynamic_map([])
        assert not is_dynamic_map("text")

    def test_is_tagged_and_type_of(self) -> None:
        wire = {"@type": "ModelCounter", "@value": 1}
        assert is_tagged(wire)
        assert type_of(wire) == "ModelCounter"
        assert not is_tagged({"a": 1})
        assert type_of({"a": 1}) == ""
        assert type_of({"@type": 5}) == ""
        assert type_of([]) == ""

    def test_field_or_default_returns_matching_value(self) -> None:
        assert field_or_default({"@value": 3}, "@value", (int, float), 0) == 3

    def test_field_or_default_missing_or_malformed(self) -> None:
        assert field_or_default({}, "@value", (int, float), 0) == 0
        assert field_or_default({"@value": "3"}, "@value", (int, float), 0) == 0
        assert field_or_default(None, "@value", (int, float), 0) == 0

    def test_field_or_default_rejects_bool_for_numbers(self) -> None:
        assert field_or_default({"@value": True}, "@value", (int, float), 0) == 0
        assert field_or_default({"@now": True}, "@now", bool, False) is True


class TestGeohash:
    def test_known_point(self) -> None:
        assert encode_geohash(57.64911, 10.40744) == "u4pruydqqvj"

    def test_precision(self) -> None:
        assert encode_geohash(57.64911, 10.40744, 5) == "u4pru"
        assert encode_geohash(0.0, 0.0, 1) == "s"

    @pytest.mark.parametrize(
        ("latitude", "longitude", "precision"),
        [(90.1, 0.0, 5), (0.0, -180.5, 5), (0.0, 0.0, 0), (0.0, 0.0, 13)],
    )
    def test_out_of_range(self, latitude: float, longitude: float, precision: int) -> None:
        with pytest.raises(ValueError):
            encode_geohash(latitude, longitude, precision)
