"""Tests for tagged field values (normalisation and derived computations)."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from fieldcodec.domain.enums import ModelFieldValueType, ValueSource
from fieldcodec.domain.value_objects import (
    ModelCounter,
    ModelDate,
    ModelGeoValue,
    ModelLocale,
    ModelLocalizedLocaleValue,
    ModelLocalizedValue,
    ModelRefBase,
    ModelSearch,
    ModelTimeRange,
    ModelTimestamp,
    ModelToken,
    ModelVectorValue,
)

JAN_1 = datetime(2024, 1, 1, tzinfo=UTC)
JAN_2 = datetime(2024, 1, 2, tzinfo=UTC)


class TestEnums:
    def test_value_source_values(self) -> None:
        assert ValueSource.values() == ["user", "server"]

    def test_value_source_parse_defaults_to_user(self) -> None:
        assert ValueSource.parse("server") == ValueSource.SERVER
        assert ValueSource.parse("user") == ValueSource.USER
        assert ValueSource.parse(None) == ValueSource.USER
        assert ValueSource.parse("other") == ValueSource.USER

    def test_type_names(self) -> None:
        assert ModelFieldValueType.COUNTER == "ModelCounter"
        assert "ModelServerCommandBase" in ModelFieldValueType.values()


class TestModelCounter:
    def test_defaults_to_user_source(self) -> None:
        counter = ModelCounter(3)
        assert counter.source == ValueSource.USER
        assert counter.increment == 0
        assert not counter.from_server

    def test_add_accumulates_pending_increment(self) -> None:
        counter = ModelCounter(10).add(2).add(3)
        assert counter.value == 15
        assert counter.increment == 5
        assert counter.source == ValueSource.USER

    def test_add_on_server_value_restarts_increment(self) -> None:
        counter = ModelCounter(41, 7, source=ValueSource.SERVER).add(1)
        assert counter.value == 42
        assert counter.increment == 1
        assert counter.source == ValueSource.USER


class TestModelTimestamp:
    def test_naive_datetime_is_treated_as_utc(self) -> None:
        value = ModelTimestamp(datetime(2024, 1, 1))
        assert value.value == JAN_1
        assert value.microseconds == 1_704_067_200_000_000

    def test_aware_datetime_is_converted_to_utc(self) -> None:
        eat = timezone(timedelta(hours=3))
        value = ModelTimestamp(datetime(2024, 1, 1, 3, tzinfo=eat))
        assert value.value == JAN_1
        assert value.value.tzinfo == UTC

    def test_now_sets_use_now(self) -> None:
        value = ModelDate.now()
        assert value.use_now
        assert isinstance(value, ModelDate)
        assert value.value_type == ModelFieldValueType.DATE

    def test_from_microseconds(self) -> None:
        value = ModelTimestamp.from_microseconds(
            1_704_067_200_000_123, source=ValueSource.SERVER
        )
        assert value.value == JAN_1 + timedelta(microseconds=123)
        assert value.from_server


class TestModelTimeRange:
    def test_reversed_range_is_swapped(self) -> None:
        value = ModelTimeRange(JAN_2, JAN_1)
        assert value.start == JAN_1
        assert value.end == JAN_2

    def test_microsecond_accessors(self) -> None:
        value = ModelTimeRange(JAN_1, JAN_2)
        assert value.start_microseconds == 1_704_067_200_000_000
        assert value.end_microseconds == 1_704_153_600_000_000
        assert value.duration_microseconds == 86_400_000_000


class TestModelLocale:
    def test_str_without_country(self) -> None:
        assert str(ModelLocale("en")) == "en"

    def test_str_with_country(self) -> None:
        assert str(ModelLocale("en", "US")) == "en_US"

    @pytest.mark.parametrize("text", ["en_US", "en-US", " en_US "])
    def test_parse(self, text: str) -> None:
        assert ModelLocale.parse(text) == ModelLocale("en", "US")

    def test_empty_language_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-empty"):
            ModelLocale("")


class TestModelLocalizedValue:
    def test_round_trip_map(self) -> None:
        value = ModelLocalizedValue.from_map({"en": "Hello", "ja_JP": "Konnichiwa"})
        assert value.entries == (
            ModelLocalizedLocaleValue(ModelLocale("en"), "Hello"),
            ModelLocalizedLocaleValue(ModelLocale("ja", "JP"), "Konnichiwa"),
        )
        assert value.to_map() == {"en": "Hello", "ja_JP": "Konnichiwa"}

    def test_value_for_exact_then_language_fallback(self) -> None:
        value = ModelLocalizedValue.from_map({"en_GB": "Colour", "en_US": "Color"})
        assert value.value_for("en_US") == "Color"
        assert value.value_for(ModelLocale("en", "AU")) == "Colour"
        assert value.value_for("fr", default="?") == "?"

    def test_list_input_becomes_tuple(self) -> None:
        value = ModelLocalizedValue([ModelLocalizedLocaleValue(ModelLocale("en"), 1)])
        assert isinstance(value.entries, tuple)


class TestModelRefBase:
    def test_trailing_slashes_removed(self) -> None:
        ref = ModelRefBase("users/alice//")
        assert ref.path == "users/alice"
        assert ref.id == "alice"
        assert ref.collection_path == "users"

    def test_doc_not_part_of_equality(self) -> None:
        assert ModelRefBase("users/alice", doc=object()) == ModelRefBase("users/alice")


class TestModelGeoValue:
    def test_geo_hash(self) -> None:
        value = ModelGeoValue(57.64911, 10.40744)
        assert value.geo_hash(11) == "u4pruydqqvj"
        assert value.geo_hash(5) == "u4pru"

    def test_geohash_not_part_of_equality(self) -> None:
        assert ModelGeoValue(1.0, 2.0, geohash="abc") == ModelGeoValue(1.0, 2.0)

    def test_out_of_range_rejected(self) -> None:
        with pytest.raises(ValueError, match="latitude"):
            ModelGeoValue(91.0, 0.0)
        with pytest.raises(ValueError, match="longitude"):
            ModelGeoValue(0.0, 181.0)


class TestListValues:
    def test_vector_components_are_float_tuple(self) -> None:
        value = ModelVectorValue([1, 2.5])
        assert value.components == (1.0, 2.5)
        assert value.dimensions == 2

    def test_search_of_drops_empty_and_duplicates(self) -> None:
        value = ModelSearch.of(["a", "", "b", "a"])
        assert value.values == ("a", "b")

    def test_token_is_distinct_type(self) -> None:
        assert ModelToken(("a",)) != ModelSearch(("a",))
        assert ModelToken.value_type == ModelFieldValueType.TOKEN
