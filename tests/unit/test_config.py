"""Tests for Settings loading and range validation."""

import pytest
from pydantic import ValidationError

from fieldcodec.core.config import Settings, get_settings


def test_defaults(settings: Settings) -> None:
    assert settings.geohash_precision == 11
    assert settings.default_locale_language == "en"
    assert settings.firestore_database == "(default)"
    assert settings.firebase_service_account_key is None


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GEOHASH_PRECISION", "7")
    monkeypatch.setenv("DEFAULT_LOCALE_LANGUAGE", "ja")
    monkeypatch.setenv("FIRESTORE_DATABASE", "staging")
    settings = Settings(_env_file=None)
    assert settings.geohash_precision == 7
    assert settings.default_locale_language == "ja"
    assert settings.firestore_database == "staging"


def test_service_account_key_is_secret(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FIREBASE_SERVICE_ACCOUNT_KEY", '{"project_id": "p"}')
    settings = Settings(_env_file=None)
    assert settings.firebase_service_account_key is not None
    assert "project_id" not in repr(settings.firebase_service_account_key)
    assert settings.firebase_service_account_key.get_secret_value() == '{"project_id": "p"}'


@pytest.mark.parametrize("precision", ["0", "13"])
def test_geohash_precision_out_of_range(monkeypatch: pytest.MonkeyPatch, precision: str) -> None:
    monkeypatch.setenv("GEOHASH_PRECISION", precision)
    with pytest.raises(ValidationError, match="geohash_precision"):
        Settings(_env_file=None)


def test_timeout_must_be_positive(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FIRESTORE_TIMEOUT_SECONDS", "0")
    with pytest.raises(ValidationError, match="firestore_timeout_seconds"):
        Settings(_env_file=None)


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()
