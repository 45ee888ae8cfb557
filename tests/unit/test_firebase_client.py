"""Tests for Firestore client bootstrap from settings."""

import json

import pytest

from fieldcodec.domain.exceptions import StoreNotConfiguredException
from fieldcodec.infrastructure.firebase import client as firebase_client


@pytest.fixture(autouse=True)
def _no_global_client(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(firebase_client, "_firestore_client", None)
    monkeypatch.delenv("FIREBASE_SERVICE_ACCOUNT_KEY", raising=False)
    monkeypatch.delenv("FIREBASE_SERVICE_ACCOUNT_PATH", raising=False)


def test_without_credentials_is_noop() -> None:
    assert firebase_client.init_firebase() is False
    assert firebase_client.get_firestore_client() is None
    with pytest.raises(StoreNotConfiguredException):
        firebase_client.require_firestore_client()


def test_invalid_key_json_returns_false(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FIREBASE_SERVICE_ACCOUNT_KEY", "not json")
    assert firebase_client.init_firebase() is False


def test_missing_project_id_returns_false(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FIREBASE_SERVICE_ACCOUNT_KEY", json.dumps({"type": "service_account"}))
    assert firebase_client.init_firebase() is False


def test_missing_key_file_returns_false(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.setenv("FIREBASE_SERVICE_ACCOUNT_PATH", str(tmp_path / "missing.json"))
    assert firebase_client.init_firebase() is False


async def test_init_from_key_file(monkeypatch: pytest.MonkeyPatch, tmp_path, credentials) -> None:
    key_file = tmp_path / "key.json"
    key_file.write_text(json.dumps({"project_id": "demo"}), encoding="utf-8")
    monkeypatch.setenv("FIREBASE_SERVICE_ACCOUNT_PATH", str(key_file))
    monkeypatch.setenv("FIRESTORE_DATABASE", "staging")
    monkeypatch.setattr(firebase_client, "_get_credentials", lambda key_dict: credentials)

    assert firebase_client.init_firebase() is True
    assert firebase_client.init_firebase() is True
    client = firebase_client.require_firestore_client()
    assert client.root == "projects/demo/databases/staging/documents"

    await firebase_client.close_firebase()
    assert firebase_client.get_firestore_client() is None
