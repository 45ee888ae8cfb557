"""Pytest configuration and fixtures for fieldcodec.

Codec tests use an in-memory document store; REST client tests use
httpx.MockTransport so no network or credentials are needed.
"""

from types import SimpleNamespace
from typing import Any

import pytest

from fieldcodec.core.config import Settings, get_settings
from fieldcodec.infrastructure.firebase.registry import (
    build_default_registry,
    get_converter_registry,
)
from fieldcodec.infrastructure.firebase.types import DocumentReferenceBase

TEST_ROOT = "projects/test-project/databases/(default)/documents"


class InMemoryDocumentStore:
    """Document store holding native fields in a dict (implements IDocumentStore)."""

    def __init__(self) -> None:
        self.documents: dict[str, dict[str, Any]] = {}

    async def get(self, path: str) -> dict[str, Any] | None:
        return self.documents.get(path)

    async def set(self, path: str, data: dict[str, Any], merge: bool = False) -> None:
        if merge and path in self.documents:
            self.documents[path].update(data)
        else:
            self.documents[path] = dict(data)

    def resolve_reference(self, path: str) -> DocumentReferenceBase:
        return DocumentReferenceBase(path, f"{TEST_ROOT}/{path}")


@pytest.fixture(autouse=True)
def _clear_cached_settings():
    """Drop cached settings and registry so env overrides in a test do not leak."""
    get_settings.cache_clear()
    get_converter_registry.cache_clear()
    yield
    get_settings.cache_clear()
    get_converter_registry.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def registry(settings: Settings):
    """Default registry built from test settings (geohash precision 11)."""
    return build_default_registry(settings)


@pytest.fixture
def store() -> InMemoryDocumentStore:
    return InMemoryDocumentStore()


@pytest.fixture
def credentials() -> SimpleNamespace:
    """Stand-in for google-auth credentials that never need a refresh."""
    return SimpleNamespace(valid=True, token="test-token")
