"""Firestore integration: native types, REST client, store-side converters."""

from fieldcodec.infrastructure.firebase.client import (
    close_firebase,
    get_firestore_client,
    init_firebase,
    require_firestore_client,
)
from fieldcodec.infrastructure.firebase.registry import (
    build_default_registry,
    get_converter_registry,
)

__all__ = [
    "build_default_registry",
    "close_firebase",
    "get_converter_registry",
    "get_firestore_client",
    "init_firebase",
    "require_firestore_client",
]
