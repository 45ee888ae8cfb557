"""Application interfaces (ports): converter and store protocols.

No runtime imports from fieldcodec.infrastructure.
"""

from fieldcodec.application.interfaces.converters import (
    FirestoreModelFieldValueConverter,
    ModelFieldValueConverter,
)
from fieldcodec.application.interfaces.store import IDocumentStore

__all__ = [
    "FirestoreModelFieldValueConverter",
    "IDocumentStore",
    "ModelFieldValueConverter",
]
