"""Firestore repositories."""

from fieldcodec.infrastructure.firebase.repositories.model_document_repo_firestore import (
    FirestoreModelDocumentRepository,
)

__all__ = ["FirestoreModelDocumentRepository"]
