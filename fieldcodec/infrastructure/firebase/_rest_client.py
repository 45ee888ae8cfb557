"""Thin Firestore REST API client (no firebase-admin).

Uses google-auth for service account tokens and Firestore REST v1.
Avoids grpcio / firebase-admin; the codec only needs get, set (with merge
and field transforms), reference resolution and collection listing.
All HTTP calls use httpx.AsyncClient so they do not block the event loop.
"""

from __future__ import annotations

import asyncio
import json
from collections.abc import AsyncIterator
from typing import Any

import httpx

from fieldcodec.infrastructure.firebase._rest_encoding import (
    decode_document,
    encode_write,
    path_from_name,
)
from fieldcodec.infrastructure.firebase.types import DocumentReferenceBase
from fieldcodec.shared.telemetry import get_logger

logger = get_logger(__name__)

_FIRESTORE_SCOPE = "https://www.googleapis.com/auth/datastore"
_BASE = "https://firestore.googleapis.com/v1"


def _get_credentials(key_dict: dict):
    """Return google.oauth2.service_account.Credentials for Firestore."""
    from google.oauth2 import service_account

    return service_account.Credentials.from_service_account_info(
        key_dict, scopes=[_FIRESTORE_SCOPE]
    )


def _get_access_token(credentials) -> str:
    from google.auth.transport.requests import Request

    if not credentials.valid:
        credentials.refresh(Request())
    return credentials.token


async def _request_async(
    client: httpx.AsyncClient,
    url: str,
    method: str = "GET",
    body: dict | None = None,
    access_token: str | None = None,
) -> dict | None:
    """Perform async HTTP request to Firestore REST API. 404 returns None."""
    headers = {"Content-Type": "application/json"}
    if access_token:
        headers["Authorization"] = f"Bearer {access_token}"
    if method == "GET":
        resp = await client.get(url, headers=headers)
    elif method == "POST":
        resp = await client.post(url, headers=headers, json=body)
    elif method == "DELETE":
        resp = await client.delete(url, headers=headers)
    else:
        raise ValueError(f"Unsupported method: {method!r}")
    if resp.status_code == 404:
        return None
    if resp.status_code == 409:
        raise DocumentExistsError("Document already exists")
    if resp.status_code not in (200, 204):
        resp.raise_for_status()
    if method == "DELETE":
        return {}
    raw = resp.content
    return json.loads(raw.decode()) if raw else {}


class DocumentExistsError(Exception):
    """Raised when Firestore returns 409 (document already exists / conflict)."""


class DocumentReference(DocumentReferenceBase):
    """Reference to a single document; matches firestore API style."""

    def __init__(self, client: FirestoreRESTClient, path: str) -> None:
        path = path.strip("/")
        super().__init__(path, f"{client.root}/{path}")
        self._client = client

    def collection(self, collection_id: str) -> CollectionReference:
        return CollectionReference(self._client, f"{self.path}/{collection_id}")

    async def get(self) -> DocumentSnapshot | None:
        """Fetch the document; returns None if not found."""
        out = await _request_async(
            self._client._http,
            f"{_BASE}/{self.name}",
            access_token=await self._client.get_token(),
        )
        if not out:
            return None
        return DocumentSnapshot(self.id, self._client.decode(out.get("fields")))

    async def set(self, data: dict[str, Any], merge: bool = False) -> None:
        """Write data through a commit so sentinels become field transforms.

        merge=False replaces the document; merge=True touches only the
        given leaf paths.
        """
        write = encode_write(self.name, data, merge=merge, root=self._client.root)
        await _request_async(
            self._client._http,
            f"{_BASE}/{self._client.database_name}/documents:commit",
            method="POST",
            body={"writes": [write]},
            access_token=await self._client.get_token(),
        )

    async def delete(self) -> None:
        """Delete the document. Idempotent if document is already missing (404)."""
        await _request_async(
            self._client._http,
            f"{_BASE}/{self.name}",
            method="DELETE",
            access_token=await self._client.get_token(),
        )


class DocumentSnapshot:
    """Snapshot of a document (id + data)."""

    def __init__(self, id_: str, data: dict):
        self.id = id_
        self._data = data

    def to_dict(self) -> dict:
        return self._data


class CollectionReference:
    """Reference to a collection; matches firestore API style."""

    def __init__(self, client: FirestoreRESTClient, path: str):
        self._client = client
        self._path = path.strip("/")

    @property
    def path(self) -> str:
        return self._path

    def document(self, document_id: str) -> DocumentReference:
        return DocumentReference(self._client, f"{self._path}/{document_id}")

    async def stream(self) -> AsyncIterator[DocumentSnapshot]:
        """List documents in the collection (shallow), following page tokens."""
        url = f"{_BASE}/{self._client.root}/{self._path}"
        page_token: str | None = None
        while True:
            page_url = f"{url}?pageToken={page_token}" if page_token else url
            out = await _request_async(
                self._client._http,
                page_url,
                access_token=await self._client.get_token(),
            )
            if not out:
                return
            for doc in out.get("documents", []):
                name = doc.get("name", "")
                doc_id = name.split("/")[-1] if name else ""
                yield DocumentSnapshot(doc_id, self._client.decode(doc.get("fields")))
            page_token = out.get("nextPageToken")
            if not page_token:
                return


class FirestoreRESTClient:
    """Lightweight Firestore client using REST API (no firebase-admin).

    Implements the document store used by the model document repository:
    get(path), set(path, data, merge) and resolve_reference(path).
    """

    def __init__(
        self,
        project_id: str,
        credentials,
        *,
        database: str = "(default)",
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ) -> None:
        self._project_id = project_id
        self._credentials = credentials
        self._database_name = f"projects/{project_id}/databases/{database}"
        self._prefix = f"{self._database_name}/documents"
        self._http = http_client if http_client is not None else httpx.AsyncClient(timeout=timeout)
        self._owns_http = http_client is None

    @property
    def database_name(self) -> str:
        return self._database_name

    @property
    def root(self) -> str:
        """Resource name of the documents root (projects/<p>/databases/<d>/documents)."""
        return self._prefix

    async def aclose(self) -> None:
        """Close the HTTP client only if we created it (do not close injected client)."""
        if self._owns_http:
            await self._http.aclose()

    async def get_token(self) -> str:
        """Return a valid access token; refreshes in thread pool to avoid blocking."""
        return await asyncio.to_thread(_get_access_token, self._credentials)

    def collection(self, collection_path: str) -> CollectionReference:
        return CollectionReference(self, collection_path)

    def document(self, path: str) -> DocumentReference:
        return DocumentReference(self, path)

    def resolve_reference(self, path: str) -> DocumentReference:
        """Return a reference for a document path (no network call)."""
        return DocumentReference(self, path)

    def decode(self, fields: dict | None) -> dict:
        """Decode REST fields; referenceValues become references bound to this client."""
        return decode_document(
            fields, lambda name: DocumentReference(self, path_from_name(name))
        )

    async def get(self, path: str) -> dict[str, Any] | None:
        """Return the document's native fields, or None if it does not exist."""
        snapshot = await self.document(path).get()
        if snapshot is None:
            return None
        logger.debug("Fetched Firestore document %s", path)
        return snapshot.to_dict()

    async def set(self, path: str, data: dict[str, Any], merge: bool = False) -> None:
        await self.document(path).set(data, merge=merge)
        logger.debug("Wrote Firestore document %s (merge=%s)", path, merge)
