"""REST client tests against httpx.MockTransport (no network, no credentials)."""

import json
from datetime import UTC, datetime

import httpx
import pytest

from fieldcodec.infrastructure.firebase._rest_client import (
    DocumentExistsError,
    DocumentReference,
    FirestoreRESTClient,
)
from fieldcodec.infrastructure.firebase.types import DELETE_FIELD, Increment

ROOT = "projects/test-project/databases/(default)/documents"


def make_client(handler, credentials) -> FirestoreRESTClient:
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return FirestoreRESTClient("test-project", credentials, http_client=http)


async def test_get_decodes_fields_and_binds_references(credentials) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json={
                "name": f"{ROOT}/trips/t1",
                "fields": {
                    "title": {"stringValue": "Trip"},
                    "at": {"timestampValue": "2024-01-01T00:00:00Z"},
                    "owner": {"referenceValue": f"{ROOT}/users/alice"},
                },
            },
        )

    client = make_client(handler, credentials)
    data = await client.get("trips/t1")

    assert data["title"] == "Trip"
    assert data["at"] == datetime(2024, 1, 1, tzinfo=UTC)
    assert isinstance(data["owner"], DocumentReference)
    assert data["owner"].path == "users/alice"
    assert data["owner"].name == f"{ROOT}/users/alice"
    assert seen[0].method == "GET"
    assert seen[0].url.path.endswith("/documents/trips/t1")
    assert seen[0].headers["Authorization"] == "Bearer test-token"


async def test_get_missing_document_returns_none(credentials) -> None:
    client = make_client(lambda request: httpx.Response(404), credentials)
    assert await client.get("trips/missing") is None


async def test_set_commits_write_with_mask_and_transforms(credentials) -> None:
    bodies: list[dict] = []

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "POST"
        assert request.url.path.endswith("/documents:commit")
        bodies.append(json.loads(request.content))
        return httpx.Response(200, json={"writeResults": [{}]})

    client = make_client(handler, credentials)
    await client.set("trips/t1", {"views": Increment(1), "old": DELETE_FIELD, "n": 2}, merge=True)

    (write,) = bodies[0]["writes"]
    assert write["update"] == {"name": f"{ROOT}/trips/t1", "fields": {"n": {"integerValue": "2"}}}
    assert write["updateMask"] == {"fieldPaths": ["old", "n"]}
    assert write["updateTransforms"] == [
        {"fieldPath": "views", "increment": {"integerValue": "1"}}
    ]


async def test_conflict_raises_document_exists(credentials) -> None:
    client = make_client(lambda request: httpx.Response(409), credentials)
    with pytest.raises(DocumentExistsError):
        await client.set("trips/t1", {"n": 1})


async def test_server_error_raises(credentials) -> None:
    client = make_client(lambda request: httpx.Response(500), credentials)
    with pytest.raises(httpx.HTTPStatusError):
        await client.get("trips/t1")


async def test_stream_follows_page_tokens(credentials) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        token = request.url.params.get("pageToken")
        if token is None:
            return httpx.Response(
                200,
                json={
                    "documents": [{"name": f"{ROOT}/trips/a", "fields": {"n": {"integerValue": "1"}}}],
                    "nextPageToken": "next",
                },
            )
        assert token == "next"
        return httpx.Response(
            200,
            json={"documents": [{"name": f"{ROOT}/trips/b", "fields": {"n": {"integerValue": "2"}}}]},
        )

    client = make_client(handler, credentials)
    snapshots = [s async for s in client.collection("trips").stream()]
    assert [(s.id, s.to_dict()) for s in snapshots] == [("a", {"n": 1}), ("b", {"n": 2})]


async def test_delete_is_idempotent(credentials) -> None:
    methods: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        methods.append(request.method)
        return httpx.Response(404)

    client = make_client(handler, credentials)
    await client.document("trips/t1").delete()
    assert methods == ["DELETE"]


async def test_references_and_paths(credentials) -> None:
    client = make_client(lambda request: httpx.Response(200, json={}), credentials)
    ref = client.resolve_reference("/users/alice/")
    assert ref.path == "users/alice"
    assert ref.id == "alice"
    assert ref.name == f"{ROOT}/users/alice"
    assert ref.collection("posts").document("p1").path == "users/alice/posts/p1"
    assert client.database_name == "projects/test-project/databases/(default)"


async def test_injected_http_client_not_closed(credentials) -> None:
    http = httpx.AsyncClient(transport=httpx.MockTransport(lambda request: httpx.Response(200)))
    client = FirestoreRESTClient("test-project", credentials, http_client=http)
    await client.aclose()
    assert not http.is_closed
    await http.aclose()
