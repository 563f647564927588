"""Tests for the httpx content store client."""

import json

import httpx
import pytest

from sanity_mcp.client import ClientConfig, ContentStore, SanityClient
from sanity_mcp.errors import ContentStoreError
from sanity_mcp.models import ArchiveReleaseAction, PublishAction

CONFIG = ClientConfig(
    project_id="abc123",
    dataset="production",
    token="sk-test",
    api_host="https://api.sanity.io",
    api_version="2025-02-19",
)
BASE = "https://abc123.api.sanity.io/v2025-02-19"


def make_client(handler) -> tuple[SanityClient, list[httpx.Request]]:
    requests: list[httpx.Request] = []

    def record(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return handler(request)

    http = httpx.AsyncClient(transport=httpx.MockTransport(record))
    return SanityClient(CONFIG, http=http), requests


def test_base_url():
    assert CONFIG.base_url == BASE


def test_base_url_defaults_to_https_without_scheme():
    config = ClientConfig(project_id="abc123", dataset="production", api_host="api.sanity.io/")
    assert config.base_url == BASE


def test_base_url_keeps_explicit_scheme():
    config = ClientConfig(project_id="abc123", dataset="d", api_host="http://localhost:3333")
    assert config.base_url == "http://abc123.localhost:3333/v2025-02-19"


def test_implements_protocol():
    client, _ = make_client(lambda request: httpx.Response(200, json={}))
    assert isinstance(client, ContentStore)


class TestGetDocument:
    async def test_returns_first_document(self):
        client, requests = make_client(
            lambda request: httpx.Response(200, json={"documents": [{"_id": "drafts.x"}]})
        )

        document = await client.get_document("drafts.x")

        assert document == {"_id": "drafts.x"}
        assert str(requests[0].url) == f"{BASE}/data/doc/production/drafts.x"
        assert requests[0].headers["Authorization"] == "Bearer sk-test"

    async def test_empty_list_is_none(self):
        client, _ = make_client(lambda request: httpx.Response(200, json={"documents": []}))
        assert await client.get_document("x") is None

    async def test_404_is_none(self):
        client, _ = make_client(lambda request: httpx.Response(404, json={"error": "Not found"}))
        assert await client.get_document("x") is None


class TestPerformAction:
    async def test_posts_single_action(self):
        client, requests = make_client(
            lambda request: httpx.Response(200, json={"transactionId": "tx-1"})
        )

        result = await client.perform_action(PublishAction(draft_id="drafts.x", published_id="x"))

        assert result.transaction_id == "tx-1"
        assert requests[0].method == "POST"
        assert str(requests[0].url) == f"{BASE}/data/actions/production"
        assert json.loads(requests[0].content) == {
            "actions": [
                {
                    "actionType": "sanity.action.document.publish",
                    "draftId": "drafts.x",
                    "publishedId": "x",
                }
            ]
        }

    async def test_error_description_is_surfaced(self):
        client, _ = make_client(
            lambda request: httpx.Response(
                409,
                json={"error": {"description": "Document has no draft", "type": "conflict"}},
            )
        )

        with pytest.raises(ContentStoreError) as exc_info:
            await client.perform_action(PublishAction(draft_id="drafts.x", published_id="x"))

        assert str(exc_info.value) == "Document has no draft"
        assert exc_info.value.status_code == 409

    async def test_transport_error_is_wrapped(self):
        def fail(request):
            raise httpx.ConnectError("connection refused", request=request)

        client, _ = make_client(fail)

        with pytest.raises(ContentStoreError) as exc_info:
            await client.perform_action(PublishAction(draft_id="drafts.x", published_id="x"))
        assert exc_info.value.status_code is None

    async def test_posts_release_action(self):
        client, requests = make_client(
            lambda request: httpx.Response(200, json={"transactionId": "tx-2"})
        )

        result = await client.perform_action(ArchiveReleaseAction(release_id="rspring"))

        assert result.transaction_id == "tx-2"
        assert str(requests[0].url) == f"{BASE}/data/actions/production"
        assert json.loads(requests[0].content) == {
            "actions": [{"actionType": "sanity.action.release.archive", "releaseId": "rspring"}]
        }


class TestMutate:
    async def test_posts_mutations_with_query(self):
        client, requests = make_client(
            lambda request: httpx.Response(200, json={"transactionId": "tx-2", "results": []})
        )

        result = await client.mutate([{"create": {"_id": "drafts.x"}}], return_documents=True)

        assert result["transactionId"] == "tx-2"
        request = requests[0]
        assert request.url.path == "/v2025-02-19/data/mutate/production"
        assert request.url.params["returnDocuments"] == "true"
        assert json.loads(request.content) == {"mutations": [{"create": {"_id": "drafts.x"}}]}


class TestWithConfig:
    async def test_shares_connection_and_targets_other_dataset(self):
        client, requests = make_client(lambda request: httpx.Response(200, json={"documents": []}))

        other = client.with_config(dataset="staging")
        await other.get_document("x")
        await other.close()

        assert other.config.project_id == "abc123"
        assert str(requests[0].url) == f"{BASE}/data/doc/staging/x"
        assert not client._http.is_closed
        await client.close()
