"""Content store client for the Sanity HTTP API.

The ContentStore protocol is what the document operations consume; SanityClient
implements it over httpx. A process-wide client is created lazily from settings
by get_client() and closed by close_client().

The client never retries. Transport errors and non-2xx responses surface as
ContentStoreError.
"""

import asyncio
import logging
from dataclasses import dataclass, replace
from typing import Any, Protocol, runtime_checkable
from urllib.parse import quote

import httpx

from .config import settings
from .errors import ContentStoreError
from .models import Action, ActionResult, ReleaseAction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClientConfig:
    """Read-only resource and API settings shared by concurrent calls."""

    project_id: str
    dataset: str
    token: str = ""
    api_host: str = "https://api.sanity.io"
    api_version: str = "2025-02-19"

    @property
    def base_url(self) -> str:
        """Project-scoped API root, e.g. https://abc123.api.sanity.io/v2025-02-19.

        An ``api_host`` given without a scheme is reached over https.
        """
        scheme, separator, host = self.api_host.rstrip("/").partition("://")
        if not separator:
            scheme, host = "https", scheme
        return f"{scheme}://{self.project_id}.{host}/v{self.api_version.lstrip('v')}"


@runtime_checkable
class ContentStore(Protocol):
    """Operations the document layer needs from the content store."""

    config: ClientConfig

    def with_config(
        self, project_id: str | None = None, dataset: str | None = None
    ) -> "ContentStore":
        """Client for another project/dataset."""
        ...

    async def get_document(self, document_id: str) -> dict[str, Any] | None:
        """Fetch a document by exact id. Returns None when it does not exist."""
        ...

    async def perform_action(self, action: Action | ReleaseAction) -> ActionResult:
        """Send one action as a single atomic request."""
        ...

    async def mutate(
        self, mutations: list[dict[str, Any]], return_documents: bool = False
    ) -> dict[str, Any]:
        """Apply a transaction of mutations."""
        ...


def _error_description(payload: Any) -> str | None:
    """Pull the human-readable message out of an API error body."""
    if not isinstance(payload, dict):
        return None
    error = payload.get("error")
    if isinstance(error, dict):
        return error.get("description") or error.get("message")
    if isinstance(error, str):
        return payload.get("message") or error
    return payload.get("message")


class SanityClient:
    """Async client for one Sanity project/dataset.

    Clients created with with_config() share the parent's connection pool;
    only the client that created the pool closes it.
    """

    def __init__(
        self,
        config: ClientConfig,
        http: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ):
        self.config = config
        self._owns_http = http is None
        self._http = http or httpx.AsyncClient(timeout=timeout)

    def with_config(
        self, project_id: str | None = None, dataset: str | None = None
    ) -> "SanityClient":
        """Return a client for another resource sharing this client's connections."""
        config = replace(
            self.config,
            project_id=project_id or self.config.project_id,
            dataset=dataset or self.config.dataset,
        )
        return SanityClient(config, http=self._http)

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.config.token:
            headers["Authorization"] = f"Bearer {self.config.token}"
        return headers

    async def _request(
        self,
        method: str,
        path: str,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
        allow_not_found: bool = False,
    ) -> Any:
        url = f"{self.config.base_url}{path}"
        try:
            response = await self._http.request(
                method, url, json=json, params=params, headers=self._headers()
            )
        except httpx.HTTPError as e:
            logger.warning(f"Content store request failed: {method} {path}: {e}")
            raise ContentStoreError(f"Request to content store failed: {e}") from e

        if allow_not_found and response.status_code == 404:
            return None

        try:
            payload = response.json()
        except ValueError:
            payload = response.text

        if response.status_code >= 400:
            description = _error_description(payload) or f"HTTP {response.status_code}"
            logger.warning(
                f"Content store returned {response.status_code} for {method} {path}: {description}"
            )
            raise ContentStoreError(description, status_code=response.status_code, payload=payload)

        return payload

    async def get_document(self, document_id: str) -> dict[str, Any] | None:
        path = f"/data/doc/{self.config.dataset}/{quote(document_id, safe='.-_')}"
        payload = await self._request("GET", path, allow_not_found=True)
        if not payload:
            return None
        documents = payload.get("documents") or []
        return documents[0] if documents else None

    async def perform_action(self, action: Action | ReleaseAction) -> ActionResult:
        payload = await self._request(
            "POST",
            f"/data/actions/{self.config.dataset}",
            json={"actions": [action.to_wire()]},
        )
        return ActionResult(transaction_id=(payload or {}).get("transactionId"))

    async def mutate(
        self, mutations: list[dict[str, Any]], return_documents: bool = False
    ) -> dict[str, Any]:
        params = {"returnDocuments": "true" if return_documents else "false", "visibility": "sync"}
        payload = await self._request(
            "POST",
            f"/data/mutate/{self.config.dataset}",
            json={"mutations": mutations},
            params=params,
        )
        return payload or {}

    async def close(self) -> None:
        if self._owns_http:
            await self._http.aclose()


# Global client instance
_client: SanityClient | None = None
_lock = asyncio.Lock()


def config_from_settings() -> ClientConfig:
    """Build the default client configuration from environment settings."""
    return ClientConfig(
        project_id=settings.sanity_project_id,
        dataset=settings.sanity_dataset,
        token=settings.sanity_api_token,
        api_host=settings.sanity_api_host,
        api_version=settings.sanity_api_version,
    )


async def get_client() -> SanityClient:
    """Get or create the shared SanityClient."""
    global _client

    async with _lock:
        if _client is None:
            config = config_from_settings()
            if not config.project_id or not config.dataset:
                logger.warning(
                    "SANITY_PROJECT_ID or SANITY_DATASET not set; tools will fail until configured"
                )
            _client = SanityClient(config, timeout=settings.request_timeout_seconds)
            logger.info(
                f"Content store client created for project {config.project_id or '<unset>'}, "
                f"dataset {config.dataset or '<unset>'}"
            )
        return _client


async def close_client() -> None:
    """Close the shared client."""
    global _client
    async with _lock:
        if _client is not None:
            try:
                await _client.close()
                logger.info("Content store client closed")
            finally:
                _client = None
