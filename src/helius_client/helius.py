"""Top-level client wiring the REST, webhook and RPC layers together."""

import logging

import httpx

from helius_client.api.client import HeliusApiClient
from helius_client.config import Settings
from helius_client.rpc.client import RpcClient
from helius_client.utils.endpoints import get_helius_endpoints
from helius_client.webhooks.manager import WebhookManager
from helius_client.webhooks.models import DEFAULT_MINTLIST_PAGE_SIZE

logger = logging.getLogger(__name__)


class Helius:
    """Entry point for all Helius API methods.

    Owns one ``httpx.AsyncClient`` shared by every layer unless the caller
    passes its own, in which case closing it is the caller's job.
    """

    def __init__(
        self,
        api_key: str,
        cluster: str = "mainnet-beta",
        id: str = "helius-sdk",
        *,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
        page_size: int = DEFAULT_MINTLIST_PAGE_SIZE,
        max_pages: int | None = None,
    ) -> None:
        if not api_key:
            raise ValueError("`api_key` is required")

        self.cluster = cluster
        self.endpoints = get_helius_endpoints(cluster)
        self.endpoint = self.endpoints.api

        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            headers={"Content-Type": "application/json"},
            timeout=timeout,
        )
        self.api = HeliusApiClient(api_key, self.endpoints, http_client=self._client)
        self.webhooks = WebhookManager(self.api, page_size=page_size, max_pages=max_pages)
        self.rpc = RpcClient(
            self.endpoints.rpc_url,
            api_key=api_key,
            request_id=id,
            http_client=self._client,
        )
        logger.debug("Helius client ready for %s", cluster)

    @classmethod
    def from_settings(
        cls, settings: Settings, *, http_client: httpx.AsyncClient | None = None
    ) -> "Helius":
        return cls(
            settings.helius_api_key,
            settings.helius_cluster,
            settings.rpc_request_id,
            http_client=http_client,
            timeout=settings.http_timeout,
            page_size=settings.mintlist_page_size,
            max_pages=settings.mintlist_max_pages,
        )

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "Helius":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.close()
