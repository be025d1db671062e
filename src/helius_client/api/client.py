import logging

import httpx
from pydantic import ValidationError

from helius_client.errors import RemoteCallFailedError, WebhookNotFoundError
from helius_client.utils.endpoints import HeliusEndpoints
from helius_client.webhooks.models import (
    CollectionQuery,
    MintlistPage,
    Webhook,
    WebhookPayload,
)

logger = logging.getLogger(__name__)


def _error_detail(resp: httpx.Response) -> str:
    """Prefer the service's ``error`` field, fall back to status and body text."""
    try:
        body = resp.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return f"HTTP {resp.status_code}: {resp.text or resp.reason_phrase}"


class HeliusApiClient:
    """REST calls against the Helius webhook and mintlist endpoints.

    One call in, one call out: no retries, no caching. Every failure is
    raised as RemoteCallFailedError tagged with the operation name.
    """

    def __init__(
        self,
        api_key: str,
        endpoints: HeliusEndpoints,
        *,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ) -> None:
        self._api_key = api_key
        self._endpoints = endpoints
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            headers={"Content-Type": "application/json"},
            timeout=timeout,
        )

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def _request(
        self,
        operation: str,
        method: str,
        path: str,
        *,
        webhook_id: str | None = None,
        **kwargs,
    ) -> httpx.Response:
        url = self._endpoints.api_url(path)
        try:
            resp = await self._client.request(
                method, url, params={"api-key": self._api_key}, **kwargs
            )
        except httpx.HTTPError as exc:
            raise RemoteCallFailedError(operation, str(exc) or type(exc).__name__) from exc

        if resp.status_code == 404 and webhook_id is not None:
            raise WebhookNotFoundError(
                operation, f"webhook not found: {webhook_id}", status_code=404
            )
        if resp.is_error:
            raise RemoteCallFailedError(
                operation, _error_detail(resp), status_code=resp.status_code
            )
        return resp

    @staticmethod
    def _parse(operation: str, resp: httpx.Response, parse):
        try:
            return parse(resp.json())
        except (ValueError, ValidationError) as exc:
            raise RemoteCallFailedError(
                operation, f"malformed response body: {exc}", status_code=resp.status_code
            ) from exc

    async def get_all_webhooks(self) -> list[Webhook]:
        op = "get_all_webhooks"
        resp = await self._request(op, "GET", "/v0/webhooks")
        return self._parse(op, resp, lambda data: [Webhook.model_validate(w) for w in data])

    async def get_webhook_by_id(self, webhook_id: str) -> Webhook:
        op = "get_webhook_by_id"
        resp = await self._request(op, "GET", f"/v0/webhooks/{webhook_id}", webhook_id=webhook_id)
        return self._parse(op, resp, Webhook.model_validate)

    async def create_webhook(self, payload: WebhookPayload) -> Webhook:
        op = "create_webhook"
        resp = await self._request(op, "POST", "/v0/webhooks", json=payload.to_wire())
        webhook = self._parse(op, resp, Webhook.model_validate)
        logger.info(
            "Created webhook %s watching %d addresses",
            webhook.webhook_id, len(webhook.account_addresses),
        )
        return webhook

    async def replace_webhook(self, webhook_id: str, payload: WebhookPayload) -> Webhook:
        """PUT a complete webhook record. The service has no field-level patch."""
        op = "replace_webhook"
        resp = await self._request(
            op, "PUT", f"/v0/webhooks/{webhook_id}",
            webhook_id=webhook_id, json=payload.to_wire(),
        )
        return self._parse(op, resp, Webhook.model_validate)

    async def delete_webhook(self, webhook_id: str) -> bool:
        await self._request(
            "delete_webhook", "DELETE", f"/v0/webhooks/{webhook_id}", webhook_id=webhook_id
        )
        logger.info("Deleted webhook %s", webhook_id)
        return True

    async def get_mintlist_page(
        self,
        query: CollectionQuery,
        *,
        limit: int,
        pagination_token: str | None = None,
    ) -> MintlistPage:
        """Fetch one page of mints matching ``query``."""
        op = "get_mintlist"
        options: dict = {"limit": limit}
        if pagination_token:
            options["paginationToken"] = pagination_token
        body = {"query": query.to_wire(), "options": options}
        resp = await self._request(op, "POST", "/v1/mintlist", json=body)
        return self._parse(op, resp, MintlistPage.model_validate)
