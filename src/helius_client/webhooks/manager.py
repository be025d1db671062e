"""Webhook operations: fetch → compute → write.

Mutations are read-modify-write against the service. The current record is
re-fetched for every call, the new state is computed by a pure function, and
the full record is written back. Concurrent writers race; the last write wins.
"""

import logging
from collections.abc import Iterable, Mapping

from helius_client.api.client import HeliusApiClient
from helius_client.errors import InvalidQueryError
from helius_client.webhooks.address_set import (
    append_addresses,
    as_address_list,
    check_capacity,
    remove_addresses,
)
from helius_client.webhooks.edit_merger import merge_edit
from helius_client.webhooks.mintlist import collect_mintlist
from helius_client.webhooks.models import (
    DEFAULT_MINTLIST_PAGE_SIZE,
    CollectionQuery,
    CreateCollectionWebhookRequest,
    CreateWebhookRequest,
    EditWebhookRequest,
    MintlistItem,
    MintlistPage,
    Webhook,
)
from helius_client.webhooks.payload import build_collection_webhook_payload
from helius_client.webhooks.query import validate_collection_query

logger = logging.getLogger(__name__)


class WebhookManager:
    def __init__(
        self,
        api: HeliusApiClient,
        *,
        page_size: int = DEFAULT_MINTLIST_PAGE_SIZE,
        max_pages: int | None = None,
    ) -> None:
        self._api = api
        self._page_size = page_size
        self._max_pages = max_pages

    async def get_all_webhooks(self) -> list[Webhook]:
        return await self._api.get_all_webhooks()

    async def get_webhook_by_id(self, webhook_id: str) -> Webhook:
        return await self._api.get_webhook_by_id(webhook_id)

    async def create_webhook(self, request: CreateWebhookRequest | Mapping) -> Webhook:
        if isinstance(request, Mapping):
            request = CreateWebhookRequest.model_validate(request)
        check_capacity(request.account_addresses)
        return await self._api.create_webhook(request)

    async def delete_webhook(self, webhook_id: str) -> bool:
        return await self._api.delete_webhook(webhook_id)

    async def edit_webhook(
        self, webhook_id: str, edit: EditWebhookRequest | Mapping
    ) -> Webhook:
        """Apply a partial edit, keeping every field the caller left unset."""
        if isinstance(edit, Mapping):
            edit = EditWebhookRequest.model_validate(edit)
        existing = await self._api.get_webhook_by_id(webhook_id)
        return await self._write_edit(webhook_id, existing, edit)

    async def append_addresses_to_webhook(
        self, webhook_id: str, addresses: Iterable[str]
    ) -> Webhook:
        addresses = as_address_list(addresses)
        existing = await self._api.get_webhook_by_id(webhook_id)
        # Raises CapacityExceededError before anything is written
        new_addresses = append_addresses(existing.account_addresses, addresses)
        logger.info(
            "Appending %d addresses to webhook %s",
            len(new_addresses) - len(existing.account_addresses), webhook_id,
        )
        edit = EditWebhookRequest(account_addresses=new_addresses)
        return await self._write_edit(webhook_id, existing, edit)

    async def remove_addresses_from_webhook(
        self, webhook_id: str, addresses: Iterable[str]
    ) -> Webhook:
        addresses = as_address_list(addresses)
        existing = await self._api.get_webhook_by_id(webhook_id)
        new_addresses = remove_addresses(existing.account_addresses, addresses)
        logger.info(
            "Removing %d addresses from webhook %s",
            len(existing.account_addresses) - len(new_addresses), webhook_id,
        )
        edit = EditWebhookRequest(account_addresses=new_addresses)
        return await self._write_edit(webhook_id, existing, edit)

    async def _write_edit(
        self, webhook_id: str, existing: Webhook, edit: EditWebhookRequest
    ) -> Webhook:
        payload = merge_edit(existing, edit)
        check_capacity(payload.account_addresses)
        logger.info(
            "Replacing webhook %s (%d addresses)", webhook_id, len(payload.account_addresses)
        )
        return await self._api.replace_webhook(webhook_id, payload)

    async def get_mintlist(
        self,
        query: CollectionQuery | Mapping | None,
        *,
        limit: int | None = None,
        pagination_token: str | None = None,
    ) -> MintlistPage:
        """Fetch a single mintlist page."""
        query = validate_collection_query(query)
        return await self._api.get_mintlist_page(
            query, limit=limit or self._page_size, pagination_token=pagination_token
        )

    async def get_full_mintlist(self, query: CollectionQuery | Mapping | None) -> list[MintlistItem]:
        """Fetch every mint matching ``query``, following all pages."""
        query = validate_collection_query(query)
        return await collect_mintlist(
            self._api, query, page_size=self._page_size, max_pages=self._max_pages
        )

    async def create_collection_webhook(
        self, request: CreateCollectionWebhookRequest | Mapping | None
    ) -> Webhook:
        """Create a webhook watching every mint of an NFT collection."""
        request = _coerce_collection_request(request)
        mintlist = await collect_mintlist(
            self._api,
            request.collection_query,
            page_size=self._page_size,
            max_pages=self._max_pages,
        )
        logger.info("Resolved collection to %d mints", len(mintlist))
        payload = build_collection_webhook_payload(request, mintlist)
        return await self._api.create_webhook(payload)


def _coerce_collection_request(
    request: CreateCollectionWebhookRequest | Mapping | None,
) -> CreateCollectionWebhookRequest:
    if request is None:
        raise InvalidQueryError("must provide a collection webhook request.")
    if isinstance(request, CreateCollectionWebhookRequest):
        return request
    if request.get("collectionQuery") is None and request.get("collection_query") is None:
        raise InvalidQueryError("must provide collectionQuery object.")
    return CreateCollectionWebhookRequest.model_validate(request)
