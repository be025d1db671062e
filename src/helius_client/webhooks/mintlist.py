"""Drain a paginated mintlist into one complete list."""

import logging
from typing import Protocol

from helius_client.errors import PageLimitExceededError
from helius_client.webhooks.models import (
    DEFAULT_MINTLIST_PAGE_SIZE,
    CollectionQuery,
    MintlistItem,
    MintlistPage,
)

logger = logging.getLogger(__name__)


class MintlistSource(Protocol):
    async def get_mintlist_page(
        self,
        query: CollectionQuery,
        *,
        limit: int,
        pagination_token: str | None = None,
    ) -> MintlistPage: ...


async def collect_mintlist(
    source: MintlistSource,
    query: CollectionQuery,
    *,
    page_size: int = DEFAULT_MINTLIST_PAGE_SIZE,
    max_pages: int | None = None,
) -> list[MintlistItem]:
    """Follow pagination tokens until the service stops returning one.

    Pages are requested one at a time, each only after the previous response
    has been processed. Any failure propagates and the partial result is
    discarded. With ``max_pages=None`` there is no upper bound: a service that
    never stops returning a token keeps this loop running, so callers that
    need a bound should pass ``max_pages`` or wrap the call in a timeout.
    """
    items: list[MintlistItem] = []
    token: str | None = None
    pages = 0

    while True:
        if max_pages is not None and pages >= max_pages:
            logger.warning("Mintlist drain reached %d pages, aborting", max_pages)
            raise PageLimitExceededError(max_pages)

        page = await source.get_mintlist_page(query, limit=page_size, pagination_token=token)
        pages += 1
        items.extend(page.result)
        logger.debug("Mintlist page %d: %d items (%d total)", pages, len(page.result), len(items))

        if not page.pagination_token:
            break
        token = page.pagination_token

    return items
