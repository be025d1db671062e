"""Pure operations over a webhook's account address list."""

from collections.abc import Iterable

from helius_client.errors import CapacityExceededError
from helius_client.webhooks.models import MAX_WEBHOOK_ADDRESSES


def as_address_list(addresses: Iterable[str]) -> list[str]:
    """Materialize an address iterable, rejecting a bare string."""
    if isinstance(addresses, str):
        raise TypeError("expected a list of addresses, got a single string")
    return list(addresses)


def check_capacity(addresses: list[str], limit: int = MAX_WEBHOOK_ADDRESSES) -> None:
    if len(addresses) > limit:
        raise CapacityExceededError(len(addresses), limit)


def append_addresses(
    existing: list[str],
    additions: Iterable[str],
    *,
    limit: int = MAX_WEBHOOK_ADDRESSES,
) -> list[str]:
    """Return ``existing + additions`` in order, without deduplication.

    Raises CapacityExceededError if the result would exceed ``limit``.
    """
    result = list(existing)
    result.extend(as_address_list(additions))
    check_capacity(result, limit)
    return result


def remove_addresses(existing: list[str], removals: Iterable[str]) -> list[str]:
    """Drop every occurrence of each address in ``removals`` (exact match).

    Addresses not present are ignored. Duplicates in ``existing`` are each
    matched independently; the remaining order is preserved.
    """
    to_remove = set(as_address_list(removals))
    return [address for address in existing if address not in to_remove]
