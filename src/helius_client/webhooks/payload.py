"""Build a create-webhook payload from a drained mintlist."""

from helius_client.webhooks.address_set import check_capacity
from helius_client.webhooks.models import (
    CreateCollectionWebhookRequest,
    CreateWebhookRequest,
    MintlistItem,
)

# Optional fields copied only when the caller set them
_OPTIONAL_FIELDS = ("auth_header", "webhook_type", "txn_status", "encoding")


def build_collection_webhook_payload(
    request: CreateCollectionWebhookRequest,
    mintlist: list[MintlistItem],
) -> CreateWebhookRequest:
    """Turn a complete mintlist into a create request watching every mint.

    Addresses keep the drain's order. Raises CapacityExceededError before
    anything is sent if the collection is larger than a webhook can hold.
    """
    addresses = [item.mint for item in mintlist]
    check_capacity(addresses)

    fields: dict = {
        "webhook_url": request.webhook_url,
        "transaction_types": list(request.transaction_types),
        "account_addresses": addresses,
    }
    for name in _OPTIONAL_FIELDS:
        value = getattr(request, name)
        if value:
            fields[name] = value
    return CreateWebhookRequest.model_validate(fields)
