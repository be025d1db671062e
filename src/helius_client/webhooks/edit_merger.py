"""Merge a partial webhook edit over the current server record."""

import logging

from helius_client.webhooks.models import EditWebhookRequest, Webhook, WebhookPayload

logger = logging.getLogger(__name__)


def merge_edit(existing: Webhook, edit: EditWebhookRequest) -> WebhookPayload:
    """Build a full replacement payload from a partial edit.

    Every mutable field takes the edit's value when it is set (not None),
    otherwise the value currently stored on ``existing``. The service only
    supports whole-record replacement, so the result is always complete.

    Example:
        existing = {url: A, types: [T1], addresses: [X]}
        edit     = {types: [T2]}

        Result:    {url: A, types: [T2], addresses: [X]}
    """
    merged = {}
    overridden = []
    for name in WebhookPayload.model_fields:
        value = getattr(edit, name)
        if value is None:
            merged[name] = getattr(existing, name)
        else:
            merged[name] = value
            overridden.append(name)

    logger.debug("Merging edit for webhook %s, overriding: %s", existing.webhook_id, overridden)
    return WebhookPayload.model_validate(merged)
