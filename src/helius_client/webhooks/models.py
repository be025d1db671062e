"""Pydantic models for Helius webhooks and mintlists.

Field names are snake_case in Python and camelCase on the wire; always dump
with ``by_alias=True, exclude_none=True`` so unset optionals never reach the
service as explicit nulls.
"""

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

MAX_WEBHOOK_ADDRESSES = 100_000
DEFAULT_MINTLIST_PAGE_SIZE = 10_000


class WebhookType(str, Enum):
    ENHANCED = "enhanced"
    ENHANCED_DEVNET = "enhancedDevnet"
    RAW = "raw"
    RAW_DEVNET = "rawDevnet"
    DISCORD = "discord"
    DISCORD_DEVNET = "discordDevnet"


class TxnStatus(str, Enum):
    ALL = "all"
    SUCCESS = "success"
    FAILED = "failed"


class AccountWebhookEncoding(str, Enum):
    JSON_PARSED = "jsonParsed"


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class WebhookPayload(_WireModel):
    """The caller-mutable fields of a webhook, as sent on create and replace."""

    webhook_url: str = Field(alias="webhookURL")
    transaction_types: list[str] = Field(alias="transactionTypes")  # e.g. "ANY", "NFT_SALE"
    account_addresses: list[str] = Field(alias="accountAddresses")
    account_address_owners: list[str] | None = Field(None, alias="accountAddressOwners")
    webhook_type: WebhookType | None = Field(None, alias="webhookType")
    auth_header: str | None = Field(None, alias="authHeader")
    txn_status: TxnStatus | None = Field(None, alias="txnStatus")
    encoding: AccountWebhookEncoding | None = Field(None, alias="encoding")


CreateWebhookRequest = WebhookPayload


class Webhook(WebhookPayload):
    """Server-owned webhook record."""

    webhook_id: str = Field(alias="webhookID")
    wallet: str
    project: str | None = None


class EditWebhookRequest(_WireModel):
    """Partial update; any field left as None keeps the current server value."""

    webhook_url: str | None = Field(None, alias="webhookURL")
    transaction_types: list[str] | None = Field(None, alias="transactionTypes")
    account_addresses: list[str] | None = Field(None, alias="accountAddresses")
    account_address_owners: list[str] | None = Field(None, alias="accountAddressOwners")
    webhook_type: WebhookType | None = Field(None, alias="webhookType")
    auth_header: str | None = Field(None, alias="authHeader")
    txn_status: TxnStatus | None = Field(None, alias="txnStatus")
    encoding: AccountWebhookEncoding | None = Field(None, alias="encoding")


class ByCreators(_WireModel):
    """Select mints whose first verified creator is one of these addresses."""

    kind: Literal["creators"] = Field("creators", exclude=True)
    first_verified_creators: list[str] = Field(alias="firstVerifiedCreators")


class ByCollections(_WireModel):
    """Select mints belonging to one of these verified collections."""

    kind: Literal["collections"] = Field("collections", exclude=True)
    verified_collection_addresses: list[str] = Field(alias="verifiedCollectionAddresses")


CollectionQuery = Annotated[ByCreators | ByCollections, Field(discriminator="kind")]


class CreateCollectionWebhookRequest(_WireModel):
    webhook_url: str = Field(alias="webhookURL")
    transaction_types: list[str] = Field(alias="transactionTypes")
    collection_query: CollectionQuery = Field(alias="collectionQuery")
    webhook_type: WebhookType | None = Field(None, alias="webhookType")
    auth_header: str | None = Field(None, alias="authHeader")
    txn_status: TxnStatus | None = Field(None, alias="txnStatus")
    encoding: AccountWebhookEncoding | None = Field(None, alias="encoding")

    @field_validator("collection_query", mode="before")
    @classmethod
    def _check_query(cls, value):
        from helius_client.webhooks.query import validate_collection_query

        return validate_collection_query(value)


class MintlistItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    mint: str
    name: str | None = None


class MintlistPage(_WireModel):
    """One page of ``/v1/mintlist`` results."""

    result: list[MintlistItem]
    pagination_token: str | None = Field(None, alias="paginationToken")
