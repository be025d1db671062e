"""Typed request/response shapes for priority fee estimation."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class PriorityLevel(str, Enum):
    MIN = "Min"
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    VERY_HIGH = "VeryHigh"
    UNSAFE_MAX = "UnsafeMax"
    DEFAULT = "Default"


class UiTransactionEncoding(str, Enum):
    BINARY = "binary"
    BASE64 = "base64"
    BASE58 = "base58"
    JSON = "json"
    JSON_PARSED = "jsonParsed"


class _RpcModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)


class PriorityFeeEstimateOptions(_RpcModel):
    priority_level: PriorityLevel | None = Field(None, alias="priorityLevel")
    include_all_priority_fee_levels: bool | None = Field(None, alias="includeAllPriorityFeeLevels")
    transaction_encoding: UiTransactionEncoding | None = Field(None, alias="transactionEncoding")
    lookback_slots: int | None = Field(None, alias="lookbackSlots")
    recommended: bool | None = None


class PriorityFeeEstimateRequest(_RpcModel):
    transaction: str | None = None
    account_keys: list[str] | None = Field(None, alias="accountKeys")
    options: PriorityFeeEstimateOptions | None = None


class MicroLamportPriorityFeeLevels(_RpcModel):
    min: float
    low: float
    medium: float
    high: float
    very_high: float = Field(alias="veryHigh")
    unsafe_max: float = Field(alias="unsafeMax")


class PriorityFeeEstimateResponse(_RpcModel):
    priority_fee_estimate: float | None = Field(None, alias="priorityFeeEstimate")
    priority_fee_levels: MicroLamportPriorityFeeLevels | None = Field(
        None, alias="priorityFeeLevels"
    )
