"""JSON-RPC dispatcher for DAS asset queries, fee estimates and Jito bundles.

Each method is a thin call-shape translator: send ``params`` under the named
method, unwrap ``result``, and raise RemoteCallFailedError on any failure.
"""

import json
import logging
from collections.abc import Mapping
from typing import Any

import httpx
from pydantic import ValidationError

from helius_client.errors import RemoteCallFailedError
from helius_client.rpc.models import PriorityFeeEstimateRequest, PriorityFeeEstimateResponse
from helius_client.utils.endpoints import jito_api_url

logger = logging.getLogger(__name__)


class RpcClient:
    def __init__(
        self,
        url: str,
        *,
        api_key: str | None = None,
        request_id: str = "helius-sdk",
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ) -> None:
        self._url = url
        self._params = {"api-key": api_key} if api_key else {}
        self._id = request_id
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            headers={"Content-Type": "application/json"},
            timeout=timeout,
        )

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def call(
        self,
        method: str,
        params: Any,
        *,
        url: str | None = None,
        request_id: str | int | None = None,
    ) -> Any:
        """POST a JSON-RPC request and return its ``result`` member."""
        body = {
            "jsonrpc": "2.0",
            "id": self._id if request_id is None else request_id,
            "method": method,
            "params": params,
        }
        # Jito block engines are not Helius endpoints; never leak the API key there
        query = self._params if url is None else {}
        logger.debug("RPC %s", method)
        try:
            resp = await self._client.post(url or self._url, json=body, params=query)
        except httpx.HTTPError as exc:
            raise RemoteCallFailedError(method, str(exc) or type(exc).__name__) from exc

        try:
            data = resp.json()
        except ValueError:
            data = None

        if isinstance(data, dict) and data.get("error"):
            raise RemoteCallFailedError(
                method, json.dumps(data["error"], indent=2), status_code=resp.status_code
            )
        if resp.is_error:
            raise RemoteCallFailedError(
                method, f"HTTP {resp.status_code}: {resp.text}", status_code=resp.status_code
            )
        if not isinstance(data, dict) or "result" not in data:
            raise RemoteCallFailedError(method, "malformed response body", resp.status_code)
        return data["result"]

    async def get_asset(self, params: Mapping | str) -> dict:
        """Get a single asset by ID (a bare ID string or a request object)."""
        if isinstance(params, str):
            params = {"id": params}
        return await self.call("getAsset", dict(params))

    async def get_rwa_asset(self, params: Mapping) -> dict:
        return await self.call("getRwaAccountsByMint", dict(params))

    async def get_asset_batch(self, params: Mapping) -> list[dict]:
        return await self.call("getAssetBatch", dict(params))

    async def get_asset_proof(self, params: Mapping) -> dict:
        return await self.call("getAssetProof", dict(params))

    async def get_assets_by_group(self, params: Mapping) -> dict:
        return await self.call("getAssetsByGroup", dict(params))

    async def get_assets_by_owner(self, params: Mapping) -> dict:
        return await self.call("getAssetsByOwner", dict(params))

    async def get_assets_by_creator(self, params: Mapping) -> dict:
        return await self.call("getAssetsByCreator", dict(params))

    async def get_assets_by_authority(self, params: Mapping) -> dict:
        return await self.call("getAssetsByAuthority", dict(params))

    async def search_assets(self, params: Mapping) -> dict:
        return await self.call("searchAssets", dict(params))

    async def get_signatures_for_asset(self, params: Mapping) -> dict:
        return await self.call("getSignaturesForAsset", dict(params))

    async def get_nft_editions(self, params: Mapping) -> dict:
        return await self.call("getNftEditions", dict(params))

    async def get_token_accounts(self, params: Mapping) -> dict:
        return await self.call("getTokenAccounts", dict(params))

    async def get_priority_fee_estimate(
        self, request: PriorityFeeEstimateRequest | Mapping
    ) -> PriorityFeeEstimateResponse:
        if isinstance(request, Mapping):
            request = PriorityFeeEstimateRequest.model_validate(request)
        params = [request.model_dump(by_alias=True, exclude_none=True)]
        result = await self.call("getPriorityFeeEstimate", params)
        try:
            return PriorityFeeEstimateResponse.model_validate(result)
        except ValidationError as exc:
            raise RemoteCallFailedError(
                "getPriorityFeeEstimate", f"malformed response body: {exc}"
            ) from exc

    async def send_jito_bundle(
        self, serialized_transactions: list[str], jito_url: str | None = None
    ) -> str:
        """Send a bundle to a Jito block engine. Returns the bundle ID."""
        url = jito_url or jito_api_url()
        return await self.call("sendBundle", [serialized_transactions], url=url, request_id=1)

    async def get_bundle_statuses(
        self, bundle_ids: list[str], jito_url: str | None = None
    ) -> Any:
        url = jito_url or jito_api_url()
        return await self.call("getBundleStatuses", [bundle_ids], url=url, request_id=1)
