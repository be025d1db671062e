import json

import httpx
import pytest

from helius_client.errors import RemoteCallFailedError
from helius_client.rpc.client import RpcClient
from helius_client.rpc.models import PriorityFeeEstimateRequest, PriorityLevel
from helius_client.utils.endpoints import JITO_API_URLS

RPC_URL = "https://mainnet.helius-rpc.com/"


def _make_client(handler) -> RpcClient:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return RpcClient(RPC_URL, api_key="test-key", http_client=client)


class Recorder:
    def __init__(self, response: dict, status: int = 200):
        self.response = response
        self.status = status
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status, json=self.response)

    @property
    def body(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.mark.asyncio
async def test_get_asset_by_id_string():
    recorder = Recorder({"jsonrpc": "2.0", "id": "helius-sdk", "result": {"id": "A1"}})
    rpc = _make_client(recorder)
    assert await rpc.get_asset("A1") == {"id": "A1"}
    assert recorder.body == {
        "jsonrpc": "2.0",
        "id": "helius-sdk",
        "method": "getAsset",
        "params": {"id": "A1"},
    }
    assert recorder.requests[0].url.params["api-key"] == "test-key"


@pytest.mark.asyncio
async def test_search_assets_passes_params():
    recorder = Recorder({"result": {"total": 0, "items": []}})
    rpc = _make_client(recorder)
    params = {"ownerAddress": "O1", "page": 1}
    assert await rpc.search_assets(params) == {"total": 0, "items": []}
    assert recorder.body["method"] == "searchAssets"
    assert recorder.body["params"] == params


@pytest.mark.asyncio
async def test_rpc_error_member_raises():
    recorder = Recorder({"error": {"code": -32602, "message": "invalid params"}})
    rpc = _make_client(recorder)
    with pytest.raises(RemoteCallFailedError) as exc_info:
        await rpc.get_asset_proof({"id": "A1"})
    assert exc_info.value.operation == "getAssetProof"
    assert "invalid params" in exc_info.value.detail


@pytest.mark.asyncio
async def test_http_error_raises():
    recorder = Recorder({"message": "rate limited"}, status=429)
    rpc = _make_client(recorder)
    with pytest.raises(RemoteCallFailedError) as exc_info:
        await rpc.get_assets_by_owner({"ownerAddress": "O1"})
    assert exc_info.value.status_code == 429


@pytest.mark.asyncio
async def test_priority_fee_estimate():
    recorder = Recorder(
        {
            "result": {
                "priorityFeeEstimate": 1200.0,
                "priorityFeeLevels": {
                    "min": 0, "low": 10, "medium": 100,
                    "high": 1000, "veryHigh": 10000, "unsafeMax": 100000,
                },
            }
        }
    )
    rpc = _make_client(recorder)
    request = PriorityFeeEstimateRequest.model_validate(
        {"accountKeys": ["K1"], "options": {"priorityLevel": PriorityLevel.HIGH}}
    )
    response = await rpc.get_priority_fee_estimate(request)

    assert response.priority_fee_estimate == 1200.0
    assert response.priority_fee_levels.very_high == 10000
    assert recorder.body["params"] == [
        {"accountKeys": ["K1"], "options": {"priorityLevel": "High"}}
    ]


@pytest.mark.asyncio
async def test_send_jito_bundle():
    recorder = Recorder({"result": "bundle-1"})
    rpc = _make_client(recorder)
    bundle_id = await rpc.send_jito_bundle(["tx1", "tx2"], JITO_API_URLS["NY"])

    assert bundle_id == "bundle-1"
    request = recorder.requests[0]
    assert request.url.host == "ny.mainnet.block-engine.jito.wtf"
    assert request.url.path == "/api/v1/bundles"
    assert "api-key" not in request.url.params
    assert recorder.body == {
        "jsonrpc": "2.0",
        "id": 1,
        "method": "sendBundle",
        "params": [["tx1", "tx2"]],
    }


@pytest.mark.asyncio
async def test_get_bundle_statuses_default_region():
    recorder = Recorder({"result": {"value": []}})
    rpc = _make_client(recorder)
    assert await rpc.get_bundle_statuses(["b1"]) == {"value": []}
    assert recorder.requests[0].url.host == "mainnet.block-engine.jito.wtf"
    assert recorder.body["method"] == "getBundleStatuses"


@pytest.mark.asyncio
async def test_missing_result():
    recorder = Recorder({"jsonrpc": "2.0"})
    rpc = _make_client(recorder)
    with pytest.raises(RemoteCallFailedError, match="malformed"):
        await rpc.get_token_accounts({"mint": "M"})
