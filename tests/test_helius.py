import logging

import httpx
import pytest

from helius_client.config import Settings, configure_logging
from helius_client.helius import Helius


def test_empty_api_key_rejected():
    with pytest.raises(ValueError):
        Helius("")


def test_settings_defaults():
    settings = Settings(helius_api_key="k", _env_file=None)
    assert settings.helius_cluster == "mainnet-beta"
    assert settings.mintlist_page_size == 10_000
    assert settings.mintlist_max_pages is None


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("HELIUS_API_KEY", "env-key")
    monkeypatch.setenv("HELIUS_CLUSTER", "devnet")
    monkeypatch.setenv("MINTLIST_MAX_PAGES", "50")
    settings = Settings(_env_file=None)
    assert settings.helius_api_key == "env-key"
    assert settings.helius_cluster == "devnet"
    assert settings.mintlist_max_pages == 50


def test_configure_logging(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))
    configure_logging(Settings(helius_api_key="k", log_level="debug", _env_file=None))
    assert calls["level"] == logging.DEBUG


@pytest.mark.asyncio
async def test_from_settings_wires_everything():
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        if request.url.path == "/v1/mintlist":
            return httpx.Response(200, json={"result": [{"mint": "m1", "name": "one"}]})
        return httpx.Response(200, json={"result": {"id": "A1"}})

    settings = Settings(
        helius_api_key="k", helius_cluster="devnet", mintlist_page_size=5, _env_file=None
    )
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    async with Helius.from_settings(settings, http_client=client) as helius:
        assert helius.cluster == "devnet"
        assert helius.endpoint == "https://api-devnet.helius-rpc.com"
        items = await helius.webhooks.get_full_mintlist({"firstVerifiedCreators": ["C"]})
        asset = await helius.rpc.get_asset("A1")

    assert [i.mint for i in items] == ["m1"]
    assert asset == {"id": "A1"}
    assert requests[0].url.host == "api-devnet.helius-rpc.com"
    assert requests[1].url.host == "devnet.helius-rpc.com"
    assert not client.is_closed
    await client.aclose()
