from dataclasses import dataclass
from typing import Literal

HeliusCluster = Literal["mainnet-beta", "devnet"]
JitoRegion = Literal["Default", "NY", "Amsterdam", "Frankfurt", "Tokyo"]


@dataclass(frozen=True)
class HeliusEndpoints:
    """Base URLs for one cluster."""

    api: str  # REST: webhooks, mintlist
    rpc: str  # JSON-RPC: DAS, priority fees

    @property
    def rpc_url(self) -> str:
        return f"{self.rpc}/"

    def api_url(self, path: str) -> str:
        """Full REST URL for a versioned path like ``/v0/webhooks``."""
        if not path.startswith(("/v0", "/v1")):
            raise ValueError(
                f"Invalid API path provided: {path}. Path must start with '/v0' or '/v1'."
            )
        return f"{self.api}{path}"


_ENDPOINTS: dict[str, HeliusEndpoints] = {
    "mainnet-beta": HeliusEndpoints(
        api="https://api-mainnet.helius-rpc.com",
        rpc="https://mainnet.helius-rpc.com",
    ),
    "devnet": HeliusEndpoints(
        api="https://api-devnet.helius-rpc.com",
        rpc="https://devnet.helius-rpc.com",
    ),
}

JITO_API_URLS: dict[str, str] = {
    "Default": "https://mainnet.block-engine.jito.wtf/api/v1/bundles",
    "NY": "https://ny.mainnet.block-engine.jito.wtf/api/v1/bundles",
    "Amsterdam": "https://amsterdam.mainnet.block-engine.jito.wtf/api/v1/bundles",
    "Frankfurt": "https://frankfurt.mainnet.block-engine.jito.wtf/api/v1/bundles",
    "Tokyo": "https://tokyo.mainnet.block-engine.jito.wtf/api/v1/bundles",
}


def get_helius_endpoints(cluster: str) -> HeliusEndpoints:
    try:
        return _ENDPOINTS[cluster]
    except KeyError:
        raise ValueError(f"Unknown Helius cluster: {cluster!r}") from None


def jito_api_url(region: str = "Default") -> str:
    try:
        return JITO_API_URLS[region]
    except KeyError:
        raise ValueError(f"Unknown Jito region: {region!r}") from None
