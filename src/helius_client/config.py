import logging
from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # Helius
    helius_api_key: str
    helius_cluster: Literal["mainnet-beta", "devnet"] = "mainnet-beta"
    rpc_request_id: str = "helius-sdk"

    # HTTP
    http_timeout: float = 30.0

    # Mintlist pagination (None = follow cursors until the service stops)
    mintlist_page_size: int = 10_000
    mintlist_max_pages: int | None = None

    log_level: str = "info"


def configure_logging(settings: Settings) -> None:
    """Set up root logging for applications embedding the client."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
