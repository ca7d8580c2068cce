"""Constants for the Seaport API adapter."""

from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class ChainConfig:
    """Marketplace endpoint settings for one chain."""

    api_base_url: str
    chain_path: str


# Chain IDs
MAINNET_CHAIN_ID = 1
RINKEBY_CHAIN_ID = 4
GOERLI_CHAIN_ID = 5
POLYGON_CHAIN_ID = 137
MUMBAI_CHAIN_ID = 80001

OPENSEA_API_BASE_URL = "https://api.opensea.io"
OPENSEA_TESTNETS_API_BASE_URL = "https://testnets-api.opensea.io"

DEFAULT_CHAINS: MappingProxyType[int, ChainConfig] = MappingProxyType(
    {
        MAINNET_CHAIN_ID: ChainConfig(OPENSEA_API_BASE_URL, "ethereum"),
        RINKEBY_CHAIN_ID: ChainConfig(OPENSEA_TESTNETS_API_BASE_URL, "rinkeby"),
        GOERLI_CHAIN_ID: ChainConfig(OPENSEA_TESTNETS_API_BASE_URL, "goerli"),
        POLYGON_CHAIN_ID: ChainConfig(OPENSEA_API_BASE_URL, "matic"),
        MUMBAI_CHAIN_ID: ChainConfig(OPENSEA_TESTNETS_API_BASE_URL, "mumbai"),
    }
)

# Endpoints
ASSETS_API_PATH = "/api/v1/assets"
ORDERS_API_PATH_TEMPLATE = "/v2/orders/{chain}/{protocol}/{side}"
SEAPORT_PROTOCOL = "seaport"
API_KEY_HEADER = "X-API-KEY"

# Request Configuration
DEFAULT_API_TIMEOUT_SECONDS = 10.0
DEFAULT_QUERY_LIMIT = 10

# Retry Configuration
DEFAULT_RETRIES = 2  # Retries after the first attempt
RETRY_DELAY_SECONDS = 3.0  # Fixed delay, no exponential growth

# Orders
DEFAULT_NONCE = "0"
MAX_BASIS_POINTS = 10000
