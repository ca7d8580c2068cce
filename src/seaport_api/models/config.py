"""Client construction config."""

from pydantic import BaseModel, ConfigDict, Field

from src.seaport_api.config.constants import MAINNET_CHAIN_ID


class APIConfig(BaseModel):
    """Options accepted by the API client at construction.

    Attributes:
        chain_id: Chain identifier (1 = mainnet)
        api_base_url: Override for the chain's default base URL
        api_key: Override for the API key read from the environment
        proxy_url: HTTP(S) proxy used for every request
        api_timeout: Request timeout in seconds
    """

    model_config = ConfigDict(frozen=True)

    chain_id: int = Field(default=MAINNET_CHAIN_ID, description="Chain identifier")
    api_base_url: str | None = Field(None, description="API base URL override")
    api_key: str | None = Field(None, description="API key override")
    proxy_url: str | None = Field(None, description="Proxy URL")
    api_timeout: float | None = Field(None, gt=0, description="Request timeout in seconds")
