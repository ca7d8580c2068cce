"""Settings configuration for the Seaport API adapter."""

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.seaport_api.config.constants import (
    DEFAULT_API_TIMEOUT_SECONDS,
    DEFAULT_RETRIES,
    MAINNET_CHAIN_ID,
    RETRY_DELAY_SECONDS,
)
from src.seaport_api.models.config import APIConfig
from src.seaport_api.utils.retry import RetryPolicy

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Adapter settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API Configuration
    opensea_api_key: str | None = Field(None, description="Marketplace API key (X-API-KEY)")
    opensea_api_base_url: str | None = Field(
        None, description="Override for the chain's default API base URL"
    )
    opensea_api_timeout: float = Field(
        default=DEFAULT_API_TIMEOUT_SECONDS, gt=0, description="Request timeout in seconds"
    )
    opensea_proxy_url: str | None = Field(None, description="HTTP(S) proxy for API requests")
    chain_id: int = Field(default=MAINNET_CHAIN_ID, description="Chain identifier")

    # Retry Configuration
    retries: int = Field(default=DEFAULT_RETRIES, ge=0, le=10, description="Retries per call")
    retry_delay_seconds: float = Field(
        default=RETRY_DELAY_SECONDS, ge=0, description="Fixed delay between attempts"
    )

    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("opensea_api_base_url", "opensea_proxy_url")
    @classmethod
    def validate_url(cls, v: str | None) -> str | None:
        """Validate URL format."""
        if v is None or v == "":
            return None
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v_upper

    def to_api_config(self) -> APIConfig:
        """Build the client construction config from these settings."""
        return APIConfig(
            chain_id=self.chain_id,
            api_base_url=self.opensea_api_base_url,
            api_key=self.opensea_api_key,
            proxy_url=self.opensea_proxy_url,
            api_timeout=self.opensea_api_timeout,
        )

    def to_retry_policy(self) -> RetryPolicy:
        """Build the shared retry policy from these settings."""
        return RetryPolicy(retries=self.retries, delay=self.retry_delay_seconds)
