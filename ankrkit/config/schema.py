"""Configuration schema using Pydantic.

One ClientConfig describes one client: endpoint, HTTP timeout, rate limit
and retry policy. Values come from keyword arguments, a JSON file (see
loader.py) or ANKR_* environment variables.
"""

from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_BASE_URL = "https://rpc.ankr.com/multichain"


class RateLimitConfig(BaseModel):
    """Token bucket shared by every request of one client."""
    capacity: int = Field(default=1000, gt=0)  # tokens per window
    window_seconds: float = Field(default=60.0, gt=0)
    on_limit_exceeded: Literal["block", "error"] = "block"


class RetryConfig(BaseModel):
    """Retry policy for transport failures. Protocol errors are never retried."""
    max_attempts: int = Field(default=3, ge=1)
    delay_seconds: float = Field(default=1.0, ge=0)


class ClientConfig(BaseSettings):
    """Root configuration for an ankrkit client."""
    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    timeout: float = Field(default=30.0, gt=0)  # per HTTP request, seconds
    rate_limit: RateLimitConfig = Field(default_factory=RateLimitConfig)
    retry: RetryConfig = Field(default_factory=RetryConfig)

    model_config = SettingsConfigDict(
        env_prefix="ANKR_",
        env_nested_delimiter="__",
    )

    @property
    def endpoint_url(self) -> str:
        """Multichain endpoint; the API key is the last path segment."""
        base = self.base_url.rstrip("/")
        if not self.api_key:
            return base
        return f"{base}/{self.api_key}"
