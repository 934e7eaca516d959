"""Configuration module for ankrkit."""

from ankrkit.config.loader import load_config, save_config, get_config_path
from ankrkit.config.schema import ClientConfig, RateLimitConfig, RetryConfig

__all__ = [
    "ClientConfig",
    "RateLimitConfig",
    "RetryConfig",
    "load_config",
    "save_config",
    "get_config_path",
]
