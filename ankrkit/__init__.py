"""ankrkit - async client for the Ankr Advanced API."""

from loguru import logger

from ankrkit.client import AnkrClient
from ankrkit.config import ClientConfig, RateLimitConfig, RetryConfig, load_config
from ankrkit.models import Chain, apply_defaults
from ankrkit.rpc import PageCursor, RateLimitBehavior, RequestExecutor, TokenBucketRateLimiter
from ankrkit.utils.exceptions import (
    AnkrError,
    DefaultingError,
    ExhaustedRetriesError,
    PagesExhaustedError,
    ProtocolError,
    RateLimitExceededError,
    RequestCancelledError,
    TransportError,
)

__version__ = "0.1.0"

# Library logging stays silent until the application calls logger.enable("ankrkit").
logger.disable("ankrkit")

__all__ = [
    "AnkrClient",
    "ClientConfig",
    "RateLimitConfig",
    "RetryConfig",
    "load_config",
    "Chain",
    "apply_defaults",
    "PageCursor",
    "RateLimitBehavior",
    "RequestExecutor",
    "TokenBucketRateLimiter",
    "AnkrError",
    "DefaultingError",
    "ExhaustedRetriesError",
    "PagesExhaustedError",
    "ProtocolError",
    "RateLimitExceededError",
    "RequestCancelledError",
    "TransportError",
]
