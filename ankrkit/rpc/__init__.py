"""Request execution core: rate limiting, retries and pagination."""

from ankrkit.rpc.envelope import JSONRPC_VERSION, RPCErrorBody, RPCRequest, RPCResponse
from ankrkit.rpc.executor import RequestExecutor
from ankrkit.rpc.pages import PageCursor
from ankrkit.rpc.rate_limiter import RateLimitBehavior, TokenBucketRateLimiter

__all__ = [
    "JSONRPC_VERSION",
    "PageCursor",
    "RPCErrorBody",
    "RPCRequest",
    "RPCResponse",
    "RateLimitBehavior",
    "RequestExecutor",
    "TokenBucketRateLimiter",
]
