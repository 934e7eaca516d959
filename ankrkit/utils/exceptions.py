"""
Exception hierarchy and error handling utilities for ankrkit.

Provides:
- Error classes for every outcome of an RPC exchange, each with an error code
- Error categorization (retryable, fatal, rate limit, ...)
- Safe error message formatting (API keys never leak into logs)
"""

from __future__ import annotations

import asyncio
import json
import re
from enum import Enum
from typing import Any

import httpx


class ErrorCategory(Enum):
    """Error categories for classification."""
    RETRYABLE = "retryable"
    FATAL = "fatal"
    VALIDATION = "validation"
    TIMEOUT = "timeout"
    RATE_LIMIT = "rate_limit"


class AnkrError(Exception):
    """Base exception for all ankrkit errors."""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        category: ErrorCategory = ErrorCategory.FATAL,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.details = details or {}

    @property
    def retryable(self) -> bool:
        return self.category == ErrorCategory.RETRYABLE

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "category": self.category.value,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class TransportError(AnkrError):
    """Network failure, (de)serialization failure or non-success HTTP status."""

    def __init__(self, message: str, method: str | None = None, status_code: int | None = None):
        super().__init__(
            message,
            code="TRANSPORT_ERROR",
            category=ErrorCategory.RETRYABLE,
            details={"method": method, "status_code": status_code},
        )
        self.method = method
        self.status_code = status_code


class ProtocolError(AnkrError):
    """Structured error returned inside a successful JSON-RPC response."""

    def __init__(self, method: str, rpc_code: int, rpc_message: str, data: Any = None):
        super().__init__(
            f"rpc error {rpc_code} from {method}: {rpc_message}",
            code="RPC_ERROR",
            category=ErrorCategory.FATAL,
            details={"method": method, "rpc_code": rpc_code, "data": data},
        )
        self.method = method
        self.rpc_code = rpc_code
        self.rpc_message = rpc_message
        self.data = data


class RateLimitExceededError(AnkrError):
    """Admission refused by a rate limiter running in error mode."""

    def __init__(self, cost: int, available: float, retry_after: float | None = None):
        message = f"Rate limit exceeded: requested {cost} token(s), {available:.2f} available"
        if retry_after:
            message += f", retry after {retry_after:.2f}s"
        super().__init__(
            message,
            code="RATE_LIMIT",
            category=ErrorCategory.RATE_LIMIT,
            details={"cost": cost, "available": available, "retry_after": retry_after},
        )
        self.retry_after = retry_after


class RequestCancelledError(AnkrError):
    """The caller's deadline fired while a request was suspended."""

    def __init__(self, operation: str, timeout_seconds: float | None):
        super().__init__(
            f"Operation '{operation}' cancelled after {timeout_seconds}s deadline",
            code="CANCELLED",
            category=ErrorCategory.TIMEOUT,
            details={"operation": operation, "timeout_seconds": timeout_seconds},
        )


class ExhaustedRetriesError(AnkrError):
    """Every attempt of a call failed with a transport error."""

    def __init__(self, method: str, attempts: int, last_error: TransportError):
        super().__init__(
            f"{method} failed after {attempts} attempt(s), last error: {last_error.message}",
            code="RETRIES_EXHAUSTED",
            category=ErrorCategory.FATAL,
            details={"method": method, "attempts": attempts, "last_error": last_error.to_dict()},
        )
        self.method = method
        self.attempts = attempts
        self.last_error = last_error


class DefaultingError(AnkrError):
    """A request value could not be completed with its send-time defaults."""

    def __init__(self, message: str, field: str | None = None):
        details = {"field": field} if field else {}
        super().__init__(message, code="DEFAULTING_ERROR", category=ErrorCategory.VALIDATION, details=details)


class PagesExhaustedError(AnkrError):
    """next_page() was called on a cursor that already returned its last page."""

    def __init__(self, method: str):
        super().__init__(
            f"No more pages for {method}",
            code="PAGES_EXHAUSTED",
            category=ErrorCategory.FATAL,
            details={"method": method},
        )


_SENSITIVE_PATTERNS = [
    re.compile(r"(api[_-]?key|secret|password)[=:]\s*['\"]?([^\s'\"]+)['\"]?", re.IGNORECASE),
    re.compile(r"bearer\s+[a-zA-Z0-9\-._~+/]+=*", re.IGNORECASE),
]

# The multichain endpoint carries the API key as its last path segment.
_ENDPOINT_KEY_PATTERN = re.compile(r"(/multichain/)([^\s/?#'\"]+)")


def sanitize_error_message(message: str, replacement: str = "[REDACTED]") -> str:
    """
    Remove API keys and other secrets from error messages.

    Addresses, transaction hashes and page tokens are left readable.
    """
    sanitized = _ENDPOINT_KEY_PATTERN.sub(lambda m: m.group(1) + replacement, message)
    for pattern in _SENSITIVE_PATTERNS:
        sanitized = pattern.sub(replacement, sanitized)
    return sanitized


def classify_exception(exc: BaseException) -> tuple[str, ErrorCategory, bool]:
    """
    Classify an exception and return (error_code, category, should_retry).

    Only transport-level failures are worth retrying; a JSON-RPC error is the
    server's final answer for that request and a deadline is the caller's.
    """
    if isinstance(exc, AnkrError):
        return exc.code, exc.category, exc.retryable

    if isinstance(exc, (httpx.TimeoutException, httpx.RequestError, httpx.HTTPStatusError)):
        return "TRANSPORT_ERROR", ErrorCategory.RETRYABLE, True

    if isinstance(exc, asyncio.TimeoutError):
        return "CANCELLED", ErrorCategory.TIMEOUT, False

    if isinstance(exc, ConnectionError):
        return "TRANSPORT_ERROR", ErrorCategory.RETRYABLE, True

    if isinstance(exc, json.JSONDecodeError):
        return "TRANSPORT_ERROR", ErrorCategory.RETRYABLE, True

    if isinstance(exc, (ValueError, TypeError, KeyError)):
        return "INVALID_VALUE", ErrorCategory.VALIDATION, False

    return "INTERNAL_ERROR", ErrorCategory.FATAL, False
