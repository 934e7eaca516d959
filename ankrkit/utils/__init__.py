"""Utility helpers for ankrkit."""

from ankrkit.utils.exceptions import (
    AnkrError,
    DefaultingError,
    ErrorCategory,
    ExhaustedRetriesError,
    PagesExhaustedError,
    ProtocolError,
    RateLimitExceededError,
    RequestCancelledError,
    TransportError,
    classify_exception,
    sanitize_error_message,
)

__all__ = [
    "AnkrError",
    "DefaultingError",
    "ErrorCategory",
    "ExhaustedRetriesError",
    "PagesExhaustedError",
    "ProtocolError",
    "RateLimitExceededError",
    "RequestCancelledError",
    "TransportError",
    "classify_exception",
    "sanitize_error_message",
]
