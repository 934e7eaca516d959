"""Rate-limited, retried JSON-RPC request execution."""

from __future__ import annotations

import asyncio
import itertools
from typing import Any, Callable, TypeVar

import httpx
from loguru import logger
from pydantic import BaseModel, ValidationError

from ankrkit.models.base import AnkrRequest
from ankrkit.models.defaults import apply_defaults
from ankrkit.rpc.envelope import RPCRequest, RPCResponse
from ankrkit.rpc.rate_limiter import TokenBucketRateLimiter
from ankrkit.utils.exceptions import (
    ExhaustedRetriesError,
    ProtocolError,
    RequestCancelledError,
    TransportError,
    classify_exception,
    sanitize_error_message,
)

ResultT = TypeVar("ResultT", bound=BaseModel)

DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_RETRY_DELAY = 1.0
DEFAULT_HTTP_TIMEOUT = 30.0


class RequestExecutor:
    """
    Performs one logical RPC call end to end.

    Every attempt takes one token from the shared rate limiter, applies the
    request's send defaults, POSTs the envelope and classifies the outcome.
    Transport failures are retried up to ``max_attempts`` times with a fixed
    delay between attempts; a protocol error is returned at once.
    """

    def __init__(
        self,
        endpoint_url: str,
        rate_limiter: TokenBucketRateLimiter,
        *,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        retry_delay: float = DEFAULT_RETRY_DELAY,
        defaults: Callable[[Any], Any] = apply_defaults,
    ):
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")
        if retry_delay < 0:
            raise ValueError(f"retry_delay must not be negative, got {retry_delay}")
        self.endpoint_url = endpoint_url
        self.rate_limiter = rate_limiter
        self.timeout = timeout
        self.max_attempts = max_attempts
        self.retry_delay = retry_delay
        self._defaults = defaults
        self._http_client = http_client
        self._owns_http_client = http_client is None
        self._ids = itertools.count(1)

    def _get_http_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=self.timeout)
        return self._http_client

    async def aclose(self) -> None:
        """Close the HTTP client if this executor created it."""
        if self._http_client is not None and self._owns_http_client:
            await self._http_client.aclose()
            self._http_client = None

    async def call(
        self,
        method: str,
        params: AnkrRequest,
        result_type: type[ResultT],
        *,
        timeout: float | None = None,
    ) -> ResultT:
        """
        Run ``method`` and return its result validated as ``result_type``.

        ``timeout`` bounds the whole call, rate-limit waits and retry delays
        included; when it fires RequestCancelledError is raised and no
        further attempt is made.

        Raises:
            ProtocolError: the server answered with a JSON-RPC error.
            ExhaustedRetriesError: every attempt failed with a TransportError.
            RateLimitExceededError: the limiter runs in error mode and is empty.
            RequestCancelledError: ``timeout`` elapsed.
            DefaultingError: ``params`` could not be completed with its defaults.
        """
        if timeout is None:
            return await self._call_with_retries(method, params, result_type)
        try:
            return await asyncio.wait_for(
                self._call_with_retries(method, params, result_type), timeout=timeout
            )
        except asyncio.TimeoutError as exc:
            raise RequestCancelledError(method, timeout) from exc

    async def _call_with_retries(
        self, method: str, params: AnkrRequest, result_type: type[ResultT]
    ) -> ResultT:
        attempt = 0
        while True:
            attempt += 1
            try:
                return await self._post(method, params, result_type)
            except ProtocolError as exc:
                logger.debug("ankr: {} returned rpc error {}: {}", method, exc.rpc_code, exc.rpc_message)
                raise
            except TransportError as exc:
                code, _, should_retry = classify_exception(exc)
                if not should_retry:
                    raise
                logger.warning(
                    "ankr: {} attempt {}/{} failed ({}): {}",
                    method,
                    attempt,
                    self.max_attempts,
                    code,
                    sanitize_error_message(exc.message),
                )
                if attempt >= self.max_attempts:
                    logger.error("ankr: {} failed after {} attempts", method, attempt)
                    raise ExhaustedRetriesError(method, attempt, exc) from exc
            if self.retry_delay > 0:
                await asyncio.sleep(self.retry_delay)

    async def _post(self, method: str, params: AnkrRequest, result_type: type[ResultT]) -> ResultT:
        await self.rate_limiter.acquire(1)
        prepared = self._defaults(params)

        try:
            envelope = RPCRequest(id=next(self._ids), method=method, params=prepared.to_params())
            body = envelope.model_dump_json()
        except (ValueError, TypeError) as exc:
            raise TransportError(f"failed to serialize {method} request: {exc}", method=method) from exc

        client = self._get_http_client()
        try:
            resp = await client.post(
                self.endpoint_url,
                content=body,
                headers={"Content-Type": "application/json"},
            )
        except httpx.TimeoutException as exc:
            raise TransportError(f"{method} request timed out", method=method) from exc
        except httpx.RequestError as exc:
            raise TransportError(
                f"{method} network error: {sanitize_error_message(str(exc))}", method=method
            ) from exc

        if not resp.is_success:
            raise TransportError(
                f"http error {resp.status_code}: {self._extract_error_message(resp)}",
                method=method,
                status_code=resp.status_code,
            )

        try:
            response = RPCResponse.model_validate_json(resp.content)
        except ValidationError as exc:
            raise TransportError(
                f"bad response for {method}: not a JSON-RPC envelope",
                method=method,
                status_code=resp.status_code,
            ) from exc

        if response.error is not None:
            raise ProtocolError(method, response.error.code, response.error.message, response.error.data)

        try:
            return result_type.model_validate(response.result)
        except ValidationError as exc:
            raise TransportError(
                f"failed to parse {method} result as {result_type.__name__}: {exc.error_count()} error(s)",
                method=method,
                status_code=resp.status_code,
            ) from exc

    @staticmethod
    def _extract_error_message(resp: httpx.Response) -> str:
        text = (resp.text or "").strip()
        if text:
            return sanitize_error_message(text[:200])
        return resp.reason_phrase or "request failed"

    def __repr__(self) -> str:
        return (
            f"RequestExecutor(endpoint={sanitize_error_message(self.endpoint_url)!r}, "
            f"max_attempts={self.max_attempts}, retry_delay={self.retry_delay})"
        )
