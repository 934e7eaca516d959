"""Tests for RequestExecutor: envelope, classification and retry policy."""

from __future__ import annotations

import asyncio
import json
import time

import httpx
import pytest

from ankrkit.models import (
    Chain,
    GetTokenHoldersRequest,
    GetTokenHoldersResponse,
    GetTokenPriceRequest,
    GetTokenPriceResponse,
)
from ankrkit.rpc.executor import RequestExecutor
from ankrkit.rpc.rate_limiter import TokenBucketRateLimiter
from ankrkit.utils.exceptions import (
    DefaultingError,
    ExhaustedRetriesError,
    ProtocolError,
    RateLimitExceededError,
    RequestCancelledError,
    TransportError,
)

ENDPOINT = "https://rpc.example.test/multichain/0123456789abcdef0123456789abcdef"


class Recorder:
    """MockTransport handler replaying scripted responses and recording request bodies."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.bodies: list[dict] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.bodies.append(json.loads(request.content))
        item = self.responses[0] if len(self.responses) == 1 else self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    @property
    def calls(self) -> int:
        return len(self.bodies)


def rpc_result(result: dict) -> httpx.Response:
    return httpx.Response(200, json={"jsonrpc": "2.0", "id": 1, "result": result})


def make_executor(handler, *, capacity: int = 100, behavior: str = "block", max_attempts: int = 3) -> RequestExecutor:
    limiter = TokenBucketRateLimiter(capacity=capacity, window=60.0, behavior=behavior)
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return RequestExecutor(ENDPOINT, limiter, http_client=http_client, max_attempts=max_attempts, retry_delay=0)


PRICE_REQ = GetTokenPriceRequest(blockchain=Chain.ETHEREUM, contract_address="0xdac17f958d2ee523a2206206994597c13d831ec7")


@pytest.mark.asyncio
async def test_success_returns_typed_result_and_sends_envelope() -> None:
    handler = Recorder(rpc_result({"blockchain": "eth", "contractAddress": "0xdac1", "usdPrice": "1.0001"}))
    executor = make_executor(handler)

    result = await executor.call("ankr_getTokenPrice", PRICE_REQ, GetTokenPriceResponse)

    assert isinstance(result, GetTokenPriceResponse)
    assert result.usd_price == "1.0001"
    assert handler.calls == 1
    body = handler.bodies[0]
    assert body["jsonrpc"] == "2.0"
    assert body["method"] == "ankr_getTokenPrice"
    assert isinstance(body["id"], int)
    assert body["params"] == {
        "blockchain": "eth",
        "contractAddress": "0xdac17f958d2ee523a2206206994597c13d831ec7",
    }


@pytest.mark.asyncio
async def test_defaults_are_applied_per_attempt_without_touching_caller_value() -> None:
    handler = Recorder(rpc_result({"holders": [], "nextPageToken": ""}))
    executor = make_executor(handler)
    req = GetTokenHoldersRequest(blockchain=Chain.BSC, contract_address="0xabc")

    await executor.call("ankr_getTokenHolders", req, GetTokenHoldersResponse)

    assert handler.bodies[0]["params"]["pageSize"] == 10000
    assert req.page_size is None


@pytest.mark.asyncio
async def test_request_ids_increase_per_attempt() -> None:
    handler = Recorder(httpx.Response(502), rpc_result({"usdPrice": "1"}))
    executor = make_executor(handler)

    await executor.call("ankr_getTokenPrice", PRICE_REQ, GetTokenPriceResponse)

    ids = [b["id"] for b in handler.bodies]
    assert len(ids) == 2
    assert ids[1] > ids[0]


@pytest.mark.asyncio
async def test_protocol_error_is_returned_on_first_attempt_without_retry() -> None:
    handler = Recorder(
        httpx.Response(
            200,
            json={"jsonrpc": "2.0", "id": 1, "error": {"code": -32602, "message": "invalid params", "data": "pageSize"}},
        )
    )
    executor = make_executor(handler)

    with pytest.raises(ProtocolError) as exc_info:
        await executor.call("ankr_getTokenPrice", PRICE_REQ, GetTokenPriceResponse)

    assert handler.calls == 1
    err = exc_info.value
    assert err.rpc_code == -32602
    assert err.rpc_message == "invalid params"
    assert err.data == "pageSize"
    assert err.retryable is False


@pytest.mark.asyncio
async def test_protocol_error_wins_even_with_result_present() -> None:
    handler = Recorder(
        httpx.Response(200, json={"jsonrpc": "2.0", "id": 1, "result": {}, "error": {"code": 1, "message": "x"}})
    )
    executor = make_executor(handler)
    with pytest.raises(ProtocolError):
        await executor.call("ankr_getTokenPrice", PRICE_REQ, GetTokenPriceResponse)
    assert handler.calls == 1


@pytest.mark.asyncio
async def test_always_failing_transport_makes_exactly_max_attempts() -> None:
    handler = Recorder(httpx.Response(503, text="upstream unavailable"))
    executor = make_executor(handler, max_attempts=3)

    with pytest.raises(ExhaustedRetriesError) as exc_info:
        await executor.call("ankr_getTokenPrice", PRICE_REQ, GetTokenPriceResponse)

    assert handler.calls == 3
    err = exc_info.value
    assert err.attempts == 3
    assert isinstance(err.last_error, TransportError)
    assert err.last_error.status_code == 503
    assert err.__cause__ is err.last_error


@pytest.mark.asyncio
async def test_network_error_is_retried_then_succeeds() -> None:
    request = httpx.Request("POST", ENDPOINT)
    handler = Recorder(httpx.ConnectError("connection refused", request=request), rpc_result({"usdPrice": "2"}))
    executor = make_executor(handler)

    result = await executor.call("ankr_getTokenPrice", PRICE_REQ, GetTokenPriceResponse)

    assert result.usd_price == "2"
    assert handler.calls == 2


@pytest.mark.asyncio
async def test_non_json_body_counts_as_transport_error() -> None:
    handler = Recorder(httpx.Response(200, text="<html>gateway</html>"))
    executor = make_executor(handler, max_attempts=2)

    with pytest.raises(ExhaustedRetriesError) as exc_info:
        await executor.call("ankr_getTokenPrice", PRICE_REQ, GetTokenPriceResponse)

    assert handler.calls == 2
    assert exc_info.value.last_error.code == "TRANSPORT_ERROR"


@pytest.mark.asyncio
async def test_result_of_wrong_shape_counts_as_transport_error() -> None:
    handler = Recorder(rpc_result({"holders": "not-a-list"}))
    executor = make_executor(handler, max_attempts=1)

    with pytest.raises(ExhaustedRetriesError) as exc_info:
        await executor.call("ankr_getTokenHolders", GetTokenHoldersRequest(), GetTokenHoldersResponse)
    assert handler.calls == 1
    assert exc_info.value.attempts == 1
    assert exc_info.value.last_error.method == "ankr_getTokenHolders"


@pytest.mark.asyncio
async def test_each_attempt_consumes_one_token() -> None:
    handler = Recorder(httpx.Response(500))
    executor = make_executor(handler, capacity=10, max_attempts=3)

    with pytest.raises(ExhaustedRetriesError):
        await executor.call("ankr_getTokenPrice", PRICE_REQ, GetTokenPriceResponse)

    assert executor.rate_limiter.available_tokens == pytest.approx(7.0, abs=0.05)


@pytest.mark.asyncio
async def test_rate_limit_refusal_makes_no_network_call() -> None:
    handler = Recorder(rpc_result({"usdPrice": "1"}))
    executor = make_executor(handler, capacity=1, behavior="error")

    await executor.call("ankr_getTokenPrice", PRICE_REQ, GetTokenPriceResponse)
    with pytest.raises(RateLimitExceededError):
        await executor.call("ankr_getTokenPrice", PRICE_REQ, GetTokenPriceResponse)

    assert handler.calls == 1


@pytest.mark.asyncio
async def test_deadline_during_http_call_stops_retry_loop() -> None:
    calls = 0

    async def slow(request: httpx.Request) -> httpx.Response:
        nonlocal calls
        calls += 1
        await asyncio.sleep(5)
        return rpc_result({"usdPrice": "1"})

    executor = make_executor(slow)
    with pytest.raises(RequestCancelledError):
        await executor.call("ankr_getTokenPrice", PRICE_REQ, GetTokenPriceResponse, timeout=0.05)
    await asyncio.sleep(0.05)
    assert calls == 1


@pytest.mark.asyncio
async def test_deadline_during_retry_delay_stops_further_attempts() -> None:
    handler = Recorder(httpx.Response(500))
    limiter = TokenBucketRateLimiter(capacity=10, window=60.0)
    executor = RequestExecutor(
        ENDPOINT,
        limiter,
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
        max_attempts=3,
        retry_delay=10.0,
    )

    with pytest.raises(RequestCancelledError):
        await executor.call("ankr_getTokenPrice", PRICE_REQ, GetTokenPriceResponse, timeout=0.1)
    assert handler.calls == 1


@pytest.mark.asyncio
async def test_deadline_fires_while_blocked_on_empty_bucket() -> None:
    handler = Recorder(rpc_result({"usdPrice": "1"}))
    executor = make_executor(handler, capacity=1, behavior="block")

    await executor.call("ankr_getTokenPrice", PRICE_REQ, GetTokenPriceResponse)

    started = time.monotonic()
    with pytest.raises(RequestCancelledError) as exc_info:
        await executor.call("ankr_getTokenPrice", PRICE_REQ, GetTokenPriceResponse, timeout=0.1)
    assert time.monotonic() - started < 1.0
    assert exc_info.value.details["operation"] == "ankr_getTokenPrice"
    assert handler.calls == 1


@pytest.mark.asyncio
async def test_non_request_params_raise_defaulting_error_without_retry() -> None:
    handler = Recorder(rpc_result({}))
    executor = make_executor(handler)

    with pytest.raises(DefaultingError):
        await executor.call("ankr_getTokenPrice", {"blockchain": "eth"}, GetTokenPriceResponse)
    assert handler.calls == 0


@pytest.mark.asyncio
async def test_injected_http_client_is_not_closed() -> None:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(Recorder(rpc_result({}))))
    executor = RequestExecutor(ENDPOINT, TokenBucketRateLimiter(), http_client=http_client)
    await executor.aclose()
    assert not http_client.is_closed
    await http_client.aclose()


def test_repr_hides_api_key() -> None:
    executor = RequestExecutor(ENDPOINT, TokenBucketRateLimiter())
    assert "0123456789abcdef" not in repr(executor)


def test_rejects_invalid_retry_policy() -> None:
    with pytest.raises(ValueError):
        RequestExecutor(ENDPOINT, TokenBucketRateLimiter(), max_attempts=0)
    with pytest.raises(ValueError):
        RequestExecutor(ENDPOINT, TokenBucketRateLimiter(), retry_delay=-1)
