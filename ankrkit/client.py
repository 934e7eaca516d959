"""
Ankr Advanced API client.

Wires one rate limiter and one request executor per configuration and exposes
every Advanced API method as a typed coroutine. Methods whose request carries
a page token return a PageCursor instead of a single response.
"""

from __future__ import annotations

from typing import Any

import httpx

from ankrkit.config.schema import ClientConfig
from ankrkit.models.nft import (
    GetNFTHoldersRequest,
    GetNFTHoldersResponse,
    GetNFTMetadataRequest,
    GetNFTMetadataResponse,
    GetNFTsByOwnerRequest,
    GetNFTsByOwnerResponse,
    GetNFTTransfersRequest,
    GetNFTTransfersResponse,
)
from ankrkit.models.query import (
    GetBlockchainStatsRequest,
    GetBlockchainStatsResponse,
    GetBlocksRequest,
    GetBlocksResponse,
    GetInteractionsRequest,
    GetInteractionsResponse,
    GetLogsRequest,
    GetLogsResponse,
    GetTransactionsByAddressRequest,
    GetTransactionsByAddressResponse,
    GetTransactionsByHashRequest,
    GetTransactionsByHashResponse,
)
from ankrkit.models.token import (
    GetAccountBalanceRequest,
    GetAccountBalanceResponse,
    GetCurrenciesRequest,
    GetCurrenciesResponse,
    GetTokenHoldersCountRequest,
    GetTokenHoldersCountResponse,
    GetTokenHoldersRequest,
    GetTokenHoldersResponse,
    GetTokenPriceRequest,
    GetTokenPriceResponse,
    GetTokenTransfersRequest,
    GetTokenTransfersResponse,
)
from ankrkit.rpc.executor import RequestExecutor
from ankrkit.rpc.pages import PageCursor
from ankrkit.rpc.rate_limiter import TokenBucketRateLimiter


class AnkrClient:
    """
    Async client for the Ankr Advanced API.

    Usage:
        async with AnkrClient(api_key="...") as client:
            price = await client.get_token_price(GetTokenPriceRequest(blockchain=Chain.ETHEREUM))
            async for page in client.get_token_holders(GetTokenHoldersRequest(...)):
                ...
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        api_key: str | None = None,
        http_client: httpx.AsyncClient | None = None,
        rate_limiter: TokenBucketRateLimiter | None = None,
    ):
        """
        Args:
            config: Client configuration; defaults to ClientConfig() (ANKR_* env vars apply).
            api_key: Overrides config.api_key.
            http_client: Custom HTTP client; the caller keeps ownership of it.
            rate_limiter: Limiter to share with other clients; built from config when omitted.
        """
        config = config or ClientConfig()
        if api_key is not None:
            config = config.model_copy(update={"api_key": api_key})
        self.config = config
        self.rate_limiter = rate_limiter or TokenBucketRateLimiter(
            capacity=config.rate_limit.capacity,
            window=config.rate_limit.window_seconds,
            behavior=config.rate_limit.on_limit_exceeded,
        )
        self.executor = RequestExecutor(
            config.endpoint_url,
            self.rate_limiter,
            http_client=http_client,
            timeout=config.timeout,
            max_attempts=config.retry.max_attempts,
            retry_delay=config.retry.delay_seconds,
        )

    async def aclose(self) -> None:
        await self.executor.aclose()

    async def __aenter__(self) -> AnkrClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"AnkrClient(base_url={self.config.base_url!r}, rate_limiter={self.rate_limiter!r})"

    # ==================== NFT API ====================

    def get_nfts_by_owner(self, req: GetNFTsByOwnerRequest) -> PageCursor[GetNFTsByOwnerResponse]:
        """NFTs held by a wallet across one, several or all chains."""
        return PageCursor(self.executor, "ankr_getNFTsByOwner", req, GetNFTsByOwnerResponse)

    async def get_nft_metadata(
        self, req: GetNFTMetadataRequest, *, timeout: float | None = None
    ) -> GetNFTMetadataResponse:
        """Metadata and traits of a single NFT."""
        return await self.executor.call("ankr_getNFTMetadata", req, GetNFTMetadataResponse, timeout=timeout)

    def get_nft_holders(self, req: GetNFTHoldersRequest) -> PageCursor[GetNFTHoldersResponse]:
        """Wallets holding tokens of an NFT collection."""
        return PageCursor(self.executor, "ankr_getNFTHolders", req, GetNFTHoldersResponse)

    def get_nft_transfers(self, req: GetNFTTransfersRequest) -> PageCursor[GetNFTTransfersResponse]:
        """NFT transfers of the given addresses within a block or time range."""
        return PageCursor(self.executor, "ankr_getNftTransfers", req, GetNFTTransfersResponse)

    # ==================== Query API ====================

    async def get_blockchain_stats(
        self, req: GetBlockchainStatsRequest, *, timeout: float | None = None
    ) -> GetBlockchainStatsResponse:
        """Transaction and event counts, latest block and native coin price per chain."""
        return await self.executor.call(
            "ankr_getBlockchainStats", req, GetBlockchainStatsResponse, timeout=timeout
        )

    async def get_blocks(self, req: GetBlocksRequest, *, timeout: float | None = None) -> GetBlocksResponse:
        """Full info of the blocks in a range of at most 100 blocks."""
        return await self.executor.call("ankr_getBlocks", req, GetBlocksResponse, timeout=timeout)

    def get_logs(self, req: GetLogsRequest) -> PageCursor[GetLogsResponse]:
        """Event logs within a block or timestamp range, optionally decoded."""
        return PageCursor(self.executor, "ankr_getLogs", req, GetLogsResponse)

    async def get_transactions_by_hash(
        self, req: GetTransactionsByHashRequest, *, timeout: float | None = None
    ) -> GetTransactionsByHashResponse:
        return await self.executor.call(
            "ankr_getTransactionsByHash", req, GetTransactionsByHashResponse, timeout=timeout
        )

    def get_transactions_by_address(
        self, req: GetTransactionsByAddressRequest
    ) -> PageCursor[GetTransactionsByAddressResponse]:
        return PageCursor(
            self.executor, "ankr_getTransactionsByAddress", req, GetTransactionsByAddressResponse
        )

    async def get_interactions(
        self, req: GetInteractionsRequest, *, timeout: float | None = None
    ) -> GetInteractionsResponse:
        """Chains a wallet has interacted with."""
        return await self.executor.call("ankr_getInteractions", req, GetInteractionsResponse, timeout=timeout)

    # ==================== Token API ====================

    def get_account_balances(self, req: GetAccountBalanceRequest) -> PageCursor[GetAccountBalanceResponse]:
        """Token balances of a wallet, native coin first by default."""
        return PageCursor(self.executor, "ankr_getAccountBalance", req, GetAccountBalanceResponse)

    async def get_currencies(
        self, req: GetCurrenciesRequest, *, timeout: float | None = None
    ) -> GetCurrenciesResponse:
        return await self.executor.call("ankr_getCurrencies", req, GetCurrenciesResponse, timeout=timeout)

    async def get_token_price(
        self, req: GetTokenPriceRequest, *, timeout: float | None = None
    ) -> GetTokenPriceResponse:
        """USD price of a token, or of the chain's native coin without a contract address."""
        return await self.executor.call("ankr_getTokenPrice", req, GetTokenPriceResponse, timeout=timeout)

    def get_token_holders(self, req: GetTokenHoldersRequest) -> PageCursor[GetTokenHoldersResponse]:
        return PageCursor(self.executor, "ankr_getTokenHolders", req, GetTokenHoldersResponse)

    def get_token_holder_count_histories(
        self, req: GetTokenHoldersCountRequest
    ) -> PageCursor[GetTokenHoldersCountResponse]:
        """Daily holder count history of a token."""
        return PageCursor(self.executor, "ankr_getTokenHoldersCount", req, GetTokenHoldersCountResponse)

    def get_token_transfers(self, req: GetTokenTransfersRequest) -> PageCursor[GetTokenTransfersResponse]:
        return PageCursor(self.executor, "ankr_getTokenTransfers", req, GetTokenTransfersResponse)
