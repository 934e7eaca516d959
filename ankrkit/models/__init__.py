"""Typed request and response models for the Advanced API."""

from ankrkit.models.base import AnkrModel, AnkrRequest, PaginatedRequest, PaginatedResponse
from ankrkit.models.chains import Chain
from ankrkit.models.defaults import apply_defaults
from ankrkit.models.nft import (
    NFT,
    GetNFTHoldersRequest,
    GetNFTHoldersResponse,
    GetNFTMetadataRequest,
    GetNFTMetadataResponse,
    GetNFTsByOwnerRequest,
    GetNFTsByOwnerResponse,
    GetNFTTransfersRequest,
    GetNFTTransfersResponse,
    NFTMetadata,
    NFTMetadataAttributes,
    NFTTrait,
    NFTTransfer,
)
from ankrkit.models.query import (
    Block,
    BlockchainStat,
    Event,
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
    Log,
    Method,
    Transaction,
)
from ankrkit.models.token import (
    Currency,
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
    HolderCountHistory,
    TokenAsset,
    TokenHolder,
    TokenTransfer,
)

__all__ = [
    "AnkrModel",
    "AnkrRequest",
    "PaginatedRequest",
    "PaginatedResponse",
    "Chain",
    "apply_defaults",
    "NFT",
    "NFTTrait",
    "NFTTransfer",
    "NFTMetadata",
    "NFTMetadataAttributes",
    "GetNFTsByOwnerRequest",
    "GetNFTsByOwnerResponse",
    "GetNFTMetadataRequest",
    "GetNFTMetadataResponse",
    "GetNFTHoldersRequest",
    "GetNFTHoldersResponse",
    "GetNFTTransfersRequest",
    "GetNFTTransfersResponse",
    "Block",
    "BlockchainStat",
    "Event",
    "Log",
    "Method",
    "Transaction",
    "GetBlockchainStatsRequest",
    "GetBlockchainStatsResponse",
    "GetBlocksRequest",
    "GetBlocksResponse",
    "GetLogsRequest",
    "GetLogsResponse",
    "GetTransactionsByHashRequest",
    "GetTransactionsByHashResponse",
    "GetTransactionsByAddressRequest",
    "GetTransactionsByAddressResponse",
    "GetInteractionsRequest",
    "GetInteractionsResponse",
    "Currency",
    "TokenAsset",
    "TokenHolder",
    "TokenTransfer",
    "HolderCountHistory",
    "GetAccountBalanceRequest",
    "GetAccountBalanceResponse",
    "GetCurrenciesRequest",
    "GetCurrenciesResponse",
    "GetTokenPriceRequest",
    "GetTokenPriceResponse",
    "GetTokenHoldersRequest",
    "GetTokenHoldersResponse",
    "GetTokenHoldersCountRequest",
    "GetTokenHoldersCountResponse",
    "GetTokenTransfersRequest",
    "GetTokenTransfersResponse",
]
