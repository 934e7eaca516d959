"""Token API models."""

from __future__ import annotations

from pydantic import Field

from ankrkit.models.base import (
    AnkrModel,
    AnkrRequest,
    BlockchainFilter,
    BlockRef,
    PaginatedRequest,
    PaginatedResponse,
)
from ankrkit.models.chains import Chain


class GetAccountBalanceRequest(PaginatedRequest):
    """Params of ankr_getAccountBalance. No page size means all assets in one page."""

    send_defaults = {"native_first": True, "only_whitelisted": True}

    wallet_address: str | None = None
    blockchain: BlockchainFilter = None
    native_first: bool | None = None
    only_whitelisted: bool | None = None


class TokenAsset(AnkrModel):
    balance: str = ""
    balance_raw_integer: str = ""
    balance_usd: str = ""
    blockchain: str = ""
    contract_address: str = ""
    holder_address: str = ""
    thumbnail: str = ""
    token_decimals: int = 0
    token_name: str = ""
    token_price: str = ""
    token_symbol: str = ""
    token_type: str = ""


class GetAccountBalanceResponse(PaginatedResponse):
    assets: list[TokenAsset] = Field(default_factory=list)
    total_balance_usd: str = ""


class GetCurrenciesRequest(AnkrRequest):
    blockchain: Chain | None = None


class Currency(AnkrModel):
    address: str = ""
    blockchain: str = ""
    decimals: int = 0
    name: str = ""
    symbol: str = ""
    thumbnail: str = ""


class GetCurrenciesResponse(AnkrModel):
    currencies: list[Currency] = Field(default_factory=list)


class GetTokenPriceRequest(AnkrRequest):
    """Without ``contract_address`` the native coin price of ``blockchain`` is returned."""

    blockchain: Chain | None = None
    contract_address: str | None = None


class GetTokenPriceResponse(AnkrModel):
    blockchain: str = ""
    contract_address: str = ""
    usd_price: str = ""


class GetTokenHoldersRequest(PaginatedRequest):
    send_defaults = {"page_size": 10000}

    blockchain: Chain | None = None
    contract_address: str | None = None


class TokenHolder(AnkrModel):
    balance: str = ""
    balance_raw_integer: str = ""
    holder_address: str = ""


class GetTokenHoldersResponse(PaginatedResponse):
    blockchain: str = ""
    contract_address: str = ""
    holders: list[TokenHolder] = Field(default_factory=list)
    holders_count: int = 0
    token_decimals: int = 0


class GetTokenHoldersCountRequest(PaginatedRequest):
    send_defaults = {"page_size": 10000}

    blockchain: Chain | None = None
    contract_address: str | None = None


class HolderCountHistory(AnkrModel):
    holder_count: int = 0
    last_updated_at: str = ""
    total_amount: str = ""
    total_amount_raw_integer: str = ""


class GetTokenHoldersCountResponse(PaginatedResponse):
    blockchain: str = ""
    contract_address: str = ""
    holder_count_history: list[HolderCountHistory] = Field(default_factory=list)
    token_decimals: int = 0


class GetTokenTransfersRequest(PaginatedRequest):
    send_defaults = {"page_size": 10000, "desc_order": True}

    address: list[str] | None = None
    blockchain: BlockchainFilter = None
    desc_order: bool | None = None
    from_block: BlockRef = None
    to_block: BlockRef = None
    from_timestamp: int | None = None
    to_timestamp: int | None = None


class TokenTransfer(AnkrModel):
    block_height: int = 0
    blockchain: str = ""
    contract_address: str = ""
    from_address: str = ""
    thumbnail: str = ""
    timestamp: int = 0
    to_address: str = ""
    token_decimals: int = 0
    token_name: str = ""
    token_symbol: str = ""
    transaction_hash: str = ""
    value: str = ""
    value_raw_integer: str = ""


class GetTokenTransfersResponse(PaginatedResponse):
    transfers: list[TokenTransfer] = Field(default_factory=list)
