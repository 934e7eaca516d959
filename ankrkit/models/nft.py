"""NFT API models."""

from __future__ import annotations

from pydantic import Field

from ankrkit.models.base import (
    AnkrModel,
    AnkrRequest,
    BlockchainFilter,
    PaginatedRequest,
    PaginatedResponse,
)
from ankrkit.models.chains import Chain


class NFTTrait(AnkrModel):
    trait_type: str = Field(default="", alias="trait_type")
    value: str = ""


class NFT(AnkrModel):
    blockchain: str = ""
    collection_name: str = ""
    contract_address: str = ""
    contract_type: str = ""  # ERC721 or ERC1155
    name: str = ""
    token_id: str = ""
    image_url: str = ""
    symbol: str = ""
    traits: list[NFTTrait] = Field(default_factory=list)


class GetNFTsByOwnerRequest(PaginatedRequest):
    """Params of ankr_getNFTsByOwner. ``wallet_address`` supports ENS."""

    send_defaults = {"page_size": 50}

    wallet_address: str | None = None
    blockchain: BlockchainFilter = None
    # contract address -> token ids; an empty list selects the whole collection
    filter: dict[str, list[str]] | None = None


class GetNFTsByOwnerResponse(PaginatedResponse):
    owner: str = ""
    assets: list[NFT] = Field(default_factory=list)


class GetNFTMetadataRequest(AnkrRequest):
    """Params of ankr_getNFTMetadata.

    ``force_fetch`` reads the metadata from the contract instead of the
    indexer database.
    """

    send_defaults = {"force_fetch": False, "skip_sync_check": False}

    blockchain: Chain | None = None
    contract_address: str | None = None
    token_id: str | None = None
    force_fetch: bool | None = None
    skip_sync_check: bool | None = None


class NFTMetadataAttributes(AnkrModel):
    contract_type: str = ""
    token_url: str = ""
    image_url: str = ""
    name: str = ""
    description: str = ""
    traits: list[NFTTrait] = Field(default_factory=list)


class NFTMetadata(AnkrModel):
    blockchain: str = ""
    contract_address: str = ""
    contract_type: str = ""
    token_id: str = ""


class GetNFTMetadataResponse(AnkrModel):
    metadata: NFTMetadata | None = None
    attributes: NFTMetadataAttributes | None = None


class GetNFTHoldersRequest(PaginatedRequest):
    send_defaults = {"page_size": 1000}

    blockchain: Chain | None = None
    contract_address: str | None = None


class GetNFTHoldersResponse(PaginatedResponse):
    holders: list[str] = Field(default_factory=list)


class GetNFTTransfersRequest(PaginatedRequest):
    send_defaults = {"page_size": 100, "desc_order": True}

    address: list[str] | None = None
    blockchain: list[Chain] | None = None
    desc_order: bool | None = None
    from_block: int | None = None
    to_block: int | None = None
    from_timestamp: int | None = None
    to_timestamp: int | None = None


class NFTTransfer(AnkrModel):
    block_height: int = 0
    blockchain: str = ""
    collection_name: str = ""
    collection_symbol: str = ""
    contract_address: str = ""
    from_address: str = ""
    image_url: str = ""
    name: str = ""
    timestamp: int = 0
    to_address: str = ""
    token_id: str = ""
    transaction_hash: str = ""
    type: str = ""
    value: str = ""  # amount moved, meaningful for ERC1155


class GetNFTTransfersResponse(PaginatedResponse):
    transfers: list[NFTTransfer] = Field(default_factory=list)
