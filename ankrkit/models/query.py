"""Query API models: chain stats, blocks, logs, transactions, interactions."""

from __future__ import annotations

from typing import Any

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


class GetBlockchainStatsRequest(AnkrRequest):
    blockchain: BlockchainFilter = None


class BlockchainStat(AnkrModel):
    blockchain: str = ""
    total_transactions_count: int = 0
    total_events_count: int = 0
    latest_block_number: int = 0
    block_time_ms: int = 0
    native_coin_usd_price: str = ""


class GetBlockchainStatsResponse(AnkrModel):
    stats: list[BlockchainStat] = Field(default_factory=list)


class GetBlocksRequest(AnkrRequest):
    """Params of ankr_getBlocks; at most 100 blocks per range.

    Logs live inside transactions, so ``include_logs`` needs ``include_txs``.
    """

    send_defaults = {
        "decode_logs": False,
        "decode_tx_data": False,
        "desc_order": True,
        "include_logs": False,
        "include_txs": True,
    }

    blockchain: Chain | None = None
    from_block: BlockRef = None
    to_block: BlockRef = None
    decode_logs: bool | None = None
    decode_tx_data: bool | None = None
    desc_order: bool | None = None
    include_logs: bool | None = None
    include_txs: bool | None = None


class EventInput(AnkrModel):
    indexed: bool = False
    name: str = ""
    size: int = 0
    type: str = ""
    value_decoded: str = ""


class Event(AnkrModel):
    anonymous: bool = False
    id: str = ""
    inputs: list[EventInput] = Field(default_factory=list)
    name: str = ""
    signature: str = ""
    string: str = ""
    verified: bool = False


class Log(AnkrModel):
    address: str = ""
    block_hash: str = ""
    block_number: str = ""
    blockchain: str = ""
    data: str = ""
    event: Event | None = None
    log_index: str = ""
    removed: bool = False
    timestamp: str = ""
    topics: list[str] = Field(default_factory=list)
    transaction_hash: str = ""
    transaction_index: str = ""


class MethodInput(AnkrModel):
    name: str = ""
    size: int = 0
    type: str = ""
    value_decoded: str = ""


class Method(AnkrModel):
    id: str = ""
    inputs: list[MethodInput] = Field(default_factory=list)
    name: str = ""
    signature: str = ""
    string: str = ""
    verified: bool = False


class Transaction(AnkrModel):
    block_hash: str = ""
    block_number: str = ""
    blockchain: str = ""
    contract_address: str = ""
    cumulative_gas_used: str = ""
    from_: str = Field(default="", alias="from")
    gas: str = ""
    gas_price: str = ""
    gas_used: str = ""
    hash: str = ""
    input: str = ""
    logs: list[Log] = Field(default_factory=list)
    logs_bloom: str = ""
    method: Method | None = None
    nonce: str = ""
    r: str = ""
    s: str = ""
    status: str = ""
    timestamp: str = ""
    to: str = ""
    transaction_hash: str = ""
    transaction_index: str = ""
    type: str = ""
    v: str = ""
    value: str = ""


class EthBlockDetails(AnkrModel):
    difficulty: str = ""
    extra_data: str = ""
    gas_limit: int = 0
    gas_used: int = 0
    miner: str = ""
    nonce: str = ""
    sha3_uncles: str = Field(default="", alias="sha3Uncles")
    size: str = ""
    state_root: str = ""
    total_difficulty: str = ""


class BlockDetails(AnkrModel):
    eth_block: EthBlockDetails | None = None


class Block(AnkrModel):
    block_hash: str = Field(default="", alias="hash")
    block_height: str = Field(default="", alias="number")
    blockchain_logo: str = ""
    blockchain_name: str = Field(default="", alias="blockchain")
    details: BlockDetails | None = None
    logs_bloom: str = ""
    mix_hash: str = ""
    nonce: str = ""
    parent_hash: str = ""
    receipts_root: str = ""
    sha3_uncles: str = Field(default="", alias="sha3Uncles")
    state_root: str = ""
    miner: str = ""
    difficulty: str = ""
    extra_data: str = ""
    size: str = ""
    gas_limit: str = ""
    gas_used: str = ""
    timestamp: str = ""
    transactions_root: str = ""
    total_difficulty: str = ""
    transactions_count: int = 0
    transactions: list[Transaction] = Field(default_factory=list)
    uncles: list[Any] = Field(default_factory=list)


class GetBlocksResponse(AnkrModel):
    blocks: list[Block] = Field(default_factory=list)


class GetLogsRequest(PaginatedRequest):
    """Params of ankr_getLogs. ``topics`` holds one list of alternatives per topic slot."""

    send_defaults = {"decode_logs": False, "desc_order": True}

    address: list[str] | None = None
    blockchain: BlockchainFilter = None
    decode_logs: bool | None = None
    desc_order: bool | None = None
    from_block: BlockRef = None
    to_block: BlockRef = None
    from_timestamp: int | None = None
    to_timestamp: int | None = None
    topics: list[list[str]] | None = None


class GetLogsResponse(PaginatedResponse):
    logs: list[Log] = Field(default_factory=list)


class GetTransactionsByHashRequest(AnkrRequest):
    send_defaults = {"decode_logs": False, "decode_tx_data": False, "include_logs": False}

    blockchain: BlockchainFilter = None
    transaction_hash: str | None = None
    decode_logs: bool | None = None
    decode_tx_data: bool | None = None
    include_logs: bool | None = None


class GetTransactionsByHashResponse(AnkrModel):
    transactions: list[Transaction] = Field(default_factory=list)


class GetTransactionsByAddressRequest(PaginatedRequest):
    send_defaults = {"include_logs": False, "desc_order": True}

    address: str | None = None
    blockchain: BlockchainFilter = None
    from_block: BlockRef = None
    to_block: BlockRef = None
    from_timestamp: int | None = None
    to_timestamp: int | None = None
    include_logs: bool | None = None
    desc_order: bool | None = None


class GetTransactionsByAddressResponse(PaginatedResponse):
    transactions: list[Transaction] = Field(default_factory=list)


class GetInteractionsRequest(AnkrRequest):
    address: str | None = None


class GetInteractionsResponse(AnkrModel):
    blockchains: list[str] = Field(default_factory=list)
