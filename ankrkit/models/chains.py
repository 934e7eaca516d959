"""
Blockchain identifiers accepted by the Advanced API.

The ``blockchain`` param of most methods takes one of these values, a list of
them, or nothing at all to query every supported chain.
"""

from __future__ import annotations

from enum import Enum


class Chain(str, Enum):
    """Supported blockchain networks."""

    # Mainnets
    ARBITRUM = "arbitrum"
    AVALANCHE = "avalanche"
    BASE = "base"
    BSC = "bsc"
    ETHEREUM = "eth"
    FANTOM = "fantom"
    FLARE = "flare"
    GNOSIS = "gnosis"
    LINEA = "linea"
    OPTIMISM = "optimism"
    POLYGON = "polygon"
    POLYGON_ZKEVM = "polygon_zkevm"
    SCROLL = "scroll"
    STELLAR = "stellar"
    STORY = "story_mainnet"
    SYSCOIN = "syscoin"
    TELOS = "telos"
    XAI = "xai"
    XLAYER = "xlayer"

    # Testnets
    AVALANCHE_FUJI = "avalanche_fuji"
    BASE_SEPOLIA = "base_sepolia"
    ETHEREUM_HOLESKY = "eth_holesky"
    ETHEREUM_SEPOLIA = "eth_sepolia"
    OPTIMISM_TESTNET = "optimism_testnet"
    POLYGON_AMOY = "polygon_amoy"
    STORY_TESTNET = "story_aeneid_testnet"

    @property
    def is_testnet(self) -> bool:
        return self in _TESTNETS

    @classmethod
    def mainnets(cls) -> list[Chain]:
        return [c for c in cls if not c.is_testnet]

    @classmethod
    def testnets(cls) -> list[Chain]:
        return [c for c in cls if c.is_testnet]

    def __str__(self) -> str:
        return self.value


_TESTNETS = frozenset(
    {
        Chain.AVALANCHE_FUJI,
        Chain.BASE_SEPOLIA,
        Chain.ETHEREUM_HOLESKY,
        Chain.ETHEREUM_SEPOLIA,
        Chain.OPTIMISM_TESTNET,
        Chain.POLYGON_AMOY,
        Chain.STORY_TESTNET,
    }
)
