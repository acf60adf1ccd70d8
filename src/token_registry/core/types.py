"""Core enums and type definitions."""

from enum import IntEnum, StrEnum
from types import MappingProxyType


class Strategy(StrEnum):
    """Named policies selecting which remote source to query."""

    GITHUB = "GitHub"
    STATIC = "Static"
    SOLANA = "Solana"
    CDN = "CDN"


class ENV(IntEnum):
    """Chain ids of the known Solana clusters."""

    MAINNET_BETA = 101
    TESTNET = 102
    DEVNET = 103


CLUSTER_SLUGS: MappingProxyType[str, ENV] = MappingProxyType(
    {
        "mainnet-beta": ENV.MAINNET_BETA,
        "testnet": ENV.TESTNET,
        "devnet": ENV.DEVNET,
    }
)
