"""Shared test fixtures for all tests."""

from __future__ import annotations

from typing import Any

import pytest

from token_registry.config import TokenRegistrySettings
from token_registry.core.models import TokenInfo

# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def usdc_data() -> dict[str, Any]:
    """Raw mainnet USDC token record."""
    return {
        "chainId": 101,
        "address": "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v",
        "symbol": "USDC",
        "name": "USD Coin",
        "decimals": 6,
        "logoURI": "https://example.com/usdc.png",
        "tags": ["stablecoin"],
        "extensions": {
            "website": "https://www.centre.io/",
            "coingeckoId": "usd-coin",
            "serumV3Usdt": "77quYg4MGneUdjgXCunt9GgM1usmrxKY31twEy3WHwcS",
        },
    }


@pytest.fixture
def devnet_nft_data() -> dict[str, Any]:
    """Raw devnet NFT token record."""
    return {
        "chainId": 103,
        "address": "DevNFT1111111111111111111111111111111111111",
        "symbol": "DNFT",
        "name": "Devnet NFT",
        "decimals": 0,
        "tags": ["nft"],
    }


@pytest.fixture
def untagged_data() -> dict[str, Any]:
    """Raw testnet token record without tags or extensions."""
    return {
        "chainId": 102,
        "address": "TestTok1111111111111111111111111111111111111",
        "symbol": "TST",
        "name": "Test Token",
        "decimals": 9,
    }


@pytest.fixture
def token_list_data(
    usdc_data: dict[str, Any],
    devnet_nft_data: dict[str, Any],
    untagged_data: dict[str, Any],
) -> dict[str, Any]:
    """Full token list document."""
    return {
        "name": "Solana Token List",
        "logoURI": "https://example.com/solana.png",
        "keywords": ["solana", "spl"],
        "tags": {
            "stablecoin": {
                "name": "stablecoin",
                "description": "Tokens that are fixed to an external asset",
            },
            "nft": {"name": "nft", "description": "Non-fungible tokens"},
        },
        "timestamp": "2021-03-03T19:57:21+0000",
        "tokens": [usdc_data, devnet_nft_data, untagged_data],
    }


@pytest.fixture
def sample_tokens(
    usdc_data: dict[str, Any],
    devnet_nft_data: dict[str, Any],
    untagged_data: dict[str, Any],
) -> list[TokenInfo]:
    """Parsed tokens spanning all three clusters."""
    return [
        TokenInfo.model_validate(usdc_data),
        TokenInfo.model_validate(devnet_nft_data),
        TokenInfo.model_validate(untagged_data),
    ]


# ============================================================================
# Source URL Fixtures
# ============================================================================


@pytest.fixture
def github_url() -> str:
    return "https://raw.githubusercontent.com/solana-labs/token-list/main/src/tokens/solana.tokenlist.json"


@pytest.fixture
def cdn_url() -> str:
    return "https://cdn.jsdelivr.net/gh/solana-labs/token-list@latest/src/tokens/solana.tokenlist.json"


@pytest.fixture
def solana_url() -> str:
    return "https://token-list.solana.com/solana.tokenlist.json"


@pytest.fixture
def fallback_url() -> str:
    """Mirror used as the fallback source."""
    return "https://mirror.example.com/solana.tokenlist.json"


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def test_settings() -> TokenRegistrySettings:
    """Create test settings."""
    return TokenRegistrySettings(
        request_timeout=5.0,
        fallback_url="",
        log_level="DEBUG",
    )
