"""Built-in token list resolution strategies."""

from __future__ import annotations

from typing import ClassVar

from token_registry.core.types import Strategy
from token_registry.resolution.base import AbstractResolutionStrategy


class GitHubTokenListResolutionStrategy(AbstractResolutionStrategy):
    """Raw file on the solana-labs/token-list GitHub repository."""

    STRATEGY: ClassVar[Strategy] = Strategy.GITHUB
    REPOSITORIES: ClassVar[tuple[str, ...]] = (
        "https://raw.githubusercontent.com/solana-labs/token-list/main/src/tokens/solana.tokenlist.json",
    )


class CDNTokenListResolutionStrategy(AbstractResolutionStrategy):
    """jsDelivr mirror of the GitHub file, pinned to ``latest``."""

    STRATEGY: ClassVar[Strategy] = Strategy.CDN
    REPOSITORIES: ClassVar[tuple[str, ...]] = (
        "https://cdn.jsdelivr.net/gh/solana-labs/token-list@latest/src/tokens/solana.tokenlist.json",
    )


class SolanaTokenListResolutionStrategy(AbstractResolutionStrategy):
    """Dedicated token-list.solana.com endpoint."""

    STRATEGY: ClassVar[Strategy] = Strategy.SOLANA
    REPOSITORIES: ClassVar[tuple[str, ...]] = (
        "https://token-list.solana.com/solana.tokenlist.json",
    )


class StaticTokenListResolutionStrategy(AbstractResolutionStrategy):
    """Uses the fallback URL as its only source."""

    STRATEGY: ClassVar[Strategy] = Strategy.STATIC

    def repositories_for(self, fallback_url: str) -> tuple[str, ...]:
        return (fallback_url,)
