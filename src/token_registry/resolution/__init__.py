"""Resolution layer for fetching token lists from remote sources."""

from token_registry.resolution.base import AbstractResolutionStrategy
from token_registry.resolution.fetch import fetch_token_list, query_json_files
from token_registry.resolution.registry import DEFAULT_REGISTRY, StrategyRegistry
from token_registry.resolution.strategies import (
    CDNTokenListResolutionStrategy,
    GitHubTokenListResolutionStrategy,
    SolanaTokenListResolutionStrategy,
    StaticTokenListResolutionStrategy,
)

__all__ = [
    # Base
    "AbstractResolutionStrategy",
    # Fetch
    "fetch_token_list",
    "query_json_files",
    # Strategies
    "CDNTokenListResolutionStrategy",
    "GitHubTokenListResolutionStrategy",
    "SolanaTokenListResolutionStrategy",
    "StaticTokenListResolutionStrategy",
    # Registry
    "DEFAULT_REGISTRY",
    "StrategyRegistry",
]
