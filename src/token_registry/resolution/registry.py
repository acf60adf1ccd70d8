"""Strategy registry mapping strategy names to shared instances."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from token_registry.core.exceptions import ValidationError
from token_registry.core.types import Strategy
from token_registry.resolution.base import AbstractResolutionStrategy
from token_registry.resolution.strategies import (
    CDNTokenListResolutionStrategy,
    GitHubTokenListResolutionStrategy,
    SolanaTokenListResolutionStrategy,
    StaticTokenListResolutionStrategy,
)


class StrategyRegistry(Mapping[Strategy, AbstractResolutionStrategy]):
    """
    Read-only lookup of resolution strategies by name.

    Strategies hold no mutable state, so one instance per name is built up
    front and shared by every caller.
    """

    def __init__(self, strategies: Iterable[AbstractResolutionStrategy]) -> None:
        self._strategies = MappingProxyType({s.name: s for s in strategies})

    def __getitem__(self, key: Strategy) -> AbstractResolutionStrategy:
        return self._strategies[key]

    def __iter__(self) -> Iterator[Strategy]:
        return iter(self._strategies)

    def __len__(self) -> int:
        return len(self._strategies)

    def get_strategy(self, name: Strategy | str) -> AbstractResolutionStrategy:
        """Look up a strategy by enum member or its string value."""
        try:
            return self._strategies[Strategy(name)]
        except (KeyError, ValueError):
            raise ValidationError(
                f"Unknown strategy: {name}, please use one of "
                f"{', '.join(s.value for s in self._strategies)}",
                details={"strategy": str(name)},
            ) from None

    @classmethod
    def default(cls) -> StrategyRegistry:
        """Create a registry with the four built-in strategies."""
        return cls(
            [
                GitHubTokenListResolutionStrategy(),
                StaticTokenListResolutionStrategy(),
                SolanaTokenListResolutionStrategy(),
                CDNTokenListResolutionStrategy(),
            ]
        )


DEFAULT_REGISTRY = StrategyRegistry.default()
