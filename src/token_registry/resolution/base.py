"""Abstract base class for token list resolution strategies."""

from __future__ import annotations

from abc import ABC
from typing import TYPE_CHECKING, ClassVar

from token_registry.core.models import TokenInfo
from token_registry.core.types import Strategy
from token_registry.resolution.fetch import query_json_files

if TYPE_CHECKING:
    import httpx


class AbstractResolutionStrategy(ABC):
    """
    Base class for all resolution strategies.

    A strategy is a fixed list of primary source URLs. Every strategy shares
    the same fetch routine and differs only in which URLs it treats as
    primary sources.
    """

    # Class-level configuration (to be overridden by subclasses)
    STRATEGY: ClassVar[Strategy]
    REPOSITORIES: ClassVar[tuple[str, ...]] = ()

    @property
    def name(self) -> Strategy:
        """The strategy this instance implements."""
        return self.STRATEGY

    @property
    def repositories(self) -> tuple[str, ...]:
        """Fixed primary source URLs."""
        return self.REPOSITORIES

    def repositories_for(self, fallback_url: str) -> tuple[str, ...]:
        """Primary source URLs to query for a given fallback URL."""
        return self.repositories

    async def resolve(
        self,
        fallback_url: str,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> list[TokenInfo]:
        """
        Resolve tokens from every primary source.

        Args:
            fallback_url: Source queried in place of any primary that fails
            client: Shared HTTP client (a short-lived one is used if omitted)

        Returns:
            Tokens from all sources, in source order
        """
        return await query_json_files(
            self.repositories_for(fallback_url),
            fallback_url,
            client=client,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(repositories={list(self.repositories)!r})"
