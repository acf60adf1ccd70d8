"""Main library entry point for resolving token lists."""

from __future__ import annotations

import logging

import httpx

from token_registry.config import TokenRegistrySettings, get_settings
from token_registry.container import TokenListContainer
from token_registry.core.types import Strategy
from token_registry.resolution.registry import DEFAULT_REGISTRY, StrategyRegistry

logger = logging.getLogger(__name__)


class TokenListProvider:
    """
    Resolves a token list through a named strategy.

    Usage:
        # One-off resolution with a short-lived HTTP client
        container = await TokenListProvider().resolve()

        # Several resolutions sharing one HTTP client
        async with TokenListProvider() as provider:
            github = await provider.resolve(Strategy.GITHUB)
            static = await provider.resolve(Strategy.STATIC, "https://example.com/list.json")

    Settings are loaded from environment variables or can be passed explicitly.
    """

    def __init__(
        self,
        settings: TokenRegistrySettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
        registry: StrategyRegistry | None = None,
    ) -> None:
        """
        Initialize the provider.

        Args:
            settings: Library settings. If not provided, loaded from environment.
            client: HTTP client to reuse. It is never closed by the provider.
            registry: Strategy lookup. Defaults to the built-in strategies.
        """
        self._settings = settings or get_settings()
        self._registry = registry or DEFAULT_REGISTRY
        self._client = client
        self._owns_client = False

    def _create_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=httpx.Timeout(self._settings.request_timeout),
            follow_redirects=True,
        )

    async def __aenter__(self) -> TokenListProvider:
        """Open a shared HTTP client on context entry."""
        if self._client is None:
            self._client = self._create_client()
            self._owns_client = True
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Close the HTTP client if this provider opened it."""
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client if this provider opened it."""
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None
            self._owns_client = False

    async def resolve(
        self,
        strategy: Strategy | str | None = None,
        fallback_url: str | None = None,
    ) -> TokenListContainer:
        """
        Resolve tokens with the named strategy.

        Args:
            strategy: Strategy to use (``settings.default_strategy`` if not provided)
            fallback_url: Source used when a primary fails (``settings.fallback_url``
                if not provided)

        Returns:
            A container over every resolved token

        Raises:
            ValidationError: If the strategy name is unknown
            ResolutionError: If a source and its fallback both fail
        """
        if strategy is None:
            strategy = self._settings.default_strategy
        if fallback_url is None:
            fallback_url = self._settings.fallback_url

        resolver = self._registry.get_strategy(strategy)
        logger.debug(f"Resolving token list with {resolver!r}")

        if self._client is not None:
            tokens = await resolver.resolve(fallback_url, client=self._client)
        else:
            async with self._create_client() as client:
                tokens = await resolver.resolve(fallback_url, client=client)
        return TokenListContainer(tokens)


# Convenience function for one-off resolutions
async def resolve_token_list(
    strategy: Strategy | str | None = None,
    fallback_url: str | None = None,
    *,
    settings: TokenRegistrySettings | None = None,
) -> TokenListContainer:
    """
    Resolve a token list (convenience function).

    For multiple resolutions, use TokenListProvider as a context manager.
    """
    async with TokenListProvider(settings) as provider:
        return await provider.resolve(strategy, fallback_url)
