"""Immutable, chainable filtering over a resolved token list."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from token_registry.core.exceptions import UnknownClusterSlugError
from token_registry.core.models import TokenInfo
from token_registry.core.types import CLUSTER_SLUGS


class TokenListContainer:
    """
    Wraps a resolved token sequence.

    Every filter returns a new container over a new tuple; a container is
    never modified after construction.

    Usage:
        tokens = (
            container
            .filter_by_cluster_slug("mainnet-beta")
            .exclude_by_tag("nft")
            .get_list()
        )
    """

    __slots__ = ("_tokens",)

    def __init__(self, tokens: Iterable[TokenInfo]) -> None:
        self._tokens: tuple[TokenInfo, ...] = tuple(tokens)

    def _where(self, predicate: Callable[[TokenInfo], bool]) -> TokenListContainer:
        return TokenListContainer(token for token in self._tokens if predicate(token))

    def filter_by_tag(self, tag: str) -> TokenListContainer:
        """Keep tokens tagged with ``tag``."""
        return self._where(lambda token: token.has_tag(tag))

    def exclude_by_tag(self, tag: str) -> TokenListContainer:
        """Drop tokens tagged with ``tag``."""
        return self._where(lambda token: not token.has_tag(tag))

    def filter_by_chain_id(self, chain_id: int) -> TokenListContainer:
        """Keep tokens on chain ``chain_id``."""
        return self._where(lambda token: token.chainId == chain_id)

    def exclude_by_chain_id(self, chain_id: int) -> TokenListContainer:
        """Drop tokens on chain ``chain_id``."""
        return self._where(lambda token: token.chainId != chain_id)

    def filter_by_cluster_slug(self, slug: str) -> TokenListContainer:
        """
        Keep tokens on the cluster named by ``slug``.

        Raises:
            UnknownClusterSlugError: If ``slug`` is not a known cluster
        """
        if slug in CLUSTER_SLUGS:
            return self.filter_by_chain_id(CLUSTER_SLUGS[slug])
        raise UnknownClusterSlugError(slug, CLUSTER_SLUGS.keys())

    def get_list(self) -> tuple[TokenInfo, ...]:
        """Return the wrapped tokens."""
        return self._tokens

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[TokenInfo]:
        return iter(self._tokens)

    def __repr__(self) -> str:
        return f"TokenListContainer(<{len(self._tokens)} tokens>)"
