"""Custom exception hierarchy for token_registry."""

from collections.abc import Iterable
from typing import Any


class TokenRegistryError(Exception):
    """Base exception for all token_registry errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(TokenRegistryError):
    """Input validation failed."""

    pass


class UnknownClusterSlugError(ValidationError):
    """Cluster slug is not one of the known clusters."""

    def __init__(
        self,
        slug: str,
        valid_slugs: Iterable[str],
        details: dict[str, Any] | None = None,
    ) -> None:
        self.slug = slug
        self.valid_slugs = tuple(valid_slugs)
        super().__init__(
            f"Unknown slug: {slug}, please use one of {', '.join(self.valid_slugs)}",
            details,
        )


class ResolutionError(TokenRegistryError):
    """Failed to resolve a token list."""

    pass


class SourceUnavailableError(ResolutionError):
    """Token list source could not be fetched."""

    def __init__(
        self,
        message: str,
        source: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.source = source
        self.status_code = status_code


class InvalidTokenListError(ResolutionError):
    """Token list source returned a body that is not a token list."""

    def __init__(
        self,
        message: str,
        source: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.source = source
