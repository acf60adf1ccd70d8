"""Tests for the exception hierarchy."""

from __future__ import annotations

from token_registry.core.exceptions import (
    InvalidTokenListError,
    ResolutionError,
    SourceUnavailableError,
    TokenRegistryError,
    UnknownClusterSlugError,
    ValidationError,
)


class TestUnknownClusterSlugError:
    """Tests for UnknownClusterSlugError."""

    def test_message_names_slug_and_choices(self):
        """The message should name the slug and list the valid slugs."""
        error = UnknownClusterSlugError("localnet", ["mainnet-beta", "testnet", "devnet"])

        assert str(error) == (
            "Unknown slug: localnet, please use one of mainnet-beta, testnet, devnet"
        )
        assert error.slug == "localnet"
        assert error.valid_slugs == ("mainnet-beta", "testnet", "devnet")

    def test_is_validation_error(self):
        """Slug errors should be caller input errors."""
        error = UnknownClusterSlugError("x", [])
        assert isinstance(error, ValidationError)
        assert isinstance(error, TokenRegistryError)


class TestResolutionErrors:
    """Tests for resolution error types."""

    def test_source_unavailable(self):
        """SourceUnavailableError should carry source and status code."""
        error = SourceUnavailableError("HTTP 503", source="https://a", status_code=503)

        assert isinstance(error, ResolutionError)
        assert error.source == "https://a"
        assert error.status_code == 503
        assert error.details == {}

    def test_invalid_token_list(self):
        """InvalidTokenListError should carry the source."""
        error = InvalidTokenListError("bad body", source="https://a")

        assert isinstance(error, ResolutionError)
        assert error.source == "https://a"
        assert error.message == "bad body"
