"""token_registry - Solana token list resolution and filtering library."""

from token_registry.config import TokenRegistrySettings, configure_logging
from token_registry.container import TokenListContainer
from token_registry.core.exceptions import (
    InvalidTokenListError,
    ResolutionError,
    SourceUnavailableError,
    TokenRegistryError,
    UnknownClusterSlugError,
    ValidationError,
)
from token_registry.core.models import TagDetails, TokenExtensions, TokenInfo, TokenList
from token_registry.core.types import CLUSTER_SLUGS, ENV, Strategy
from token_registry.provider import TokenListProvider, resolve_token_list

__version__ = "0.1.0"
__all__ = [
    # Provider
    "TokenListProvider",
    "TokenListContainer",
    "resolve_token_list",
    # Config
    "TokenRegistrySettings",
    "configure_logging",
    # Types
    "CLUSTER_SLUGS",
    "ENV",
    "Strategy",
    # Models
    "TagDetails",
    "TokenExtensions",
    "TokenInfo",
    "TokenList",
    # Exceptions
    "InvalidTokenListError",
    "ResolutionError",
    "SourceUnavailableError",
    "TokenRegistryError",
    "UnknownClusterSlugError",
    "ValidationError",
    # Version
    "__version__",
]
