"""Token list document and token record models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TagDetails(BaseModel):
    """Human-readable description of a tag key."""

    model_config = ConfigDict(frozen=True, extra="allow")

    name: Any = Field(default=None, description="Display name")
    description: Any = Field(default=None, description="Tag description")


class TokenExtensions(BaseModel):
    """Optional token metadata. Unknown keys are preserved."""

    model_config = ConfigDict(frozen=True, extra="allow")

    website: str | None = None
    bridgeContract: str | None = None
    assetContract: str | None = None
    address: str | None = None
    explorer: str | None = None
    twitter: str | None = None
    github: str | None = None
    medium: str | None = None
    tgann: str | None = None
    tggroup: str | None = None
    discord: str | None = None
    serumV3Usdt: str | None = Field(default=None, description="Serum V3 USDT market address")
    serumV3Usdc: str | None = Field(default=None, description="Serum V3 USDC market address")
    coingeckoId: str | None = Field(default=None, description="CoinGecko price id")
    imageUrl: str | None = None
    description: str | None = None


class TokenInfo(BaseModel):
    """A single token record.

    Identity is ``(chainId, address)``, but records are never deduplicated:
    the same token listed by two sources appears twice.
    """

    model_config = ConfigDict(frozen=True)

    chainId: int = Field(..., description="Numeric chain id")
    address: str = Field(..., description="Mint address")
    name: str = Field(..., description="Token name")
    decimals: int = Field(..., description="Decimal places")
    symbol: str = Field(..., description="Ticker symbol")
    logoURI: str | None = Field(default=None, description="Logo image URL")
    tags: tuple[str, ...] | None = Field(default=None, description="Tag keys")
    extensions: TokenExtensions | None = Field(default=None, description="Extra metadata")

    def has_tag(self, tag: str) -> bool:
        """Check whether the token carries ``tag``. Missing tags count as empty."""
        return tag in (self.tags or ())


class TokenList(BaseModel):
    """A token list document as published by a single source.

    Only ``tokens`` is used downstream, so the document metadata is taken as
    published and never rejects a document.
    """

    model_config = ConfigDict(frozen=True)

    name: Any = None
    logoURI: Any = None
    tags: dict[str, TagDetails] = Field(default_factory=dict)
    timestamp: Any = None
    tokens: tuple[TokenInfo, ...] = ()

    @field_validator("tokens", mode="before")
    @classmethod
    def _missing_tokens_are_empty(cls, value: Any) -> Any:
        return () if value is None else value

    @field_validator("tags", mode="before")
    @classmethod
    def _drop_malformed_tags(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return {}
        return {str(key): details for key, details in value.items() if isinstance(details, dict)}
