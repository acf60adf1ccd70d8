"""Fetch token list documents with a single fallback per source."""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Sequence
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
import pydantic

from token_registry.config import get_settings
from token_registry.core.exceptions import InvalidTokenListError, SourceUnavailableError
from token_registry.core.models import TokenInfo, TokenList

logger = logging.getLogger(__name__)


@asynccontextmanager
async def http_client(
    client: httpx.AsyncClient | None = None,
) -> AsyncIterator[httpx.AsyncClient]:
    """Yield ``client`` as is, or a short-lived client closed on exit."""
    if client is not None:
        yield client
        return

    async with httpx.AsyncClient(
        timeout=httpx.Timeout(get_settings().request_timeout),
        follow_redirects=True,
    ) as owned:
        yield owned


async def fetch_token_list(client: httpx.AsyncClient, url: str) -> TokenList:
    """Fetch ``url`` and parse the body as a token list document."""
    try:
        response = await client.get(url)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise SourceUnavailableError(
            message=f"HTTP {e.response.status_code} from {url}",
            source=url,
            status_code=e.response.status_code,
        ) from e
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise SourceUnavailableError(
            message=f"HTTP error: {e}",
            source=url,
        ) from e

    try:
        token_list = TokenList.model_validate(response.json())
    except (json.JSONDecodeError, UnicodeDecodeError, pydantic.ValidationError) as e:
        raise InvalidTokenListError(
            message=f"Invalid token list from {url}: {e}",
            source=url,
        ) from e

    logger.debug(f"Fetched {len(token_list.tokens)} tokens from {url}")
    return token_list


async def _fetch_with_fallback(
    client: httpx.AsyncClient,
    url: str,
    fallback_url: str,
) -> TokenList:
    try:
        return await fetch_token_list(client, url)
    except Exception as e:
        logger.info(f"Falling back to fallback url {fallback_url!r}: {url} failed: {e}")

    return await fetch_token_list(client, fallback_url)


async def query_json_files(
    urls: Sequence[str],
    fallback_url: str,
    *,
    client: httpx.AsyncClient | None = None,
) -> list[TokenInfo]:
    """
    Fetch every source concurrently and merge their tokens.

    Each source that fails is retried once against ``fallback_url``. All
    sources settle before anything is merged, and tokens come back in
    source order then document order, without deduplication.

    Raises:
        ResolutionError: If a source and its fallback both fail
    """
    async with http_client(client) as active:
        results = await asyncio.gather(
            *(_fetch_with_fallback(active, url, fallback_url) for url in urls),
            return_exceptions=True,
        )

    tokens: list[TokenInfo] = []
    for result in results:
        if isinstance(result, BaseException):
            raise result
        tokens.extend(result.tokens)
    return tokens
