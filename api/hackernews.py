"""
Hacker News Search (via Algolia).

Fetches one page of search results per call and decodes it into a
ResultPage. Every failure, transport or decode, surfaces as FetchFailed.

API: https://hn.algolia.com/api
Rate Limits: Generous (Algolia hosted)
"""

import logging
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from core.exceptions import FetchFailed
from models import ResultPage

__all__ = ["HackerNewsClient", "fetch_page", "item_url"]

# ══════════════════════════════════════════════════════════════════════════════
# Configuration
# ══════════════════════════════════════════════════════════════════════════════

API_BASE = "https://hn.algolia.com/api/v1"
PATH_SEARCH = "/search"
ITEM_BASE = "https://news.ycombinator.com/item?id="

logger = logging.getLogger(__name__)

# ══════════════════════════════════════════════════════════════════════════════
# Client
# ══════════════════════════════════════════════════════════════════════════════


class HackerNewsClient:
    """
    Thin GET wrapper around the Algolia search endpoint.

    One network call per ``fetch_page`` invocation, no retries. No timeout
    unless the caller passes one.
    """

    def __init__(
        self,
        api_base: str = API_BASE,
        *,
        timeout: Optional[float] = None,
    ):
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout

    @property
    def search_url(self) -> str:
        return f"{self.api_base}{PATH_SEARCH}"

    async def fetch_page(self, query: str, page: int = 0) -> ResultPage:
        """
        Fetch one page of results for ``query``.

        Args:
            query: Search term, sent verbatim
            page: Zero-based page number

        Returns:
            ResultPage with the decoded hits and the page number

        Raises:
            FetchFailed: On any network, HTTP status or decode failure

        Example:
            >>> page = await HackerNewsClient().fetch_page("redux", 0)
        """
        params = {"query": query, "page": page}
        logger.debug(f"GET {self.search_url} query={query!r} page={page}")

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(self.search_url, params=params)
                response.raise_for_status()
                data = response.json()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(f"Search failed: {e}")
            raise FetchFailed(query, page, str(e)) from e
        except ValueError as e:
            logger.warning(f"Search returned invalid JSON: {e}")
            raise FetchFailed(query, page, "invalid JSON") from e

        return _decode(data, query, page)


def _decode(data: Any, query: str, page: int) -> ResultPage:
    """Decode a response body into a ResultPage."""
    if not isinstance(data, dict) or not isinstance(data.get("hits"), list):
        logger.warning(f"Unexpected payload for {query!r} page {page}")
        raise FetchFailed(query, page, "payload has no hits list")

    try:
        return ResultPage.model_validate(data)
    except ValidationError as e:
        logger.warning(f"Could not decode page {page} for {query!r}: {e}")
        raise FetchFailed(query, page, "malformed payload") from e


# ══════════════════════════════════════════════════════════════════════════════
# Helpers
# ══════════════════════════════════════════════════════════════════════════════


async def fetch_page(query: str, page: int = 0, **client_options) -> ResultPage:
    """Fetch a page using a one-off client."""
    return await HackerNewsClient(**client_options).fetch_page(query, page)


def item_url(hit_id: str) -> str:
    """Discussion page for a hit, used when the story has no url."""
    return f"{ITEM_BASE}{hit_id}"
