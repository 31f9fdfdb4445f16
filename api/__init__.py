"""
Hacker News API Integration.

    async def fetch_page(query: str, page: int = 0) -> ResultPage

Each call performs a single GET against the Algolia search endpoint and
returns the decoded page, or raises FetchFailed.

Configuration:
─────────────────────────────────────────────────────────────────────────────
    HN_API_BASE       Search API root (default https://hn.algolia.com/api/v1)
    HN_API_TIMEOUT    Request timeout in seconds (default: none)
"""

from api.hackernews import (
    API_BASE,
    HackerNewsClient,
    fetch_page,
    item_url,
)

__all__ = [
    "API_BASE",
    "HackerNewsClient",
    "fetch_page",
    "item_url",
]
