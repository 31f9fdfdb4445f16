"""
In-memory accumulation of search results per search key.

Entries are created on the first successful fetch for a key and live
for the session, so revisiting a query does not refetch it.
"""

import logging
from typing import Iterator, Optional

from core.exceptions import UnknownSearchKey
from models import ResultPage

__all__ = ["ResultStore"]

logger = logging.getLogger(__name__)


class ResultStore:
    """
    Mapping from search key to the hits accumulated for it.

    Appending a page concatenates its hits after everything already
    stored for the key and records the page number as the latest one
    fetched. No deduplication happens here.
    """

    def __init__(self):
        self._results: dict[str, ResultPage] = {}

    def __contains__(self, key: str) -> bool:
        return key in self._results

    def __len__(self) -> int:
        return len(self._results)

    def keys(self) -> Iterator[str]:
        return iter(self._results)

    def get(self, key: str) -> Optional[ResultPage]:
        return self._results.get(key)

    def needs_fetch(self, key: str) -> bool:
        """True iff nothing has been stored for ``key`` yet."""
        return key not in self._results

    def append_page(self, key: str, page: ResultPage) -> ResultPage:
        """Merge ``page`` into the entry for ``key`` and return the entry."""
        existing = self._results.get(key)
        old_hits = existing.hits if existing else []

        merged = page.model_copy(update={"hits": [*old_hits, *page.hits]})
        self._results[key] = merged

        logger.debug(
            f"Stored page {page.page} for {key!r}: "
            f"+{len(page.hits)} hits, {len(merged.hits)} total"
        )
        return merged

    def remove_hit(self, key: str, hit_id: str) -> ResultPage:
        """
        Drop the hit with ``hit_id`` from the entry for ``key``.

        Raises:
            UnknownSearchKey: If ``key`` has no entry
        """
        existing = self._results.get(key)
        if existing is None:
            raise UnknownSearchKey(key)

        remaining = [hit for hit in existing.hits if hit.id != hit_id]
        updated = existing.model_copy(update={"hits": remaining})
        self._results[key] = updated
        return updated
