"""
Search session controller.

Drives submit / load more / dismiss against a ResultStore and a search
client, and keeps the loading and error flags the view renders from.

    idle ──submit──▶ loading ──ok──▶ loaded ──load_more──▶ loading
                        │                                     │
                        └──error──▶ failed ◀──────error───────┘

A submit whose key is already stored skips the network and goes
straight to ``loaded``.
"""

import logging
import time
from typing import Optional

from core.exceptions import ControllerStateError, FetchFailed
from core.metrics import FetchMetrics, get_fetch_metrics
from core.store import ResultStore
from models import Hit, ResultPage, SearchStatus, SessionState

__all__ = ["SearchController", "DEFAULT_QUERY"]

DEFAULT_QUERY = "redux"

logger = logging.getLogger(__name__)


class SearchController:
    """
    Orchestrates one search session.

    ``client`` is anything with an async ``fetch_page(query, page)``
    returning a ResultPage or raising FetchFailed.

    Several requests may be in flight at once (nothing stops a double
    submit). Responses are applied in arrival order; each one merges into
    the key it was requested for, and only the most recent action (a
    fetch, or a submit served from the store) updates ``is_loading``,
    ``last_error`` and ``status``.
    """

    def __init__(
        self,
        client,
        store: Optional[ResultStore] = None,
        *,
        metrics: Optional[FetchMetrics] = None,
    ):
        self.client = client
        self.store = store if store is not None else ResultStore()
        self.metrics = metrics if metrics is not None else get_fetch_metrics()

        self.active_query = ""
        self.active_search_key = ""
        self.is_loading = False
        self.last_error: Optional[FetchFailed] = None
        self.status = SearchStatus.IDLE

        self._generation = 0

    # ──────────────────────────────────────────────────────────────────────────
    # View accessors
    # ──────────────────────────────────────────────────────────────────────────

    @property
    def state(self) -> SessionState:
        return SessionState(
            active_query=self.active_query,
            active_search_key=self.active_search_key,
            is_loading=self.is_loading,
            last_error=self.last_error,
            status=self.status,
        )

    @property
    def active_page(self) -> Optional[ResultPage]:
        return self.store.get(self.active_search_key)

    @property
    def visible_hits(self) -> list[Hit]:
        entry = self.active_page
        return list(entry.hits) if entry else []

    @property
    def visible_page(self) -> int:
        entry = self.active_page
        return entry.page if entry else 0

    @property
    def has_more(self) -> bool:
        entry = self.active_page
        return entry.has_more if entry else True

    # ──────────────────────────────────────────────────────────────────────────
    # User actions
    # ──────────────────────────────────────────────────────────────────────────

    def change_query(self, text: str) -> None:
        """Update the pending input only; nothing is fetched."""
        self.active_query = text

    async def mount(self, default_query: str = DEFAULT_QUERY) -> SessionState:
        """Start the session with ``default_query``, like a first submit."""
        self.active_query = default_query
        return await self.submit(default_query)

    async def submit(self, query: Optional[str] = None) -> SessionState:
        """
        Make ``query`` (or the pending input) the active search.

        Fetches page 0 only when the store has nothing for the exact
        query string; otherwise the stored results become visible
        without a network call.
        """
        key = self.active_query if query is None else query
        self.active_search_key = key

        if self.store.needs_fetch(key):
            await self._fetch(key, 0)
        else:
            logger.debug(f"Serving {key!r} from store")
            self.metrics.record_cache_hit()
            self._start_request()
            self.is_loading = False
            self.last_error = None
            self.status = SearchStatus.LOADED

        return self.state

    async def load_more(self) -> SessionState:
        """Fetch the page after the last stored one for the active key."""
        if self.status == SearchStatus.IDLE:
            raise ControllerStateError("Nothing has been searched yet")
        if self.is_loading:
            raise ControllerStateError("A request is already loading")

        await self._fetch(self.active_search_key, self.visible_page + 1)
        return self.state

    def dismiss(self, hit_id: str) -> SessionState:
        """
        Remove a hit from the active results.

        Raises:
            ControllerStateError: Before the first search or while loading
            UnknownSearchKey: If the active key has no stored results
        """
        if self.status not in (SearchStatus.LOADED, SearchStatus.FAILED):
            raise ControllerStateError(
                f"Cannot dismiss while {self.status.value}"
            )

        before = len(self.visible_hits)
        self.store.remove_hit(self.active_search_key, hit_id)
        if len(self.visible_hits) < before:
            self.metrics.record_dismiss()
        return self.state

    # ──────────────────────────────────────────────────────────────────────────
    # Fetching
    # ──────────────────────────────────────────────────────────────────────────

    async def _fetch(self, key: str, page: int) -> None:
        generation = self._start_request()

        self.is_loading = True
        self.last_error = None
        self.status = SearchStatus.LOADING

        start = time.perf_counter()
        try:
            result = await self.client.fetch_page(key, page)
        except FetchFailed as e:
            cause = e.__cause__
            self.metrics.record_failure(type(cause or e).__name__)
            if generation == self._generation:
                self.last_error = e
                self.is_loading = False
                self.status = SearchStatus.FAILED
            else:
                logger.debug(f"Dropped stale failure for {key!r} page {page}")
            return
        except BaseException:
            # Cancelled or crashed: nothing merged, stop loading and re-raise.
            if generation == self._generation:
                self.is_loading = False
                self.status = (
                    SearchStatus.LOADED if key in self.store else SearchStatus.IDLE
                )
            raise

        latency_ms = (time.perf_counter() - start) * 1000
        self.metrics.record_success(latency_ms, len(result.hits))
        self.store.append_page(key, result)

        if generation == self._generation:
            self.last_error = None
            self.is_loading = False
            self.status = SearchStatus.LOADED

    def _start_request(self) -> int:
        self._generation += 1
        return self._generation
