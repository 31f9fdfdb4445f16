"""
Core of the HN search session.

    ResultStore        Per-query accumulation of fetched hits
    SearchController   Submit / load more / dismiss state machine
    Metrics            Fetch reliability and store usage
"""

from core.exceptions import (
    ControllerStateError,
    FetchFailed,
    HNSearchError,
    UnknownSearchKey,
)
from core.metrics import (
    FetchMetrics,
    format_metrics_report,
    get_fetch_metrics,
)
from core.store import ResultStore
from core.controller import DEFAULT_QUERY, SearchController

__all__ = [
    # Errors
    "HNSearchError",
    "FetchFailed",
    "UnknownSearchKey",
    "ControllerStateError",
    # Store
    "ResultStore",
    # Controller
    "SearchController",
    "DEFAULT_QUERY",
    # Metrics
    "FetchMetrics",
    "get_fetch_metrics",
    "format_metrics_report",
]
