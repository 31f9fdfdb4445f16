"""Exceptions raised by the HN search session."""

__all__ = [
    "HNSearchError",
    "FetchFailed",
    "UnknownSearchKey",
    "ControllerStateError",
]


class HNSearchError(Exception):
    """Base class for search session errors."""


class FetchFailed(HNSearchError):
    """A page could not be fetched or decoded.

    Network and decode failures are not distinguished; the original
    exception is chained as ``__cause__``.
    """

    def __init__(self, query: str, page: int, reason: str = ""):
        self.query = query
        self.page = page
        self.reason = reason
        message = f"Fetching page {page} for {query!r} failed"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class UnknownSearchKey(HNSearchError, KeyError):
    """The store has no entry for the given search key."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"No results stored for search key {self.key!r}"


class ControllerStateError(HNSearchError, RuntimeError):
    """The requested action is not available in the current state."""
