"""Configuration enums for the HN search session."""

from enum import Enum


class ResponseFormat(str, Enum):
    """Output format for tool responses."""

    MARKDOWN = "markdown"
    JSON = "json"


class SearchStatus(str, Enum):
    """Lifecycle of the active search."""

    IDLE = "idle"  # Nothing submitted yet
    LOADING = "loading"  # Request in flight
    LOADED = "loaded"  # Results visible
    FAILED = "failed"  # Last request errored
