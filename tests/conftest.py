"""Shared fixtures: hit payloads and a scripted search client.

``FakeClient`` stands in for ``HackerNewsClient`` in controller tests. Each
call to ``fetch_page`` pops the next scripted outcome: a ResultPage is
returned, an exception is raised. Outcomes can also be an
``asyncio.Event``-gated pair so tests control the order responses land in.
"""

from __future__ import annotations

import asyncio
from typing import Any

import pytest

from core.exceptions import FetchFailed
from core.metrics import FetchMetrics
from models import Hit, ResultPage


def hit_payload(object_id: str, **overrides: Any) -> dict[str, Any]:
    """Raw Algolia hit as returned by the search endpoint."""
    payload = {
        "objectID": object_id,
        "title": f"Story {object_id}",
        "url": f"https://example.com/{object_id}",
        "author": "pg",
        "num_comments": 3,
        "points": 42,
        "created_at": "2016-03-01T12:00:00.000Z",
        "_tags": ["story"],
    }
    payload.update(overrides)
    return payload


def make_hit(object_id: str, **overrides: Any) -> Hit:
    return Hit.model_validate(hit_payload(object_id, **overrides))


def make_page(page: int, *ids: str, nb_pages: int | None = None) -> ResultPage:
    return ResultPage(
        hits=[make_hit(i) for i in ids], page=page, nb_pages=nb_pages
    )


class Gate:
    """A response that is released only when the test says so."""

    def __init__(self, outcome: ResultPage | Exception):
        self.outcome = outcome
        self.event = asyncio.Event()

    def release(self) -> None:
        self.event.set()


class FakeClient:
    """Scripted stand-in for the HTTP search client."""

    def __init__(self, *outcomes: ResultPage | Exception | Gate):
        self.outcomes = list(outcomes)
        self.calls: list[tuple[str, int]] = []

    def queue(self, *outcomes: ResultPage | Exception | Gate) -> None:
        self.outcomes.extend(outcomes)

    async def fetch_page(self, query: str, page: int = 0) -> ResultPage:
        self.calls.append((query, page))
        if not self.outcomes:
            raise AssertionError(f"Unexpected fetch for {query!r} page {page}")

        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Gate):
            await outcome.event.wait()
            outcome = outcome.outcome
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def fetch_failed(query: str = "redux", page: int = 0) -> FetchFailed:
    try:
        raise FetchFailed(query, page, "boom") from ConnectionError("boom")
    except FetchFailed as e:
        return e


@pytest.fixture
def metrics() -> FetchMetrics:
    return FetchMetrics()


@pytest.fixture
def client() -> FakeClient:
    return FakeClient()
