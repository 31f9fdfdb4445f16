#!/usr/bin/env python3
"""
HN Search MCP Server

Search Hacker News stories through the Algolia search API as a session:
submit a query, page through results with "load more", and dismiss rows
you are not interested in. Results are kept per query for the life of the
server, so going back to an earlier query does not refetch it.

Tools:
- hn_change_query: edit the pending query without searching
- hn_submit_search: search the pending (or given) query
- hn_load_more: fetch the next page for the active query
- hn_dismiss_hit: hide a result row
- hn_view_results: show the current session
- hn_get_metrics: fetch and store statistics
"""

import json
import logging
from typing import Optional

from mcp.server.fastmcp import FastMCP

from api import HackerNewsClient
from core import (
    HNSearchError,
    SearchController,
    format_metrics_report,
    get_fetch_metrics,
)
from models import ResponseFormat
from utils import load_config, render_view

CONFIG = load_config()

logging.basicConfig(
    level=getattr(logging, CONFIG["log_level"], logging.WARNING),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("hn_search_mcp")

# Initialize MCP server
mcp = FastMCP("hn_search_mcp")

_session: Optional[SearchController] = None


def _create_session() -> SearchController:
    client = HackerNewsClient(CONFIG["api_base"], timeout=CONFIG["timeout"])
    return SearchController(client, metrics=get_fetch_metrics())


async def get_session() -> SearchController:
    """Return the session controller, mounting it on first use."""
    global _session
    if _session is None:
        _session = _create_session()
        await _session.mount(CONFIG["default_query"])
    return _session


def _response_format(value: Optional[str]) -> ResponseFormat:
    raw = (value or CONFIG["response_format"]).lower()
    try:
        return ResponseFormat(raw)
    except ValueError:
        logger.warning(f"Unknown response format {raw!r}, using markdown")
        return ResponseFormat.MARKDOWN


def _error_response(action: str, error: Exception) -> str:
    logger.error(f"{action} failed: {error}")
    return json.dumps({"error": str(error), "action": action}, indent=2)


# ============================================================================
# Session Tools
# ============================================================================


@mcp.tool(
    name="hn_change_query",
    annotations={
        "title": "Edit Pending Query",
        "readOnlyHint": False,
        "destructiveHint": False,
        "idempotentHint": True,
        "openWorldHint": False,
    },
)
async def hn_change_query(query: str, response_format: Optional[str] = None) -> str:
    """
    Set the text of the search box without running a search.

    Args:
        query: New pending query text
        response_format: 'markdown' (default) or 'json'

    Returns:
        str: The current session view
    """
    session = await get_session()
    session.change_query(query)
    return render_view(session, _response_format(response_format))


@mcp.tool(
    name="hn_submit_search",
    annotations={
        "title": "Search Hacker News",
        "readOnlyHint": False,
        "destructiveHint": False,
        "idempotentHint": False,
        "openWorldHint": True,
    },
)
async def hn_submit_search(
    query: Optional[str] = None, response_format: Optional[str] = None
) -> str:
    """
    Run a search for the pending query, or for ``query`` if given.

    Queries already searched this session are served from memory
    without contacting the API. Matching is exact: "redux" and
    "redux " are different searches.

    Args:
        query: Query to search (replaces the pending query)
        response_format: 'markdown' (default) or 'json'

    Returns:
        str: The results view, or an error notice if the fetch failed
    """
    session = await get_session()
    if query is not None:
        session.change_query(query)
    await session.submit()
    return render_view(session, _response_format(response_format))


@mcp.tool(
    name="hn_load_more",
    annotations={
        "title": "Load More Results",
        "readOnlyHint": False,
        "destructiveHint": False,
        "idempotentHint": False,
        "openWorldHint": True,
    },
)
async def hn_load_more(response_format: Optional[str] = None) -> str:
    """
    Fetch the next page for the active query and append it.

    Args:
        response_format: 'markdown' (default) or 'json'

    Returns:
        str: The results view including the new page
    """
    session = await get_session()
    try:
        await session.load_more()
    except HNSearchError as e:
        return _error_response("load_more", e)
    return render_view(session, _response_format(response_format))


@mcp.tool(
    name="hn_dismiss_hit",
    annotations={
        "title": "Dismiss Result",
        "readOnlyHint": False,
        "destructiveHint": True,
        "idempotentHint": True,
        "openWorldHint": False,
    },
)
async def hn_dismiss_hit(hit_id: str, response_format: Optional[str] = None) -> str:
    """
    Remove a result row from the active query's results.

    Args:
        hit_id: The ID column of the row to remove
        response_format: 'markdown' (default) or 'json'

    Returns:
        str: The results view without the dismissed row
    """
    session = await get_session()
    try:
        session.dismiss(hit_id)
    except HNSearchError as e:
        return _error_response("dismiss", e)
    return render_view(session, _response_format(response_format))


@mcp.tool(
    name="hn_view_results",
    annotations={
        "title": "View Search Session",
        "readOnlyHint": True,
        "destructiveHint": False,
        "idempotentHint": True,
        "openWorldHint": False,
    },
)
async def hn_view_results(response_format: Optional[str] = None) -> str:
    """
    Show the active query, its results and the loading/error state.

    Args:
        response_format: 'markdown' (default) or 'json'
    """
    session = await get_session()
    return render_view(session, _response_format(response_format))


@mcp.tool(
    name="hn_get_metrics",
    annotations={
        "title": "Get Session Metrics",
        "readOnlyHint": True,
        "destructiveHint": False,
        "idempotentHint": True,
        "openWorldHint": False,
    },
)
async def hn_get_metrics() -> str:
    """
    Report fetch success rate, latency and how many submits were
    answered from memory.
    """
    return format_metrics_report()


# ============================================================================
# Main Entry Point
# ============================================================================


def main():
    logger.info(f"Using search API at {CONFIG['api_base']}")
    mcp.run()


if __name__ == "__main__":
    main()
