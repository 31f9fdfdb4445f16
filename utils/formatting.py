"""Rendering of the search session for tool responses."""

import json
from typing import Any

from api.hackernews import item_url
from core.controller import SearchController
from models import Hit, ResponseFormat

__all__ = ["ERROR_MESSAGE", "view_payload", "render_markdown", "render_view"]

ERROR_MESSAGE = "Something went wrong. Please try again!"


_CELL_ESCAPES = str.maketrans({
    "\\": "\\\\",
    "|": "\\|",
    "[": "\\[",
    "]": "\\]",
    "\n": " ",
    "\r": " ",
})

_URL_ESCAPES = str.maketrans({
    " ": "%20",
    "|": "%7C",
    "(": "%28",
    ")": "%29",
})


def _cell(value: Any) -> str:
    """Text safe to place inside a markdown table cell."""
    if value is None:
        return ""
    return str(value).translate(_CELL_ESCAPES)


def _hit_link(hit: Hit) -> str:
    target = (hit.url or item_url(hit.id)).translate(_URL_ESCAPES)
    return f"[{_cell(hit.title or '(untitled)')}]({target})"


def view_payload(controller: SearchController) -> dict[str, Any]:
    """Plain-data snapshot of everything the view shows."""
    state = controller.state
    return {
        "query": state.active_query,
        "search_key": state.active_search_key,
        "status": state.status.value,
        "is_loading": state.is_loading,
        "error": str(state.last_error) if state.last_error else None,
        "page": controller.visible_page,
        "has_more": controller.has_more,
        "hits": [hit.model_dump() for hit in controller.visible_hits],
    }


def render_markdown(controller: SearchController) -> str:
    """Render the session as a markdown results table."""
    state = controller.state
    hits = controller.visible_hits

    lines = [
        f"# Hacker News: {state.active_search_key!r}",
        "",
    ]
    if state.active_query != state.active_search_key:
        lines.extend([f"_Pending query: {state.active_query!r}_", ""])

    if state.last_error is not None:
        lines.append(ERROR_MESSAGE)
    elif not hits:
        lines.append("No results.")
    else:
        lines.append("| # | Title | Author | Comments | Points | ID |")
        lines.append("|---|-------|--------|----------|--------|----|")
        for index, hit in enumerate(hits, start=1):
            lines.append(
                f"| {index} | {_hit_link(hit)} | {_cell(hit.author)} "
                f"| {hit.comment_count} | {hit.points} | `{_cell(hit.id)}` |"
            )

    lines.append("")
    if state.is_loading:
        lines.append("Loading...")
    elif controller.has_more:
        lines.append(f"Page {controller.visible_page}. More results available.")
    else:
        lines.append(f"Page {controller.visible_page}. No more results.")

    return "\n".join(lines)


def render_view(
    controller: SearchController,
    response_format: ResponseFormat = ResponseFormat.MARKDOWN,
) -> str:
    if response_format == ResponseFormat.JSON:
        return json.dumps(view_payload(controller), indent=2)
    return render_markdown(controller)
