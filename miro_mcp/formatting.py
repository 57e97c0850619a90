"""Text rendering for tool results and errors."""

import json
from typing import Any, Dict, List, Optional

import httpx

from .batch import BatchReport
from .errors import BatchSizeError, ConfigurationError, MiroAPIError, UnsupportedItemTypeError

# ─── Errors ──────────────────────────────────────────────────────────────────


def handle_api_error(e: Exception) -> str:
    """Consistent error formatting."""
    if isinstance(e, MiroAPIError):
        status = e.status_code
        if status == 401:
            return "Error: Authentication failed. Check your MIRO_OAUTH_TOKEN."
        elif status == 403:
            return "Error: Permission denied. Ensure the token has the boards:write scope for this board."
        elif status == 404:
            return "Error: Resource not found. Check the board and item IDs are correct."
        elif status == 429:
            return "Error: Rate limit exceeded. Wait a moment and retry."
        else:
            body = e.body[:500]
            return f"Error: Miro API returned {status} {e.status_text}. Response: {body}"
    elif isinstance(e, httpx.TimeoutException):
        return "Error: Request timed out. Try again."
    elif isinstance(e, httpx.HTTPError):
        return f"Error: Could not reach the Miro API: {e}"
    elif isinstance(e, (BatchSizeError, UnsupportedItemTypeError, ConfigurationError, ValueError)):
        return f"Error: {e}"
    return f"Error: {type(e).__name__}: {e}"


# ─── Formatting Helpers ──────────────────────────────────────────────────────


def to_json(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def _person(person: Optional[Dict]) -> str:
    if not person:
        return "Unknown"
    return person.get("name") or person.get("id", "Unknown")


def format_board_summary(board: Dict) -> str:
    """Format a board for display."""
    name = board.get("name") or "Untitled"
    bid = board.get("id", "?")
    lines = [f"**{name}** (ID: {bid})"]

    description = board.get("description")
    if description:
        lines.append(f"  Description: {description[:200]}{'...' if len(description) > 200 else ''}")

    team = board.get("team")
    if team:
        lines.append(f"  Team: {team.get('name', '?')} ({team.get('id', '?')})")
    owner = board.get("owner")
    if owner:
        lines.append(f"  Owner: {_person(owner)}")

    created = board.get("createdAt", "N/A")
    modified = board.get("modifiedAt", "N/A")
    lines.append(f"  Created: {created} | Modified: {modified}")

    url = board.get("viewLink")
    if url:
        lines.append(f"  URL: {url}")
    return "\n".join(lines)


def format_board_list(boards: List[Dict]) -> str:
    lines = [f"Found {len(boards)} board(s):"]
    for board in boards:
        lines.append(f"- {board.get('name', 'Untitled')} (ID: {board.get('id', '?')})")
    return "\n".join(lines)


def format_item_line(item: Dict) -> str:
    """One-line description of a board item."""
    item_type = item.get("type", "item")
    iid = item.get("id", "?")
    data = item.get("data") or {}
    label = data.get("content") or data.get("title") or data.get("url") or ""
    if len(label) > 80:
        label = label[:80] + "..."
    line = f"- {item_type} {iid}"
    if label:
        line += f": {label}"
    position = item.get("position")
    if position:
        line += f" @ ({position.get('x', 0)}, {position.get('y', 0)})"
    return line


def format_batch_report(report: BatchReport, board_id: str) -> str:
    """Summarise a bulk call, naming every element that failed."""
    verbs = {
        "create": ("Created", "items", "on"),
        "update": ("Updated", "items", "on"),
        "delete": ("Deleted", "items", "from"),
        "connector": ("Created", "connectors", "on"),
    }
    verb, noun, preposition = verbs.get(report.kind, ("Processed", "elements", "on"))
    lines = [
        f"{verb} {report.succeeded} of {report.requested} {noun} {preposition} board {board_id}"
    ]
    for outcome in report.outcomes:
        if outcome.ok and outcome.result:
            lines.append(f"  [{outcome.index}] {outcome.key} -> ID: {outcome.result.get('id', '?')}")
    if report.failures:
        lines.append(f"{report.failed} failed:")
        for outcome in report.failures:
            lines.append(f"  [{outcome.index}] {outcome.key}: {outcome.error}")
    return "\n".join(lines)
