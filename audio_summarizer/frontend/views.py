"""
Markdown rendering for the upload form results
"""

import html
from typing import List

from ..models.requests import SummarizeResponse

NO_ACTION_ITEMS_MESSAGE = "No explicit action items were detected."
NO_DECISIONS_MESSAGE = "No explicit decisions were identified."


def bullet_list(items: List[str], empty_message: str = "") -> str:
    if not items:
        return f"*{empty_message}*" if empty_message else ""
    return "\n".join(f"- {html.escape(item)}" for item in items)


def render_summary(result: SummarizeResponse) -> str:
    """Summary paragraph followed by the key points"""
    return (
        "## Summary\n\n"
        f"{html.escape(result.summary)}\n\n"
        "### Key points\n\n"
        f"{bullet_list(result.key_points)}"
    )


def render_actions(result: SummarizeResponse) -> str:
    """Action items and decisions, with a note when either is empty"""
    return (
        "## Action items\n\n"
        f"{bullet_list(result.action_items, NO_ACTION_ITEMS_MESSAGE)}\n\n"
        "### Decisions\n\n"
        f"{bullet_list(result.decisions, NO_DECISIONS_MESSAGE)}"
    )


def render_error(message: str) -> str:
    return f"**❌ {html.escape(message)}**"
