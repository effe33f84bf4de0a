"""
Pure utility functions for annotation logic.

These functions have no side effects and can be tested in isolation.
"""

from typing import Optional

from .state import Layout, Record

PREVIEW_MAX = 120


def compute_layout(
    width: int,
    height: int,
    header_allowance: int = 4,
    border_allowance: int = 4,
) -> Layout:
    """
    Split the terminal between the list and the two detail panes.

    Args:
        width: Terminal width in columns
        height: Terminal height in rows
        header_allowance: Rows kept for the header and pane borders
        border_allowance: Columns kept around each pane

    Returns:
        Layout with the list taking the whole terminal and each
        detail pane roughly half of it
    """
    width = max(0, width)
    height = max(0, height)
    return Layout(
        list_width=width,
        list_height=height,
        pane_width=max(0, width // 2 - border_allowance),
        pane_height=max(0, height - header_allowance),
    )


def make_preview(text: str, limit: int = PREVIEW_MAX) -> str:
    """Collapse whitespace and truncate for a one-line preview."""
    oneline = " ".join(text.split())
    if len(oneline) > limit:
        return oneline[: limit - 1] + "…"
    return oneline


def entry_title(record: Record, numbered: bool = True) -> str:
    """Label shown for a record in the list."""
    if numbered:
        return f"{record.position + 1}. {record.title}"
    return record.title


def entry_description(record: Record) -> str:
    """Secondary line shown for a record in the list."""
    return make_preview(record.source_text)


def matches_filter(record: Record, query: Optional[str]) -> bool:
    """Case-insensitive substring match on the record title."""
    if not query:
        return True
    return query.casefold() in record.title.casefold()


def progress_label(cursor: Optional[int], total: int) -> str:
    """Header text for the detail view, 1-based."""
    if cursor is None:
        return f"Item -/{total}"
    return f"Item {cursor + 1}/{total}"


def clamp_cursor(cursor: int, total: int) -> int:
    """Keep ``cursor`` inside ``[0, total - 1]``."""
    if total <= 0:
        raise ValueError("cannot place a cursor over an empty store")
    return min(max(cursor, 0), total - 1)
