"""Shared service-layer helper functions."""

from __future__ import annotations

from datetime import date

from latercap.domain.signals import normalize_newlines, strip_marker

ELLIPSIS = "..."


def today_local() -> date:
    """Today's date on the caller's local clock."""
    return date.today()


def truncate(text: str, max_length: int) -> str:
    """Cut *text* to at most *max_length* characters, marking the cut.

    Examples:
        >>> truncate("Buy milk", 20)
        'Buy milk'
        >>> truncate("Buy milk and eggs", 10)
        'Buy mil...'
    """
    if len(text) <= max_length:
        return text
    return text[: max_length - len(ELLIPSIS)].rstrip() + ELLIPSIS


def derive_title(text: str, max_length: int) -> str:
    """Title for a captured item: its first non-empty line, markers stripped.

    A trailing colon (list headers such as ``"Shopping list:"``) is dropped.
    Returns ``"Untitled"`` when nothing usable remains.
    """
    for line in normalize_newlines(text).split("\n"):
        item, _ = strip_marker(line)
        item = item.rstrip(":").strip()
        if item:
            return truncate(item, max_length)
    return "Untitled"
