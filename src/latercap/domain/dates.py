"""Relative due-date extraction.

Only calendar dates are produced.  Clock times ("at 3pm") are recognised as
task signals elsewhere but never block or alter the date found here.

Phrase precedence, first match wins:

1. ``today`` / ``tonight``  -> today
2. ``tomorrow``             -> today + 1
3. ``next week``            -> today + 7
4. ``next month``           -> today + 30
5. a weekday name           -> the next such weekday, strictly after today
"""

from __future__ import annotations

from datetime import date, datetime, timedelta

from latercap.domain.vocabulary import WEEKDAYS, compile_terms

NEXT_WEEK_DAYS = 7
NEXT_MONTH_DAYS = 30

_OFFSETS: tuple[tuple[str, int], ...] = (
    ("today", 0),
    ("tonight", 0),
    ("tomorrow", 1),
    ("next week", NEXT_WEEK_DAYS),
    ("next month", NEXT_MONTH_DAYS),
)

_OFFSET_PATTERNS = tuple((compile_terms([phrase]), days) for phrase, days in _OFFSETS)
_WEEKDAY_PATTERN = compile_terms(WEEKDAYS)
_WEEKDAY_NUMBERS = {name: number for number, name in enumerate(WEEKDAYS)}


def _as_date(now: date | datetime | None) -> date:
    if now is None:
        return date.today()
    if isinstance(now, datetime):
        return now.date()
    return now


def next_weekday(start: date, weekday: int) -> date:
    """First date strictly after *start* that falls on *weekday* (Mon=0)."""
    days_ahead = (weekday - start.weekday()) % 7 or 7
    return start + timedelta(days=days_ahead)


def extract_due_date(text: str, *, now: date | datetime | None = None) -> date | None:
    """Find a relative date phrase in *text* and resolve it against *now*.

    *now* defaults to the local clock.  Returns None when no phrase is
    recognised; never raises.
    """
    if not text or not text.strip():
        return None

    today = _as_date(now)
    for pattern, days in _OFFSET_PATTERNS:
        if pattern.search(text):
            return today + timedelta(days=days)

    match = _WEEKDAY_PATTERN.search(text)
    if match is None:
        return None
    # IGNORECASE also matches Unicode case variants ("ſunday"); casefold maps them back.
    weekday = _WEEKDAY_NUMBERS.get(match.group(0).casefold())
    if weekday is None:
        return None
    return next_weekday(today, weekday)
