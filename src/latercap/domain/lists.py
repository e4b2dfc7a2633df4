"""List-item extraction.

Two shapes are recognised:

- **Marked** lines (bullets, numbers, checkboxes).  Marker styles may differ
  from line to line.  Once a marked line has been seen, unmarked lines are
  ignored.
- **Unmarked** short lines.  A line qualifies when it is shorter than the
  short-line threshold, contains no period and does not end with a colon.
  When nothing in the text is marked, the result is kept only if the text
  reads as a list: at least two items after a list header, or at least
  three items without one.

A list header ("Shopping list:", "Things to buy:") is skipped while no item
has been collected yet.
"""

from __future__ import annotations

from latercap.domain.signals import (
    MIN_SIMPLE_LIST_LINES,
    SHORT_LINE_THRESHOLD,
    normalize_newlines,
    strip_marker,
)
from latercap.domain.vocabulary import DEFAULT_VOCABULARY, Vocabulary

MIN_HEADED_ITEMS = 2


def extract_list_items(text: str, *, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> list[str]:
    """Return the cleaned list items of *text* in their original order.

    Returns an empty list for anything that does not read as a list.
    """
    if not text or not text.strip():
        return []

    items: list[str] = []
    found_marked = False
    header_skipped = False

    for line in normalize_newlines(text).split("\n"):
        stripped = line.strip()
        if not stripped:
            continue

        item, marked = strip_marker(line)
        if marked:
            if item:
                items.append(item)
                found_marked = True
            continue

        if not items and vocabulary.list_pattern.search(stripped):
            header_skipped = True
            continue

        if found_marked:
            continue

        if len(stripped) < SHORT_LINE_THRESHOLD and "." not in stripped and not stripped.endswith(":"):
            items.append(stripped)

    if found_marked:
        return items

    required = MIN_HEADED_ITEMS if header_skipped else MIN_SIMPLE_LIST_LINES
    if len(items) < required:
        return []
    return items
