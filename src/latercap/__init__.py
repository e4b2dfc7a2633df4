"""latercap: quick-capture classification for the Later app.

The engine lives in :mod:`latercap.domain.classifier`; the names below are
the public surface that UI code imports.
"""

from __future__ import annotations

from latercap.domain.classifier import (
    classify,
    detect_type,
    extract_due_date,
    extract_list_items,
    get_confidence,
)
from latercap.domain.types import ContentType

__version__ = "0.4.0"

__all__ = [
    "ContentType",
    "__version__",
    "classify",
    "detect_type",
    "extract_due_date",
    "extract_list_items",
    "get_confidence",
]
