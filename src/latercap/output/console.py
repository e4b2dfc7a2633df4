"""Rich Console factory and theme for latercap output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

LATERCAP_THEME = Theme(
    {
        "later.ok": "bold green",
        "later.error": "bold red",
        "later.warning": "bold yellow",
        "later.op": "bold cyan",
        "later.key": "dim",
        "later.title": "bold",
        "later.date": "bold blue",
        "later.type.task": "yellow",
        "later.type.list": "blue",
        "later.type.note": "green",
        "later.score": "magenta",
    }
)

_TYPE_STYLES: dict[str, str] = {
    "task": "later.type.task",
    "list": "later.type.list",
    "note": "later.type.note",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=LATERCAP_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_type(content_type: str) -> str:
    """Return the Rich style name for a content type."""
    return _TYPE_STYLES.get(content_type, "")
