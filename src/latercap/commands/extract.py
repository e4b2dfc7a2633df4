"""Command group: extraction helpers (list items, due date)."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from latercap.commands._base import LaterGroup
from latercap.commands._input import resolve_text, text_source

if TYPE_CHECKING:
    from latercap.commands._context import AppContext


_EXTRACT_EXAMPLES = """\
  latercap extract items $'Shopping list:\\n- Milk\\n- Eggs'
  latercap -q extract items --file groceries.txt
  latercap extract due "Call the dentist tomorrow at 3pm"
  latercap extract due "Submit by Friday"
  latercap --json extract due --file note.txt"""


@click.group(cls=LaterGroup, examples=_EXTRACT_EXAMPLES)
@click.pass_obj
def extract(app: AppContext) -> None:
    """Extract list items or a due date from free text."""


@extract.command(
    examples="""\
  latercap extract items $'1. Wake up\\n2. Exercise'
  latercap -q extract items --file groceries.txt""",
)
@text_source
@click.pass_obj
def items(app: AppContext, text: str | None, file_path: Path | None) -> None:
    """List the items of TEXT in their original order."""
    app.emit(app.capture.extract_items(resolve_text(text, file_path)))


@extract.command(
    examples="""\
  latercap extract due "Buy milk tomorrow"
  latercap -q extract due --file note.txt""",
)
@text_source
@click.pass_obj
def due(app: AppContext, text: str | None, file_path: Path | None) -> None:
    """Resolve a relative due date ("today", "tomorrow", "next week") in TEXT."""
    app.emit(app.capture.extract_due(resolve_text(text, file_path)))
