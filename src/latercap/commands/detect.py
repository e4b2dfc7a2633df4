"""Command: detect the content type of free text."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from latercap.commands._base import LaterCommand
from latercap.commands._input import resolve_text, text_source

if TYPE_CHECKING:
    from latercap.commands._context import AppContext


@click.command(
    cls=LaterCommand,
    examples="""\
  latercap detect "Buy milk tomorrow"
  latercap detect $'- Milk\\n- Eggs\\n- Bread'
  pbpaste | latercap -q detect -
  latercap --json detect --file inbox.txt""",
)
@text_source
@click.pass_obj
def detect(app: AppContext, text: str | None, file_path: Path | None) -> None:
    """Suggest whether TEXT is a task, a list, or a note."""
    app.emit(app.capture.detect(resolve_text(text, file_path)))
