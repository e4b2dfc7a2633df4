"""Command: quick capture: classify text and build a pre-filled draft."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from latercap.commands._base import LaterCommand
from latercap.commands._input import resolve_text, text_source
from latercap.domain.types import ContentType

if TYPE_CHECKING:
    from latercap.commands._context import AppContext


@click.command(
    cls=LaterCommand,
    examples="""\
  latercap capture "Call mom at 5pm tomorrow"
  latercap capture $'Shopping list:\\n- Milk\\n- Eggs'
  latercap capture "Ideas for the offsite" --type note
  latercap --json capture --file inbox.txt""",
)
@text_source
@click.option(
    "-t",
    "--type",
    "content_type",
    type=click.Choice([ct.value for ct in ContentType]),
    default=None,
    help="Skip detection and capture as this type.",
)
@click.pass_obj
def capture(
    app: AppContext,
    text: str | None,
    file_path: Path | None,
    content_type: str | None,
) -> None:
    """Turn TEXT into a draft task, list, or note with pre-filled fields."""
    app.emit(app.capture.capture(resolve_text(text, file_path), content_type=content_type))
