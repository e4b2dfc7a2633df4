"""Command: score free text against one content type."""

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
  latercap confidence "Buy milk tomorrow" --type task
  latercap -q confidence $'- Milk\\n- Eggs' --type task
  latercap --json confidence --file draft.txt --type note""",
)
@text_source
@click.option(
    "-t",
    "--type",
    "content_type",
    type=click.Choice([ct.value for ct in ContentType]),
    required=True,
    help="Content type to score against.",
)
@click.pass_obj
def confidence(
    app: AppContext,
    text: str | None,
    file_path: Path | None,
    content_type: str,
) -> None:
    """Report how strongly TEXT reads as the given content type (0.0-1.0)."""
    app.emit(app.capture.confidence(resolve_text(text, file_path), content_type))
