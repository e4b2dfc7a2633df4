"""Shared TEXT / --file input handling for classification commands."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import click

STDIN_MARKER = "-"


def text_source(func: Any) -> Any:
    """Decorate a command with an optional TEXT argument and ``--file``."""
    func = click.option(
        "-f",
        "--file",
        "file_path",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        default=None,
        help="Read the text from a file instead of the argument.",
    )(func)
    return click.argument("text", required=False)(func)


def resolve_text(text: str | None, file_path: Path | None) -> str:
    """Return the text to classify.

    ``-`` (or no TEXT and no ``--file``) reads stdin.  Exactly one of
    TEXT and ``--file`` may be given.
    """
    if text is not None and file_path is not None:
        raise click.UsageError("Pass either TEXT or --file, not both.")

    if file_path is not None:
        try:
            return file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            msg = f"Cannot read {file_path}: {exc}"
            raise click.ClickException(msg) from exc

    if text is None or text == STDIN_MARKER:
        return click.get_text_stream("stdin").read()
    return text
