"""Subcommand modules for latercap.

Provides register_commands() which uses deferred imports to keep
``latercap --help`` fast as the codebase grows.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group.

    1 group (extract) + 3 standalone commands.
    """
    # --- Groups ---
    from latercap.commands.extract import extract

    cli.add_command(extract)

    # --- Standalone commands ---
    from latercap.commands.capture import capture
    from latercap.commands.confidence import confidence
    from latercap.commands.detect import detect

    cli.add_command(detect)
    cli.add_command(confidence)
    cli.add_command(capture)
