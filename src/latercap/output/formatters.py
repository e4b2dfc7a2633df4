"""Output mode dispatch.

The CLI renders ServiceResult for humans (Rich output) or machines
(--json).  ``--quiet`` prints only the essential value so results pipe
cleanly into other tools.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from latercap.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from latercap.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """How a result should be rendered."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
    json_output: bool = False,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        settings: Output mode; takes precedence over *json_output*.
        json_output: Shorthand for ``OutputSettings(json_output=True)``.
    """
    if settings is None:
        settings = OutputSettings(json_output=json_output)
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
