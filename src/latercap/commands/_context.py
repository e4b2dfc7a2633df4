"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy service construction and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from latercap.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from latercap.config.settings import LatercapSettings
    from latercap.services.capture import CaptureService
    from latercap.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.  The capture service is
    built on first use so ``--help`` and ``--version`` stay cheap.
    """

    def __init__(self, settings: LatercapSettings) -> None:
        self.settings = settings
        self._capture: CaptureService | None = None

        # Configure structured logging
        from latercap.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        # Enable telemetry context var when verbose
        if settings.verbose:
            from latercap.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def capture(self) -> CaptureService:
        """The capture service (created lazily on first access)."""
        if self._capture is None:
            from latercap.services.capture import CaptureService

            self._capture = CaptureService(self.settings)
        return self._capture

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
