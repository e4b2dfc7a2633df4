"""Root CLI group for latercap with global flags and command registration."""

from __future__ import annotations

import click

from latercap import __version__
from latercap.commands import register_commands
from latercap.commands._context import AppContext
from latercap.config.settings import LatercapSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="latercap")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with timing info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """latercap: quick-capture classifier for tasks, lists, and notes."""
    ctx.ensure_object(dict)
    flags = {
        "json_output": json_output,
        "quiet": quiet,
        "verbose": verbose,
        "log_json": log_json,
    }
    # Unset flags fall through to LATERCAP_* env vars and latercap.toml.
    settings = LatercapSettings.from_cli(
        config_path=config_path,
        **{name: True for name, value in flags.items() if value},
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
