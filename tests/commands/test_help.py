"""Parametrized help tests for all CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from latercap.cli import cli

# (CLI args, expected keywords in output)
HELP_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["--help"], ["detect", "confidence", "capture", "extract", "--json", "--quiet"]),
    (["detect", "--help"], ["TEXT", "--file", "--examples"]),
    (["confidence", "--help"], ["TEXT", "--type", "task|list|note"]),
    (["capture", "--help"], ["TEXT", "--type", "--file"]),
    (["extract", "--help"], ["items", "due"]),
    (["extract", "items", "--help"], ["TEXT", "--file"]),
    (["extract", "due", "--help"], ["TEXT", "tomorrow"]),
]


@pytest.mark.parametrize(
    ("args", "keywords"),
    HELP_COMMANDS,
    ids=[" ".join(args) for args, _ in HELP_COMMANDS],
)
def test_help(cli_runner: CliRunner, args: list[str], keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    for keyword in keywords:
        assert keyword in result.output
