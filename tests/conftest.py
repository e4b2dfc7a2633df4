"""Shared pytest fixtures and test helpers for latercap tests."""

from __future__ import annotations

from collections.abc import Generator
from datetime import date
from pathlib import Path

import pytest
from click.testing import CliRunner

from latercap.config.settings import LatercapSettings
from latercap.services.capture import CaptureService
from latercap.services.telemetry import _current_span, disable_telemetry

# A Wednesday, so weekday arithmetic is easy to read in assertions.
FIXED_TODAY = date(2025, 1, 15)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def fixed_today() -> date:
    """A fixed 'today' for due-date assertions."""
    return FIXED_TODAY


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> LatercapSettings:
    """Default settings, isolated from any real latercap.toml or env vars."""
    monkeypatch.delenv("LATERCAP_CONFIG", raising=False)
    return LatercapSettings.from_cli(cwd=tmp_path)


@pytest.fixture
def capture_service(settings: LatercapSettings) -> CaptureService:
    """CaptureService on default settings."""
    return CaptureService(settings)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to an empty temp dir so the CLI finds no latercap.toml.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes.
    """
    monkeypatch.delenv("LATERCAP_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _reset_telemetry() -> Generator[None]:
    """``-v`` CLI runs enable telemetry in the test process; undo it."""
    yield
    disable_telemetry()
    _current_span.set(None)
