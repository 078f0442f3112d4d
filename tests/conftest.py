"""Shared pytest fixtures for zillion tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from zillion.config.settings import ZillionSettings
from zillion.services.telemetry import _current_span, disable_telemetry


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory with no ZILLION_* variables.

    Keeps a developer's own zillion.toml or environment from leaking in.
    """
    for var in ("ZILLION_CONFIG", "ZILLION_SCHEME", "ZILLION_SCALE", "ZILLION_VERBOSE"):
        monkeypatch.delenv(var, raising=False)
    for var in ("ZILLION_NAMING__SCHEME", "ZILLION_NAMING__SCALE"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _reset_global_state() -> Generator[None]:
    """Undo logging/telemetry changes made by CLI invocations with --verbose."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    root_level = root.level
    zillion_level = logging.getLogger("zillion").level
    yield
    root.handlers = handlers
    root.setLevel(root_level)
    logging.getLogger("zillion").setLevel(zillion_level)
    disable_telemetry()
    _current_span.set(None)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> ZillionSettings:
    """Default settings with no config file."""
    return ZillionSettings.from_cli(start=tmp_path)
