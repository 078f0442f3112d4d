"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from zillion.config.logging import _StderrHandler, configure_logging


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("zillion").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("zillion").level == logging.WARNING

    def test_quiet_sets_error(self) -> None:
        configure_logging(quiet=True)
        assert logging.getLogger("zillion").level == logging.ERROR

    def test_verbose_beats_quiet(self) -> None:
        configure_logging(verbose=True, quiet=True)
        assert logging.getLogger("zillion").level == logging.DEBUG

    def test_reconfigure_replaces_own_handler_only(self) -> None:
        foreign = logging.NullHandler()
        logging.getLogger().addHandler(foreign)
        configure_logging()
        configure_logging(log_json=True)
        handlers = logging.getLogger().handlers
        assert foreign in handlers
        assert sum(isinstance(h, _StderrHandler) for h in handlers) == 1

    def test_json_mode_structlog(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        structlog.get_logger("zillion.test").warning("json test", groups=3)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["groups"] == 3
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "zillion.test"
        assert "timestamp" in parsed

    def test_json_mode_stdlib(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("zillion.services.naming").debug("named %d groups", 4)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "named 4 groups"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "zillion.services.naming"

    def test_debug_suppressed_without_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        logging.getLogger("zillion.services.naming").debug("hidden")
        assert capfd.readouterr().err == ""
