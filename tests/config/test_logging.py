"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from hairstylex.config.logging import bind_command, clear_command, configure_logging


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger("hairstylex").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_default_is_warning(self) -> None:
        configure_logging()
        assert logging.getLogger("hairstylex").level == logging.WARNING

    def test_quiet_is_error(self) -> None:
        configure_logging(quiet=True)
        assert logging.getLogger("hairstylex").level == logging.ERROR

    def test_verbose_wins_over_quiet(self) -> None:
        configure_logging(verbose=True, quiet=True)
        assert logging.getLogger("hairstylex").level == logging.DEBUG

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("hairstylex.test")
        log.warning("json test", answer=42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "hairstylex.test"
        assert "timestamp" in parsed

    def test_stdlib_logger_gets_structured_fields(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("hairstylex.plugins.manager").debug("Registered plugin: audit")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "Registered plugin: audit"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "hairstylex.plugins.manager"

    def test_bound_command_is_attached(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(log_json=True)
        bind_command("client add")
        structlog.get_logger("hairstylex.test").warning("with command")
        clear_command()
        structlog.get_logger("hairstylex.test").warning("without command")
        first, second = capfd.readouterr().err.strip().splitlines()
        assert json.loads(first)["command"] == "client add"
        assert "command" not in json.loads(second)

    def test_third_party_debug_is_suppressed(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("pluggy").debug("hook noise")
        assert capfd.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        """Multiple configure_logging calls don't stack handlers."""
        configure_logging(verbose=True)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1
