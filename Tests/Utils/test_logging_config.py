"""Tests for logging setup and the command line entry point."""

import sys

import pytest
from loguru import logger

from wolf_terminal.__main__ import parse_args
from wolf_terminal.Utils.logging_config import LOG_LEVEL_ENV_VAR, configure_logging, resolve_log_level


@pytest.fixture(autouse=True)
def restore_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)


class TestLoggingConfig:

    def test_explicit_level_wins(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "ERROR")
        assert resolve_log_level("debug") == "DEBUG"

    def test_env_level_used(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "warning")
        assert resolve_log_level() == "WARNING"

    def test_default_level(self, monkeypatch):
        monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
        assert resolve_log_level() == "INFO"

    def test_file_sink_receives_messages(self, tmp_path):
        log_file = tmp_path / "wolf.log"
        configure_logging("DEBUG", str(log_file), console=False)
        logger.info("reveal finished")
        logger.complete()
        assert "reveal finished" in log_file.read_text(encoding="utf-8")

    def test_level_filters_file_sink(self, tmp_path):
        log_file = tmp_path / "wolf.log"
        configure_logging("WARNING", str(log_file), console=False)
        logger.info("quiet")
        logger.warning("loud")
        contents = log_file.read_text(encoding="utf-8")
        assert "quiet" not in contents
        assert "loud" in contents


class TestParseArgs:

    def test_defaults(self):
        args = parse_args([])
        assert args.config is None
        assert args.log_level is None

    def test_options(self):
        args = parse_args(["--config", "my.toml", "--log-level", "DEBUG", "--log-file", "out.log"])
        assert args.config == "my.toml"
        assert args.log_level == "DEBUG"
        assert args.log_file == "out.log"
