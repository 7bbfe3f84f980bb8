"""Tests for logging configuration and utilities."""

import logging

import pytest

from genlab.logging import ComponentFormatter, configure_logging, resolve_level


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def _record(name: str) -> logging.LogRecord:
    return logging.LogRecord(name, logging.INFO, __file__, 1, "hello", None, None)


class TestComponentFormatter:
    def test_extracts_component(self):
        formatter = ComponentFormatter("%(component)s | %(message)s")
        assert formatter.format(_record("genlab.caching.cache")) == "caching | hello"

    def test_non_genlab_logger_uses_first_part(self):
        formatter = ComponentFormatter("%(component)s | %(message)s")
        assert formatter.format(_record("rich.console")) == "rich | hello"


class TestResolveLevel:
    def test_explicit_level(self):
        assert resolve_level("debug") == "DEBUG"

    def test_env_fallback(self, monkeypatch):
        monkeypatch.setenv("GENLAB_LOG_LEVEL", "warning")
        assert resolve_level() == "WARNING"

    def test_default_info(self):
        assert resolve_level() == "INFO"

    def test_unknown_level_falls_back_to_info(self):
        assert resolve_level("chatty") == "INFO"


class TestConfigureLogging:
    def test_sets_root_level(self, restore_root_logger):
        configure_logging("DEBUG")
        assert restore_root_logger.level == logging.DEBUG
        assert len(restore_root_logger.handlers) == 1

    def test_rich_handler(self, restore_root_logger):
        from rich.logging import RichHandler

        configure_logging("INFO", use_rich=True)

        (handler,) = restore_root_logger.handlers
        assert isinstance(handler, RichHandler)
        assert isinstance(handler.formatter, ComponentFormatter)
