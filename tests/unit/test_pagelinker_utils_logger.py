"""Unit tests for pagelinker.utils.logger."""

import logging

import pytest

from pagelinker.utils import logger as logger_module
from pagelinker.utils.logger import configure_logging, get_logger


@pytest.fixture
def fresh_logging(monkeypatch):
    """Let configure_logging run again and drop the handlers it adds."""
    monkeypatch.setattr(logger_module, "_CONFIGURED", False)
    root = logging.getLogger("pagelinker")
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers[len(handlers) :]:
        handler.close()
    root.handlers = handlers
    root.setLevel(level)


def test_get_logger_namespace():
    assert get_logger("link").name == "pagelinker.link"


def test_configure_logging_writes_log_file(fresh_logging, tmp_path):
    configure_logging(tmp_path, "DEBUG")
    get_logger("link").debug("Building links")

    assert fresh_logging.level == logging.DEBUG
    for handler in fresh_logging.handlers:
        handler.flush()
    assert "pagelinker.link - DEBUG - Building links" in (tmp_path / "pagelinker.log").read_text()


def test_configure_logging_only_once(fresh_logging, tmp_path):
    configure_logging(tmp_path / "first", "WARN")
    configure_logging(tmp_path / "second", "DEBUG")

    assert fresh_logging.level == logging.WARNING
    assert not (tmp_path / "second").exists()


def test_configure_logging_home_from_environment(fresh_logging, tmp_path, monkeypatch):
    monkeypatch.setenv("PAGELINKER_HOME", str(tmp_path / "home"))
    configure_logging()

    assert (tmp_path / "home" / "pagelinker.log").exists()
