"""Tests for htmllinks logging setup."""

import logging

from htmllinks.utils import logger as logger_module
from htmllinks.utils.logger import configure_logging, get_logger


def test_get_logger_namespace():
    assert get_logger("links").name == "htmllinks.links"


def test_configure_logging_writes_to_home(tmp_path, monkeypatch):
    monkeypatch.setattr(logger_module, "_CONFIGURED", False)
    root = logging.getLogger("htmllinks")
    handlers_before = list(root.handlers)
    level_before = root.level
    try:
        configure_logging(tmp_path, "DEBUG")
        assert root.level == logging.DEBUG
        get_logger("test").debug("hello log")
        for handler in root.handlers:
            handler.flush()
        assert "hello log" in (tmp_path / "htmllinks.log").read_text()

        # Second call is a no-op
        configure_logging(tmp_path / "other")
        assert not (tmp_path / "other").exists()
    finally:
        for handler in root.handlers[len(handlers_before) :]:
            handler.close()
        root.handlers = handlers_before
        root.setLevel(level_before)


def test_configure_logging_defaults_to_home_dir(htmllinks_home, monkeypatch):
    monkeypatch.setattr(logger_module, "_CONFIGURED", False)
    root = logging.getLogger("htmllinks")
    handlers_before = list(root.handlers)
    level_before = root.level
    try:
        configure_logging()
        assert (htmllinks_home / "htmllinks.log").exists()
    finally:
        for handler in root.handlers[len(handlers_before) :]:
            handler.close()
        root.handlers = handlers_before
        root.setLevel(level_before)
