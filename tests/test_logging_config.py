"""Tests for setup_logging()."""

import logging

import pytest

from uaclassify.logging_config import setup_logging


@pytest.fixture(autouse=True)
def restore_root_handlers():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


class TestSetupLogging:
    def test_console_only(self):
        assert setup_logging() is None
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.handlers[0].level == logging.WARNING

    def test_console_level(self):
        setup_logging(console_level=logging.DEBUG)
        assert logging.getLogger().handlers[0].level == logging.DEBUG

    def test_file_handler_creates_parent_dirs(self, tmp_path):
        log_file = tmp_path / "nested" / "dir" / "run.log"
        path = setup_logging(log_file=str(log_file))
        assert path == log_file
        assert log_file.parent.is_dir()

        logging.getLogger("uaclassify.test").debug("hello from test")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "[uaclassify.test] hello from test" in log_file.read_text(encoding="utf-8")

    def test_repeat_calls_do_not_duplicate(self, tmp_path):
        setup_logging(log_file=str(tmp_path / "a.log"))
        setup_logging(log_file=str(tmp_path / "b.log"))
        assert len(logging.getLogger().handlers) == 2
