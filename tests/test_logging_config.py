"""Tests for logging configuration"""
import logging

import pytest

from git_status_of_so_many.logging_config import ColoredFormatter, get_logger, setup_logging


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way pytest left it."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield root_logger
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


class TestSetupLogging:
    """Test log levels per mode."""

    @pytest.mark.parametrize("verbose,expected", [(False, logging.WARNING), (True, logging.INFO)])
    def test_level(self, restore_root_logger, verbose, expected):
        setup_logging(verbose=verbose)

        assert restore_root_logger.level == expected
        assert len(restore_root_logger.handlers) == 1
        assert isinstance(restore_root_logger.handlers[0].formatter, ColoredFormatter)

    def test_debug_writes_log_file(self, restore_root_logger, temp_dir, monkeypatch):
        monkeypatch.setenv("HOME", str(temp_dir))

        setup_logging(debug=True)
        get_logger("git_status_of_so_many.core").debug("hello")
        for handler in restore_root_logger.handlers:
            handler.flush()

        assert restore_root_logger.level == logging.DEBUG
        log_file = temp_dir / ".git-status-of-so-many" / "git-status-of-so-many.log"
        assert "hello" in log_file.read_text()
        for handler in restore_root_logger.handlers:
            if isinstance(handler, logging.FileHandler):
                handler.close()


class TestGetLogger:
    """Test logger naming."""

    def test_package_prefix_is_stripped(self):
        assert get_logger("git_status_of_so_many.services.discovery").name == "services.discovery"

    def test_other_names_are_kept(self):
        assert get_logger("tests").name == "tests"
