"""
Tests for observability — log level resolution and logging setup.
"""

import logging

import pytest

from opennow_installer.core.observability.logging_config import (
    PACKAGE_LOGGER,
    resolve_level,
    setup_logging,
)


@pytest.fixture
def package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield logger
    for h in logger.handlers:
        if h not in handlers:
            h.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


class TestResolveLevel:
    def test_default(self):
        assert resolve_level(environ={}) == "WARNING"

    def test_env(self):
        assert resolve_level(environ={"OPENNOW_LOG_LEVEL": "INFO"}) == "INFO"

    def test_flag_precedence(self):
        env = {"OPENNOW_LOG_LEVEL": "CRITICAL"}
        assert resolve_level(debug=True, verbose=True, quiet=True, environ=env) == "DEBUG"
        assert resolve_level(verbose=True, quiet=True, environ=env) == "INFO"
        assert resolve_level(quiet=True, environ=env) == "ERROR"


class TestSetupLogging:
    def test_console_only(self, package_logger):
        assert setup_logging("INFO") is package_logger
        assert len(package_logger.handlers) == 1
        assert package_logger.level == logging.INFO
        assert package_logger.propagate is False

    def test_root_logger_untouched(self, package_logger):
        root = logging.getLogger()
        before = list(root.handlers)
        setup_logging("DEBUG")
        assert root.handlers == before

    def test_unknown_level_falls_back(self, package_logger):
        setup_logging("LOUD")
        assert package_logger.level == logging.WARNING

    def test_console_format_follows_level(self, package_logger):
        setup_logging("WARNING")
        (handler,) = package_logger.handlers
        assert handler.formatter._fmt == "%(levelname)s: %(message)s"

        setup_logging("DEBUG")
        (handler,) = package_logger.handlers
        assert "%(lineno)d" in handler.formatter._fmt

    def test_file_handler(self, tmp_path, package_logger):
        log_file = tmp_path / "install.log"
        setup_logging("WARNING", log_file=str(log_file), log_file_level="DEBUG")
        assert len(package_logger.handlers) == 2
        assert package_logger.level == logging.DEBUG

        logging.getLogger(f"{PACKAGE_LOGGER}.test").debug("hello from test")
        for h in package_logger.handlers:
            h.flush()
        assert "hello from test" in log_file.read_text()

    def test_reconfigure_replaces_handlers(self, tmp_path, package_logger):
        setup_logging("INFO", log_file=str(tmp_path / "a.log"))
        setup_logging("INFO")
        assert len(package_logger.handlers) == 1
        assert not any(isinstance(h, logging.FileHandler) for h in package_logger.handlers)
