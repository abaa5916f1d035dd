"""Tests for the package logging setup."""
import logging

import pytest

from vectorplayground.logging_config import PACKAGE_LOGGER, resolve_level, setup_logging


@pytest.fixture
def package_logger():
    """Package logger, with its handlers removed again after the test."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


class TestResolveLevel:

    @pytest.mark.parametrize("level, expected", [
        (logging.DEBUG, logging.DEBUG),
        ("debug", logging.DEBUG),
        (" INFO ", logging.INFO),
        ("WARNING", logging.WARNING),
    ])
    def test_known_levels(self, level, expected):
        assert resolve_level(level) == expected

    def test_unknown_level_raises(self):
        with pytest.raises(ValueError):
            resolve_level("verbose")


class TestSetupLogging:

    def test_configures_package_logger(self, package_logger):
        logger = setup_logging("DEBUG")
        assert logger is package_logger
        assert logger.name == "vectorplayground"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_repeated_setup_does_not_stack_handlers(self, package_logger):
        setup_logging(logging.INFO)
        setup_logging(logging.INFO)
        assert len(package_logger.handlers) == 1

    def test_module_loggers_reach_the_file(self, package_logger, tmp_path):
        log_file = tmp_path / "playground.log"
        setup_logging(logging.DEBUG, log_file=str(log_file))

        logging.getLogger("vectorplayground.controller.synchronizer").debug("arrow created")
        for handler in package_logger.handlers:
            handler.flush()

        text = log_file.read_text(encoding="utf-8")
        assert "Logging initialized at DEBUG." in text
        assert "vectorplayground.controller.synchronizer - DEBUG - arrow created" in text
