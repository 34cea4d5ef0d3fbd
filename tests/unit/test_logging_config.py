"""Unit tests for layout ring logging setup."""

import logging

from layout_ring.logging_config import LOGGER_NAME, get_logger, log_timing, setup_logging


class TestLoggingSetup:
    """Test logging configuration and setup."""

    def test_default_logging_level(self):
        logger = setup_logging(verbose=False, debug=False)
        assert logger.level == logging.WARNING

    def test_verbose_logging_level(self):
        logger = setup_logging(verbose=True)
        assert logger.level == logging.INFO

    def test_debug_overrides_verbose(self):
        logger = setup_logging(verbose=True, debug=True)
        assert logger.level == logging.DEBUG

    def test_logger_name(self):
        assert setup_logging().name == LOGGER_NAME
        assert get_logger().name == LOGGER_NAME

    def test_repeated_setup_keeps_one_handler(self):
        setup_logging()
        logger = setup_logging(debug=True)
        assert len(logger.handlers) == 1


class TestTiming:
    """Test operation timing logs."""

    def test_log_timing(self, caplog):
        caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)

        with log_timing("next"):
            pass

        assert any("next took" in record.getMessage() for record in caplog.records)
