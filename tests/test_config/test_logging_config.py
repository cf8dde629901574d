"""Tests for logging configuration."""

import logging

from config.logging_config import ROOT_LOGGER_NAME, get_logger, setup_logging


class TestSetupLogging:
    """Tests for setup_logging and get_logger."""

    def teardown_method(self):
        logger = logging.getLogger(ROOT_LOGGER_NAME)
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()

    def test_log_file(self, tmp_path):
        """Test that records under the browser hierarchy reach the log file."""
        log_file = tmp_path / "logs" / "browse.log"

        setup_logging("DEBUG", log_file=log_file, log_to_console=False)
        get_logger("browser.controller").debug("products loaded")
        for handler in logging.getLogger(ROOT_LOGGER_NAME).handlers:
            handler.flush()

        text = log_file.read_text()
        assert "DEBUG" in text
        assert "stackshop.browser.controller | products loaded" in text

    def test_repeated_setup_does_not_stack_handlers(self):
        """Test that calling setup on every rerun keeps a single handler."""
        setup_logging("INFO")
        logger = setup_logging("WARNING")

        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self):
        """Test an unrecognized level name."""
        logger = setup_logging("chatty", log_to_console=False)

        assert logger.level == logging.INFO

    def test_logger_names(self):
        """Test the logger hierarchy."""
        assert get_logger().name == "stackshop"
        assert get_logger("app.session").name == "stackshop.app.session"
