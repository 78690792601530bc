#!/usr/bin/env python3
"""
Tests for logging configuration
"""

import logging

import pytest

from palette_translation.logging_config import (
    LOGGER_NAME,
    get_logger,
    parse_log_level,
    setup_logging,
)


@pytest.mark.unit
class TestLoggingConfig:
    """Test logger setup"""

    def test_setup_sets_level(self):
        logger = setup_logging("DEBUG")
        assert logger.name == LOGGER_NAME
        assert logger.level == logging.DEBUG
        assert logger.propagate is False

    def test_unknown_level_defaults_to_info(self, capsys):
        assert setup_logging("CHATTY").level == logging.INFO
        assert "Unknown log level CHATTY" in capsys.readouterr().out

    def test_repeated_setup_replaces_handlers(self):
        setup_logging("INFO")
        logger = setup_logging("INFO")
        assert len(logger.handlers) == 1

    def test_log_file(self, temp_dir):
        log_file = temp_dir / "translation.log"
        logger = setup_logging("INFO", str(log_file))
        assert len(logger.handlers) == 2
        get_logger("parser").info("parsed definition")
        for handler in logger.handlers:
            handler.flush()
        assert "palette_translation.parser - INFO - parsed definition" in log_file.read_text()

    def test_bad_log_file_keeps_console(self, temp_dir):
        logger = setup_logging("INFO", str(temp_dir / "missing" / "x.log"))
        assert len(logger.handlers) == 1

    def test_get_logger_is_child(self):
        assert get_logger("translation").name == "palette_translation.translation"


@pytest.mark.unit
class TestParseLogLevel:
    """Test validation of log level names"""

    @pytest.mark.parametrize("name,expected", [("debug", "DEBUG"), (" Warning ", "WARNING")])
    def test_known_levels(self, name, expected):
        assert parse_log_level(name) == expected

    @pytest.mark.parametrize("name", ["CHATTY", "", "10"])
    def test_unknown_levels(self, name):
        with pytest.raises(ValueError, match="Unknown log level"):
            parse_log_level(name)
