"""
Logging setup tests.
"""

import logging
from unittest.mock import Mock

import pytest

from src.edr_weather.core.exceptions import PartialDataWarning
from src.edr_weather.core.logger import LoggerContext, setup_logger, warn_partial


class TestSetupLogger:
    """Test cases for setup_logger."""

    def test_console_and_file(self, tmp_path):
        log_file = tmp_path / "logs" / "app.log"

        logger = setup_logger("edr_weather.test_file", str(log_file), "DEBUG")
        logger.debug("detail")
        for handler in logger.handlers:
            handler.flush()

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2
        assert "detail" in log_file.read_text(encoding="utf-8")

    def test_empty_path_disables_file(self):
        logger = setup_logger("edr_weather.test_console", "")

        assert [type(h) for h in logger.handlers] == [logging.StreamHandler]

    def test_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "warning")

        assert setup_logger("edr_weather.test_env", "").level == logging.WARNING

    def test_unknown_level(self):
        assert setup_logger("edr_weather.test_bad", "", "LOUD").level == logging.INFO

    def test_repeated_setup_does_not_duplicate(self):
        setup_logger("edr_weather.test_repeat", "")
        logger = setup_logger("edr_weather.test_repeat", "")

        assert len(logger.handlers) == 1


class TestWarnPartial:
    """Test cases for partial-data reporting."""

    def test_logs_and_warns(self):
        logger = Mock()

        with pytest.warns(PartialDataWarning, match="Humidity"):
            warn_partial(logger, "Parameter 'Humidity' not present")

        logger.warning.assert_called_once_with("Parameter 'Humidity' not present")


class TestLoggerContext:
    """Test cases for LoggerContext."""

    def test_success(self):
        logger = Mock()

        with LoggerContext(logger, "daily forecast") as ctx:
            pass

        assert ctx.duration is not None
        assert logger.info.call_count == 2
        logger.error.assert_not_called()

    def test_failure_propagates(self):
        logger = Mock()

        with pytest.raises(ValueError):
            with LoggerContext(logger, "daily forecast"):
                raise ValueError("bad")

        logger.error.assert_called_once()
