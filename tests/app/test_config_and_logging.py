# -*- coding: utf-8 -*-
"""
Tests for configuration parsing and logger setup.
"""

import logging
from logging.handlers import RotatingFileHandler

import pytest

from stepper.app.config import LABEL_ICON_STRATEGIES, Config, read_choice
from stepper.ui.stepper import LabelIconStrategy
from stepper.utils.logger import LOGGER_NAME, setup_logger


class TestReadChoice:
    """Test reading enum-like settings from the environment."""

    def test_missing_value_uses_default(self, monkeypatch):
        """Test an unset variable falls back to the default."""
        monkeypatch.delenv("STEPPER_LABEL_ICONS", raising=False)
        assert read_choice("STEPPER_LABEL_ICONS", LABEL_ICON_STRATEGIES, "DEFAULT") == "DEFAULT"

    def test_value_is_case_insensitive(self, monkeypatch):
        """Test a lower-case value is accepted."""
        monkeypatch.setenv("STEPPER_LABEL_ICONS", " numbers_only ")
        assert read_choice("STEPPER_LABEL_ICONS", LABEL_ICON_STRATEGIES, "DEFAULT") == "NUMBERS_ONLY"

    def test_unknown_value_warns_and_uses_default(self, monkeypatch):
        """Test a typo falls back to the default with a warning."""
        monkeypatch.setenv("STEPPER_LABEL_ICONS", "NUMBERS")
        with pytest.warns(RuntimeWarning, match="STEPPER_LABEL_ICONS"):
            value = read_choice("STEPPER_LABEL_ICONS", LABEL_ICON_STRATEGIES, "DEFAULT")
        assert value == "DEFAULT"

    def test_choices_match_icon_strategies(self):
        """Test every accepted value names a LabelIconStrategy."""
        assert set(LABEL_ICON_STRATEGIES) == set(LabelIconStrategy.__members__)
        assert Config.LABEL_ICON_STRATEGY in LabelIconStrategy.__members__


class TestLoggerSetup:
    """Test the handlers installed by setup_logger."""

    @pytest.fixture(autouse=True)
    def restore_logger(self):
        """Reinstall the default handlers after each test."""
        yield
        setup_logger()

    def test_console_only_by_default(self, monkeypatch):
        """Test no log file is written unless enabled."""
        monkeypatch.setattr(Config, "LOG_TO_FILE", False)
        logger = setup_logger()

        assert logger.name == LOGGER_NAME
        assert len(logger.handlers) == 1
        assert not isinstance(logger.handlers[0], RotatingFileHandler)

    def test_file_handler_when_enabled(self, monkeypatch, tmp_path):
        """Test LOG_TO_FILE adds a rotating file handler under LOGS_DIR."""
        logs_dir = tmp_path / "logs"
        monkeypatch.setattr(Config, "LOG_TO_FILE", True)
        monkeypatch.setattr(Config, "LOGS_DIR", logs_dir)
        monkeypatch.setattr(Config, "LOG_PATH", logs_dir / "stepper.log")
        logger = setup_logger()

        file_handlers = [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]
        assert len(file_handlers) == 1
        assert logs_dir.is_dir()
        for handler in file_handlers:
            handler.close()

    def test_setup_twice_keeps_one_console_handler(self, monkeypatch):
        """Test calling setup again replaces the handlers."""
        monkeypatch.setattr(Config, "LOG_TO_FILE", False)
        setup_logger()
        logger = setup_logger()
        assert len(logger.handlers) == 1
        assert logger.handlers[0].level == logging.getLevelName(Config.LOG_LEVEL)
