"""Tests for settings and logging setup."""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

import pytest

from prefixcomplete.config.logging_config import setup_logging
from prefixcomplete.config.settings import AutocompleteSettings, LoggingSettings, Settings


class TestSettings:
    def test_paths_hang_off_project_root(self, tmp_path: Path):
        s = Settings(project_root=tmp_path)
        assert s.data_dir == tmp_path / "data"
        assert s.terms_path == tmp_path / "data" / "terms.txt"
        assert s.logs_dir == tmp_path / "data" / "logs"

    def test_ensure_dirs(self, tmp_path: Path):
        s = Settings(project_root=tmp_path)
        s.ensure_dirs()
        assert s.logs_dir.is_dir()

    def test_subsettings_are_frozen(self):
        with pytest.raises(AttributeError):
            AutocompleteSettings().max_suggestions = 3


class TestSetupLogging:
    @pytest.fixture(autouse=True)
    def _restore_logger(self):
        logger = logging.getLogger("prefixcomplete")
        saved = list(logger.handlers), logger.level
        logger.handlers.clear()
        yield
        for handler in logger.handlers:
            handler.close()
        logger.handlers[:] = saved[0]
        logger.setLevel(saved[1])

    def test_console_and_file_handlers(self, tmp_path: Path):
        setup_logging(log_dir=tmp_path / "logs")
        logger = logging.getLogger("prefixcomplete")
        assert logger.level == logging.INFO
        kinds = {type(h) for h in logger.handlers}
        assert logging.handlers.RotatingFileHandler in kinds
        assert (tmp_path / "logs" / "prefixcomplete.log").exists()

    def test_level_and_file_come_from_settings(self, tmp_path: Path):
        log_settings = LoggingSettings(
            level="debug", log_file="ac.log", max_bytes=1024, backup_count=2
        )
        setup_logging(log_dir=tmp_path, log_settings=log_settings)
        logger = logging.getLogger("prefixcomplete")
        assert logger.level == logging.DEBUG
        (file_handler,) = [
            h for h in logger.handlers
            if isinstance(h, logging.handlers.RotatingFileHandler)
        ]
        assert Path(file_handler.baseFilename) == tmp_path / "ac.log"
        assert file_handler.maxBytes == 1024
        assert file_handler.backupCount == 2

    def test_unknown_level_rejected(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            setup_logging(log_settings=LoggingSettings(level="chatty"))

    def test_repeat_calls_do_not_stack_handlers(self):
        setup_logging()
        setup_logging()
        assert len(logging.getLogger("prefixcomplete").handlers) == 1
