"""
Unit Tests for cisextract.utils.logging_config

Tests sink setup and the step framing helpers.
"""

import pytest
from cisextract.utils import logging_config
from cisextract.utils.logging_config import get_logger, log_step_complete, log_step_start, setup_logger


@pytest.fixture(autouse=True)
def restore_console_logging():
    yield
    setup_logger(log_to_file=False)


class TestSetupLogger:
    """Tests for setup_logger()"""

    def test_console_only(self, tmp_path, monkeypatch):
        """No files are written when file logging is off"""
        monkeypatch.setattr(logging_config, "LOGS_DIR", tmp_path / "logs")
        setup_logger(log_to_file=False)
        assert not (tmp_path / "logs").exists()

    def test_file_sinks(self, tmp_path, monkeypatch):
        """Main and error log files are created"""
        monkeypatch.setattr(logging_config, "LOGS_DIR", tmp_path / "logs")
        logger = setup_logger(level="DEBUG", log_to_file=True)
        logger.error("boom")

        names = sorted(p.name for p in (tmp_path / "logs").iterdir())
        assert len(names) == 2
        assert names[0].startswith("errors_")
        assert names[1].startswith("extract_")


class TestHelpers:
    """Tests for get_logger() and the step helpers"""

    def test_get_logger_binds_name(self):
        messages = []
        logger = setup_logger(log_to_file=False)
        sink_id = logger.add(lambda m: messages.append(m.record["extra"]), level="INFO")
        try:
            get_logger("main").info("hello")
        finally:
            logger.remove(sink_id)
        assert messages == [{"name": "main"}]

    def test_step_framing(self):
        messages = []
        logger = setup_logger(log_to_file=False)
        sink_id = logger.add(lambda m: messages.append(m.record["message"]), level="INFO")
        try:
            log_step_start("Step 1: Rule Catalog")
            log_step_complete("Step 1: Rule Catalog", 1.234)
        finally:
            logger.remove(sink_id)
        assert "STEP 1: RULE CATALOG" in messages
        assert "COMPLETED: Step 1: Rule Catalog (1.23s)" in messages
