"""Tests for structured logging."""

import json
import logging

from goal_assistant.logging_config import JSONFormatter, get_logger, setup_logging


class TestJSONFormatter:
    """Tests for JSONFormatter."""

    def _record(self, **extra):
        record = logging.LogRecord(
            name="goal_assistant.test",
            level=logging.INFO,
            pathname=__file__,
            lineno=10,
            msg="Turn handled %s",
            args=("ok",),
            exc_info=None,
        )
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_formats_as_json(self):
        """Test core fields are present."""
        data = json.loads(JSONFormatter().format(self._record()))
        assert data["level"] == "INFO"
        assert data["logger"] == "goal_assistant.test"
        assert data["message"] == "Turn handled ok"
        assert "timestamp" in data

    def test_includes_context(self):
        """Test the context extra is carried through."""
        data = json.loads(
            JSONFormatter().format(self._record(context={"step_in": "followUp"}))
        )
        assert data["context"] == {"step_in": "followUp"}


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_writes_to_file(self, tmp_path):
        """Test records reach the rotating file handler."""
        log_file = tmp_path / "logs" / "app.log"
        setup_logging("DEBUG", log_file, console=False)

        get_logger("goal_assistant.test").info("hello")
        for handler in logging.getLogger().handlers:
            handler.flush()

        line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
        assert json.loads(line)["message"] == "hello"
