"""
Tests for logging configuration.
"""

import json
import logging
import sys

from mirror_resolver.logging_config import (
    HumanFormatter,
    JSONFormatter,
    get_logger,
    setup_logging,
)


def make_record(msg: str = "hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="mirror_resolver.engine.selector",
        level=logging.DEBUG,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    """Tests for JSON output."""

    def test_basic_fields(self):
        """Every entry has ts, level, logger and message."""
        entry = json.loads(JSONFormatter().format(make_record()))
        assert entry["level"] == "DEBUG"
        assert entry["logger"] == "mirror_resolver.engine.selector"
        assert entry["message"] == "hello"
        assert "ts" in entry

    def test_extra_fields(self):
        """Selector extra fields are included when present."""
        record = make_record(repo_id="central", mirror_id="corp", resolution="exact")
        entry = json.loads(JSONFormatter().format(record))
        assert entry["repo_id"] == "central"
        assert entry["mirror_id"] == "corp"
        assert entry["resolution"] == "exact"

    def test_extra_fields_absent(self):
        """Missing extra fields are left out."""
        entry = json.loads(JSONFormatter().format(make_record()))
        assert "repo_id" not in entry

    def test_exception_info(self):
        """Exception info is added when present."""
        record = make_record()
        try:
            raise ValueError("bad port")
        except ValueError:
            record.exc_info = sys.exc_info()
        entry = json.loads(JSONFormatter().format(record))
        assert "ValueError: bad port" in entry["exception"]


class TestHumanFormatter:
    """Tests for human-readable output."""

    def test_format(self):
        """Output has level, short module name and message."""
        line = HumanFormatter().format(make_record("Selecting mirror"))
        assert "DEBUG" in line
        assert "[selector" in line
        assert line.endswith("Selecting mirror")

    def test_exception_appended(self):
        """The traceback follows the message."""
        record = make_record("Resolution failed")
        try:
            raise ValueError("bad port")
        except ValueError:
            record.exc_info = sys.exc_info()
        line = HumanFormatter().format(record)
        assert "Resolution failed\nTraceback" in line
        assert line.endswith("ValueError: bad port")


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_explicit_level_and_format(self):
        """Arguments choose the level and formatter."""
        setup_logging(level="debug", format_type="json")
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JSONFormatter)

    def test_env_defaults(self, monkeypatch):
        """LOG_LEVEL and LOG_FORMAT are used when no arguments are given."""
        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        monkeypatch.setenv("LOG_FORMAT", "text")
        setup_logging()
        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert isinstance(root.handlers[0].formatter, HumanFormatter)

    def test_unknown_level_falls_back_to_info(self):
        """An unknown level name means INFO."""
        setup_logging(level="chatty")
        assert logging.getLogger().level == logging.INFO

    def test_get_logger(self):
        """get_logger returns the named logger."""
        assert get_logger("mirror_resolver.x") is logging.getLogger("mirror_resolver.x")
