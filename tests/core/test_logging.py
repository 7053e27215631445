"""Tests for logging configuration."""

import json
import logging

import pytest

from vashstatic.core.logging import (
    StructuredFormatter,
    TextFormatter,
    get_context_logger,
    setup_logging,
)


def make_record(**extra):
    record = logging.LogRecord(
        name="vashstatic.test",
        level=logging.WARNING,
        pathname=__file__,
        lineno=10,
        msg="Loop header has no declaration",
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture
def restore_root_logger():
    """Remove the handlers installed by setup_logging."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, (StructuredFormatter, TextFormatter)):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


class TestFormatters:
    """Test log formatters."""

    def test_structured_formatter(self):
        output = StructuredFormatter().format(make_record(extra_data={"template": "pg_home/Index"}))
        data = json.loads(output)

        assert data["level"] == "WARNING"
        assert data["logger"] == "vashstatic.test"
        assert data["message"] == "Loop header has no declaration"
        assert data["template"] == "pg_home/Index"

    def test_structured_formatter_without_extra(self):
        data = json.loads(StructuredFormatter().format(make_record()))
        assert "template" not in data

    def test_text_formatter(self):
        output = TextFormatter().format(make_record())
        assert "vashstatic.test - WARNING - Loop header has no declaration" in output


class TestContextLogger:
    """Test loggers with permanent context."""

    def test_context_is_attached(self):
        adapter = get_context_logger("vashstatic.test", template="pg_home/Index")
        msg, kwargs = adapter.process("hello", {"extra_data": {"line": 3}})

        assert msg == "hello"
        assert kwargs["extra"]["extra_data"] == {"template": "pg_home/Index", "line": 3}


class TestSetupLogging:
    """Test root logger configuration."""

    def test_json_to_file(self, settings, tmp_path, restore_root_logger):
        log_file = tmp_path / "logs" / "vashstatic.log"
        configured = settings.model_copy(
            update={"LOG_FORMAT": "json", "LOG_LEVEL": "debug", "LOG_FILE": str(log_file)}
        )

        setup_logging(configured)

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2
        assert all(isinstance(h.formatter, StructuredFormatter) for h in root.handlers)

        logging.getLogger("vashstatic.test").info("written", extra={"extra_data": {"k": "v"}})
        for handler in root.handlers:
            handler.flush()

        entry = json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])
        assert entry["message"] == "written"
        assert entry["k"] == "v"

    def test_text_console_only(self, settings, restore_root_logger):
        setup_logging(settings)

        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, TextFormatter)
