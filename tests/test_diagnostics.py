"""Tests for diagnostic sinks and configuration."""

import logging

from gemreadme.config import get_log_level
from gemreadme.diagnostics import CollectingDiagnosticSink, LoggingDiagnosticSink, ParseFailure


class TestParseFailure:

    def test_carries_operation_and_cause(self):
        cause = KeyError("x")
        failure = ParseFailure("clean markdown content", cause)

        assert failure.operation == "clean markdown content"
        assert failure.cause is cause
        assert "clean markdown content failed" in str(failure)


class TestSinks:
    """Tests for the built-in sinks."""

    def test_collecting_sink_records(self):
        sink = CollectingDiagnosticSink()
        sink.report(ParseFailure("extract description from README", ValueError("bad")))

        assert sink.get_stats() == {"failures": 1}
        record = sink.to_dicts()[0]
        assert record["operation"] == "extract description from README"
        assert record["error_type"] == "ValueError"
        assert record["message"] == "bad"
        assert record["timestamp"]

    def test_logging_sink_uses_given_logger(self, caplog):
        log = logging.getLogger("gemreadme.tests.sink")
        sink = LoggingDiagnosticSink(log)

        with caplog.at_level(logging.WARNING, logger="gemreadme.tests.sink"):
            sink.report(ParseFailure("clean markdown content", RuntimeError("boom")))

        assert caplog.records[0].name == "gemreadme.tests.sink"
        assert "Failed to clean markdown content" in caplog.records[0].getMessage()


class TestLogLevel:
    """Tests for GEMREADME_LOG_LEVEL handling."""

    def test_default(self, monkeypatch):
        monkeypatch.delenv("GEMREADME_LOG_LEVEL", raising=False)
        assert get_log_level() == logging.WARNING

    def test_named_level(self, monkeypatch):
        monkeypatch.setenv("GEMREADME_LOG_LEVEL", "debug")
        assert get_log_level() == logging.DEBUG

    def test_unknown_level(self, monkeypatch):
        monkeypatch.setenv("GEMREADME_LOG_LEVEL", "chatty")
        assert get_log_level() == logging.WARNING
