"""
Tests for request logging.

Tests LoggingConfig, formatters, per-host loggers and the records emitted by
the request pipeline.
"""

import json
import logging

import pytest
import responses

from request_client import Client, LoggingConfig, with_basic_auth, with_logging
from request_client.core.logging import (
    JSONFormatter,
    LogFormat,
    LogLevel,
    TextFormatter,
    configure_logger,
    get_formatter,
    logger_name_for,
)

CONSOLE_URL = "https://console.example.com"


@pytest.fixture
def console_logger():
    """Reset the per-host logger that with_logging() configures."""
    logger = logging.getLogger(logger_name_for(CONSOLE_URL))
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


class TestLoggingConfig:
    """Tests for LoggingConfig dataclass."""

    def test_default_config(self):
        config = LoggingConfig()

        assert config.level == LogLevel.INFO
        assert config.format == LogFormat.TEXT
        assert config.enable_console is True

    def test_create_from_strings(self):
        config = LoggingConfig.create(level="debug", format="JSON")

        assert config.level == LogLevel.DEBUG
        assert config.format == LogFormat.JSON

    def test_create_invalid_level(self):
        with pytest.raises(ValueError):
            LoggingConfig.create(level="LOUD")

    def test_get_formatter(self):
        assert isinstance(get_formatter(LogFormat.JSON), JSONFormatter)
        assert isinstance(get_formatter(LogFormat.TEXT), TextFormatter)


class TestFormatters:
    """Formatters include extra fields."""

    def make_record(self):
        record = logging.LogRecord(
            "request_client.api.example.com", logging.DEBUG, __file__, 1,
            "Request completed", (), None,
        )
        record.method = "GET"
        record.status_code = 200
        return record

    def test_json_formatter(self):
        data = json.loads(JSONFormatter().format(self.make_record()))

        assert data["level"] == "DEBUG"
        assert data["logger"] == "request_client.api.example.com"
        assert data["message"] == "Request completed"
        assert data["method"] == "GET"
        assert data["status_code"] == 200
        assert data["timestamp"].endswith("Z")

    def test_text_formatter(self):
        output = TextFormatter().format(self.make_record())

        assert "[DEBUG]" in output
        assert "Request completed" in output
        assert "method=GET" in output
        assert "status_code=200" in output


class TestLoggerNames:
    """Per-host loggers live under request_client."""

    def test_logger_name_for_host(self):
        assert logger_name_for("https://api.example.com") == "request_client.api.example.com"

    def test_logger_name_with_port(self):
        assert logger_name_for("http://localhost:8080/v1") == "request_client.localhost:8080"

    def test_logger_name_without_host(self):
        assert logger_name_for("not a url") == "request_client"

    def test_package_logger_silent_by_default(self):
        handlers = logging.getLogger("request_client").handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)


class TestConfigureLogger:
    """configure_logger() does not duplicate handlers."""

    def test_reconfigure_replaces_handler(self, console_logger):
        config = LoggingConfig.create(level="DEBUG")

        configure_logger(config, console_logger.name)
        configure_logger(config, console_logger.name)

        assert len(console_logger.handlers) == 1
        assert console_logger.level == logging.DEBUG
        assert console_logger.propagate is False

    def test_console_disabled(self, console_logger):
        configure_logger(LoggingConfig.create(level="WARNING", enable_console=False), console_logger.name)

        assert console_logger.handlers == []
        assert console_logger.level == logging.WARNING


class TestRequestLogging:
    """Records emitted by the pipeline."""

    @responses.activate
    def test_started_and_completed(self, client, base_url, caplog):
        responses.add(responses.GET, f"{base_url}/users", json=[{"id": 1}], status=200)

        with caplog.at_level(logging.DEBUG, logger="request_client"):
            client.get("/users")

        records = [r for r in caplog.records if r.name == "request_client.api.example.com"]
        assert [r.getMessage() for r in records] == ["Request started", "Request completed"]

        completed = records[1]
        assert completed.method == "GET"
        assert completed.status_code == 200
        assert completed.response_size == len(b'[{"id": 1}]')
        assert completed.duration_ms >= 0

    @responses.activate
    def test_failed(self, client, base_url, caplog):
        with caplog.at_level(logging.DEBUG, logger="request_client"):
            with pytest.raises(Exception):
                client.get("/unregistered")

        failed = [r for r in caplog.records if r.getMessage() == "Request failed"]
        assert len(failed) == 1
        assert failed[0].error_type == "ConnectionError"

    @responses.activate
    def test_secrets_redacted(self, base_url, caplog):
        responses.add(responses.GET, f"{base_url}/search", json=[], status=200)

        with caplog.at_level(logging.DEBUG, logger="request_client"):
            with Client(base_url, with_basic_auth("user", "pass")) as client:
                client.get("/search", query={"api_key": "secret123", "q": "x"})

        started = next(r for r in caplog.records if r.getMessage() == "Request started")
        assert started.headers["Authorization"] == "REDACTED"
        assert "secret123" not in started.url
        assert "api_key=REDACTED" in started.url

    @responses.activate
    def test_no_records_above_debug(self, client, base_url, caplog):
        responses.add(responses.GET, f"{base_url}/users", json=[], status=200)

        with caplog.at_level(logging.INFO, logger="request_client"):
            client.get("/users")

        assert caplog.records == []

    @responses.activate
    def test_with_logging_writes_json_to_stdout(self, console_logger, capsys):
        responses.add(responses.GET, f"{CONSOLE_URL}/ping", body=b"pong", status=200)

        config = LoggingConfig.create(level="DEBUG", format="json")
        with Client(CONSOLE_URL, with_logging(config)) as client:
            client.get("/ping")

        lines = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
        assert [line["message"] for line in lines] == ["Request started", "Request completed"]
        assert lines[1]["status_code"] == 200
        assert lines[1]["logger"] == "request_client.console.example.com"
