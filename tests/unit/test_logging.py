"""Unit tests for mongo_stubs logging."""

import json
import logging
import subprocess
import sys
import textwrap
from collections.abc import Iterator
from typing import Any

import pytest
import structlog

from mongo_stubs.config import StubSettings
from mongo_stubs.factories.collection import mock_collection
from mongo_stubs.factories.database import mock_database
from mongo_stubs.logging import LOGGER_NAME, configure_logging


class RecordingHandler(logging.Handler):
    """Keep emitted records in memory."""

    def __init__(self) -> None:
        super().__init__()
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@pytest.fixture
def restore_logging(stub_settings: StubSettings) -> Iterator[None]:
    yield
    configure_logging(stub_settings)


@pytest.fixture
def json_handler(restore_logging: None) -> Iterator[RecordingHandler]:
    """Record library log events at DEBUG, rendered as JSON."""
    configure_logging(StubSettings(_env_file=None, log_level="DEBUG", json_logs=True))
    handler = RecordingHandler()
    library_logger = logging.getLogger(LOGGER_NAME)
    library_logger.addHandler(handler)
    yield handler
    library_logger.removeHandler(handler)


def events(handler: RecordingHandler) -> list[dict[str, Any]]:
    return [json.loads(record.getMessage()) for record in handler.records]


class TestConfigureLogging:
    """Tests for configure_logging."""

    @pytest.mark.usefixtures("restore_logging")
    def test_applies_level_from_settings(self) -> None:
        configure_logging(StubSettings(_env_file=None, log_level="DEBUG"))

        library_logger = logging.getLogger(LOGGER_NAME)
        assert library_logger.level == logging.DEBUG
        assert library_logger.propagate is False

    @pytest.mark.usefixtures("restore_logging")
    def test_reconfiguring_replaces_handler(self, stub_settings: StubSettings) -> None:
        configure_logging(stub_settings)
        configure_logging(stub_settings)

        assert len(logging.getLogger(LOGGER_NAME).handlers) == 1

    @pytest.mark.usefixtures("restore_logging")
    def test_global_structlog_config_untouched(self) -> None:
        before = structlog.get_config()

        configure_logging(StubSettings(_env_file=None, log_level="DEBUG", json_logs=True))
        mock_collection(settings=StubSettings(_env_file=None))

        assert structlog.get_config() == before

    def test_import_keeps_host_structlog_config(self) -> None:
        script = textwrap.dedent(
            """
            import structlog

            renderer = structlog.processors.JSONRenderer()
            structlog.configure(processors=[renderer])

            import mongo_stubs

            mongo_stubs.mock_client()
            assert structlog.get_config()["processors"] == [renderer]
            """
        )

        result = subprocess.run(
            [sys.executable, "-c", script],
            capture_output=True,
            text=True,
            check=False,
        )

        assert result.returncode == 0, result.stderr


class TestFactoryEvents:
    """Factories log what they built."""

    def test_stub_instance_logged(
        self,
        json_handler: RecordingHandler,
        stub_settings: StubSettings,
    ) -> None:
        mock_collection({"find": None}, settings=stub_settings)

        built = [entry for entry in events(json_handler) if entry["event"] == "built_stub_instance"]
        assert len(built) == 1
        assert built[0]["contract"] == "CollectionCapabilities"
        assert built[0]["overrides"] == ["find"]
        assert built[0]["level"] == "debug"
        assert built[0]["logger"] == "mongo_stubs.stubs.instance"

    def test_named_children_logged(
        self,
        json_handler: RecordingHandler,
        stub_settings: StubSettings,
    ) -> None:
        mock_database({"orders": {}, "customers": {}}, settings=stub_settings)

        wired = [entry for entry in events(json_handler) if entry["event"] == "wired_named_children"]
        assert wired[0]["kind"] == "collection"
        assert wired[0]["names"] == ["customers", "orders"]

    def test_debug_events_filtered_at_default_level(
        self,
        stub_settings: StubSettings,
        restore_logging: None,
    ) -> None:
        configure_logging(stub_settings)
        handler = RecordingHandler()
        library_logger = logging.getLogger(LOGGER_NAME)
        library_logger.addHandler(handler)
        try:
            mock_collection(settings=stub_settings)
        finally:
            library_logger.removeHandler(handler)

        assert handler.records == []
