"""pytest integration for mongo_stubs.

Enable it with ``-p mongo_stubs.pytest_plugin`` on the command line (or in
addopts), or with ``pytest_plugins = ["mongo_stubs.pytest_plugin"]`` in a
top-level conftest.py.
"""

from collections.abc import Mapping
from typing import Any
from unittest.mock import NonCallableMagicMock

import pytest

from mongo_stubs.config import StubSettings, get_settings
from mongo_stubs.factories.client import mock_client
from mongo_stubs.factories.collection import mock_collection
from mongo_stubs.factories.database import mock_database
from mongo_stubs.results.array import DocumentArray, document_array
from mongo_stubs.results.stream import DocumentStream, document_stream

__all__ = [
    "MongoStubs",
    "mock_mongo_client",
    "mock_mongo_collection",
    "mock_mongo_database",
    "mongo_stub_settings",
    "mongo_stubs",
]


class MongoStubs:
    """All stub factories bound to one set of settings.

    Example:
        def test_find(mongo_stubs):
            customers = mongo_stubs.collection()
            db = mongo_stubs.database({"customers": customers})
            customers.find.returns(mongo_stubs.document_array([{"a": 1}]))
    """

    def __init__(self, settings: StubSettings) -> None:
        self.settings = settings

    def client(
        self,
        databases: Mapping[str, Any] | None = None,
        method_stubs: Mapping[str, Any] | None = None,
    ) -> NonCallableMagicMock:
        return mock_client(databases, method_stubs, settings=self.settings)

    def database(
        self,
        collections: Mapping[str, Any] | None = None,
        method_stubs: Mapping[str, Any] | None = None,
    ) -> NonCallableMagicMock:
        return mock_database(collections, method_stubs, settings=self.settings)

    def collection(self, method_stubs: Mapping[str, Any] | None = None) -> NonCallableMagicMock:
        return mock_collection(method_stubs, settings=self.settings)

    @staticmethod
    def document_array(documents: Any = None) -> DocumentArray:
        return document_array(documents)

    @staticmethod
    def document_stream(documents: Any = None) -> DocumentStream:
        return document_stream(documents)


@pytest.fixture
def mongo_stub_settings() -> StubSettings:
    """Settings used by the mongo_stubs fixtures; override to customize."""
    return get_settings()


@pytest.fixture
def mongo_stubs(mongo_stub_settings: StubSettings) -> MongoStubs:
    """Stub factories bound to ``mongo_stub_settings``."""
    return MongoStubs(mongo_stub_settings)


@pytest.fixture
def mock_mongo_collection(mongo_stubs: MongoStubs) -> NonCallableMagicMock:
    """Fresh collection substitute."""
    return mongo_stubs.collection()


@pytest.fixture
def mock_mongo_database(mongo_stubs: MongoStubs) -> NonCallableMagicMock:
    """Fresh database substitute."""
    return mongo_stubs.database()


@pytest.fixture
def mock_mongo_client(mongo_stubs: MongoStubs) -> NonCallableMagicMock:
    """Fresh client substitute."""
    return mongo_stubs.client()
