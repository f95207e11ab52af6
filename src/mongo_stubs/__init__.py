"""mongo_stubs - Test doubles for async MongoDB clients.

This package provides tools for:
- Building recording, configurable substitutes for a client, a database
  and a collection handle
- Wiring named databases and collections into their parent's lookup
- Synthesizing query results as a ``to_list()`` cursor or a document stream

Example usage:
    from mongo_stubs import document_array, mock_collection, mock_database

    customers = mock_collection()
    db = mock_database({"customers": customers})
    customers.find.with_args({"org": "acme"}).returns(
        document_array([{"name": "a"}, {"name": "b"}])
    )

    repository = CustomerRepository(db)
    assert await repository.find_in_org("acme") == [{"name": "a"}, {"name": "b"}]
    customers.find.assert_called_once_with({"org": "acme"})
"""

__version__ = "0.1.0"

from mongo_stubs.config import StubSettings, get_settings

# Factories
from mongo_stubs.factories.client import mock_client
from mongo_stubs.factories.collection import mock_collection
from mongo_stubs.factories.database import mock_database

# Capability sets
from mongo_stubs.interfaces.client import ClientCapabilities
from mongo_stubs.interfaces.collection import CollectionCapabilities
from mongo_stubs.interfaces.database import DatabaseCapabilities

# Result shapes
from mongo_stubs.results.array import DocumentArray, document_array
from mongo_stubs.results.stream import DocumentStream, document_stream

# Stubs
from mongo_stubs.stubs.instance import method_capabilities, stub_instance
from mongo_stubs.stubs.method import ArgumentBehavior, AsyncMethodStub, MethodStub

__all__ = [  # noqa: RUF022
    # Factories
    "mock_client",
    "mock_database",
    "mock_collection",
    # Result shapes
    "document_array",
    "document_stream",
    "DocumentArray",
    "DocumentStream",
    # Stubs
    "MethodStub",
    "AsyncMethodStub",
    "ArgumentBehavior",
    "method_capabilities",
    "stub_instance",
    # Capability sets
    "ClientCapabilities",
    "DatabaseCapabilities",
    "CollectionCapabilities",
    # Configuration
    "StubSettings",
    "get_settings",
]
