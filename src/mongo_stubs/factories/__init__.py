"""Substitute factories for the client → database → collection hierarchy."""

from mongo_stubs.factories.client import mock_client
from mongo_stubs.factories.collection import mock_collection
from mongo_stubs.factories.database import mock_database

__all__ = [
    "mock_client",
    "mock_database",
    "mock_collection",
]
