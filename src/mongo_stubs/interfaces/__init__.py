"""Capability sets for mongo_stubs.

This module exports the Protocols describing each level of the client
hierarchy. Stub factories build one substitute per declared method.
"""

from mongo_stubs.interfaces.client import ClientCapabilities
from mongo_stubs.interfaces.collection import CollectionCapabilities
from mongo_stubs.interfaces.database import DatabaseCapabilities

__all__ = [
    "ClientCapabilities",
    "DatabaseCapabilities",
    "CollectionCapabilities",
]
