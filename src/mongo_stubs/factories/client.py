"""Client substitutes for mongo_stubs.

This module builds the top-level client substitute: it connects to
itself and hands out database substitutes by name.
"""

from collections.abc import Mapping
from typing import Any
from unittest.mock import NonCallableMagicMock

from mongo_stubs.config import StubSettings, get_settings
from mongo_stubs.factories.database import mock_database
from mongo_stubs.interfaces.client import ClientCapabilities
from mongo_stubs.logging import get_logger
from mongo_stubs.stubs.instance import stub_instance
from mongo_stubs.stubs.method import MethodStub

__all__ = [
    "mock_client",
]

logger = get_logger(__name__)


def mock_client(
    databases: Mapping[str, Any] | None = None,
    method_stubs: Mapping[str, Any] | None = None,
    *,
    settings: StubSettings | None = None,
) -> NonCallableMagicMock:
    """Build a substitute for an async MongoDB client.

    Defaults installed before ``method_stubs`` are applied:
    - ``await client.connect()`` resolves to the client itself
    - ``get_database(name)`` and ``client[name]`` return the matching entry
      of ``databases``, or a default database substitute built once for
      this client

    Example:
        reporting = mock_database()
        client = mock_client({"reporting": reporting})

        await client.connect()
        assert client.get_database("reporting") is reporting
        client.get_database.assert_called_once_with("reporting")

    Args:
        databases: Database name to pre-built substitute
        method_stubs: Per-method overrides; caller-supplied entries win
        settings: Stub settings

    Returns:
        Client substitute
    """
    settings = settings if settings is not None else get_settings()
    method_stubs = method_stubs or {}

    database_lookup = MethodStub(return_value=mock_database(settings=settings))
    for name, database in (databases or {}).items():
        database_lookup.with_args(name).returns(database)
    if databases:
        logger.debug("wired_named_children", kind="database", names=sorted(databases))

    client = stub_instance(
        ClientCapabilities,
        {"get_database": database_lookup, **method_stubs},
        settings=settings,
    )
    # Attached before configuring so the client is not re-parented
    # under its own connect stub.
    if "connect" not in method_stubs:
        client.connect.resolves(client)
    client.__getitem__ = client.get_database
    return client
