"""Database substitutes for mongo_stubs.

This module builds database handle substitutes whose collection lookup
is wired to caller-supplied collection substitutes.
"""

from collections.abc import Mapping
from typing import Any
from unittest.mock import NonCallableMagicMock

from mongo_stubs.config import StubSettings, get_settings
from mongo_stubs.factories.collection import mock_collection
from mongo_stubs.interfaces.database import DatabaseCapabilities
from mongo_stubs.logging import get_logger
from mongo_stubs.stubs.instance import stub_instance
from mongo_stubs.stubs.method import MethodStub

__all__ = [
    "mock_database",
]

logger = get_logger(__name__)


def mock_database(
    collections: Mapping[str, Any] | None = None,
    method_stubs: Mapping[str, Any] | None = None,
    *,
    settings: StubSettings | None = None,
) -> NonCallableMagicMock:
    """Build a substitute for a logical database handle.

    ``get_collection(name)`` and ``db[name]`` share one stub. Names found
    in ``collections`` return that exact object, any other name returns a
    default collection substitute built once for this database.

    Example:
        customers = mock_collection()
        db = mock_database({"customers": customers})
        assert db.get_collection("customers") is customers
        assert db["customers"] is customers

    Args:
        collections: Collection name to pre-built substitute
        method_stubs: Per-method overrides, applied last
        settings: Stub settings

    Returns:
        Database substitute
    """
    settings = settings if settings is not None else get_settings()
    method_stubs = method_stubs or {}

    collection_lookup = MethodStub(return_value=mock_collection(settings=settings))
    for name, collection in (collections or {}).items():
        collection_lookup.with_args(name).returns(collection)
    if collections:
        logger.debug("wired_named_children", kind="collection", names=sorted(collections))

    database = stub_instance(
        DatabaseCapabilities,
        {"get_collection": collection_lookup, **method_stubs},
        settings=settings,
    )
    database.__getitem__ = database.get_collection
    return database
