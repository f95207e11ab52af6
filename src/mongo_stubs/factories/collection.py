"""Collection substitutes for mongo_stubs."""

from collections.abc import Mapping
from typing import Any
from unittest.mock import NonCallableMagicMock

from mongo_stubs.config import StubSettings, get_settings
from mongo_stubs.interfaces.collection import CollectionCapabilities
from mongo_stubs.stubs.instance import stub_instance
from mongo_stubs.stubs.method import MethodStub

__all__ = [
    "mock_collection",
]


def mock_collection(
    method_stubs: Mapping[str, Any] | None = None,
    *,
    settings: StubSettings | None = None,
) -> NonCallableMagicMock:
    """Build a substitute for a collection handle.

    Every method is callable and recorded and returns None until
    configured. ``collection[name]`` returns a sub-collection substitute,
    built on first access and reused for the same name.

    Example:
        customers = mock_collection()
        customers.find_one.with_args({"name": "foo"}).resolves({"name": "foo"})
        customers["archive"].insert_one.resolves(None)

    Args:
        method_stubs: Per-method overrides (mocks, callables or return values)
        settings: Stub settings

    Returns:
        Collection substitute
    """
    settings = settings if settings is not None else get_settings()
    sub_collections: dict[str, NonCallableMagicMock] = {}

    def sub_collection(name: str) -> NonCallableMagicMock:
        if name not in sub_collections:
            sub_collections[name] = mock_collection(settings=settings)
        return sub_collections[name]

    collection = stub_instance(CollectionCapabilities, method_stubs, settings=settings)
    collection.__getitem__ = MethodStub().calls(sub_collection)
    return collection
