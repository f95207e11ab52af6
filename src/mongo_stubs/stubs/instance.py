"""Stub instances built from capability sets.

This module turns a capability set (usually one of the Protocols in
mongo_stubs.interfaces) into an object exposing one recording,
configurable stub per declared method.
"""

import inspect
from collections.abc import Mapping
from typing import Any, Generic, Protocol
from unittest.mock import NonCallableMagicMock

from mongo_stubs.config import StubSettings, get_settings
from mongo_stubs.logging import get_logger
from mongo_stubs.stubs.method import as_method_stub, new_method_stub

__all__ = [
    "method_capabilities",
    "stub_instance",
]

logger = get_logger(__name__)

_SKIPPED_BASES = (object, Protocol, Generic)


def method_capabilities(contract: type) -> dict[str, bool]:
    """Enumerate the public methods declared on a contract and its bases.

    Members are read from each class namespace without triggering
    descriptors. Errors raised while walking the contract propagate.

    Args:
        contract: Class or Protocol to introspect

    Returns:
        Mapping of method name to whether it is a coroutine function
    """
    capabilities: dict[str, bool] = {}
    for klass in reversed(inspect.getmro(contract)):
        if klass in _SKIPPED_BASES:
            continue
        for name, member in vars(klass).items():
            if name.startswith("_"):
                continue
            if isinstance(member, (staticmethod, classmethod)):
                member = member.__func__
            if inspect.isfunction(member):
                capabilities[name] = inspect.iscoroutinefunction(member)
    return capabilities


def stub_instance(
    contract: type,
    method_stubs: Mapping[str, Any] | None = None,
    *,
    settings: StubSettings | None = None,
) -> NonCallableMagicMock:
    """Build a substitute exposing one stub per method of ``contract``.

    The substitute is specced on the contract, so reading an undeclared
    attribute raises AttributeError and isinstance checks pass.

    Args:
        contract: Capability set to mirror
        method_stubs: Per-method overrides, applied after the bare stubs
        settings: Stub settings (defaults to the environment settings)

    Returns:
        Substitute instance
    """
    settings = settings if settings is not None else get_settings()
    method_stubs = method_stubs or {}
    capabilities = method_capabilities(contract)

    instance = NonCallableMagicMock(spec=contract)
    for name, is_async in capabilities.items():
        setattr(instance, name, new_method_stub(is_async, settings))
    for name, value in method_stubs.items():
        setattr(instance, name, as_method_stub(value, capabilities.get(name, False), settings))

    logger.debug(
        "built_stub_instance",
        contract=contract.__name__,
        methods=len(capabilities),
        overrides=sorted(method_stubs),
    )
    return instance
