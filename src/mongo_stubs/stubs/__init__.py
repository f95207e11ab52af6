"""Recording, configurable substitutes for mongo_stubs."""

from mongo_stubs.stubs.instance import method_capabilities, stub_instance
from mongo_stubs.stubs.method import ArgumentBehavior, AsyncMethodStub, MethodStub

__all__ = [
    "ArgumentBehavior",
    "AsyncMethodStub",
    "MethodStub",
    "method_capabilities",
    "stub_instance",
]
