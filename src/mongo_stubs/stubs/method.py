"""Method substitutes for mongo_stubs.

This module provides MagicMock and AsyncMock subclasses that keep the full
unittest.mock recording and assertion API and add argument-specific
behaviors that can be configured at any time after creation.

Example:
    find_one = AsyncMethodStub()
    find_one.with_args({"name": "foo"}).resolves({"name": "foo", "age": 3})

    await find_one({"name": "foo"})  # {"name": "foo", "age": 3}
    await find_one({"name": "bar"})  # falls back to return_value
    find_one.assert_awaited_with({"name": "bar"})
"""

import inspect
from collections.abc import Callable, Mapping
from typing import Any, Self
from unittest.mock import ANY, DEFAULT, AsyncMock, MagicMock, NonCallableMock

from mongo_stubs.config import StubSettings

__all__ = [
    "ArgumentBehavior",
    "AsyncMethodStub",
    "MethodStub",
    "as_method_stub",
    "new_method_stub",
]


async def _resolved(value: Any) -> Any:
    return value


async def _rejected(exc: BaseException | type[BaseException]) -> Any:
    raise exc


def _same_arguments(left: tuple[Any, ...], right: tuple[Any, ...]) -> bool:
    """Strict comparison so that mock.ANY never aliases a concrete argument."""
    if len(left) != len(right):
        return False
    return all(a is b or (type(a) is type(b) and a == b) for a, b in zip(left, right, strict=True))


def _argument_matches(expected: Any, actual: Any) -> bool:
    """Equality that keeps bool apart from int; mock.ANY matches anything."""
    if expected is ANY:
        return True
    if isinstance(expected, bool) != isinstance(actual, bool):
        return False
    return bool(expected == actual)


class ArgumentBehavior:
    """Outcome configured for calls whose arguments match.

    Every configuration method returns the owning stub, so a stub can be
    built and handed over in one expression:

        stub = MethodStub().with_args("customers").returns(collection)
    """

    def __init__(
        self,
        stub: "StubBehaviorMixin",
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> None:
        self._stub = stub
        self.args = args
        self.kwargs = kwargs
        self._outcome: Callable[..., Any] | None = None
        self._awaits_result = False

    @property
    def configured(self) -> bool:
        """True once an outcome has been set."""
        return self._outcome is not None

    @property
    def specificity(self) -> int:
        """Number of arguments this behavior constrains."""
        return len(self.args) + len(self.kwargs)

    def matches(self, args: tuple[Any, ...], kwargs: Mapping[str, Any]) -> bool:
        """Check whether a call's arguments select this behavior.

        Leading positional arguments must equal the configured ones and
        every configured keyword must be present with an equal value.
        Extra arguments are allowed. ``True``/``False`` never match ``1``/``0``.

        Args:
            args: Positional arguments of the call
            kwargs: Keyword arguments of the call

        Returns:
            True if the call matches
        """
        if len(args) < len(self.args):
            return False
        if not all(map(_argument_matches, self.args, args)):
            return False
        return all(
            key in kwargs and _argument_matches(value, kwargs[key])
            for key, value in self.kwargs.items()
        )

    def same_arguments(self, args: tuple[Any, ...], kwargs: Mapping[str, Any]) -> bool:
        """Check whether this behavior was declared with exactly these arguments."""
        if self.kwargs.keys() != kwargs.keys():
            return False
        keys = list(self.kwargs)
        return _same_arguments(self.args, args) and _same_arguments(
            tuple(self.kwargs[key] for key in keys),
            tuple(kwargs[key] for key in keys),
        )

    def returns(self, value: Any) -> "StubBehaviorMixin":
        """Return ``value`` from matching calls."""
        return self._set(lambda *args, **kwargs: value)

    def resolves(self, value: Any) -> "StubBehaviorMixin":
        """Make matching calls awaitable, resolving to ``value``."""
        if self._stub._returns_awaitable:
            return self.returns(value)
        return self._set(lambda *args, **kwargs: _resolved(value))

    def raises(self, exc: BaseException | type[BaseException]) -> "StubBehaviorMixin":
        """Raise ``exc`` from matching calls."""

        def _raise(*args: Any, **kwargs: Any) -> Any:
            raise exc

        return self._set(_raise)

    def rejects(self, exc: BaseException | type[BaseException]) -> "StubBehaviorMixin":
        """Make matching calls awaitable, raising ``exc`` when awaited."""
        if self._stub._returns_awaitable:
            return self.raises(exc)
        return self._set(lambda *args, **kwargs: _rejected(exc))

    def calls(self, fn: Callable[..., Any]) -> "StubBehaviorMixin":
        """Delegate matching calls to ``fn`` with the call's arguments."""
        self._set(fn)
        self._awaits_result = True
        return self._stub

    def invoke(self, args: tuple[Any, ...], kwargs: Mapping[str, Any]) -> Any:
        """Produce the configured outcome for a call."""
        if self._outcome is None:
            raise RuntimeError("ArgumentBehavior invoked before an outcome was configured")
        return self._outcome(*args, **kwargs)

    @property
    def awaits_result(self) -> bool:
        """True when an awaitable stub should await what ``invoke`` returns."""
        return self._awaits_result

    def _set(self, outcome: Callable[..., Any]) -> "StubBehaviorMixin":
        self._outcome = outcome
        self._awaits_result = False
        return self._stub

    def __repr__(self) -> str:
        return f"ArgumentBehavior(args={self.args!r}, kwargs={self.kwargs!r}, configured={self.configured})"


class StubBehaviorMixin:
    """Argument-specific behaviors layered over a unittest.mock callable.

    The stub owns its ``side_effect``: calls are routed through the
    configured behaviors and fall back to ``return_value`` when none match.
    """

    _returns_awaitable = False

    def __init__(self, /, *args: Any, **kwargs: Any) -> None:
        if "side_effect" in kwargs:
            raise TypeError(
                f"{type(self).__name__} manages its own side_effect; "
                "use calls() or raises() instead"
            )
        super().__init__(*args, **kwargs)
        self._argument_behaviors: list[ArgumentBehavior] = []
        self.side_effect = self._dispatch

    def with_args(self, *args: Any, **kwargs: Any) -> ArgumentBehavior:
        """Get the behavior for calls starting with these arguments.

        Asking twice for the same arguments returns the same behavior, so
        it can be reconfigured.

        Args:
            *args: Leading positional arguments to match
            **kwargs: Keyword arguments that must be present

        Returns:
            ArgumentBehavior to configure
        """
        for behavior in self._argument_behaviors:
            if behavior.same_arguments(args, kwargs):
                return behavior
        behavior = ArgumentBehavior(self, args, kwargs)
        self._argument_behaviors.append(behavior)
        return behavior

    def returns(self, value: Any) -> Self:
        """Set the value returned by calls no other behavior matches."""
        self._argument_behaviors = [
            behavior for behavior in self._argument_behaviors if behavior.specificity
        ]
        self.return_value = value
        return self

    def resolves(self, value: Any) -> Self:
        """Make unmatched calls awaitable, resolving to ``value``."""
        if self._returns_awaitable:
            return self.returns(value)
        self.with_args().resolves(value)
        return self

    def raises(self, exc: BaseException | type[BaseException]) -> Self:
        """Raise ``exc`` from unmatched calls."""
        self.with_args().raises(exc)
        return self

    def rejects(self, exc: BaseException | type[BaseException]) -> Self:
        """Make unmatched calls awaitable, raising ``exc`` when awaited."""
        self.with_args().rejects(exc)
        return self

    def calls(self, fn: Callable[..., Any]) -> Self:
        """Delegate unmatched calls to ``fn``."""
        self.with_args().calls(fn)
        return self

    def reset_mock(
        self,
        /,
        *args: Any,
        return_value: bool = False,
        side_effect: bool = False,
        **kwargs: Any,
    ) -> None:
        """Reset call history; ``side_effect=True`` also drops every behavior."""
        super().reset_mock(*args, return_value=return_value, side_effect=side_effect, **kwargs)
        if side_effect:
            self._argument_behaviors.clear()
            self.side_effect = self._dispatch

    def _select_behavior(
        self,
        args: tuple[Any, ...],
        kwargs: Mapping[str, Any],
    ) -> ArgumentBehavior | None:
        # Most specific match wins, the latest declared breaks ties
        selected: ArgumentBehavior | None = None
        for behavior in self._argument_behaviors:
            if not behavior.configured or not behavior.matches(args, kwargs):
                continue
            if selected is None or behavior.specificity >= selected.specificity:
                selected = behavior
        return selected

    def _dispatch(self, *args: Any, **kwargs: Any) -> Any:
        behavior = self._select_behavior(args, kwargs)
        if behavior is None:
            return DEFAULT
        return behavior.invoke(args, kwargs)

    def _get_child_mock(self, /, **kw: Any) -> MagicMock:
        return MagicMock(**kw)


class MethodStub(StubBehaviorMixin, MagicMock):
    """Synchronous method substitute (cursor-returning methods, lookups)."""


class AsyncMethodStub(StubBehaviorMixin, AsyncMock):
    """Awaitable method substitute (everything that talks to the server)."""

    _returns_awaitable = True

    async def _dispatch(self, *args: Any, **kwargs: Any) -> Any:
        behavior = self._select_behavior(args, kwargs)
        if behavior is None:
            return DEFAULT
        result = behavior.invoke(args, kwargs)
        if behavior.awaits_result and inspect.isawaitable(result):
            result = await result
        return result


def new_method_stub(is_async: bool, settings: StubSettings) -> MethodStub | AsyncMethodStub:
    """Create a bare recording stub.

    Args:
        is_async: Whether the stubbed method is a coroutine
        settings: Stub settings (auto_return decides the default return value)

    Returns:
        MethodStub or AsyncMethodStub
    """
    stub_class = AsyncMethodStub if is_async else MethodStub
    if settings.auto_return:
        return stub_class()
    return stub_class(return_value=None)


def as_method_stub(value: Any, is_async: bool, settings: StubSettings) -> Any:
    """Turn a caller-supplied override into a method substitute.

    Mocks are used as-is, other callables are wrapped in a recording stub
    that delegates to them, and plain values become the stub's return value.
    """
    if isinstance(value, NonCallableMock):
        return value
    if callable(value):
        return new_method_stub(is_async or inspect.iscoroutinefunction(value), settings).calls(value)
    return new_method_stub(is_async, settings).returns(value)
