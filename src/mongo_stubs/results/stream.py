"""Streamed query results for mongo_stubs.

This module provides a push-based document stream. Query methods of
the wrapped client either return such a stream directly or expose it
through an explicit ``stream()`` accessor; DocumentStream supports both.
"""

import asyncio
from collections import deque
from collections.abc import Callable
from typing import Any, Self

from mongo_stubs.utils.documents import as_document_list

__all__ = [
    "DocumentStream",
    "document_stream",
]

Listener = Callable[..., Any]


class DocumentStream:
    """Object-mode readable stream of documents.

    Documents are buffered at construction. Attaching the first ``"data"``
    listener (or calling ``resume()``) schedules emission on the running
    event loop, so listeners attached before the loop next yields still see
    every document followed by exactly one ``"end"``. The stream can also be
    consumed with ``async for``.

    Example:
        stream = document_stream([{"name": "a"}, {"name": "b"}])
        docs = []
        stream.on("data", docs.append).on("end", lambda: print(docs))
    """

    EVENTS = ("data", "end")

    def __init__(self, documents: list[Any]) -> None:
        self._buffer: deque[Any] = deque(documents)
        self._listeners: dict[str, list[Listener]] = {event: [] for event in self.EVENTS}
        self._flowing = False
        self._ended = False

    @property
    def readable_ended(self) -> bool:
        """True once ``"end"`` has been emitted."""
        return self._ended

    def stream(self) -> Self:
        """Get the stream itself, for call sites using ``cursor.stream()``."""
        return self

    def on(self, event: str, listener: Listener) -> Self:
        """Register a listener.

        ``"data"`` listeners receive each document, ``"end"`` listeners are
        called without arguments.

        Args:
            event: "data" or "end"
            listener: Callable to register

        Returns:
            The stream, for chaining

        Raises:
            ValueError: If the event is not supported
        """
        self._listeners_for(event).append(listener)
        if event == "data":
            self.resume()
        return self

    def once(self, event: str, listener: Listener) -> Self:
        """Register a listener removed after its first call."""

        def _once(*args: Any) -> None:
            self.remove_listener(event, _once)
            listener(*args)

        _once.listener = listener  # type: ignore[attr-defined]
        return self.on(event, _once)

    def remove_listener(self, event: str, listener: Listener) -> Self:
        """Unregister a listener (registered with ``on`` or ``once``)."""
        listeners = self._listeners_for(event)
        for index, registered in enumerate(listeners):
            if registered == listener or getattr(registered, "listener", None) == listener:
                del listeners[index]
                break
        return self

    def resume(self) -> Self:
        """Start emitting buffered documents on the next loop iteration.

        Raises:
            RuntimeError: If no event loop is running
        """
        if not self._flowing:
            loop = asyncio.get_running_loop()
            self._flowing = True
            loop.call_soon(self._flow)
        return self

    def __aiter__(self) -> Self:
        return self

    async def __anext__(self) -> Any:
        await asyncio.sleep(0)
        if self._buffer:
            return self._buffer.popleft()
        self._finish()
        raise StopAsyncIteration

    def _listeners_for(self, event: str) -> list[Listener]:
        if event not in self._listeners:
            raise ValueError(
                f"Unsupported stream event: {event}. Expected one of: {', '.join(self.EVENTS)}"
            )
        return self._listeners[event]

    def _emit(self, event: str, *args: Any) -> None:
        for listener in list(self._listeners[event]):
            listener(*args)

    def _flow(self) -> None:
        while self._buffer:
            self._emit("data", self._buffer.popleft())
        self._finish()

    def _finish(self) -> None:
        if not self._ended:
            self._ended = True
            self._emit("end")

    def __repr__(self) -> str:
        return f"DocumentStream(buffered={len(self._buffer)}, ended={self._ended})"


def document_stream(documents: Any = None) -> DocumentStream:
    """Wrap a document, a list of documents or nothing into a DocumentStream."""
    return DocumentStream(as_document_list(documents))
