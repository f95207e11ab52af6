"""Client capability set for mongo_stubs.

This module defines the Protocol mirroring the surface of an async
MongoDB client (motor.motor_asyncio.AsyncIOMotorClient).
"""

from typing import Any, Protocol, runtime_checkable

__all__ = [
    "ClientCapabilities",
]


@runtime_checkable
class ClientCapabilities(Protocol):
    """Contract for the top-level client handle.

    Motor connects lazily, so ``connect`` stands for the explicit connect
    step application wrappers perform before touching a database.
    """

    async def connect(self) -> "ClientCapabilities":
        """Open the connection.

        Returns:
            The connected client
        """
        ...

    def close(self) -> None:
        """Close the client and its connection pool."""
        ...

    def get_database(self, name: str | None = None, **options: Any) -> Any:
        """Get a database handle.

        Args:
            name: Database name; the URI default database when None
            **options: codec_options, read_preference, write_concern, read_concern

        Returns:
            Database handle
        """
        ...

    def get_default_database(self, default: str | None = None, **options: Any) -> Any:
        """Get the database named in the connection URI."""
        ...

    async def list_database_names(self, session: Any = None, **kwargs: Any) -> list[str]:
        """List the names of all databases."""
        ...

    async def list_databases(self, session: Any = None, **kwargs: Any) -> Any:
        """Get a cursor over the databases on the server."""
        ...

    async def drop_database(self, name_or_database: Any, session: Any = None, **kwargs: Any) -> None:
        """Drop a database.

        Args:
            name_or_database: Database name or handle to drop
            session: Optional client session
        """
        ...

    async def server_info(self, session: Any = None) -> dict[str, Any]:
        """Get information about the connected server."""
        ...

    async def start_session(self, **kwargs: Any) -> Any:
        """Start a logical client session."""
        ...

    def watch(self, pipeline: list[dict[str, Any]] | None = None, **kwargs: Any) -> Any:
        """Open a change stream over the whole cluster."""
        ...

    def __getitem__(self, name: str) -> Any:
        """Get a database handle by name (``client["name"]``)."""
        ...
