"""Database capability set for mongo_stubs.

This module defines the Protocol mirroring the surface of an async
MongoDB database handle (motor.motor_asyncio.AsyncIOMotorDatabase).
"""

from typing import Any, Protocol, runtime_checkable

__all__ = [
    "DatabaseCapabilities",
]


@runtime_checkable
class DatabaseCapabilities(Protocol):
    """Contract for a logical database handle."""

    def get_collection(self, name: str, **options: Any) -> Any:
        """Get a collection handle.

        Args:
            name: Collection name
            **options: codec_options, read_preference, write_concern, read_concern

        Returns:
            Collection handle
        """
        ...

    async def create_collection(self, name: str, **kwargs: Any) -> Any:
        """Explicitly create a collection.

        Args:
            name: Collection name
            **kwargs: Creation options (capped, validator, ...)

        Returns:
            Handle to the new collection
        """
        ...

    async def drop_collection(self, name_or_collection: Any, **kwargs: Any) -> dict[str, Any]:
        """Drop a collection."""
        ...

    async def list_collection_names(self, session: Any = None, **kwargs: Any) -> list[str]:
        """List the collection names in this database."""
        ...

    async def list_collections(self, session: Any = None, **kwargs: Any) -> Any:
        """Get a cursor over the collections in this database."""
        ...

    async def command(self, command: Any, **kwargs: Any) -> dict[str, Any]:
        """Run a database command.

        Args:
            command: Command name or command document
            **kwargs: Additional command arguments

        Returns:
            Command response document
        """
        ...

    def aggregate(self, pipeline: list[dict[str, Any]], **kwargs: Any) -> Any:
        """Run a database-level aggregation and return a cursor."""
        ...

    def watch(self, pipeline: list[dict[str, Any]] | None = None, **kwargs: Any) -> Any:
        """Open a change stream over this database."""
        ...

    def with_options(self, **options: Any) -> Any:
        """Get a clone of this database with different options."""
        ...

    async def validate_collection(self, name_or_collection: Any, **kwargs: Any) -> dict[str, Any]:
        """Validate a collection's data and indexes."""
        ...

    async def dereference(self, dbref: Any, **kwargs: Any) -> dict[str, Any] | None:
        """Resolve a DBRef to its document."""
        ...

    def __getitem__(self, name: str) -> Any:
        """Get a collection handle by name (``db["name"]``)."""
        ...
