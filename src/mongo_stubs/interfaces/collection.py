"""Collection capability set for mongo_stubs.

This module defines the Protocol mirroring the surface of an async
MongoDB collection handle (motor.motor_asyncio.AsyncIOMotorCollection).
"""

from typing import Any, Protocol, runtime_checkable

__all__ = [
    "CollectionCapabilities",
]

Document = dict[str, Any]
Filter = dict[str, Any]


@runtime_checkable
class CollectionCapabilities(Protocol):
    """Contract for a collection handle.

    Cursor-returning methods (find, aggregate, list_indexes, ...) are
    synchronous, everything that talks to the server is a coroutine.
    """

    # Queries
    def find(self, filter: Filter | None = None, *args: Any, **kwargs: Any) -> Any:
        """Query the collection.

        Args:
            filter: Query filter document
            *args: Projection and further cursor options
            **kwargs: Cursor options (sort, limit, skip, ...)

        Returns:
            Cursor over the matching documents
        """
        ...

    async def find_one(self, filter: Filter | None = None, *args: Any, **kwargs: Any) -> Document | None:
        """Get a single matching document.

        Args:
            filter: Query filter document

        Returns:
            The first matching document, None when nothing matches
        """
        ...

    async def find_one_and_update(self, filter: Filter, update: Any, **kwargs: Any) -> Document | None:
        """Update a single document and return it (before the update by default)."""
        ...

    async def find_one_and_replace(self, filter: Filter, replacement: Document, **kwargs: Any) -> Document | None:
        """Replace a single document and return it."""
        ...

    async def find_one_and_delete(self, filter: Filter, **kwargs: Any) -> Document | None:
        """Delete a single document and return it."""
        ...

    async def count_documents(self, filter: Filter, **kwargs: Any) -> int:
        """Count the documents matching a filter."""
        ...

    async def estimated_document_count(self, **kwargs: Any) -> int:
        """Estimate the number of documents from collection metadata."""
        ...

    async def distinct(self, key: str, filter: Filter | None = None, **kwargs: Any) -> list[Any]:
        """Get the distinct values of a key."""
        ...

    def aggregate(self, pipeline: list[Document], **kwargs: Any) -> Any:
        """Run an aggregation pipeline and return a cursor."""
        ...

    def watch(self, pipeline: list[Document] | None = None, **kwargs: Any) -> Any:
        """Open a change stream over this collection."""
        ...

    # Writes
    async def insert_one(self, document: Document, **kwargs: Any) -> Any:
        """Insert a single document.

        Args:
            document: Document to insert

        Returns:
            InsertOneResult
        """
        ...

    async def insert_many(self, documents: list[Document], **kwargs: Any) -> Any:
        """Insert several documents and return an InsertManyResult."""
        ...

    async def replace_one(self, filter: Filter, replacement: Document, **kwargs: Any) -> Any:
        """Replace a single document and return an UpdateResult."""
        ...

    async def update_one(self, filter: Filter, update: Any, **kwargs: Any) -> Any:
        """Update a single document and return an UpdateResult."""
        ...

    async def update_many(self, filter: Filter, update: Any, **kwargs: Any) -> Any:
        """Update all matching documents and return an UpdateResult."""
        ...

    async def delete_one(self, filter: Filter, **kwargs: Any) -> Any:
        """Delete a single document and return a DeleteResult."""
        ...

    async def delete_many(self, filter: Filter, **kwargs: Any) -> Any:
        """Delete all matching documents and return a DeleteResult."""
        ...

    async def bulk_write(self, requests: list[Any], **kwargs: Any) -> Any:
        """Send a batch of write operations and return a BulkWriteResult."""
        ...

    # Indexes
    async def create_index(self, keys: Any, **kwargs: Any) -> str:
        """Create an index and return its name."""
        ...

    async def create_indexes(self, indexes: list[Any], **kwargs: Any) -> list[str]:
        """Create several indexes and return their names."""
        ...

    async def drop_index(self, index_or_name: Any, **kwargs: Any) -> None:
        """Drop an index."""
        ...

    async def drop_indexes(self, **kwargs: Any) -> None:
        """Drop every index except the one on _id."""
        ...

    def list_indexes(self, **kwargs: Any) -> Any:
        """Get a cursor over this collection's indexes."""
        ...

    async def index_information(self, **kwargs: Any) -> dict[str, Any]:
        """Get a mapping of index name to index details."""
        ...

    def list_search_indexes(self, name: str | None = None, **kwargs: Any) -> Any:
        """Get a cursor over this collection's Atlas Search indexes."""
        ...

    async def create_search_index(self, model: Any, **kwargs: Any) -> str:
        """Create an Atlas Search index and return its name."""
        ...

    # Administration
    async def drop(self, **kwargs: Any) -> None:
        """Drop this collection."""
        ...

    async def rename(self, new_name: str, **kwargs: Any) -> Any:
        """Rename this collection."""
        ...

    async def options(self, **kwargs: Any) -> dict[str, Any]:
        """Get the options this collection was created with."""
        ...

    def with_options(self, **options: Any) -> Any:
        """Get a clone of this collection with different options."""
        ...

    def __getitem__(self, name: str) -> Any:
        """Get a sub-collection handle (``collection["name"]``)."""
        ...
