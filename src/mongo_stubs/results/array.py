"""Array-like query results for mongo_stubs.

This module provides a stand-in for a cursor consumed with ``to_list()``.
"""

from typing import Any

from mongo_stubs.utils.documents import as_document_list

__all__ = [
    "DocumentArray",
    "document_array",
]


class DocumentArray:
    """Cursor stand-in materialized with ``await cursor.to_list()``.

    Example:
        customers.find.with_args({"org": "acme"}).returns(
            document_array([{"name": "a"}, {"name": "b"}])
        )
        docs = await customers.find({"org": "acme"}).to_list(None)
    """

    def __init__(self, documents: list[Any]) -> None:
        self._documents = documents

    async def to_list(self, length: int | None = None) -> list[Any]:
        """Get the documents as a new list.

        Args:
            length: Maximum number of documents to return, None for all

        Returns:
            List of documents in their original order

        Raises:
            ValueError: If length is negative
        """
        if length is not None and length < 0:
            raise ValueError(f"length must be a non-negative integer or None, got {length}")
        documents = list(self._documents)
        return documents if length is None else documents[:length]

    def __repr__(self) -> str:
        return f"DocumentArray({self._documents!r})"


def document_array(documents: Any = None) -> DocumentArray:
    """Wrap a document, a list of documents or nothing into a DocumentArray."""
    return DocumentArray(as_document_list(documents))
