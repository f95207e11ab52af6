"""Query result shapes for mongo_stubs."""

from mongo_stubs.results.array import DocumentArray, document_array
from mongo_stubs.results.stream import DocumentStream, document_stream

__all__ = [
    "DocumentArray",
    "DocumentStream",
    "document_array",
    "document_stream",
]
