"""Utility functions for mongo_stubs.

This module contains internal utility functions.
"""

from mongo_stubs.utils.documents import as_document_list

__all__ = [
    "as_document_list",
]
