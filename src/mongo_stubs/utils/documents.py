from typing import Any


def as_document_list(documents: Any = None) -> list[Any]:
    """Normalize a query result into an ordered list of documents.

    None becomes an empty list, lists and tuples keep their order, and
    anything else (a single document, a scalar) becomes a one-element list.
    """
    if documents is None:
        return []
    if isinstance(documents, (list, tuple)):
        return list(documents)
    return [documents]
