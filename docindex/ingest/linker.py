from __future__ import annotations

from typing import Iterable, Optional

from docindex.ingest.errors import EmptyDocumentError
from docindex.models.document import Document


def link_documents(roots: Iterable[Document]) -> Optional[Document]:
    """Wire prev/next across the forest in pre-order; returns the last linked document."""

    prev: Optional[Document] = None
    for root in roots:
        prev = _create_links(root, prev)
    return prev


def _create_links(document: Document, prev: Optional[Document]) -> Optional[Document]:
    if not document.children and not document.body:
        raise EmptyDocumentError(document.slug)

    if document.body:
        if prev is not None:
            prev.next = document.as_link()
            document.prev = prev.as_link()
        prev = document

    for child in document.children:
        prev = _create_links(child, prev)
    return prev


__all__ = ["link_documents"]
