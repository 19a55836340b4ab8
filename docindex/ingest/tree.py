from __future__ import annotations

from typing import List, Mapping

from docindex.ingest.paths import parent_slug
from docindex.models.document import Document


def build_tree(content: Mapping[str, Document]) -> List[Document]:
    """Attach every document to its parent and return the roots in mapping order.

    A document whose parent slug has no entry of its own becomes a root, since
    intermediate folders do not need an index page.
    """

    roots: List[Document] = []
    for slug, document in content.items():
        parent = parent_slug(slug)
        if not parent or parent not in content:
            roots.append(document)
            continue
        content[parent].children.append(document)
    return roots


__all__ = ["build_tree"]
