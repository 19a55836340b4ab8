"""Hierarchical documentation index builder."""

from .ingest.pipeline import IndexResult, build_index, create_index
from .models.document import Document, DocumentLink, Section

__all__ = ["Document", "DocumentLink", "Section", "IndexResult", "build_index", "create_index"]
