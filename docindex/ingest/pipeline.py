from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping

from docindex.ingest.assets import bind_assets
from docindex.ingest.linker import link_documents
from docindex.ingest.loader import DocumentLoader, DocumentLoaderConfig
from docindex.ingest.tree import build_tree
from docindex.models.document import Document

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class IndexResult:
    """The flat slug mapping together with the roots of the document forest."""

    documents: Dict[str, Document]
    roots: List[Document]
    assets_bound: int = 0


async def build_index(
    documents: Mapping[str, Any],
    assets: Mapping[str, Any],
    base: str,
    read: Callable[[Any], Any],
    *,
    config: DocumentLoaderConfig | None = None,
) -> IndexResult:
    """Load, nest, bind assets and link a whole corpus.

    ``read(locator)`` must return an object whose ``text()`` gives the file
    contents, either directly or as an awaitable. Any ``IndexBuildError`` aborts
    the build; no partial index is returned.
    """

    content = await DocumentLoader(config).load(documents, base, read)
    roots = build_tree(content)
    assets_bound = bind_assets(assets, content, base)
    link_documents(roots)

    logger.info(
        "Indexed %d documents (%d roots, %d assets) under %s",
        len(content),
        len(roots),
        assets_bound,
        base,
    )
    return IndexResult(documents=content, roots=roots, assets_bound=assets_bound)


async def create_index(
    documents: Mapping[str, Any],
    assets: Mapping[str, Any],
    base: str,
    read: Callable[[Any], Any],
    *,
    config: DocumentLoaderConfig | None = None,
) -> Dict[str, Document]:
    result = await build_index(documents, assets, base, read, config=config)
    return result.documents


__all__ = ["IndexResult", "build_index", "create_index"]
