from __future__ import annotations

import asyncio
import logging

from docindex.ingest.loader import DocumentLoaderConfig
from docindex.ingest.pipeline import IndexResult, build_index
from docindex.ingest.sources import discover_sources, read_file
from docindex.models.configs import ContentConfig
from docindex.server.settings import Settings

logger = logging.getLogger(__name__)


class ContentService:
    """Owns the current index and decides when it must be rebuilt."""

    def __init__(self, settings: Settings, config: ContentConfig | None = None) -> None:
        self.settings = settings
        self.config = config or settings.content()
        self._index: IndexResult | None = None
        self._lock = asyncio.Lock()

    async def get_index(self) -> IndexResult:
        async with self._lock:
            if self._index is None or self.settings.rebuild_on_request:
                self._index = await self.rebuild()
            return self._index

    async def rebuild(self) -> IndexResult:
        base = self.config.resolved_base()
        documents, assets = discover_sources(self.config.content_dir, base, self.config.pattern)
        logger.debug("Rebuilding index from %s (%d sources)", self.config.content_dir, len(documents))
        return await build_index(
            documents,
            assets,
            base,
            read_file,
            config=DocumentLoaderConfig(concurrency=self.config.concurrency),
        )


__all__ = ["ContentService"]
