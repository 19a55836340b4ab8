from __future__ import annotations

import asyncio
import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional

from docindex.ingest.errors import (
    DuplicateSlugError,
    FrontmatterError,
    IncludeNotFoundError,
    MissingTitleError,
)
from docindex.ingest.frontmatter import extract_frontmatter
from docindex.ingest.includes import MissingInclude, splice_includes
from docindex.ingest.paths import generated_sibling_key, is_indexable_key, relative_file, slug_from_file
from docindex.ingest.utils import read_text, slugify
from docindex.models.document import Document, Section

logger = logging.getLogger(__name__)

_SECTION_PATTERN = re.compile(r"^##\s+(.*?)\r?$", re.MULTILINE)


@dataclass(slots=True)
class DocumentLoaderConfig:
    """Configuration for reading source documents."""

    concurrency: int = 16


@dataclass(slots=True)
class _SourceEntry:
    key: str
    file: str
    slug: str
    generated_key: Optional[str]


def extract_sections(body: str) -> List[Section]:
    return [
        Section(slug=slugify(match.group(1)), title=match.group(1))
        for match in _SECTION_PATTERN.finditer(body)
    ]


class DocumentLoader:
    """Turn a flat source collection into a ``slug -> Document`` mapping."""

    def __init__(self, config: DocumentLoaderConfig | None = None) -> None:
        self.config = config or DocumentLoaderConfig()

    async def load(
        self,
        documents: Mapping[str, Any],
        base: str,
        read: Callable[[Any], Any],
    ) -> Dict[str, Document]:
        entries = self._collect_entries(documents, base)

        semaphore = asyncio.Semaphore(max(self.config.concurrency, 1))

        async def fetch(locator: Any) -> str:
            async with semaphore:
                return await read_text(read, locator)

        generated_keys = list(dict.fromkeys(e.generated_key for e in entries if e.generated_key))
        try:
            async with asyncio.TaskGroup() as group:
                text_tasks = [group.create_task(fetch(documents[entry.key])) for entry in entries]
                generated_tasks = {key: group.create_task(fetch(documents[key])) for key in generated_keys}
        except ExceptionGroup as failures:
            # Pending reads are cancelled by the group; surface the first failure.
            raise failures.exceptions[0]

        texts = [task.result() for task in text_tasks]
        generated = {key: task.result() for key, task in generated_tasks.items()}

        content: Dict[str, Document] = {}
        origins: Dict[str, str] = {}
        for entry, text in zip(entries, texts):
            if entry.slug in content:
                raise DuplicateSlugError(entry.slug, origins[entry.slug], entry.key)
            content[entry.slug] = self._build_document(entry, text, generated)
            origins[entry.slug] = entry.key
            logger.debug("Loaded %s as %s", entry.key, entry.slug)

        return content

    def _collect_entries(self, documents: Mapping[str, Any], base: str) -> List[_SourceEntry]:
        entries: List[_SourceEntry] = []
        for key in documents:
            if not is_indexable_key(key):
                continue
            file = relative_file(key, base)
            sibling = generated_sibling_key(key)
            entries.append(
                _SourceEntry(
                    key=key,
                    file=file,
                    slug=slug_from_file(file),
                    generated_key=sibling if sibling in documents else None,
                )
            )
        return entries

    def _build_document(self, entry: _SourceEntry, text: str, generated: Mapping[str, str]) -> Document:
        try:
            metadata, body = extract_frontmatter(text)
        except ValueError as exc:
            raise FrontmatterError(entry.file, str(exc)) from exc

        if not metadata.get("title"):
            raise MissingTitleError(entry.slug, entry.file)

        if entry.generated_key is not None:
            try:
                body = splice_includes(body, generated[entry.generated_key])
            except MissingInclude as exc:
                raise IncludeNotFoundError(exc.name, entry.slug, entry.generated_key) from exc

        return Document(
            slug=entry.slug,
            file=entry.file,
            metadata=metadata,
            body=body,
            sections=extract_sections(body),
        )


__all__ = ["DocumentLoader", "DocumentLoaderConfig", "extract_sections"]
