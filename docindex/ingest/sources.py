from __future__ import annotations

import asyncio
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Tuple

from docindex.ingest.paths import ASSETS_SEGMENT


@dataclass(frozen=True, slots=True)
class FileResource:
    """Lazy handle on a file; ``text()`` reads it without blocking the event loop."""

    path: Path

    async def text(self) -> str:
        return await asyncio.to_thread(self.path.read_text, encoding="utf-8")


def read_file(path: Path) -> FileResource:
    return FileResource(Path(path))


def discover_sources(
    content_dir: Path,
    base: str,
    pattern: str = "**/*.md",
) -> Tuple[Dict[str, Path], Dict[str, Path]]:
    """Collect markdown sources and ``+assets`` files below ``content_dir``.

    Keys take the form ``<base>/<relative posix path>`` and are sorted so that
    numeric ordering prefixes decide reading order.
    """

    if not content_dir.is_dir():
        raise FileNotFoundError(f"Content directory not found: {content_dir}")

    documents: Dict[str, Path] = {}
    for path in content_dir.glob(pattern):
        if path.is_file():
            documents[f"{base}/{path.relative_to(content_dir).as_posix()}"] = path

    assets: Dict[str, Path] = {}
    for path in content_dir.rglob("*"):
        if not path.is_file():
            continue
        relative = path.relative_to(content_dir)
        if ASSETS_SEGMENT in relative.parts[:-1]:
            assets[f"{base}/{relative.as_posix()}"] = path

    return dict(sorted(documents.items())), dict(sorted(assets.items()))


__all__ = ["FileResource", "discover_sources", "read_file"]
