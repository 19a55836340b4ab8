from pathlib import Path

import pytest

from docindex.ingest.pipeline import build_index
from docindex.ingest.sources import FileResource, discover_sources, read_file


def _write(path: Path, text: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def _content_tree(root: Path) -> Path:
    content = root / "docs"
    _write(content / "01-guide" / "index.md", "---\ntitle: Guide\n---\nWelcome\n")
    _write(content / "01-guide" / "02-start.md", "---\ntitle: Start\n---\n## Setup\n<!-- @include cmd -->\n")
    _write(content / "01-guide" / "_generated.md", "<!-- @include_start cmd -->pip install<!-- @include_end cmd -->")
    _write(content / "01-guide" / "+assets" / "diagram.svg", "<svg/>")
    _write(content / "02-faq.md", "---\ntitle: FAQ\n---\nAnswers\n")
    return content


def test_discover_sources_keys_and_assets(tmp_path):
    content = _content_tree(tmp_path)

    documents, assets = discover_sources(content, "docs")

    assert list(documents) == [
        "docs/01-guide/02-start.md",
        "docs/01-guide/_generated.md",
        "docs/01-guide/index.md",
        "docs/02-faq.md",
    ]
    assert assets == {"docs/01-guide/+assets/diagram.svg": content / "01-guide" / "+assets" / "diagram.svg"}


def test_discover_sources_requires_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        discover_sources(tmp_path / "missing", "docs")


@pytest.mark.asyncio
async def test_file_resource_reads_text(tmp_path):
    path = _write(tmp_path / "a.md", "hello")

    resource = read_file(path)

    assert isinstance(resource, FileResource)
    assert await resource.text() == "hello"


@pytest.mark.asyncio
async def test_build_index_from_directory(tmp_path):
    content = _content_tree(tmp_path)
    documents, assets = discover_sources(content, "docs")

    result = await build_index(documents, assets, "docs", read_file)

    assert [root.slug for root in result.roots] == ["guide", "faq"]
    start = result.documents["guide/start"]
    assert "pip install" in start.body
    assert start.prev.slug == "guide"
    assert start.next.slug == "faq"
    assert result.documents["guide"].assets == {"diagram.svg": content / "01-guide" / "+assets" / "diagram.svg"}
