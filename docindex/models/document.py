from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True, slots=True)
class DocumentLink:
    """Value snapshot of a neighbouring document in reading order."""

    slug: str
    title: str

    def to_dict(self) -> Dict[str, str]:
        return {"slug": self.slug, "title": self.title}


@dataclass(frozen=True, slots=True)
class Section:
    """A level-2 heading extracted from a document body."""

    slug: str
    title: str


@dataclass(slots=True)
class Document:
    """A single page of the content index.

    ``children`` are owned by this document. ``prev`` and ``next`` are plain
    snapshots and never point back into the tree.
    """

    slug: str
    file: str
    metadata: Dict[str, Any]
    body: str
    sections: List[Section] = field(default_factory=list)
    children: List["Document"] = field(default_factory=list)
    prev: Optional[DocumentLink] = None
    next: Optional[DocumentLink] = None
    assets: Optional[Dict[str, Any]] = None

    @property
    def title(self) -> str:
        return str(self.metadata["title"])

    def as_link(self) -> DocumentLink:
        return DocumentLink(slug=self.slug, title=self.title)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-ready snapshot with children reduced to their slugs."""

        return {
            "slug": self.slug,
            "file": self.file,
            "metadata": dict(self.metadata),
            "body": self.body,
            "sections": [{"slug": section.slug, "title": section.title} for section in self.sections],
            "children": [child.slug for child in self.children],
            "prev": self.prev.to_dict() if self.prev else None,
            "next": self.next.to_dict() if self.next else None,
            "assets": (
                {name: str(locator) for name, locator in self.assets.items()}
                if self.assets is not None
                else None
            ),
        }


__all__ = ["Document", "DocumentLink", "Section"]
