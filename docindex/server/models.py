from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, Field

from docindex.models.document import Document, DocumentLink


class LinkModel(BaseModel):
    slug: str
    title: str

    @classmethod
    def from_link(cls, link: DocumentLink | None) -> "LinkModel | None":
        if link is None:
            return None
        return cls(slug=link.slug, title=link.title)


class SectionModel(BaseModel):
    slug: str
    title: str


class NavigationNode(BaseModel):
    """One entry of the navigation tree; bodies are left out."""

    slug: str
    title: str
    has_body: bool
    children: List["NavigationNode"] = Field(default_factory=list)

    @classmethod
    def from_document(cls, document: Document) -> "NavigationNode":
        return cls(
            slug=document.slug,
            title=document.title,
            has_body=bool(document.body),
            children=[cls.from_document(child) for child in document.children],
        )


class DocumentResponse(BaseModel):
    slug: str
    file: str
    title: str
    metadata: Dict[str, Any]
    body: str
    sections: List[SectionModel]
    children: List[LinkModel]
    prev: LinkModel | None = None
    next: LinkModel | None = None
    assets: List[str] = Field(default_factory=list)

    @classmethod
    def from_document(cls, document: Document) -> "DocumentResponse":
        return cls(
            slug=document.slug,
            file=document.file,
            title=document.title,
            metadata=document.metadata,
            body=document.body,
            sections=[SectionModel(slug=s.slug, title=s.title) for s in document.sections],
            children=[LinkModel(slug=child.slug, title=child.title) for child in document.children],
            prev=LinkModel.from_link(document.prev),
            next=LinkModel.from_link(document.next),
            assets=sorted(document.assets or {}),
        )


NavigationNode.model_rebuild()


__all__ = ["DocumentResponse", "LinkModel", "NavigationNode", "SectionModel"]
