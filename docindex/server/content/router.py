from __future__ import annotations

from pathlib import Path
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse

from docindex.ingest.errors import IndexBuildError
from docindex.ingest.pipeline import IndexResult
from docindex.server.content.service import ContentService
from docindex.server.models import DocumentResponse, NavigationNode
from docindex.server.settings import Settings, get_settings


router = APIRouter(prefix="/api/content", tags=["content"])


def _resolve_service(settings: Settings) -> ContentService:
    global _CONTENT_SERVICE
    if _CONTENT_SERVICE is None:
        _CONTENT_SERVICE = ContentService(settings)
    return _CONTENT_SERVICE


def get_content_service(settings: Settings = Depends(get_settings)) -> ContentService:
    return _resolve_service(settings)


_CONTENT_SERVICE: ContentService | None = None


async def _load_index(service: ContentService) -> IndexResult:
    try:
        return await service.get_index()
    except IndexBuildError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@router.get("")
async def get_navigation(service: ContentService = Depends(get_content_service)) -> List[NavigationNode]:
    index = await _load_index(service)
    return [NavigationNode.from_document(root) for root in index.roots]


@router.get("/{slug:path}/+assets/{name:path}")
async def get_asset(slug: str, name: str, service: ContentService = Depends(get_content_service)):
    index = await _load_index(service)
    document = index.documents.get(slug)
    if document is None or not document.assets or name not in document.assets:
        raise HTTPException(status_code=404, detail="Asset not found")
    return FileResponse(Path(document.assets[name]))


@router.get("/{slug:path}")
async def get_document(slug: str, service: ContentService = Depends(get_content_service)) -> DocumentResponse:
    index = await _load_index(service)
    document = index.documents.get(slug)
    if document is None:
        raise HTTPException(status_code=404, detail="Document not found")
    return DocumentResponse.from_document(document)


__all__ = ["router", "get_content_service"]
