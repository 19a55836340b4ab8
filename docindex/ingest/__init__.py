"""Index building: loading, nesting, asset binding and linking."""

from .assets import bind_assets
from .errors import (
    DuplicateSlugError,
    EmptyDocumentError,
    FrontmatterError,
    IncludeNotFoundError,
    IndexBuildError,
    MissingTitleError,
    UnexpectedKeyError,
    UnknownAssetOwnerError,
)
from .linker import link_documents
from .loader import DocumentLoader, DocumentLoaderConfig
from .pipeline import IndexResult, build_index, create_index
from .sources import FileResource, discover_sources, read_file
from .tree import build_tree

__all__ = [
    "DocumentLoader",
    "DocumentLoaderConfig",
    "IndexResult",
    "build_index",
    "create_index",
    "build_tree",
    "bind_assets",
    "link_documents",
    "FileResource",
    "discover_sources",
    "read_file",
    "IndexBuildError",
    "MissingTitleError",
    "FrontmatterError",
    "IncludeNotFoundError",
    "DuplicateSlugError",
    "UnexpectedKeyError",
    "EmptyDocumentError",
    "UnknownAssetOwnerError",
]
