from __future__ import annotations

import logging
from typing import Any, Mapping

from docindex.ingest.errors import UnknownAssetOwnerError
from docindex.ingest.paths import relative_file, split_asset_path
from docindex.models.document import Document

logger = logging.getLogger(__name__)


def bind_assets(assets: Mapping[str, Any], content: Mapping[str, Document], base: str) -> int:
    """Attach each asset locator to the document owning its ``+assets`` folder.

    Returns the number of assets bound.
    """

    bound = 0
    for key, locator in assets.items():
        split = split_asset_path(relative_file(key, base))
        if split is None:
            raise UnknownAssetOwnerError(key, None)
        slug, name = split

        document = content.get(slug)
        if document is None:
            raise UnknownAssetOwnerError(key, slug)

        if document.assets is None:
            document.assets = {}
        document.assets[name] = locator
        bound += 1
        logger.debug("Bound asset %s to %s", name, slug)
    return bound


__all__ = ["bind_assets"]
