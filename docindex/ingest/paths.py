"""Key and slug conventions shared with the content layout."""

from __future__ import annotations

import re
from typing import Optional, Tuple

from docindex.ingest.errors import UnexpectedKeyError

ASSETS_SEGMENT = "+assets"
GENERATED_FILENAME = "_generated.md"

_ORDERING_PREFIX_PATTERN = re.compile(r"(^|/)[\d-]+")
_MARKDOWN_SUFFIX_PATTERN = re.compile(r"(/index)?\.md$")


def relative_file(key: str, base: str) -> str:
    """Strip ``<base>/`` from a collection key, which must start with it."""

    if not key.startswith(f"{base}/"):
        raise UnexpectedKeyError(key, base)
    return key[len(base) + 1 :]


def strip_ordering_prefixes(path: str) -> str:
    return _ORDERING_PREFIX_PATTERN.sub(r"\1", path)


def slug_from_file(file: str) -> str:
    """``01-guide/02-start.md`` -> ``guide/start``, ``01-guide/index.md`` -> ``guide``."""

    return _MARKDOWN_SUFFIX_PATTERN.sub("", strip_ordering_prefixes(file))


def is_indexable_key(key: str) -> bool:
    return ASSETS_SEGMENT not in key and not key.endswith(f"/{GENERATED_FILENAME}")


def generated_sibling_key(key: str) -> str:
    """Key of the generated include file living in the same folder as ``key``."""

    return f"{key[: key.rfind('/')]}/{GENERATED_FILENAME}"


def parent_slug(slug: str) -> str:
    parts = slug.split("/")
    parts.pop()
    return "/".join(parts)


def split_asset_path(path: str) -> Optional[Tuple[str, str]]:
    """Split ``guide/+assets/img/a.png`` into ``("guide", "img/a.png")``.

    Returns ``None`` when the path has no ``+assets`` segment.
    """

    marker = f"/{ASSETS_SEGMENT}/"
    index = f"/{path}".find(marker)
    if index == -1:
        return None
    owner = path[: max(index - 1, 0)]
    name = path[index + len(ASSETS_SEGMENT) + 1 :]
    return strip_ordering_prefixes(owner), name


__all__ = [
    "ASSETS_SEGMENT",
    "GENERATED_FILENAME",
    "generated_sibling_key",
    "is_indexable_key",
    "parent_slug",
    "relative_file",
    "slug_from_file",
    "split_asset_path",
    "strip_ordering_prefixes",
]
