from __future__ import annotations

import inspect
import re
from typing import Any, Callable


_SLUG_PATTERN = re.compile(r"[^a-zA-Z0-9\s-]")
_SEPARATOR_PATTERN = re.compile(r"[\s-]+")


def slugify(text: str, fallback: str = "section") -> str:
    """Create a URL-friendly slug from arbitrary text."""

    slug = _SLUG_PATTERN.sub("", text).strip().lower()
    slug = _SEPARATOR_PATTERN.sub("-", slug)
    return slug or fallback


async def read_text(read: Callable[[Any], Any], locator: Any) -> str:
    """Resolve ``read(locator).text()`` whether ``text`` is a coroutine or not."""

    result = read(locator).text()
    if inspect.isawaitable(result):
        result = await result
    return result


__all__ = ["read_text", "slugify"]
