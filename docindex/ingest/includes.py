from __future__ import annotations

import re


_INCLUDE_PATTERN = re.compile(r"<!-- @include (.+?) -->")


class MissingInclude(LookupError):
    """Raised by ``splice_includes`` with the name of the unresolved include."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name


def find_include(generated: str, name: str) -> str:
    """Return the text between the start and end markers for ``name``.

    An absent marker and an empty region both yield an empty string.
    """

    start_marker = f"<!-- @include_start {name} -->"
    end_marker = f"<!-- @include_end {name} -->"

    start = generated.find(start_marker)
    if start == -1:
        return ""
    start += len(start_marker)
    end = generated.find(end_marker, start)
    if end == -1:
        return ""
    return generated[start:end]


def splice_includes(body: str, generated: str) -> str:
    """Replace every ``@include`` marker in ``body`` with its generated region."""

    def _replace(match: re.Match[str]) -> str:
        name = match.group(1)
        snippet = find_include(generated, name)
        if not snippet:
            raise MissingInclude(name)
        return snippet

    return _INCLUDE_PATTERN.sub(_replace, body)


__all__ = ["MissingInclude", "find_include", "splice_includes"]
