from __future__ import annotations

import re
from typing import Any, Dict, Optional, Tuple

import yaml


_FRONTMATTER_PATTERN = re.compile(r"\A---\r?\n(?P<block>.*?)\r?\n---[ \t]*(?:\r?\n|\Z)", re.DOTALL)
_FLAT_LINE_PATTERN = re.compile(r"^(?P<key>[A-Za-z_][\w-]*)[ \t]*:(?:[ \t]+(?P<value>.*?))?[ \t]*$")
_STRUCTURED_VALUE_PREFIXES = ("[", "{", "'", '"', "|", ">", "&", "*", "!")


def _parse_flat(block: str) -> Optional[Dict[str, str]]:
    """Read ``key: value`` lines, splitting each on its first colon.

    Returns ``None`` unless every non-blank line has that shape and no value
    opens a YAML collection, quote or block scalar.
    """

    data: Dict[str, str] = {}
    for line in block.splitlines():
        if not line.strip():
            continue
        match = _FLAT_LINE_PATTERN.match(line)
        if not match:
            return None
        value = match.group("value") or ""
        if value.startswith(_STRUCTURED_VALUE_PREFIXES):
            return None
        data[match.group("key")] = value
    return data


def extract_frontmatter(text: str) -> Tuple[Dict[str, Any], str]:
    """Split a markdown file into its YAML frontmatter mapping and body.

    Scalars are kept as strings (``title: No`` stays ``"No"``). A block of plain
    ``key: value`` lines whose values contain colons, which YAML rejects, is
    read line by line. Text without a leading ``---`` block yields empty
    metadata and the text unchanged. Raises ``ValueError`` when the block is not
    a mapping.
    """

    match = _FRONTMATTER_PATTERN.match(text)
    if not match:
        return {}, text

    block = match.group("block")
    try:
        data = yaml.load(block, Loader=yaml.BaseLoader)
    except yaml.YAMLError as exc:
        data = _parse_flat(block)
        if data is None:
            raise ValueError(str(exc)) from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("frontmatter must contain a mapping at the top level")
    return data, text[match.end() :]


__all__ = ["extract_frontmatter"]
