"""Tag trees as JSON text, layered on the builtins codec."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from tagdown.codecs import from_builtins, to_builtins

if TYPE_CHECKING:
    from tagdown.data import TagData, TagShape


def to_json(tag: TagShape, *, indent: int | None = 2) -> str:
    """Write a tag and its descendants as JSON.

    Non-ASCII names and text are kept as-is rather than escaped. Pass
    ``indent=None`` for single-line output.
    """
    return json.dumps(to_builtins(tag), indent=indent, ensure_ascii=False)


def from_json(s: str) -> TagData:
    """Read a tag written by to_json.

    Wrap the result in Tag() to get an editable tree.

    Raises:
        ValueError: If the text is not a JSON object describing a tag
        KeyError: If a tag object has no 'name'

    """
    data = json.loads(s)
    if not isinstance(data, dict):
        msg = f"Expected JSON object with 'name' field, got {type(data).__name__}"
        raise ValueError(msg)
    return from_builtins(data)
