"""Conversion between tags and JSON-compatible Python builtins."""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any

from tagdown.data import TagData, is_text

if TYPE_CHECKING:
    from tagdown.data import TagShape

# Tag format: {"name": ..., "is_quoted": ..., "is_attribute": ...,
#              "attributes": [...], "is_literal": ..., "contents": [...],
#              "layout": ...}
# Text contents are plain strings; "layout" is omitted when unset.
_NAME_KEY = "name"
_LAYOUT_KEY = "layout"
_FLAG_KEYS = ("is_quoted", "is_attribute", "is_literal")


def to_builtins(tag: TagShape) -> dict[str, Any]:
    """Convert a tag tree to JSON-compatible Python builtins.

    Args:
        tag: Any tag-shaped value (TagData, Tag, or ReadonlyTag)

    Returns:
        Nested dicts, lists, strings and booleans

    """
    result: dict[str, Any] = {
        _NAME_KEY: tag.name,
        "is_quoted": tag.is_quoted,
        "is_attribute": tag.is_attribute,
        "attributes": [to_builtins(attr) for attr in tag.attributes],
        "is_literal": tag.is_literal,
        "contents": [content_to_builtins(content) for content in tag.contents],
    }
    if tag.layout is not None:
        result[_LAYOUT_KEY] = copy.deepcopy(tag.layout)
    return result


def content_to_builtins(content: str | TagShape) -> str | dict[str, Any]:
    """Convert a single content item to builtins."""
    return content if is_text(content) else to_builtins(content)


def from_builtins(data: dict[str, Any]) -> TagData:
    """Rebuild a tag from the output of to_builtins.

    Args:
        data: Dict with at least a 'name' field

    Returns:
        The reconstructed tag

    Raises:
        KeyError: If the required 'name' field is missing
        ValueError: If data or one of its entries has the wrong shape

    """
    if not isinstance(data, dict):
        msg = f"Expected a dict describing a tag, got {type(data).__name__}"
        raise ValueError(msg)
    if _NAME_KEY not in data:
        msg = f"Missing required '{_NAME_KEY}' field"
        raise KeyError(msg)
    name = data[_NAME_KEY]
    if not isinstance(name, str):
        msg = f"Tag name must be a string, got {type(name).__name__}"
        raise ValueError(msg)

    flags = {key: bool(data.get(key, False)) for key in _FLAG_KEYS}
    return TagData(
        name=name,
        attributes=[from_builtins(attr) for attr in _list_field(data, "attributes")],
        contents=[_content_from_builtins(item) for item in _list_field(data, "contents")],
        layout=copy.deepcopy(data.get(_LAYOUT_KEY)),
        **flags,
    )


def _list_field(data: dict[str, Any], key: str) -> list[Any]:
    value = data.get(key, [])
    if not isinstance(value, list):
        msg = f"Field '{key}' must be a list, got {type(value).__name__}"
        raise ValueError(msg)
    return value


def _content_from_builtins(item: Any) -> str | TagData:
    if isinstance(item, str):
        return item
    if isinstance(item, dict):
        return from_builtins(item)
    msg = f"Content entries must be strings or dicts, got {type(item).__name__}"
    raise ValueError(msg)
