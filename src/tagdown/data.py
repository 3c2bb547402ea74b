"""Plain tag-shaped values shared by the syntax, codecs, and tag classes."""

from __future__ import annotations

import copy
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol, TypeGuard, runtime_checkable


@runtime_checkable
class TagShape(Protocol):
    """Anything with the fields of a tag.

    Satisfied by TagData, Tag, and ReadonlyTag, so the printer and the
    codecs work on all three.
    """

    name: str
    is_quoted: bool
    is_attribute: bool
    is_literal: bool
    layout: Any

    @property
    def attributes(self) -> Sequence[TagShape]: ...

    @property
    def contents(self) -> Sequence[str | TagShape]: ...


@dataclass
class TagData:
    """A bare tag value with no behaviour, as produced by the parser."""

    name: str = "unnamed"
    is_quoted: bool = False
    is_attribute: bool = False
    attributes: list[TagData] = field(default_factory=list)
    is_literal: bool = False
    contents: list[str | TagData] = field(default_factory=list)
    layout: Any = None


def is_text(content: object) -> TypeGuard[str]:
    """Check if a content item is a text run."""
    return isinstance(content, str)


def is_tag_content(content: object) -> TypeGuard[TagShape]:
    """Check if a content item is a tag."""
    return not isinstance(content, str) and isinstance(content, TagShape)


def is_attribute_content(content: object) -> TypeGuard[TagShape]:
    """Check if a content item is a tag flagged as an attribute."""
    return is_tag_content(content) and content.is_attribute


def is_text_contents(contents: Sequence[object]) -> bool:
    """Check if contents start with a text run."""
    return bool(contents) and is_text(contents[0])


def clone_tag_data(tag: TagShape) -> TagData:
    """Deep copy any tag-shaped value into independent TagData."""
    return TagData(
        name=tag.name,
        is_quoted=tag.is_quoted,
        is_attribute=tag.is_attribute,
        attributes=[clone_tag_data(attr) for attr in tag.attributes],
        is_literal=tag.is_literal,
        contents=[
            content if is_text(content) else clone_tag_data(content)
            for content in tag.contents
        ],
        layout=copy.deepcopy(tag.layout),
    )
