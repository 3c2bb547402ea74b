"""Read capability shared by mutable tags and their frozen mirrors."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator, Sequence
from datetime import datetime
from typing import Any, Self

from tagdown.codecs import to_builtins
from tagdown.config import get_config
from tagdown.data import is_text_contents
from tagdown.formats.json import to_json
from tagdown.syntax import print_tag
from tagdown.utils import parse_iso_string, parse_number

type Path = str | Sequence[str]
type TextVisitor = Callable[[str, int, Sequence[Any]], object]
type TagVisitor[D] = Callable[[D, int, Sequence[Any]], object]


def split_path(path: Path) -> list[str]:
    """Turn a path argument into a list of name segments.

    A string is split on the configured separator; any other sequence of
    names is copied as-is, so names containing the separator stay reachable.
    """
    if isinstance(path, str):
        return path.split(get_config().path_separator)
    return list(path)


def _live_indexes(items: Sequence[Any]) -> Iterator[int]:
    """Yield indexes into items, re-checking its length after each step."""
    i = 0
    while i < len(items):
        yield i
        i += 1


class BaseTag(ABC):
    """Operations common to Tag and ReadonlyTag.

    Subclasses provide the fields of a tag and the path lookups; everything
    that only reads those fields lives here.
    """

    name: str
    is_quoted: bool
    is_attribute: bool
    is_literal: bool
    layout: Any
    attributes: Sequence[Any]
    contents: Sequence[Any]

    @abstractmethod
    def attr(self, path: Path) -> Self | None:
        """Look up the attribute at path."""

    @abstractmethod
    def attrs(self, path: Path) -> list[Self]:
        """Look up every attribute matching path."""

    @abstractmethod
    def tag(self, path: Path) -> Self | None:
        """Look up the content tag at path."""

    @abstractmethod
    def tags(self, path: Path) -> list[Self]:
        """Look up every content tag matching path."""

    @abstractmethod
    def clone(self) -> Self:
        """Deep copy this tag."""

    # -------------------------------------------------------------------------
    # Text and value coercions
    # -------------------------------------------------------------------------

    @property
    def text(self) -> str:
        """The first content item if it is text, else an empty string."""
        contents = self.contents
        return contents[0] if is_text_contents(contents) else ""

    def get_texts(self, soft_length: float) -> str:
        """Collect text in document order until soft_length is reached.

        The result is not cut, so it may be longer than soft_length.
        """
        text = ""
        for content in self.contents:
            text += content if isinstance(content, str) else content.get_texts(soft_length)
            if len(text) >= soft_length:
                break
        return text

    def truncate(self, length: int) -> str:
        """Shorten the text of this tag to at most length characters."""
        if length <= 0:
            return ""
        text = self.get_texts(length)
        if not text:
            return ""
        ellipsis = get_config().ellipsis[:length]
        return text[: length - len(ellipsis)] + ellipsis

    def to_boolean(self) -> bool:
        return self.text in get_config().truthy_tokens

    def to_number(self) -> float:
        return parse_number(self.text)

    def to_date(self) -> datetime:
        """Parse the text as an ISO date, falling back to the current time."""
        date = parse_iso_string(self.text)
        return date if date is not None else datetime.now().astimezone()

    def to_builtins(self) -> dict[str, Any]:
        return to_builtins(self)

    def to_json(self, *, indent: int | None = 2) -> str:
        return to_json(self, indent=indent)

    def __str__(self) -> str:
        return print_tag(self)

    # -------------------------------------------------------------------------
    # Traversal
    #
    # All variants are depth-first and pre-order, visit attributes before
    # contents, and re-read an item after its callback so a callback may
    # replace it in its owning list.
    # -------------------------------------------------------------------------

    def traverse(self, for_text: TextVisitor, for_tag: TagVisitor[Self]) -> Self:
        """Visit every text run and every tag, attributes included."""
        attributes = self.attributes
        for i in _live_indexes(attributes):
            for_tag(attributes[i], i, attributes)
            attributes[i].traverse(for_text, for_tag)
        contents = self.contents
        for i in _live_indexes(contents):
            content = contents[i]
            if isinstance(content, str):
                for_text(content, i, contents)
            else:
                for_tag(content, i, contents)
            content = contents[i]
            if not isinstance(content, str):
                content.traverse(for_text, for_tag)
        return self

    def traverse_text(self, for_text: TextVisitor) -> Self:
        """Visit every text run, including those inside attributes."""
        for attr in self.attributes:
            attr.traverse_text(for_text)
        contents = self.contents
        for i in _live_indexes(contents):
            content = contents[i]
            if isinstance(content, str):
                for_text(content, i, contents)
                content = contents[i]
                if not isinstance(content, str):
                    content.traverse_text(for_text)
            else:
                content.traverse_text(for_text)
        return self

    def traverse_tag(self, for_tag: TagVisitor[Self]) -> Self:
        """Visit every tag, attributes included."""
        attributes = self.attributes
        for i in _live_indexes(attributes):
            for_tag(attributes[i], i, attributes)
            attributes[i].traverse_tag(for_tag)
        contents = self.contents
        for i in _live_indexes(contents):
            content = contents[i]
            if not isinstance(content, str):
                for_tag(content, i, contents)
                content = contents[i]
                if not isinstance(content, str):
                    content.traverse_tag(for_tag)
        return self

    def traverse_attribute(self, for_attribute: TagVisitor[Self]) -> Self:
        """Visit every attribute, whether listed or inline, at any depth."""
        attributes = self.attributes
        for i in _live_indexes(attributes):
            for_attribute(attributes[i], i, attributes)
            attributes[i].traverse_attribute(for_attribute)
        contents = self.contents
        for i in _live_indexes(contents):
            content = contents[i]
            if not isinstance(content, str):
                if content.is_attribute:
                    for_attribute(content, i, contents)
                content = contents[i]
                if not isinstance(content, str):
                    content.traverse_attribute(for_attribute)
        return self

    def traverse_content(self, for_text: TextVisitor, for_tag: TagVisitor[Self]) -> Self:
        """Visit text runs and tags found in content lists only.

        Attributes are not reported themselves but are searched for
        nested contents.
        """
        for attr in self.attributes:
            attr.traverse_content(for_text, for_tag)
        contents = self.contents
        for i in _live_indexes(contents):
            content = contents[i]
            if isinstance(content, str):
                for_text(content, i, contents)
            else:
                for_tag(content, i, contents)
            content = contents[i]
            if not isinstance(content, str):
                content.traverse_content(for_text, for_tag)
        return self

    def traverse_text_content(self, for_text: TextVisitor) -> Self:
        for attr in self.attributes:
            attr.traverse_text_content(for_text)
        contents = self.contents
        for i in _live_indexes(contents):
            content = contents[i]
            if isinstance(content, str):
                for_text(content, i, contents)
                content = contents[i]
                if not isinstance(content, str):
                    content.traverse_text_content(for_text)
            else:
                content.traverse_text_content(for_text)
        return self

    def traverse_tag_content(self, for_tag: TagVisitor[Self]) -> Self:
        for attr in self.attributes:
            attr.traverse_tag_content(for_tag)
        contents = self.contents
        for i in _live_indexes(contents):
            content = contents[i]
            if not isinstance(content, str):
                for_tag(content, i, contents)
                content = contents[i]
                if not isinstance(content, str):
                    content.traverse_tag_content(for_tag)
        return self


def walk_path[D: BaseTag](
    start: D,
    names: Sequence[str],
    lookup: Callable[[D, str], D | None],
) -> D | None:
    """Follow names one level at a time, or return None at the first miss."""
    tag = start
    for name in names:
        found = lookup(tag, name)
        if found is None:
            return None
        tag = found
    return tag


def fan_out[D: BaseTag](
    start: D,
    names: Sequence[str],
    lookup_all: Callable[[D, str], list[D]],
) -> list[D]:
    """Expand names level by level, collecting every match at each step."""
    if not names:
        return []
    tags = [start]
    for name in names:
        tags = [found for tag in tags for found in lookup_all(tag, name)]
    return tags

