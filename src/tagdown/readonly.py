"""Deep read-only snapshots of tags."""

from __future__ import annotations

import copy
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any, overload

from tagdown.base import BaseTag, Path, fan_out, split_path, walk_path
from tagdown.codecs import content_to_builtins, to_builtins
from tagdown.data import TagShape, clone_tag_data, is_text
from tagdown.tag import Tag


@dataclass(frozen=True, repr=False)
class ReadonlyTag(BaseTag):
    """An immutable copy of a tag and everything below it.

    Built eagerly, so it shares nothing with the tag it came from and can be
    read from several places without coordination. Lookups that miss return
    None instead of a missing tag.
    """

    name: str
    is_quoted: bool
    is_attribute: bool
    attributes: ReadonlyAttributes
    is_literal: bool
    contents: ReadonlyContents
    layout: Any = field(default=None, hash=False)

    @classmethod
    def from_tag(cls, tag: TagShape) -> ReadonlyTag:
        """Freeze any tag-shaped value, recursively."""
        contents = ReadonlyContents(tag.contents)
        return cls(
            name=tag.name,
            is_quoted=tag.is_quoted,
            is_attribute=tag.is_attribute,
            attributes=ReadonlyAttributes(tag.attributes, contents),
            is_literal=tag.is_literal,
            contents=contents,
            layout=copy.deepcopy(tag.layout),
        )

    def attr(self, path: Path) -> ReadonlyTag | None:
        return walk_path(self, split_path(path), lambda tag, name: tag.attributes.get(name))

    def attrs(self, path: Path) -> list[ReadonlyTag]:
        return fan_out(self, split_path(path), lambda tag, name: tag.attributes.get_all(name))

    def tag(self, path: Path) -> ReadonlyTag | None:
        return walk_path(self, split_path(path), lambda tag, name: tag.contents.get(name))

    def tags(self, path: Path) -> list[ReadonlyTag]:
        return fan_out(self, split_path(path), lambda tag, name: tag.contents.get_all(name))

    def unfreeze(self) -> Tag:
        """Build an independent mutable copy."""
        return Tag(clone_tag_data(self))

    def clone(self) -> ReadonlyTag:
        return ReadonlyTag.from_tag(clone_tag_data(self))

    def __repr__(self) -> str:
        return f"ReadonlyTag({str(self)!r})"


class ReadonlyContents(Sequence[str | ReadonlyTag]):
    """Frozen text runs and tags of a ReadonlyTag."""

    def __init__(self, contents: Sequence[str | TagShape]) -> None:
        self._items: tuple[str | ReadonlyTag, ...] = tuple(
            content if is_text(content) else ReadonlyTag.from_tag(content)
            for content in contents
        )

    @overload
    def __getitem__(self, index: int) -> str | ReadonlyTag: ...
    @overload
    def __getitem__(self, index: slice) -> tuple[str | ReadonlyTag, ...]: ...

    def __getitem__(self, index: int | slice) -> str | ReadonlyTag | tuple[str | ReadonlyTag, ...]:
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str | ReadonlyTag]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReadonlyContents):
            return NotImplemented
        return self._items == other._items

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return f"ReadonlyContents({list(self._items)!r})"

    def get(self, name: str) -> ReadonlyTag | None:
        for content in self._items:
            if isinstance(content, ReadonlyTag) and content.name == name:
                return content
        return None

    def get_all(self, name: str) -> list[ReadonlyTag]:
        return [
            content
            for content in self._items
            if isinstance(content, ReadonlyTag) and content.name == name
        ]

    def to_builtins(self) -> list[Any]:
        return [content_to_builtins(content) for content in self._items]


class ReadonlyAttributes(Sequence[ReadonlyTag]):
    """Frozen attributes of a ReadonlyTag, with inline attributes in lookups."""

    def __init__(self, attributes: Sequence[TagShape], contents: ReadonlyContents) -> None:
        self._items: tuple[ReadonlyTag, ...] = tuple(
            ReadonlyTag.from_tag(attr) for attr in attributes
        )
        self._contents = contents

    @overload
    def __getitem__(self, index: int) -> ReadonlyTag: ...
    @overload
    def __getitem__(self, index: slice) -> tuple[ReadonlyTag, ...]: ...

    def __getitem__(self, index: int | slice) -> ReadonlyTag | tuple[ReadonlyTag, ...]:
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[ReadonlyTag]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReadonlyAttributes):
            return NotImplemented
        return self._items == other._items

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return f"ReadonlyAttributes({list(self._items)!r})"

    def get(self, name: str) -> ReadonlyTag | None:
        for attr in self._items:
            if attr.name == name:
                return attr
        for content in self._contents:
            if isinstance(content, ReadonlyTag) and content.is_attribute and content.name == name:
                return content
        return None

    def get_all(self, name: str) -> list[ReadonlyTag]:
        attrs = [attr for attr in self._items if attr.name == name]
        attrs.extend(
            content
            for content in self._contents
            if isinstance(content, ReadonlyTag) and content.is_attribute and content.name == name
        )
        return attrs

    def to_builtins(self) -> list[dict[str, Any]]:
        return [to_builtins(attr) for attr in self._items]
