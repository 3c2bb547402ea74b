"""Mutable tags and their attribute and content lists.

A Tag owns an Attributes list and a Contents list. Attributes may also be
stored inline in the contents as tags flagged ``is_attribute``; the
Attributes list looks in both places, so callers never see the split.

Looking up a path that does not exist returns a *missing* tag: a normal,
detached Tag that remembers where it was looked up. The first write to it
attaches it (and any absent ancestors) to the tree::

    root.tag("head.title").set_text("Hello")
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable, Iterator, Mapping, MutableSequence, Sequence
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import TYPE_CHECKING, Any, Self, overload

from tagdown.base import BaseTag, Path, fan_out, split_path, walk_path
from tagdown.codecs import content_to_builtins
from tagdown.config import get_config
from tagdown.data import TagShape, clone_tag_data
from tagdown.syntax import parse_tag
from tagdown.utils import format_number, is_iterable_input, to_iso_string

if TYPE_CHECKING:
    from tagdown.readonly import ReadonlyTag

logger = logging.getLogger(__name__)

# Input types accepted wherever a tag, a list of tags, attributes, or
# contents are expected. Strings are parsed as tagdown text when a tag is
# expected and kept as text runs when a content item is expected.
type TagInput = str | Mapping[str, Any] | TagShape
type TagLike = Tag | TagInput
type TagsLike = TagLike | Iterable[TagLike]
type TagValue = bool | int | float | str | date | datetime | BaseTag | Mapping[str, Any] | TagShape
type AttributesInput = TagLike | Iterable[TagLike] | Mapping[str, TagValue | None]
type ContentLike = str | TagLike
type ContentsInput = ContentLike | Iterable[ContentLike]

_FIELDS = frozenset(
    {"name", "is_quoted", "is_attribute", "attributes", "is_literal", "contents", "layout"},
)


class _Unset:
    def __repr__(self) -> str:
        return "<unset>"


_UNSET: Any = _Unset()


@dataclass(frozen=True)
class _MissingInput:
    """Where a missing tag was looked up, so it can attach itself later."""

    parent: Tag
    path: tuple[str, ...]
    is_attribute: bool


class Tag(BaseTag):
    """A mutable tagdown tag.

    Construct from tagdown text, from a mapping of fields, or from any
    tag-shaped value::

        Tag("p[class{intro}]{Hello}")
        Tag({"name": "p", "contents": ["Hello"]})

    Building from another Tag reuses its child tags; use clone() for an
    independent copy.
    """

    name: str
    is_quoted: bool
    is_attribute: bool
    attributes: Attributes
    is_literal: bool
    contents: Contents
    layout: Any

    def __init__(self, tag_input: TagInput | None = None) -> None:
        self._missing: _MissingInput | None = None
        if isinstance(tag_input, str):
            tag_input = parse_tag(tag_input)
        self.set_tag(tag_input)

    @classmethod
    def _for_missing(cls, parent: Tag, path: Sequence[str], *, is_attribute: bool) -> Tag:
        tag = cls({"name": path[-1]})
        tag._missing = _MissingInput(parent, tuple(path[:-1]), is_attribute)
        return tag

    @property
    def is_missing(self) -> bool:
        """True while this tag came from a failed lookup and is not attached."""
        return self._missing is not None

    def set_tag(self, tag_input: Mapping[str, Any] | TagShape | None = None) -> None:
        """Replace every field of this tag."""
        fields = _tag_fields(tag_input)
        contents = Contents(fields.get("contents", ()))
        self.is_quoted = bool(fields.get("is_quoted", False))
        self.is_attribute = bool(fields.get("is_attribute", False))
        self.name = fields.get("name", get_config().default_name)
        self.attributes = Attributes(fields.get("attributes", ()), contents)
        self.is_literal = bool(fields.get("is_literal", False))
        self.contents = contents
        self.layout = copy.deepcopy(fields.get("layout"))

    def assign(self, tag_input: Mapping[str, Any]) -> Self:
        """Overwrite only the fields present in tag_input."""
        fields = _tag_fields(tag_input)
        if "contents" in fields:
            self.set_contents(fields.pop("contents"))
        if "attributes" in fields:
            self.set_attributes(fields.pop("attributes"))
        for key, value in fields.items():
            setattr(self, key, copy.deepcopy(value) if key == "layout" else value)
        return self

    def set_attributes(self, attributes_input: AttributesInput) -> Self:
        self._materialize()
        self.attributes[:] = _normalize_attributes_input(attributes_input)
        return self

    def set_text(self, text: str) -> Self:
        self._materialize()
        self.contents[:] = [text]
        return self

    def set_contents(self, contents_input: ContentsInput) -> Self:
        self._materialize()
        self.contents[:] = _normalize_contents_input(contents_input)
        return self

    # -------------------------------------------------------------------------
    # Path addressing
    # -------------------------------------------------------------------------

    @overload
    def attr(self, path: Path) -> Tag: ...
    @overload
    def attr(self, path: TagsLike) -> None: ...
    @overload
    def attr(self, path: Path, tags: TagsLike | None) -> None: ...

    def attr(self, path: Path | TagsLike, tags: TagsLike | None = _UNSET) -> Tag | None:
        """Look up, assign, or delete attributes along a path.

        - ``attr(path)`` returns the attribute at path, or a missing tag
          that attaches itself on first write. An empty path is this tag.
        - ``attr(path, tags)`` reconciles tags into the attributes of the
          tag at path, creating absent tags on the way.
        - ``attr(tags)`` reconciles tags into this tag's attributes.
        - ``attr(path, None)`` deletes the attributes named by the last
          segment; nothing happens if the path does not exist.
        """
        if tags is _UNSET and not _is_path(path):
            path, tags = [], path
        names = split_path(path)
        if tags is None:
            self._delete_at(names, is_attribute=True)
            return None
        if tags is not _UNSET:
            self._assign_at(names, normalize_tags(tags), is_attribute=True)
            return None
        return self._lookup(names, is_attribute=True)

    def attrs(self, path: Path, tags: None = _UNSET) -> list[Tag]:
        """Return every attribute matching path, expanding at each segment.

        ``attrs(path, None)`` deletes the last segment under every match of
        the rest of the path. An empty path yields no tags.
        """
        names = split_path(path)
        if tags is None:
            self._delete_all_at(names, is_attribute=True)
            return []
        _reject_tags("attrs", tags)
        return fan_out(self, names, lambda tag, name: tag.attributes.get_all(name))

    @overload
    def tag(self, path: Path) -> Tag: ...
    @overload
    def tag(self, path: TagsLike) -> None: ...
    @overload
    def tag(self, path: Path, tags: TagsLike | None) -> None: ...

    def tag(self, path: Path | TagsLike, tags: TagsLike | None = _UNSET) -> Tag | None:
        """Look up, assign, or delete content tags along a path.

        Same forms as attr(), navigating contents instead of attributes.
        """
        if tags is _UNSET and not _is_path(path):
            path, tags = [], path
        names = split_path(path)
        if tags is None:
            self._delete_at(names, is_attribute=False)
            return None
        if tags is not _UNSET:
            self._assign_at(names, normalize_tags(tags), is_attribute=False)
            return None
        return self._lookup(names, is_attribute=False)

    def tags(self, path: Path, tags: None = _UNSET) -> list[Tag]:
        """Return every content tag matching path, expanding at each segment."""
        names = split_path(path)
        if tags is None:
            self._delete_all_at(names, is_attribute=False)
            return []
        _reject_tags("tags", tags)
        return fan_out(self, names, lambda tag, name: tag.contents.get_all(name))

    def _lookup(self, names: list[str], *, is_attribute: bool) -> Tag:
        if not names:
            return self
        found = walk_path(self, names, _getter(is_attribute=is_attribute))
        if found is None:
            return Tag._for_missing(self, names, is_attribute=is_attribute)
        return found

    def _assign_at(self, names: list[str], tags: list[Tag], *, is_attribute: bool) -> None:
        if not tags:
            return
        self._materialize()
        target = _owned_list(self, is_attribute=is_attribute)
        for i, name in enumerate(names):
            found = target.get(name)
            if found is None:
                outermost, innermost = _build_chain(names[i:], is_attribute=is_attribute)
                target.set(outermost)
                target = _owned_list(innermost, is_attribute=is_attribute)
                break
            target = _owned_list(found, is_attribute=is_attribute)
        target.set(tags)

    def _delete_at(self, names: list[str], *, is_attribute: bool) -> None:
        if not names:
            return
        *prefix, name = names
        parent = self._lookup(prefix, is_attribute=is_attribute)
        if parent.is_missing:
            return
        _owned_list(parent, is_attribute=is_attribute).delete_all(name)

    def _delete_all_at(self, names: list[str], *, is_attribute: bool) -> None:
        if not names:
            return
        *prefix, name = names
        getter = _all_getter(is_attribute=is_attribute)
        parents = fan_out(self, prefix, getter) if prefix else [self]
        for parent in parents:
            _owned_list(parent, is_attribute=is_attribute).delete_all(name)

    def _materialize(self) -> None:
        """Attach a missing tag to the tree it was looked up in."""
        if self._missing is None:
            return
        missing, self._missing = self._missing, None
        logger.debug(
            "Attaching missing %s %r under %r at %s",
            "attribute" if missing.is_attribute else "tag",
            self.name,
            missing.parent.name,
            list(missing.path),
        )
        if missing.is_attribute:
            missing.parent.attr(list(missing.path), [self])
        else:
            missing.parent.tag(list(missing.path), [self])

    # -------------------------------------------------------------------------
    # Value assignment
    # -------------------------------------------------------------------------

    def from_value(self, value: TagValue) -> Self:
        """Store a value in this tag.

        Booleans, numbers, strings and dates become text; another tag
        contributes only its text; any other tag input replaces the
        contents with a single nested tag.
        """
        self._materialize()
        match value:
            case bool():
                self.from_boolean(value)
            case int() | float():
                self.from_number(value)
            case str():
                self.set_text(value)
            case datetime():
                self.from_date(value)
            case date():
                self.from_date(datetime.combine(value, time()))
            case BaseTag():
                self.set_text(value.text)
            case _:
                self.set_contents(Tag(value))
        return self

    def from_literal(self, literal: str) -> Self:
        self._materialize()
        self.set_text(literal)
        self.is_literal = True
        return self

    def from_boolean(self, boolean: bool) -> Self:
        self._materialize()
        self.set_text("true" if boolean else "false")
        return self

    def from_number(self, number: float) -> Self:
        self._materialize()
        self.set_text(format_number(number))
        return self

    def from_date(self, value: datetime) -> Self:
        self._materialize()
        self.set_text(to_iso_string(value))
        return self

    # -------------------------------------------------------------------------
    # Copies
    # -------------------------------------------------------------------------

    def freeze(self) -> ReadonlyTag:
        """Build a deep read-only snapshot of this tag."""
        from tagdown.readonly import ReadonlyTag

        return ReadonlyTag.from_tag(self)

    def clone(self) -> Tag:
        return Tag(clone_tag_data(self))

    def __repr__(self) -> str:
        state = ", missing" if self.is_missing else ""
        return f"Tag({str(self)!r}{state})"


def _tag_fields(tag_input: Mapping[str, Any] | TagShape | None) -> dict[str, Any]:
    """Read the fields of a tag input into a plain dict."""
    if tag_input is None:
        return {}
    if isinstance(tag_input, Mapping):
        unknown = set(tag_input) - _FIELDS
        if unknown:
            msg = f"Unknown tag fields: {sorted(unknown)}. Expected some of {sorted(_FIELDS)}"
            raise TypeError(msg)
        return dict(tag_input)
    if isinstance(tag_input, TagShape):
        return {
            "name": tag_input.name,
            "is_quoted": tag_input.is_quoted,
            "is_attribute": tag_input.is_attribute,
            "attributes": list(tag_input.attributes),
            "is_literal": tag_input.is_literal,
            "contents": list(tag_input.contents),
            "layout": tag_input.layout,
        }
    msg = f"Cannot build a tag from {type(tag_input).__name__}"
    raise TypeError(msg)


def _is_path(arg: object) -> bool:
    if isinstance(arg, str):
        return True
    return isinstance(arg, Sequence) and all(isinstance(name, str) for name in arg)


def _reject_tags(method: str, tags: object) -> None:
    if tags is not _UNSET:
        msg = f"{method}() only accepts None as its second argument, to delete"
        raise TypeError(msg)


def _owned_list(tag: Tag, *, is_attribute: bool) -> Attributes | Contents:
    return tag.attributes if is_attribute else tag.contents


def _getter(*, is_attribute: bool) -> Any:
    if is_attribute:
        return lambda tag, name: tag.attributes.get(name)
    return lambda tag, name: tag.contents.get(name)


def _all_getter(*, is_attribute: bool) -> Any:
    if is_attribute:
        return lambda tag, name: tag.attributes.get_all(name)
    return lambda tag, name: tag.contents.get_all(name)


def _build_chain(names: Sequence[str], *, is_attribute: bool) -> tuple[Tag, Tag]:
    """Create singly nested tags for names, returning (outermost, innermost)."""
    innermost = Tag({"name": names[-1]})
    outermost = innermost
    key = "attributes" if is_attribute else "contents"
    for name in reversed(names[:-1]):
        outermost = Tag({"name": name, key: [outermost]})
    return outermost, innermost


# =============================================================================
# Input normalization
# =============================================================================


def normalize_tag(tag_like: TagLike) -> Tag:
    if isinstance(tag_like, Tag):
        return tag_like
    return Tag(tag_like)


def normalize_tags(tags_like: TagsLike) -> list[Tag]:
    if is_iterable_input(tags_like):
        return [normalize_tag(tag_like) for tag_like in tags_like]
    return [normalize_tag(tags_like)]


def _normalize_attributes_input(attributes_input: AttributesInput) -> list[Tag]:
    if is_iterable_input(attributes_input):
        attrs = [normalize_tag(tag_like) for tag_like in attributes_input]
    elif isinstance(attributes_input, Mapping):
        attrs = _normalize_attribute_values(attributes_input)
    else:
        attrs = [normalize_tag(attributes_input)]
    for attr in attrs:
        attr.is_attribute = True
    return attrs


def _normalize_attribute_values(values: Mapping[str, TagValue | None]) -> list[Tag]:
    """Build one attribute per name, skipping names whose value is None."""
    attrs: list[Tag] = []
    for name, value in values.items():
        if value is None:
            continue
        attrs.append(Tag({"name": name}).from_value(value))
    return attrs


def _normalize_contents_input(contents_input: ContentsInput) -> list[str | Tag]:
    if is_iterable_input(contents_input):
        return [_normalize_content(content) for content in contents_input]
    return [_normalize_content(contents_input)]


def _normalize_content(content_like: ContentLike) -> str | Tag:
    return content_like if isinstance(content_like, str) else normalize_tag(content_like)


# =============================================================================
# Lists
# =============================================================================


class Contents(MutableSequence[str | Tag]):
    """The ordered text runs and tags inside a tag."""

    def __init__(self, contents_input: ContentsInput = ()) -> None:
        self._items: list[str | Tag] = _normalize_contents_input(contents_input)

    @overload
    def __getitem__(self, index: int) -> str | Tag: ...
    @overload
    def __getitem__(self, index: slice) -> list[str | Tag]: ...

    def __getitem__(self, index: int | slice) -> str | Tag | list[str | Tag]:
        return self._items[index]

    def __setitem__(self, index: Any, value: Any) -> None:
        self._items[index] = value

    def __delitem__(self, index: int | slice) -> None:
        del self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str | Tag]:
        return iter(self._items)

    def insert(self, index: int, value: str | Tag) -> None:
        self._items.insert(index, value)

    def __repr__(self) -> str:
        return f"Contents({self._items!r})"

    def get(self, name: str) -> Tag | None:
        for content in self._items:
            if isinstance(content, Tag) and content.name == name:
                return content
        return None

    def get_all(self, name: str) -> list[Tag]:
        return [
            content
            for content in self._items
            if isinstance(content, Tag) and content.name == name
        ]

    def set(self, tags_like: TagsLike) -> None:
        """Merge tags into the list by name, keeping positions stable.

        Each incoming tag overwrites the next unused entry of the same name,
        or is appended when none is left. Entries of a merged name that were
        not overwritten are removed; other entries are left alone.
        """
        marks: dict[str, int] = {}
        for tag in normalize_tags(tags_like):
            index = _find_tag(self._items, tag.name, marks.get(tag.name, 0))
            if index is None:
                self._items.append(tag)
                marks[tag.name] = len(self._items)
            else:
                self._items[index] = tag
                marks[tag.name] = index + 1
        self._items[:] = _drop_leftovers(self._items, marks, attributes_only=False)

    def add(self, contents_input: ContentsInput) -> None:
        """Append contents, joining each text run onto a trailing text run."""
        for content in _normalize_contents_input(contents_input):
            if isinstance(content, str) and self._items and isinstance(self._items[-1], str):
                self._items[-1] += content
            else:
                self._items.append(content)

    def replace(self, search_tag: Tag, replace_tag: Tag) -> bool:
        for i, content in enumerate(self._items):
            if content is search_tag:
                self._items[i] = replace_tag
                return True
        return False

    def delete(self, name: str) -> bool:
        index = _find_tag(self._items, name, 0)
        if index is None:
            return False
        del self._items[index]
        return True

    def delete_all(self, name: str) -> bool:
        kept = [
            content
            for content in self._items
            if not (isinstance(content, Tag) and content.name == name)
        ]
        removed = len(kept) != len(self._items)
        self._items[:] = kept
        return removed

    def to_builtins(self) -> list[Any]:
        return [content_to_builtins(content) for content in self._items]


class Attributes(MutableSequence[Tag]):
    """The attributes of a tag, including those stored inline in its contents.

    The list itself only holds the dedicated attribute entries; lookups and
    merges also consider attribute-flagged tags in the paired contents. New
    attributes are always added to the list.
    """

    def __init__(self, attributes_input: AttributesInput = (), contents: Contents | None = None) -> None:
        self._items: list[Tag] = _normalize_attributes_input(attributes_input)
        self._contents = contents if contents is not None else Contents()

    @overload
    def __getitem__(self, index: int) -> Tag: ...
    @overload
    def __getitem__(self, index: slice) -> list[Tag]: ...

    def __getitem__(self, index: int | slice) -> Tag | list[Tag]:
        return self._items[index]

    def __setitem__(self, index: Any, value: Any) -> None:
        self._items[index] = value

    def __delitem__(self, index: int | slice) -> None:
        del self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Tag]:
        return iter(self._items)

    def insert(self, index: int, value: Tag) -> None:
        self._items.insert(index, value)

    def __repr__(self) -> str:
        return f"Attributes({self._items!r})"

    def get(self, name: str) -> Tag | None:
        for attr in self._items:
            if attr.name == name:
                return attr
        index = _find_tag(self._contents, name, 0, attributes_only=True)
        if index is None:
            return None
        return self._contents[index]

    def get_all(self, name: str) -> list[Tag]:
        attrs = [attr for attr in self._items if attr.name == name]
        attrs.extend(
            content
            for content in self._contents
            if isinstance(content, Tag) and content.is_attribute and content.name == name
        )
        return attrs

    def set(self, attributes_input: AttributesInput) -> None:
        """Merge attributes by name across the list and inline contents.

        Same rules as Contents.set; an existing entry in either place is
        overwritten where it stands, and unmatched attributes are appended
        to the list.
        """
        marks: dict[str, int] = {}
        inline_marks: dict[str, int] = {}
        for attr in _normalize_attributes_input(attributes_input):
            name = attr.name
            index = _find_tag(self._items, name, marks.get(name, 0))
            if index is not None:
                self._items[index] = attr
                marks[name] = index + 1
                continue
            index = _find_tag(self._contents, name, inline_marks.get(name, 0), attributes_only=True)
            if index is not None:
                self._contents[index] = attr
                inline_marks[name] = index + 1
                continue
            self._items.append(attr)
            marks[name] = len(self._items)
        for name in inline_marks.keys() - marks.keys():
            marks[name] = 0
        for name in marks.keys() - inline_marks.keys():
            inline_marks[name] = 0
        self._items[:] = _drop_leftovers(self._items, marks, attributes_only=False)
        self._contents[:] = _drop_leftovers(list(self._contents), inline_marks, attributes_only=True)

    def add(self, attributes_input: AttributesInput) -> None:
        self._items.extend(_normalize_attributes_input(attributes_input))

    def replace(self, search_attribute: Tag, replace_attribute: Tag) -> bool:
        """Swap one attribute for another by identity, in whichever place it lives."""
        replace_attribute.is_attribute = True
        for i, attr in enumerate(self._items):
            if attr is search_attribute:
                self._items[i] = replace_attribute
                return True
        for i, content in enumerate(self._contents):
            if isinstance(content, Tag) and content.is_attribute and content is search_attribute:
                self._contents[i] = replace_attribute
                return True
        return False

    def delete(self, name: str) -> bool:
        index = _find_tag(self._items, name, 0)
        if index is not None:
            del self._items[index]
            return True
        index = _find_tag(self._contents, name, 0, attributes_only=True)
        if index is not None:
            del self._contents[index]
            return True
        return False

    def delete_all(self, name: str) -> bool:
        before = len(self._items) + len(self._contents)
        self._items[:] = [attr for attr in self._items if attr.name != name]
        self._contents[:] = [
            content
            for content in self._contents
            if not (isinstance(content, Tag) and content.is_attribute and content.name == name)
        ]
        return len(self._items) + len(self._contents) != before

    def place_at_top(self, names: Sequence[str]) -> None:
        """Move the first attribute of each name to the front, in names order.

        Attributes already leading in the right order stay where they are;
        everything else keeps its relative order.
        """
        wanted = list(dict.fromkeys(names))
        picked: dict[str, Tag] = {}
        for attr in self._items:
            if attr.name in wanted and attr.name not in picked:
                picked[attr.name] = attr
                if len(picked) == len(wanted):
                    break
        ordered = [picked[name] for name in wanted if name in picked]
        offset = 0
        while offset < len(ordered) and self._items[offset] is ordered[offset]:
            offset += 1
        if offset == len(ordered):
            return
        moving = ordered[offset:]
        rest = [attr for attr in self._items[offset:] if all(attr is not m for m in moving)]
        self._items[offset:] = moving + rest

    def to_builtins(self) -> list[dict[str, Any]]:
        return [attr.to_builtins() for attr in self._items]


def _find_tag(
    items: Sequence[str | Tag],
    name: str,
    start: int,
    *,
    attributes_only: bool = False,
) -> int | None:
    """Index of the first tag called name at or after start."""
    for i in range(start, len(items)):
        item = items[i]
        if isinstance(item, Tag) and item.name == name and (item.is_attribute or not attributes_only):
            return i
    return None


def _drop_leftovers(
    items: list[Any],
    marks: Mapping[str, int],
    *,
    attributes_only: bool,
) -> list[Any]:
    """Remove tags of a merged name that sit at or past that name's mark."""
    kept = [
        item
        for i, item in enumerate(items)
        if not (
            isinstance(item, Tag)
            and item.name in marks
            and i >= marks[item.name]
            and (item.is_attribute or not attributes_only)
        )
    ]
    if len(kept) != len(items):
        logger.debug("Merge removed %d leftover entries", len(items) - len(kept))
    return kept


# =============================================================================
# Shorthands
# =============================================================================


def t(
    tag_input: str | Mapping[str, Any] | TagShape,
    attributes_or_contents: AttributesInput | ContentsInput | None = None,
    contents: ContentsInput | None = None,
) -> Tag:
    """Build a tag from a name and optional attributes and contents.

    ``t(name, contents)`` or ``t(name, attributes, contents)``. Unlike
    ``Tag(str)``, the string here is the name, not tagdown text. A mapping
    or tag-shaped first argument is passed straight to Tag().
    """
    if not isinstance(tag_input, str):
        return Tag(tag_input)
    fields: dict[str, Any] = {"name": tag_input}
    if attributes_or_contents is not None:
        if contents is None:
            fields["contents"] = attributes_or_contents
        else:
            fields["attributes"] = attributes_or_contents
            fields["contents"] = contents
    return Tag(fields)


def tl(
    name: str,
    attributes_or_text: AttributesInput | str | None = None,
    text: str | None = None,
) -> Tag:
    """Build a literal tag: ``tl(name, text)``, ``tl(name, attributes)``,
    or ``tl(name, attributes, text)``.
    """
    fields: dict[str, Any] = {"name": name, "is_literal": True}
    if attributes_or_text is not None:
        if text is not None:
            fields["attributes"] = attributes_or_text
            fields["contents"] = text
        elif isinstance(attributes_or_text, str):
            fields["contents"] = attributes_or_text
        else:
            fields["attributes"] = attributes_or_text
    return Tag(fields)


def is_tag(arg: object) -> bool:
    return isinstance(arg, Tag)


def is_content(arg: object) -> bool:
    return isinstance(arg, str | Tag)


def is_contents(arg: object) -> bool:
    return isinstance(arg, Sequence) and not isinstance(arg, str) and all(is_content(item) for item in arg)

