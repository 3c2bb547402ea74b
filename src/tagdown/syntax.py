"""Tagdown text syntax: parsing, printing, and normalization.

A tag is written as its name, an optional bracketed attribute list, and a
body::

    article[lang{en} "page count"{12}]{Some text \\em{with} markup.}

Inline attributes inside a body are marked with ``@``, literal bodies are
written ``!"raw text"`` with doubled quotes, and ``\\``, ``{`` and ``}``
are escaped with a backslash inside text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tagdown.data import TagData, is_text
from tagdown.errors import TagdownSyntaxError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from tagdown.data import TagShape

_NAME_PUNCTUATION = frozenset("_-.:")
_TEXT_ESCAPES = frozenset("\\{}")


def is_bare_name(name: str) -> bool:
    """Check if a name can be written without quotes."""
    return bool(name) and all(_is_name_char(ch) for ch in name)


def _is_name_char(ch: str) -> bool:
    return ch.isalnum() or ch in _NAME_PUNCTUATION


# =============================================================================
# Parsing
# =============================================================================


class _Parser:
    """Recursive descent parser over a single source string."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def error(self, reason: str) -> TagdownSyntaxError:
        return TagdownSyntaxError(reason, self.text, self.pos)

    def peek(self, offset: int = 0) -> str:
        index = self.pos + offset
        return self.text[index] if index < len(self.text) else ""

    def skip_whitespace(self) -> None:
        while self.peek().isspace():
            self.pos += 1

    def parse_document(self) -> TagData:
        self.skip_whitespace()
        tag = self.parse_tag()
        self.skip_whitespace()
        if self.pos != len(self.text):
            raise self.error("expected end of text after tag")
        return tag

    def parse_tag(self) -> TagData:
        tag = TagData()
        if self.peek() == "@":
            tag.is_attribute = True
            self.pos += 1
        tag.name, tag.is_quoted = self.parse_name()
        if self.peek() == "[":
            tag.attributes = self.parse_attributes()
        match self.peek():
            case "{":
                tag.contents = self.parse_contents()
            case "!":
                tag.is_literal = True
                tag.contents = self.parse_literal()
            case _:
                raise self.error("expected '{' or '!\"' to open tag body")
        return tag

    def parse_name(self) -> tuple[str, bool]:
        if self.peek() == '"':
            return self.parse_quoted_name(), True
        start = self.pos
        while self.peek() and _is_name_char(self.peek()):
            self.pos += 1
        if start == self.pos:
            raise self.error("expected tag name")
        return self.text[start : self.pos], False

    def parse_quoted_name(self) -> str:
        self.pos += 1
        chars: list[str] = []
        while True:
            ch = self.peek()
            if not ch:
                raise self.error("unterminated quoted name")
            if ch == '"':
                self.pos += 1
                return "".join(chars)
            if ch == "\\":
                escaped = self.peek(1)
                if not escaped:
                    raise self.error("unterminated escape in quoted name")
                chars.append(escaped)
                self.pos += 2
            else:
                chars.append(ch)
                self.pos += 1

    def parse_attributes(self) -> list[TagData]:
        self.pos += 1
        attributes: list[TagData] = []
        while True:
            self.skip_whitespace()
            if not self.peek():
                raise self.error("unterminated attribute list")
            if self.peek() == "]":
                self.pos += 1
                return attributes
            attr = self.parse_tag()
            attr.is_attribute = True
            attributes.append(attr)

    def parse_contents(self) -> list[str | TagData]:
        self.pos += 1
        contents: list[str | TagData] = []
        chars: list[str] = []
        while True:
            ch = self.peek()
            if not ch:
                raise self.error("unterminated tag body")
            if ch == "}":
                self.pos += 1
                break
            if ch == "{":
                raise self.error("unescaped '{' in text")
            if ch == "\\":
                escaped = self.peek(1)
                if escaped in _TEXT_ESCAPES:
                    chars.append(escaped)
                    self.pos += 2
                    continue
                self.pos += 1
                if chars:
                    contents.append("".join(chars))
                    chars = []
                contents.append(self.parse_tag())
            else:
                chars.append(ch)
                self.pos += 1
        if chars:
            contents.append("".join(chars))
        return contents

    def parse_literal(self) -> list[str | TagData]:
        self.pos += 1
        if self.peek() != '"':
            raise self.error("expected '\"' to open literal body")
        self.pos += 1
        chars: list[str] = []
        while True:
            ch = self.peek()
            if not ch:
                raise self.error("unterminated literal body")
            self.pos += 1
            if ch == '"':
                if self.peek() != '"':
                    break
                self.pos += 1
            chars.append(ch)
        raw = "".join(chars)
        return [raw] if raw else []


def parse_tag(text: str) -> TagData:
    """Parse text containing exactly one tag.

    Args:
        text: Tagdown source, optionally surrounded by whitespace

    Returns:
        The parsed tag

    Raises:
        TagdownSyntaxError: If text is not a single well-formed tag

    """
    return _Parser(text).parse_document()


# =============================================================================
# Printing
# =============================================================================


def print_tag(tag: TagShape) -> str:
    """Render any tag-shaped value as canonical tagdown text."""
    parts: list[str] = []
    _print_tag(tag, parts, in_attributes=False)
    return "".join(parts)


def _print_tag(tag: TagShape, parts: list[str], *, in_attributes: bool) -> None:
    if tag.is_attribute and not in_attributes:
        parts.append("@")
    parts.append(_print_name(tag.name, is_quoted=tag.is_quoted))
    if tag.attributes:
        parts.append("[")
        for i, attr in enumerate(tag.attributes):
            if i:
                parts.append(" ")
            _print_tag(attr, parts, in_attributes=True)
        parts.append("]")
    if tag.is_literal:
        parts.append('!"')
        parts.append(literal_text(tag.contents).replace('"', '""'))
        parts.append('"')
        return
    parts.append("{")
    for content in tag.contents:
        if is_text(content):
            parts.append(_escape_text(content))
        else:
            parts.append("\\")
            _print_tag(content, parts, in_attributes=False)
    parts.append("}")


def _print_name(name: str, *, is_quoted: bool) -> str:
    if not is_quoted and is_bare_name(name):
        return name
    escaped = name.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _escape_text(text: str) -> str:
    return "".join(f"\\{ch}" if ch in _TEXT_ESCAPES else ch for ch in text)


def literal_text(contents: Sequence[str | TagShape]) -> str:
    """Concatenate every text run in contents, descending into tags."""
    return "".join(
        content if is_text(content) else literal_text(content.contents)
        for content in contents
    )


# =============================================================================
# Normalization
# =============================================================================


def shake_tag(tag: TagShape, *, in_attributes: bool = False) -> TagData:
    """Strip formatting-insignificant detail from a tag.

    The result prints identically to the input, and parsing the printed
    text gives back an equal TagData.
    """
    contents: list[str | TagData] = []
    if tag.is_literal:
        text = literal_text(tag.contents)
        if text:
            contents.append(text)
    else:
        for content in tag.contents:
            if not is_text(content):
                contents.append(shake_tag(content))
            elif not content:
                continue
            elif contents and is_text(contents[-1]):
                contents[-1] += content
            else:
                contents.append(content)
    return TagData(
        name=tag.name,
        is_quoted=tag.is_quoted or not is_bare_name(tag.name),
        is_attribute=tag.is_attribute or in_attributes,
        attributes=[shake_tag(attr, in_attributes=True) for attr in tag.attributes],
        is_literal=tag.is_literal,
        contents=contents,
        layout=None,
    )
