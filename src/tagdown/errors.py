"""Error types raised by the tagdown text syntax."""

from __future__ import annotations

# Characters of source shown around the failure point
_CONTEXT_CHARS = 20


class TagdownSyntaxError(ValueError):
    """Text could not be read as exactly one tagdown tag.

    Attributes:
        reason: Short description of what the parser expected
        text: The full source text
        position: Offset into ``text`` where parsing failed

    """

    def __init__(self, reason: str, text: str, position: int) -> None:
        self.reason = reason
        self.text = text
        self.position = position
        super().__init__(self.describe())

    @property
    def line(self) -> int:
        """1-based line number of the failure."""
        return self.text.count("\n", 0, self.position) + 1

    @property
    def column(self) -> int:
        """1-based column number of the failure."""
        return self.position - (self.text.rfind("\n", 0, self.position) + 1) + 1

    def describe(self) -> str:
        """Format the error with its location and nearby source."""
        start = max(0, self.position - _CONTEXT_CHARS)
        near = self.text[start : self.position + _CONTEXT_CHARS]
        return f"line {self.line}, column {self.column}: {self.reason} (near {near!r})"
