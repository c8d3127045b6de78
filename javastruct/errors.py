"""
Exceptions raised by the parser and the source loader.
"""

from typing import Optional, Sequence


class ParseError(Exception):
    """Error while parsing a compilation unit.

    ``offset`` is a byte offset into the UTF-8 encoded source; ``line`` and
    ``column`` are 1-based. ``expected`` lists what would have been accepted.
    """

    kind = "Parse error"

    def __init__(self, message: str, offset: int, line: int, column: int,
                 expected: Sequence[str] = ()):
        self.message = message
        self.offset = offset
        self.line = line
        self.column = column
        self.expected = tuple(expected)
        super().__init__(str(self))

    def __str__(self) -> str:
        text = f"{self.kind} at line {self.line}, column {self.column} (offset {self.offset}): {self.message}"
        if self.expected:
            text += f"; expected one of: {', '.join(self.expected)}"
        return text


class IncompleteInputError(ParseError):
    """Input ended in the middle of a construct."""

    kind = "Incomplete input"


class InvalidSyntaxError(ParseError):
    """Input at some position matched none of the applicable alternatives."""

    kind = "Invalid syntax"

    def __init__(self, message: str, offset: int, line: int, column: int,
                 expected: Sequence[str] = (), found: Optional[str] = None):
        self.found = found
        super().__init__(message, offset, line, column, expected)


class SourceLoadError(Exception):
    """A source file could not be read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read {path}: {reason}")
