"""
Scanner feeding the Lark grammar.

Whitespace and comments are skipped, runs of letters, digits and dots become
words (or keywords on an exact match), and parenthesised or braced spans the
grammar never looks inside are captured whole as a single token.

The scanner works on a str holding one character per source byte (see
``as_byte_text``), so token positions are byte offsets.
"""

import string
from typing import Iterator, Optional, Union

from lark.lexer import Lexer, Token

from .errors import IncompleteInputError, InvalidSyntaxError


WORD_CHARS = frozenset(string.ascii_letters + string.digits + ".")
WHITESPACE = frozenset(" \t\r\n\f")

KEYWORDS = {
    "package": "_PACKAGE",
    "import": "_IMPORT",
    "class": "_CLASS",
    "public": "PUBLIC",
    "protected": "PROTECTED",
    "private": "PRIVATE",
    "String": "STRING",
    "Boolean": "BOOLEAN",
    "boolean": "BOOLEAN",
    "long": "LONG",
    "Long": "LONG",
    "int": "INT",
    "Integer": "INT",
    "short": "SHORT",
}

PUNCTUATION = {
    ";": "_SEMI",
    "@": "_AT",
    ")": "_RPAR",
    "}": "_RBRACE",
}

# Display names used in error messages.
TERMINAL_NAMES = {
    "_PACKAGE": "'package'",
    "_IMPORT": "'import'",
    "_CLASS": "'class'",
    "PUBLIC": "'public'",
    "PROTECTED": "'protected'",
    "PRIVATE": "'private'",
    "STRING": "'String'",
    "BOOLEAN": "'boolean'",
    "LONG": "'long'",
    "INT": "'int'",
    "SHORT": "'short'",
    "WORD": "identifier",
    "SPAN": "text",
    "_BODY": "method body",
    "_SEMI": "';'",
    "_AT": "'@'",
    "_LPAR": "'('",
    "_RPAR": "')'",
    "_LBRACE": "'{'",
    "_RBRACE": "'}'",
    "$END": "end of input",
}


def as_byte_text(source: Union[str, bytes]) -> str:
    """Return the source as a str with one character per UTF-8 byte."""
    if isinstance(source, str):
        source = source.encode("utf-8", "surrogatepass")
    return bytes(source).decode("latin-1")


def decode_span(raw: str) -> str:
    """Decode a captured span back to text, replacing invalid sequences."""
    return raw.encode("latin-1").decode("utf-8", errors="replace")


def describe_terminal(name: str) -> str:
    return TERMINAL_NAMES.get(name, name)


def describe_expected(names) -> tuple:
    """Sorted, de-duplicated display names for a set of terminal names."""
    return tuple(sorted({describe_terminal(name) for name in names}))


def end_position(text: str) -> tuple:
    """Line and column just past the last character of text."""
    line = text.count("\n") + 1
    column = len(text) - (text.rfind("\n") + 1) + 1
    return line, column


class Scanner:
    """Single forward pass over the source producing Lark tokens."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.line = 1
        self.line_start = 0
        self._previous: Optional[str] = None

    @property
    def column(self) -> int:
        return self.pos - self.line_start + 1

    def tokens(self) -> Iterator[Token]:
        text = self.text
        while True:
            self.skip()
            if self.pos >= len(text):
                return
            ch = text[self.pos]
            if ch in WORD_CHARS:
                yield self._word()
            elif ch == "(":
                yield from self._span("(", ")", "_LPAR", "SPAN", "_RPAR")
            elif ch == "{" and self._previous == "_RPAR":
                # A brace right after a closed argument list opens a method body.
                yield from self._span("{", "}", "_LBRACE", "_BODY", "_RBRACE")
            elif ch == "{":
                yield self._emit("_LBRACE", self.pos + 1)
            elif ch in PUNCTUATION:
                yield self._emit(PUNCTUATION[ch], self.pos + 1)
            else:
                raise self._invalid(ch)

    def skip(self) -> None:
        """Consume any run of whitespace, line comments and block comments."""
        text = self.text
        while self.pos < len(text):
            if text[self.pos] in WHITESPACE:
                end = self.pos + 1
                while end < len(text) and text[end] in WHITESPACE:
                    end += 1
            elif text.startswith("//", self.pos):
                end = text.find("\n", self.pos + 2)
                if end < 0:
                    raise self._incomplete("unterminated line comment", self.line, self.column)
                end += 1
            elif text.startswith("/*", self.pos):
                # Not nested: the first */ closes the comment.
                end = text.find("*/", self.pos + 2)
                if end < 0:
                    raise self._incomplete("unterminated block comment", self.line, self.column)
                end += 2
            else:
                return
            self._advance(end)

    def _word(self) -> Token:
        text = self.text
        end = self.pos
        while end < len(text) and text[end] in WORD_CHARS:
            end += 1
        word = text[self.pos:end]
        return self._emit(KEYWORDS.get(word, "WORD"), end)

    def _span(self, opening: str, closing: str, open_type: str,
              span_type: str, close_type: str) -> Iterator[Token]:
        start = self.pos + 1
        line, column = self.line, self.column
        yield self._emit(open_type, start)
        end = self._find_closing(opening, closing, line, column)
        yield self._emit(span_type, end, decode_span(self.text[start:end]))
        yield self._emit(close_type, end + 1)

    def _find_closing(self, opening: str, closing: str, line: int, column: int) -> int:
        """Offset of the closing delimiter balancing an already consumed opener."""
        text = self.text
        depth = 1
        pos = self.pos
        while True:
            close = text.find(closing, pos)
            if close < 0:
                raise self._incomplete(f"missing {closing!r} to match {opening!r}", line, column)
            nested = text.find(opening, pos, close)
            if nested < 0:
                depth -= 1
                if depth == 0:
                    return close
                pos = close + 1
            else:
                depth += 1
                pos = nested + 1

    def _advance(self, end: int) -> None:
        newlines = self.text.count("\n", self.pos, end)
        if newlines:
            self.line += newlines
            self.line_start = self.text.rfind("\n", self.pos, end) + 1
        self.pos = end

    def _emit(self, type_: str, end: int, value: Optional[str] = None) -> Token:
        start, line, column = self.pos, self.line, self.column
        if value is None:
            value = self.text[start:end]
        self._advance(end)
        self._previous = type_
        return Token(type_, value, start_pos=start, line=line, column=column,
                     end_line=self.line, end_column=self.column, end_pos=end)

    def _incomplete(self, message: str, line: int, column: int) -> IncompleteInputError:
        end_line, end_column = end_position(self.text)
        return IncompleteInputError(
            f"{message} (opened at line {line}, column {column})",
            len(self.text), end_line, end_column,
        )

    def _invalid(self, ch: str) -> InvalidSyntaxError:
        shown = repr(ch) if ch.isascii() else f"byte 0x{ord(ch):02X}"
        return InvalidSyntaxError(
            f"unexpected character {shown}", self.pos, self.line, self.column,
            found=ch,
        )


class ScannerLexer(Lexer):
    """Adapter plugging Scanner into Lark as a custom lexer."""

    def __init__(self, lexer_conf):
        pass

    def lex(self, data: str) -> Iterator[Token]:
        return Scanner(data).tokens()
