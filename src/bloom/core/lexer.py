"""
Lexical primitives for Bloom.

Recognizers for identifiers, punctuation and the ``struct`` keyword over an
immutable ``Cursor``. Each recognizer either consumes a token and returns a
``Success`` with an advanced cursor, or returns a ``Failure`` at the cursor it
was given.

Bloom has no reserved words: ``struct`` and the primitive labels are valid
identifiers wherever the grammar expects one.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

from .results import ExpectedKind, Failure, Result, Success

STRUCT_KEYWORD = "struct"

WHITESPACE = " \t\n\r"

# First char alphabetic, then alphanumerics/underscores (ASCII only)
_IDENT_RE = re.compile(r"[A-Za-z][A-Za-z0-9_]*")

# \r\n counts as one break; a bare \r or \n each count as one
_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


class Symbol(StrEnum):
    """Punctuation tokens."""

    COMMA = ","
    COLON = ":"
    LBRACE = "{"
    RBRACE = "}"


@dataclass(frozen=True, slots=True)
class Cursor:
    """
    A read-only position in source text.

    Attributes:
        text: Full source text
        pos: Offset of the next unconsumed character
    """

    text: str
    pos: int = 0

    def __repr__(self) -> str:
        return f"Cursor({self.pos}, {self.rest[:16]!r})"

    @property
    def rest(self) -> str:
        """Unconsumed text."""
        return self.text[self.pos :]

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str | None:
        """Get current character or None if at end."""
        if self.at_end:
            return None
        return self.text[self.pos]

    def advance(self, count: int = 1) -> Cursor:
        return Cursor(self.text, min(self.pos + count, len(self.text)))

    def line_column(self) -> tuple[int, int]:
        """
        1-indexed line and column of this position.

        ``\\n``, ``\\r\\n`` and a bare ``\\r`` all end a line.
        """
        line = 1
        line_start = 0
        for match in _LINE_BREAK_RE.finditer(self.text, 0, self.pos):
            line += 1
            line_start = match.end()
        return line, self.pos - line_start + 1

    def lines(self) -> list[str]:
        """Source text split on the same line breaks as ``line_column``."""
        return _LINE_BREAK_RE.split(self.text)


def is_identifier(text: str) -> bool:
    """Check whether the whole of ``text`` is a Bloom identifier."""
    return _IDENT_RE.fullmatch(text) is not None


def skip_whitespace(cursor: Cursor) -> Cursor:
    """Skip spaces, tabs and line breaks."""
    pos = cursor.pos
    text = cursor.text
    while pos < len(text) and text[pos] in WHITESPACE:
        pos += 1
    if pos == cursor.pos:
        return cursor
    return Cursor(text, pos)


def identifier(cursor: Cursor) -> Result[str]:
    """Consume the longest identifier starting at the cursor."""
    m = _IDENT_RE.match(cursor.text, cursor.pos)
    if m is None:
        return Failure(cursor, ExpectedKind.IDENTIFIER)
    return Success(m.group(0), Cursor(cursor.text, m.end()))


def symbol(cursor: Cursor, sym: Symbol) -> Result[str]:
    """Consume one punctuation character."""
    if cursor.peek() != sym.value:
        return Failure(cursor, ExpectedKind.CHARACTER, sym.value)
    return Success(sym.value, cursor.advance())


def keyword(cursor: Cursor, word: str = STRUCT_KEYWORD) -> Result[str]:
    """Consume the literal keyword text."""
    if not cursor.text.startswith(word, cursor.pos):
        return Failure(cursor, ExpectedKind.KEYWORD, word)
    return Success(word, cursor.advance(len(word)))
