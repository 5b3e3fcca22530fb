"""
Parse results.

Every grammar rule returns either a ``Success`` (the value plus a cursor past
what was consumed) or a ``Failure`` (the cursor where the mismatch happened
plus what was expected there). Failing is an ordinary outcome: the type rule
relies on it to fall back from primitives to struct references.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import TYPE_CHECKING, Generic, NoReturn, TypeVar

from .config import DEFAULT_CONFIG, DiagnosticsConfig
from .errors import ParseError, make_parse_error

if TYPE_CHECKING:
    from .lexer import Cursor

T = TypeVar("T")


class ExpectedKind(StrEnum):
    """What a failed rule was looking for."""

    CHARACTER = "character"
    KEYWORD = "keyword"
    IDENTIFIER = "identifier"
    PRIMITIVE = "primitive"  # only seen inside the type rule
    END = "end"


@dataclass(frozen=True)
class Success(Generic[T]):
    """A rule matched; ``cursor`` sits just past the consumed text."""

    value: T
    cursor: Cursor

    ok = True

    @property
    def position(self) -> int:
        return self.cursor.pos

    @property
    def remaining(self) -> str:
        return self.cursor.rest

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    """
    A rule did not match.

    Attributes:
        cursor: Position of the mismatch (nothing was consumed past it)
        expected: Category of token that was required
        token: The exact character or keyword required, when there is one
    """

    cursor: Cursor
    expected: ExpectedKind
    token: str | None = None

    ok = False

    @property
    def position(self) -> int:
        return self.cursor.pos

    @property
    def remaining(self) -> str:
        return self.cursor.rest

    @property
    def line(self) -> int:
        return self.cursor.line_column()[0]

    @property
    def column(self) -> int:
        return self.cursor.line_column()[1]

    @property
    def message(self) -> str:
        """Human-readable description, e.g. "Expected ':', found 'b'"."""
        return f"{self._describe_expected()}, found {self._describe_found()}"

    def _describe_expected(self) -> str:
        if self.expected == ExpectedKind.CHARACTER:
            return f"Expected '{self.token}'"
        if self.expected == ExpectedKind.KEYWORD:
            return f"Expected keyword '{self.token}'"
        if self.expected == ExpectedKind.PRIMITIVE:
            return "Expected primitive type"
        if self.expected == ExpectedKind.END:
            return "Expected end of input"
        return "Expected identifier"

    def _describe_found(self) -> str:
        ch = self.cursor.peek()
        if ch is None:
            return "end of input"
        return repr(ch)

    def to_error(
        self,
        file: Path | str | None = None,
        config: DiagnosticsConfig | None = None,
    ) -> ParseError:
        """
        Build a ParseError with location and source snippet.

        Args:
            file: Source label for the diagnostic
            config: Diagnostics settings (defaults apply when omitted)
        """
        config = config or DEFAULT_CONFIG
        source = str(file) if file is not None else config.default_source
        line, column = self.cursor.line_column()

        snippet = None
        start = 1
        if config.show_snippet:
            lines = self.cursor.lines()
            start = max(1, line - config.context_lines)
            end = min(len(lines), line + config.context_lines)
            snippet = "\n".join(lines[start - 1 : end])

        return make_parse_error(
            self.message,
            source,
            line,
            column,
            snippet=snippet,
            snippet_start=start,
            marker=config.marker,
            failure=self,
        )

    def unwrap(self) -> NoReturn:
        """
        Raises:
            ParseError: Always
        """
        raise self.to_error()


Result = Success[T] | Failure
