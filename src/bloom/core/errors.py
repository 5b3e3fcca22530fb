"""
Error types for Bloom parsing and configuration.

Grammar rules report failures as values (see ``results``). The exceptions
here are raised only at the boundary, when a caller asks for a value that a
failed parse cannot provide.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .results import Failure


class BloomError(Exception):
    """Base exception for all Bloom errors."""

    def __init__(self, message: str, context: ErrorContext | None = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class ParseError(BloomError):
    """
    Raised when Bloom source cannot be parsed.

    Examples:
    - Missing keyword or punctuation
    - Identifier starting with a digit
    - Trailing comma in a field list

    Attributes:
        failure: The parse failure this error was built from, if any
    """

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        failure: Failure | None = None,
    ):
        self.failure = failure
        super().__init__(message, context)


class ConfigError(BloomError):
    """
    Raised when diagnostics configuration is invalid.

    Examples:
    - Unreadable TOML
    - Negative context line count
    """

    pass


@dataclass
class ErrorContext:
    """
    Context information for an error, including source location.

    Attributes:
        file: Label of the source (a path or a placeholder like "<input>")
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        snippet: Optional source lines surrounding the error
        snippet_start: Line number of the first snippet line
        marker: Text placed under the error column
    """

    file: str
    line: int
    column: int
    snippet: str | None = None
    snippet_start: int = 1
    marker: str = "^"

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "schema.bloom:3:12"
        """
        location = f"{self.file}:{self.line}:{self.column}"
        if self.snippet is not None:
            return f"{location}\n{self._format_snippet()}"
        return location

    def _format_snippet(self) -> str:
        """Format code snippet with line numbers and error marker."""
        if self.snippet is None:
            return ""

        formatted = []
        for i, line in enumerate(self.snippet.split("\n")):
            line_num = self.snippet_start + i
            prefix = f"{line_num:4d} | "
            formatted.append(prefix + line)

            if line_num == self.line:
                marker_pos = len(prefix) + self.column - 1
                formatted.append(" " * marker_pos + self.marker)

        return "\n".join(formatted)


def make_parse_error(
    message: str,
    file: str,
    line: int,
    column: int,
    snippet: str | None = None,
    snippet_start: int = 1,
    marker: str = "^",
    failure: Failure | None = None,
) -> ParseError:
    """
    Helper to create a ParseError with context.

    Args:
        message: Error description
        file: Source label
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        snippet: Optional source lines around the error
        snippet_start: Line number of the first snippet line
        marker: Text placed under the error column
        failure: Originating parse failure

    Returns:
        ParseError with context attached
    """
    context = ErrorContext(
        file=file,
        line=line,
        column=column,
        snippet=snippet,
        snippet_start=snippet_start,
        marker=marker,
    )
    return ParseError(message, context, failure=failure)
