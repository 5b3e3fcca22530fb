"""
Base parser class for Bloom.

Provides the token-level helpers used by all parser mixins. Every method takes
the cursor to start from and returns a result; the parser itself holds no
position, so one instance can be used for any number of parses.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .. import ir
from ..lexer import STRUCT_KEYWORD, Cursor, Symbol, identifier, keyword, skip_whitespace, symbol
from ..results import Result, Success


@runtime_checkable
class ParserProtocol(Protocol):
    """
    Protocol defining the interface available to parser mixins.

    This allows mypy to understand that mixins will have access to
    BaseParser methods when combined in the final Parser class.
    """

    def skip_ws(self, cursor: Cursor) -> Cursor: ...
    def expect_symbol(self, cursor: Cursor, sym: Symbol) -> Result[str]: ...
    def expect_keyword(self, cursor: Cursor, word: str = STRUCT_KEYWORD) -> Result[str]: ...
    def expect_identifier(self, cursor: Cursor) -> Result[str]: ...
    def at_identifier(self, cursor: Cursor) -> bool: ...

    # Methods from other mixins that may be called cross-mixin
    def parse_primitive(self, cursor: Cursor) -> Result[ir.PrimitiveKind]: ...
    def parse_type(self, cursor: Cursor) -> Result[ir.TypeRef]: ...
    def parse_field(self, cursor: Cursor) -> Result[ir.FieldSpec]: ...
    def parse_fields(self, cursor: Cursor) -> Result[list[ir.FieldSpec]]: ...


class BaseParser:
    """
    Base parser class with token matching utilities.

    This class provides the foundation for recursive descent parsing. Failed
    matches are returned as ``Failure`` values and never consume input.
    """

    def skip_ws(self, cursor: Cursor) -> Cursor:
        """Skip insignificant whitespace."""
        return skip_whitespace(cursor)

    def expect_symbol(self, cursor: Cursor, sym: Symbol) -> Result[str]:
        """Expect a specific punctuation character."""
        return symbol(cursor, sym)

    def expect_keyword(self, cursor: Cursor, word: str = STRUCT_KEYWORD) -> Result[str]:
        """Expect the literal keyword text."""
        return keyword(cursor, word)

    def expect_identifier(self, cursor: Cursor) -> Result[str]:
        """
        Expect an identifier.

        Keywords and primitive labels are accepted too: which one a name is
        depends only on where the grammar expects it.
        """
        return identifier(cursor)

    def at_identifier(self, cursor: Cursor) -> bool:
        """Check if an identifier starts at the cursor."""
        return isinstance(identifier(cursor), Success)
