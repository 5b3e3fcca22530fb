"""
Struct parser mixin for Bloom.

Parses fields, comma-separated field lists, and struct definitions.

DSL Syntax:

    struct Particle {
        position: Vector3,
        mass: f32,
        alive: bool
    }
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .. import ir
from ..lexer import STRUCT_KEYWORD, Cursor, Symbol
from ..results import Failure, Result, Success


class StructParserMixin:
    """Parser mixin for struct definitions."""

    if TYPE_CHECKING:
        skip_ws: Any
        expect_symbol: Any
        expect_keyword: Any
        expect_identifier: Any
        at_identifier: Any
        parse_type: Any

    def parse_field(self, cursor: Cursor) -> Result[ir.FieldSpec]:
        """
        Parse a single field.

        Grammar:
            ws IDENTIFIER ws ":" ws type

        Whitespace after the type is left for the caller.
        """
        name = self.expect_identifier(self.skip_ws(cursor))
        if isinstance(name, Failure):
            return name

        colon = self.expect_symbol(self.skip_ws(name.cursor), Symbol.COLON)
        if isinstance(colon, Failure):
            return colon

        field_type = self.parse_type(self.skip_ws(colon.cursor))
        if isinstance(field_type, Failure):
            return field_type

        return Success(ir.FieldSpec(name=name.value, type=field_type.value), field_type.cursor)

    def parse_fields(self, cursor: Cursor) -> Result[list[ir.FieldSpec]]:
        """
        Parse a comma-separated field list.

        Grammar:
            (field (ws "," ws field)*)?

        The list is empty when no identifier follows the leading whitespace.
        A comma must be followed by another field, so a trailing comma fails.
        After the last field nothing more is consumed.
        """
        fields: list[ir.FieldSpec] = []

        if not self.at_identifier(self.skip_ws(cursor)):
            return Success(fields, cursor)

        first = self.parse_field(cursor)
        if isinstance(first, Failure):
            return first
        fields.append(first.value)
        cursor = first.cursor

        while True:
            comma = self.expect_symbol(self.skip_ws(cursor), Symbol.COMMA)
            if isinstance(comma, Failure):
                break

            item = self.parse_field(comma.cursor)
            if isinstance(item, Failure):
                return item
            fields.append(item.value)
            cursor = item.cursor

        return Success(fields, cursor)

    def parse_struct(self, cursor: Cursor) -> Result[ir.StructSpec]:
        """
        Parse a struct definition.

        Grammar:
            ws "struct" ws IDENTIFIER ws "{" field_list ws "}"

        Returns:
            StructSpec and the cursor just past the closing brace, or the
            innermost failure
        """
        tag = self.expect_keyword(self.skip_ws(cursor), STRUCT_KEYWORD)
        if isinstance(tag, Failure):
            return tag

        name = self.expect_identifier(self.skip_ws(tag.cursor))
        if isinstance(name, Failure):
            return name

        open_brace = self.expect_symbol(self.skip_ws(name.cursor), Symbol.LBRACE)
        if isinstance(open_brace, Failure):
            return open_brace

        fields = self.parse_fields(open_brace.cursor)
        if isinstance(fields, Failure):
            return fields

        close_brace = self.expect_symbol(self.skip_ws(fields.cursor), Symbol.RBRACE)
        if isinstance(close_brace, Failure):
            return close_brace

        return Success(ir.StructSpec(name=name.value, fields=fields.value), close_brace.cursor)
