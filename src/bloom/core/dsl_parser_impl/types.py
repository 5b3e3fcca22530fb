"""
Type parsing for Bloom.

Handles the primitive vocabulary and field type references.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .. import ir
from ..lexer import Cursor
from ..results import ExpectedKind, Failure, Result, Success


class TypeParserMixin:
    """
    Mixin providing primitive and type reference parsing.

    Note: This mixin expects to be combined with BaseParser via multiple inheritance.
    """

    if TYPE_CHECKING:
        expect_identifier: Any

    def parse_primitive(self, cursor: Cursor) -> Result[ir.PrimitiveKind]:
        """
        Parse a primitive type label.

        Only an exact, case-sensitive label matches. Anything else fails at
        the original cursor so the caller can try another reading.

        Examples:
            u32   -> PrimitiveKind.U32
            U32   -> failure
            u32x  -> failure (the whole identifier must be a label)
        """
        name = self.expect_identifier(cursor)
        if isinstance(name, Success):
            kind = ir.PrimitiveKind.from_label(name.value)
            if kind is not None:
                return Success(kind, name.cursor)
        return Failure(cursor, ExpectedKind.PRIMITIVE)

    def parse_type(self, cursor: Cursor) -> Result[ir.TypeRef]:
        """
        Parse a field type.

        Tries the primitive vocabulary first; any other identifier is a
        reference to a struct by name.

        Examples:
            bool      -> PrimitiveType(primitive=BOOL)
            Vector3   -> IdentifierType(name="Vector3")
        """
        primitive = self.parse_primitive(cursor)
        if isinstance(primitive, Success):
            return Success(ir.PrimitiveType(primitive=primitive.value), primitive.cursor)

        name = self.expect_identifier(cursor)
        if isinstance(name, Failure):
            return name
        return Success(ir.IdentifierType(name=name.value), name.cursor)
