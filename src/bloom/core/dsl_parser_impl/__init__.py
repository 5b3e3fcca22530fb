"""
Bloom Parser Package.

This package provides a modular recursive descent parser for Bloom.
The parser is built using mixins to separate parsing logic by construct type.

The main exports are:
- Parser: The complete parser class
- parse_struct: Parse one struct definition into a result
- load_struct: Parse one struct definition or raise ParseError

Each ``parse_*`` function returns ``Success`` (value plus unconsumed text) or
``Failure`` (position plus what was expected).

Usage:
    from bloom.core.dsl_parser_impl import parse_struct

    result = parse_struct("struct Point { x: f32, y: f32 }")
    if result.ok:
        point = result.value
"""

from __future__ import annotations

import logging
from pathlib import Path

from .. import ir
from ..config import DEFAULT_CONFIG, DiagnosticsConfig
from ..lexer import Cursor, identifier, skip_whitespace
from ..results import ExpectedKind, Failure, Result
from .base import BaseParser
from .struct import StructParserMixin
from .types import TypeParserMixin

logger = logging.getLogger(__name__)


class Parser(
    BaseParser,
    TypeParserMixin,
    StructParserMixin,
):
    """
    Complete Bloom parser.

    This class composes all parser mixins:

    - TypeParserMixin: Primitive vocabulary and type references
    - StructParserMixin: Fields, field lists and struct definitions
    """


def parse_identifier(text: str) -> Result[str]:
    """Parse an identifier at the start of ``text``."""
    return identifier(Cursor(text))


def parse_primitive(text: str) -> Result[ir.PrimitiveKind]:
    """Parse a primitive type label at the start of ``text``."""
    return Parser().parse_primitive(Cursor(text))


def parse_type(text: str) -> Result[ir.TypeRef]:
    """Parse a field type at the start of ``text``."""
    return Parser().parse_type(Cursor(text))


def parse_field(text: str) -> Result[ir.FieldSpec]:
    """Parse a ``name: type`` field at the start of ``text``."""
    return Parser().parse_field(Cursor(text))


def parse_fields(text: str) -> Result[list[ir.FieldSpec]]:
    """Parse a comma-separated field list at the start of ``text``."""
    return Parser().parse_fields(Cursor(text))


def parse_struct(text: str) -> Result[ir.StructSpec]:
    """
    Parse one struct definition.

    Args:
        text: Bloom source text

    Returns:
        Success holding the StructSpec and any text after the closing brace,
        or Failure with the position and kind of the mismatch
    """
    return Parser().parse_struct(Cursor(text))


def load_struct(
    text: str,
    file: Path | str | None = None,
    *,
    config: DiagnosticsConfig | None = None,
    allow_trailing: bool = False,
) -> ir.StructSpec:
    """
    Parse one struct definition, raising on failure.

    Args:
        text: Bloom source text
        file: Source label used in diagnostics
        config: Diagnostics settings
        allow_trailing: Accept non-whitespace text after the closing brace

    Returns:
        The parsed StructSpec

    Raises:
        ParseError: If the text is not a struct definition, or has trailing
            text and ``allow_trailing`` is not set
    """
    result = parse_struct(text)
    if isinstance(result, Failure):
        raise result.to_error(file, config)

    if not allow_trailing:
        end = skip_whitespace(result.cursor)
        if not end.at_end:
            raise Failure(end, ExpectedKind.END).to_error(file, config)

    struct = result.value
    logger.debug(
        "Loaded struct %s (%d fields) from %s",
        struct.name,
        len(struct.fields),
        file if file is not None else (config or DEFAULT_CONFIG).default_source,
    )
    return struct


__all__ = [
    "Parser",
    "BaseParser",
    "TypeParserMixin",
    "StructParserMixin",
    "parse_identifier",
    "parse_primitive",
    "parse_type",
    "parse_field",
    "parse_fields",
    "parse_struct",
    "load_struct",
]
