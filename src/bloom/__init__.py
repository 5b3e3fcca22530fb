"""
Bloom - a parser for the Bloom schema language.

Bloom describes typed record definitions: named structs made of named fields,
each typed as a fixed-width primitive or a reference to another struct.

Usage:
    from bloom import load_struct

    point = load_struct("struct Point { x: f32, y: f32 }")
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.dsl_parser import (
    load_struct,
    parse_field,
    parse_fields,
    parse_identifier,
    parse_primitive,
    parse_struct,
    parse_type,
)
from .core.errors import BloomError, ConfigError, ParseError
from .core.ir import FieldSpec, IdentifierType, PrimitiveKind, PrimitiveType, StructSpec
from .core.results import ExpectedKind, Failure, Success

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "BloomError",
    "ParseError",
    "ConfigError",
    "ExpectedKind",
    "Failure",
    "Success",
    "PrimitiveKind",
    "PrimitiveType",
    "IdentifierType",
    "FieldSpec",
    "StructSpec",
    "load_struct",
    "parse_field",
    "parse_fields",
    "parse_identifier",
    "parse_primitive",
    "parse_struct",
    "parse_type",
]
