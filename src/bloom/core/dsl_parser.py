"""
Parser entry points for Bloom.

Re-exports the public functions of ``dsl_parser_impl`` so callers do not
depend on how the parser is split into mixins.
"""

from .dsl_parser_impl import (
    Parser,
    load_struct,
    parse_field,
    parse_fields,
    parse_identifier,
    parse_primitive,
    parse_struct,
    parse_type,
)

__all__ = [
    "Parser",
    "load_struct",
    "parse_field",
    "parse_fields",
    "parse_identifier",
    "parse_primitive",
    "parse_struct",
    "parse_type",
]
