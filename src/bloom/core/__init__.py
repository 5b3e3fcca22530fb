"""Core Bloom functionality: IR, lexer, parser, results, errors, diagnostics config."""

from . import ir
from .config import DiagnosticsConfig, load_config
from .dsl_parser import (
    Parser,
    load_struct,
    parse_field,
    parse_fields,
    parse_identifier,
    parse_primitive,
    parse_struct,
    parse_type,
)
from .errors import BloomError, ConfigError, ErrorContext, ParseError
from .lexer import Cursor
from .results import ExpectedKind, Failure, Result, Success

__all__ = [
    "ir",
    "BloomError",
    "ParseError",
    "ConfigError",
    "ErrorContext",
    "DiagnosticsConfig",
    "load_config",
    "Cursor",
    "ExpectedKind",
    "Failure",
    "Result",
    "Success",
    "Parser",
    "load_struct",
    "parse_field",
    "parse_fields",
    "parse_identifier",
    "parse_primitive",
    "parse_struct",
    "parse_type",
]
