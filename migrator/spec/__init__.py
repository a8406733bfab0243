"""Spec layer for parsing legacy ``.test`` files."""

from .errors import FormatError
from .models import TestCase
from .parser import ParserState, parse_spec, parse_spec_from_string, parse_spec_lines

__all__ = [
    "FormatError",
    "TestCase",
    "ParserState",
    "parse_spec",
    "parse_spec_from_string",
    "parse_spec_lines",
]
