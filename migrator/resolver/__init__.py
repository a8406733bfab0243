"""File resolution for legacy test-case directories."""

from .finder import (
    breadth_first,
    find_flex_file,
    find_golden_files,
    golden_output_file,
    is_golden_input_file,
    resolve_files,
)
from .models import GoldenPair, ResolvedFiles

__all__ = [
    "breadth_first",
    "find_flex_file",
    "find_golden_files",
    "golden_output_file",
    "is_golden_input_file",
    "resolve_files",
    "GoldenPair",
    "ResolvedFiles",
]
