"""Data models for resolved test-case files."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class GoldenPair:
    """A golden input file and the output it is expected to produce."""

    input_file: Path
    output_file: Path


@dataclass(frozen=True)
class ResolvedFiles:
    """Files associated with one test case by naming convention."""

    flex_file: Path
    goldens: tuple[GoldenPair, ...] = field(default_factory=tuple)
