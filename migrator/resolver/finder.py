"""Locate the grammar and golden files of a test case by naming convention."""

from collections import deque
from pathlib import Path
from typing import Callable, Iterable

from ..spec.models import TestCase
from .models import GoldenPair, ResolvedFiles

GRAMMAR_EXT = ".flex"
GOLDEN_INPUT_EXT = ".input"
GOLDEN_OUTPUT_EXT = ".output"


def breadth_first(root: str | Path) -> list[Path]:
    """List a directory tree breadth-first.

    The root comes first, followed by its entries level by level. Entries of
    a single directory are visited in name order so runs are repeatable.

    Args:
        root: The directory (or file) to traverse.

    Returns:
        Every path in the tree, in traversal order.
    """
    root = Path(root)
    visited: list[Path] = []
    queue = deque([root])

    while queue:
        current = queue.popleft()
        visited.append(current)
        if current.is_dir():
            queue.extend(sorted(current.iterdir(), key=lambda p: p.name))

    return visited


def find_flex_file(directory: str | Path, test: TestCase) -> Path:
    """Return the grammar path for a test. The file may not exist."""
    return Path(directory) / f"{test.test_name}{GRAMMAR_EXT}"


def is_golden_input_file(test_name: str, path: Path) -> bool:
    """Check whether a path is a golden input of the named test."""
    return path.name.startswith(f"{test_name}-") and path.name.endswith(GOLDEN_INPUT_EXT)


def golden_output_file(input_file: Path) -> Path:
    """Return the expected-output file for a golden input file."""
    if not input_file.name.endswith(GOLDEN_INPUT_EXT):
        raise ValueError(f"Not a golden input file: {input_file}")
    stem = input_file.name[: -len(GOLDEN_INPUT_EXT)]
    return input_file.with_name(stem + GOLDEN_OUTPUT_EXT)


def find_golden_files(
    listing: Iterable[Path],
    test_name: str,
    is_file: Callable[[Path], bool] = Path.is_file,
) -> list[GoldenPair]:
    """Pair up golden input and output files for a test.

    Inputs whose output file does not exist are skipped. Pairs keep the
    order of ``listing`` and are not deduplicated.

    Args:
        listing: Paths to consider, typically from ``breadth_first``.
        test_name: The test name all golden files are prefixed with.
        is_file: Predicate telling whether an output file exists.

    Returns:
        The valid golden pairs.
    """
    pairs = []
    for path in listing:
        if not is_golden_input_file(test_name, path):
            continue
        output_file = golden_output_file(path)
        if is_file(output_file):
            pairs.append(GoldenPair(input_file=path, output_file=output_file))
    return pairs


def resolve_files(directory: str | Path, test: TestCase) -> ResolvedFiles:
    """Find the grammar and golden pairs of a test case on disk.

    Args:
        directory: The legacy test-case directory.
        test: The parsed test case.

    Returns:
        ResolvedFiles for the test case.
    """
    goldens = find_golden_files(breadth_first(directory), test.test_name)
    return ResolvedFiles(
        flex_file=find_flex_file(directory, test),
        goldens=tuple(goldens),
    )
