"""Shared fixtures for tests."""

from pathlib import Path

import pytest

from migrator.migration.config import MigrationConfig

GRAMMAR = """%%
%class NumberParser
%standalone
%%
[0-9]+ { System.out.println("int: " + yytext()); }
"""


@pytest.fixture
def number_parser_spec() -> str:
    """Return a well-formed specification text."""
    return """name: number-parser
description:
Parses integers.
"""


@pytest.fixture
def make_case_dir(tmp_path):
    """Return a factory writing a legacy test-case directory under tmp_path."""

    def _make(name: str = "number-parser", files: dict[str, str] | None = None) -> Path:
        case_dir = tmp_path / "cases" / name
        case_dir.mkdir(parents=True)
        for filename, content in (files or {}).items():
            path = case_dir / filename
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return case_dir

    return _make


@pytest.fixture
def grammar_text() -> str:
    """Return the grammar of the number-parser case."""
    return GRAMMAR


@pytest.fixture
def number_parser_dir(make_case_dir, number_parser_spec) -> Path:
    """Return the number-parser legacy test case directory."""
    return make_case_dir(
        "number-parser",
        {
            "number-parser.test": number_parser_spec,
            "number-parser.flex": GRAMMAR,
            "number-parser-1.input": "42\n",
            "number-parser-1.output": "int: 42\n",
        },
    )


@pytest.fixture
def output_root(tmp_path) -> Path:
    """Return the directory migrated cases are written to."""
    return tmp_path / "out"


@pytest.fixture
def config(output_root) -> MigrationConfig:
    """Return a config writing into output_root."""
    return MigrationConfig(output_root=output_root)
