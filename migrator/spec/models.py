"""Pydantic model for a legacy test specification."""

import re

from pydantic import BaseModel, ConfigDict, field_validator

# Hyphen-separated words; the name becomes file names and Java class names
TEST_NAME_PATTERN = re.compile(r"^[A-Za-z0-9]+([-_][A-Za-z0-9]+)*$")


class TestCase(BaseModel):
    """One legacy test case, as described by a ``.test`` file."""

    __test__ = False  # not a pytest class

    model_config = ConfigDict(frozen=True)

    test_name: str
    description: str = ""
    expect_jflex_fail: bool = False
    expect_javac_fail: bool = False
    jflex_options: tuple[str, ...] = ()
    javac_encoding: str | None = None
    input_file_encoding: str | None = None
    output_file_encoding: str | None = None

    @field_validator("test_name")
    @classmethod
    def check_test_name(cls, value: str) -> str:
        """Require a hyphen-case identifier."""
        if not TEST_NAME_PATTERN.match(value):
            raise ValueError(f"invalid test name: {value!r}")
        return value

    @field_validator("description")
    @classmethod
    def strip_description(cls, value: str) -> str:
        """Trim surrounding whitespace from the description."""
        return value.strip()

    @property
    def needs_manual_migration(self) -> bool:
        """Whether the case expects JFlex or javac to fail."""
        return self.expect_jflex_fail or self.expect_javac_fail
