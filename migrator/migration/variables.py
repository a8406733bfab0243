"""Template variables for one migrated test case."""

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from ..resolver.models import GoldenPair
from ..spec.models import TestCase
from .config import MigrationConfig
from .naming import hyphen_to_underscore, hyphen_to_upper_camel, package_to_path


@dataclass(frozen=True)
class MigrationVars:
    """Variables handed to the BUILD and test-driver templates."""

    flex_grammar: Path
    java_package: str
    java_package_dir: str
    test_class_name: str
    scanner_class_name: str
    test_name: str
    test_description: str
    goldens: tuple[GoldenPair, ...] = field(default_factory=tuple)
    jflex_options: tuple[str, ...] = field(default_factory=tuple)
    javac_encoding: str | None = None
    input_file_encoding: str | None = None
    output_file_encoding: str | None = None

    def template_context(self) -> dict[str, Any]:
        """Flat variable bag for the renderer."""
        return {f.name: getattr(self, f.name) for f in fields(self)}


def build_migration_vars(
    directory_name: str,
    test: TestCase,
    flex_file: Path,
    goldens: list[GoldenPair] | tuple[GoldenPair, ...],
    config: MigrationConfig | None = None,
) -> MigrationVars:
    """Create the template variables for a test case.

    Args:
        directory_name: Hyphen-case name of the legacy test-case directory.
        test: The parsed test case.
        flex_file: The grammar file of the test.
        goldens: Golden pairs of the test.
        config: Migration settings (package prefix, class suffix).

    Returns:
        The MigrationVars for the test case.
    """
    config = config or MigrationConfig()
    target_dir = hyphen_to_underscore(directory_name)
    java_package = f"{config.package_prefix}.{target_dir}"
    class_name = hyphen_to_upper_camel(test.test_name)

    return MigrationVars(
        flex_grammar=flex_file,
        java_package=java_package,
        java_package_dir=package_to_path(java_package),
        test_class_name=class_name + config.test_class_suffix,
        # TODO: read the %class option from the grammar instead of relying on
        # the test name convention.
        scanner_class_name=class_name,
        test_name=test.test_name,
        test_description=test.description.strip(),
        goldens=tuple(goldens),
        jflex_options=test.jflex_options,
        javac_encoding=test.javac_encoding,
        input_file_encoding=test.input_file_encoding,
        output_file_encoding=test.output_file_encoding,
    )
