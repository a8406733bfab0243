"""Migrate legacy test-case directories into the new test layout.

For every ``.test`` file found in a legacy test-case directory, the migrator:

1. parses the specification into a ``TestCase``
2. finds the grammar and golden files by naming convention
3. creates an output directory named after the legacy directory, with
   '-' replaced by '_'
4. renders the BUILD file and the Java test class
5. copies the grammar with a ``package`` declaration prepended
6. copies the golden files
"""

import logging
import shutil
from pathlib import Path
from typing import Iterable

from ..errors import MigrationError, NotFoundError
from ..render.engine import BUILD_TEMPLATE, TEST_CASE_TEMPLATE, TemplateRenderer
from ..render.errors import TemplateError
from ..resolver.finder import breadth_first, resolve_files
from ..resolver.models import GoldenPair
from ..spec.errors import FormatError
from ..spec.parser import parse_spec
from .config import MigrationConfig
from .models import BatchResult, CaseOutcome, CaseStatus, DirectoryFailure
from .naming import hyphen_to_underscore
from .variables import MigrationVars, build_migration_vars

logger = logging.getLogger(__name__)

SPEC_EXT = ".test"
BUILD_FILE = "BUILD"


class Migrator:
    """Migrates legacy test-case directories one at a time."""

    def __init__(
        self,
        config: MigrationConfig | None = None,
        renderer: TemplateRenderer | None = None,
    ):
        self.config = config or MigrationConfig()
        self.renderer = renderer or TemplateRenderer()

    def migrate_all(self, directories: Iterable[str | Path]) -> BatchResult:
        """Migrate every given directory.

        A failure for one directory is logged and recorded; the remaining
        directories are still migrated.
        """
        result = BatchResult()
        for directory in directories:
            try:
                result.outcomes.extend(self.migrate_directory(directory))
            except MigrationError as e:
                logger.error("Migration failed: %s", e)
                result.directory_failures.append(DirectoryFailure(Path(directory), str(e)))
        return result

    def migrate_directory(self, directory: str | Path) -> list[CaseOutcome]:
        """Migrate every test specification within a test-case directory.

        Raises:
            MigrationError: If the directory does not exist or cannot be listed.
        """
        directory = Path(directory)
        if not directory.exists():
            logger.warning("Directory doesn't exist: %s", directory.name)
            raise MigrationError(
                f"Could not migrate {directory}",
                NotFoundError(f"No such directory: {directory.absolute()}", str(directory)),
            )

        logger.info("Migrating %s...", directory.name)
        logger.debug("location: %s", directory.absolute())

        try:
            spec_files = [
                p for p in breadth_first(directory) if p.suffix == SPEC_EXT and p.is_file()
            ]
        except OSError as e:
            raise MigrationError(f"Could not list {directory}", e) from e
        if not spec_files:
            logger.warning("No %s file found in %s", SPEC_EXT, directory)

        outcomes = []
        seen_names: set[str] = set()
        for spec_file in spec_files:
            try:
                outcome = self.migrate_spec_file(directory, spec_file)
            except MigrationError as e:
                logger.error("Migration of %s failed: %s", spec_file.name, e)
                logger.debug("Failure details", exc_info=e)
                outcomes.append(
                    CaseOutcome(spec_file=spec_file, status=CaseStatus.FAILED, error=str(e))
                )
                continue

            if outcome.test_name in seen_names:
                message = f"Test name {outcome.test_name} is used more than once in {directory.name}"
                logger.warning(message)
                outcome.warnings.append(message)
            seen_names.add(outcome.test_name)
            outcomes.append(outcome)

        return outcomes

    def migrate_spec_file(self, directory: Path, spec_file: Path) -> CaseOutcome:
        """Migrate the test case described by one ``.test`` file.

        Raises:
            MigrationError: If the spec is invalid or the output cannot be written.
        """
        try:
            test = parse_spec(spec_file)
        except FormatError as e:
            raise MigrationError(f"Invalid test spec {spec_file.name}", e) from e
        except (NotFoundError, OSError, UnicodeDecodeError) as e:
            raise MigrationError(f"Failed reading the test spec {spec_file.name}", e) from e

        warnings = []
        if test.needs_manual_migration:
            message = f"Test {test.test_name} must be migrated with JflexTestRunner"
            logger.warning(message)
            warnings.append(message)

        directory_name = directory.resolve().name
        try:
            files = resolve_files(directory, test)
        except OSError as e:
            raise MigrationError(f"Could not resolve files for {spec_file.name}", e) from e

        template_vars = build_migration_vars(
            directory_name, test, files.flex_file, files.goldens, self.config
        )
        output_dir = self.write_output(
            hyphen_to_underscore(directory_name), template_vars, warnings
        )

        return CaseOutcome(
            spec_file=spec_file,
            status=CaseStatus.MIGRATED,
            test_name=test.test_name,
            output_dir=output_dir,
            warnings=warnings,
        )

    def write_output(
        self,
        target_dir_name: str,
        template_vars: MigrationVars,
        warnings: list[str] | None = None,
    ) -> Path:
        """Generate the migrated test case into the output root.

        Partially written files are left in place when a step fails.

        Returns:
            The output directory.

        Raises:
            MigrationError: If rendering or any file operation fails.
        """
        if warnings is None:
            warnings = []

        output_dir = self.config.output_root / target_dir_name
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise MigrationError(f"Could not create output directory {output_dir}", e) from e

        logger.info("Generating into %s", output_dir)
        self._render_build_file(template_vars, output_dir, warnings)
        self._render_test_case(template_vars, output_dir)
        self._copy_grammar_file(template_vars.flex_grammar, template_vars.java_package, output_dir)
        self._copy_golden_files(template_vars.goldens, output_dir)

        logger.info("Import the files in your workspace")
        logger.info("   cp -r %s $(bazel info workspace)/%s", output_dir, self.config.workspace_dir)
        return output_dir

    def _render_build_file(
        self, template_vars: MigrationVars, output_dir: Path, warnings: list[str]
    ) -> None:
        out_file = output_dir / BUILD_FILE
        # Several .test files in one directory share the BUILD file
        if out_file.exists():
            message = f"Overriding {out_file}"
            logger.warning(message)
            warnings.append(message)
        self._render(BUILD_TEMPLATE, template_vars, out_file, "Couldn't write BUILD file")

    def _render_test_case(self, template_vars: MigrationVars, output_dir: Path) -> None:
        out_file = output_dir / f"{template_vars.test_class_name}.java"
        self._render(TEST_CASE_TEMPLATE, template_vars, out_file, "Couldn't write java test case")

    def _render(
        self, template_name: str, template_vars: MigrationVars, out_file: Path, failure: str
    ) -> None:
        logger.info("Generating %s", out_file)
        try:
            content = self.renderer.render(template_name, template_vars.template_context())
        except TemplateError as e:
            raise MigrationError(f"Failed to render template {template_name}", e) from e

        try:
            with open(out_file, "w", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            raise MigrationError(failure, e) from e

    def _copy_grammar_file(self, flex_file: Path, java_package: str, output_dir: Path) -> None:
        """Copy the grammar, prepending a package declaration.

        Legacy grammars live in the default Java package.
        """
        logger.info("Copy grammar %s", flex_file.name)
        logger.debug("location: %s", flex_file.absolute())
        copied = output_dir / flex_file.name
        try:
            with open(flex_file, "r", encoding="utf-8", newline="") as src:
                with open(copied, "w", encoding="utf-8", newline="") as dst:
                    dst.write(f"package {java_package};\n")
                    shutil.copyfileobj(src, dst)
        except (OSError, UnicodeDecodeError) as e:
            raise MigrationError("Could not copy .flex file", e) from e

    def _copy_golden_files(self, goldens: tuple[GoldenPair, ...], output_dir: Path) -> None:
        logger.info("Copy %d pairs of golden files", len(goldens))
        try:
            for golden in goldens:
                _copy_file(golden.input_file, output_dir)
                _copy_file(golden.output_file, output_dir)
        except OSError as e:
            raise MigrationError("Could not copy golden files", e) from e


def _copy_file(path: Path, target_dir: Path) -> None:
    """Copy a file verbatim into the target directory."""
    logger.debug("Copying %s...", path.name)
    shutil.copyfile(path, target_dir / path.name)
