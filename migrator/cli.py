"""Command-line interface for the test-case migrator."""

import sys

import click

from .migration.config import (
    ConfigLoadError,
    ConfigValidationError,
    MigrationConfig,
    build_config,
    configure_logging,
    load_config,
)
from .migration.orchestrator import Migrator
from .output.formatter import format_batch_result


@click.command()
@click.version_option(package_name="jflex-testcase-migrator")
@click.argument("directories", nargs=-1, required=True, type=click.Path())
@click.option(
    "--output-root",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory the migrated test cases are written to (default: system temp dir)",
)
@click.option(
    "--package-prefix",
    default=None,
    help="Java package prefix of the migrated tests (default: jflex.testcase)",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML file with migration settings",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    default=False,
    help="Enable debug logging",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Summary format",
)
def main(
    directories: tuple[str, ...],
    output_root: str | None,
    package_prefix: str | None,
    config_file: str | None,
    verbose: bool,
    output_format: str,
):
    """Migrate legacy JFlex test cases.

    DIRECTORIES are legacy test-case directories, each holding one or more
    .test specifications with their grammar and golden files.

    A failure in one test case is logged and the remaining cases are still
    migrated. Check the log and summary for partial failures.

    Exit codes:
      0 - All directories were processed
      2 - Usage or config error
    """
    try:
        config = _load_settings(config_file, output_root, package_prefix, verbose)
    except ConfigLoadError as e:
        click.echo(f"Error loading config: {e}", err=True)
        sys.exit(2)
    except ConfigValidationError as e:
        click.echo(f"Config validation error: {e}", err=True)
        for err in e.errors:
            click.echo(f"  - {err['loc']}: {err['msg']}", err=True)
        sys.exit(2)

    configure_logging(config.log_level)

    result = Migrator(config).migrate_all(directories)

    click.echo(format_batch_result(result, output_format))  # type: ignore
    sys.exit(0)


def _load_settings(
    config_file: str | None,
    output_root: str | None,
    package_prefix: str | None,
    verbose: bool,
) -> MigrationConfig:
    """Build the config from an optional file and command-line overrides."""
    config = load_config(config_file) if config_file else MigrationConfig()

    overrides: dict = {}
    if output_root is not None:
        overrides["output_root"] = output_root
    if package_prefix is not None:
        overrides["package_prefix"] = package_prefix
    if verbose:
        overrides["log_level"] = "DEBUG"

    if not overrides:
        return config
    return build_config({**config.model_dump(), **overrides})


if __name__ == "__main__":
    main()
