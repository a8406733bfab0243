"""Configuration for a migration run."""

import logging
import re
import tempfile
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

PACKAGE_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)*$")


class ConfigLoadError(Exception):
    """Raised when a config file cannot be loaded."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


class ConfigValidationError(Exception):
    """Raised when config values fail validation."""

    def __init__(self, message: str, errors: list[dict] | None = None):
        self.errors = errors or []
        super().__init__(message)


class MigrationConfig(BaseModel):
    """Settings passed explicitly into the migrator."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    output_root: Path = Path(tempfile.gettempdir())
    package_prefix: str = "jflex.testcase"
    test_class_suffix: str = "GoldenTest"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    workspace_dir: str = "javatests/jflex/testcase"

    @field_validator("package_prefix")
    @classmethod
    def check_package_prefix(cls, value: str) -> str:
        """Require a dotted Java package name."""
        if not PACKAGE_PATTERN.match(value):
            raise ValueError(f"not a valid Java package: {value!r}")
        return value


def load_config(path: str | Path) -> MigrationConfig:
    """Load a MigrationConfig from a YAML file.

    Args:
        path: Path to the YAML file.

    Returns:
        The loaded config. An empty file gives the defaults.

    Raises:
        ConfigLoadError: If the file cannot be read or parsed.
        ConfigValidationError: If the values fail validation.
    """
    path = Path(path)

    if not path.is_file():
        raise ConfigLoadError(f"Config file not found: {path}", str(path))

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML: {e}", str(path)) from e
    except OSError as e:
        raise ConfigLoadError(f"Cannot read file: {e}", str(path)) from e

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise ConfigLoadError(
            f"Expected YAML mapping at root, got {type(data).__name__}", str(path)
        )

    return build_config(data)


def build_config(data: dict) -> MigrationConfig:
    """Validate raw settings into a MigrationConfig.

    Raises:
        ConfigValidationError: If the values fail validation.
    """
    try:
        return MigrationConfig.model_validate(data)
    except ValidationError as e:
        errors = [
            {
                "loc": ".".join(str(x) for x in err["loc"]),
                "msg": err["msg"],
                "type": err["type"],
            }
            for err in e.errors()
        ]
        raise ConfigValidationError(
            f"Config validation failed with {len(errors)} error(s)", errors
        ) from e


def configure_logging(level: str) -> None:
    """Set up root logging for a command-line run."""
    logging.basicConfig(level=getattr(logging, level), format=LOG_FORMAT)
