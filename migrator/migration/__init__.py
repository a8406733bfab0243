"""Migration of legacy test-case directories."""

from .config import (
    ConfigLoadError,
    ConfigValidationError,
    MigrationConfig,
    build_config,
    configure_logging,
    load_config,
)
from .models import BatchResult, CaseOutcome, CaseStatus, DirectoryFailure
from .naming import hyphen_to_underscore, hyphen_to_upper_camel, package_to_path
from .orchestrator import Migrator
from .variables import MigrationVars, build_migration_vars

__all__ = [
    "ConfigLoadError",
    "ConfigValidationError",
    "MigrationConfig",
    "build_config",
    "configure_logging",
    "load_config",
    "BatchResult",
    "CaseOutcome",
    "CaseStatus",
    "DirectoryFailure",
    "hyphen_to_underscore",
    "hyphen_to_upper_camel",
    "package_to_path",
    "Migrator",
    "MigrationVars",
    "build_migration_vars",
]
