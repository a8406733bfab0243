"""Outcome records for a migration run."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class CaseStatus(str, Enum):
    """Status of one migrated test case."""

    MIGRATED = "migrated"
    FAILED = "failed"


@dataclass
class CaseOutcome:
    """Result of migrating one specification file."""

    spec_file: Path
    status: CaseStatus
    test_name: str | None = None
    output_dir: Path | None = None
    warnings: list[str] = field(default_factory=list)
    error: str | None = None


@dataclass
class DirectoryFailure:
    """A directory argument that could not be migrated at all."""

    directory: Path
    error: str


@dataclass
class BatchResult:
    """Result of migrating every directory argument."""

    outcomes: list[CaseOutcome] = field(default_factory=list)
    directory_failures: list[DirectoryFailure] = field(default_factory=list)

    @property
    def migrated(self) -> list[CaseOutcome]:
        """Cases that were migrated."""
        return [o for o in self.outcomes if o.status == CaseStatus.MIGRATED]

    @property
    def failed(self) -> list[CaseOutcome]:
        """Cases that failed."""
        return [o for o in self.outcomes if o.status == CaseStatus.FAILED]

    @property
    def has_failures(self) -> bool:
        """Check if any case or directory failed."""
        return bool(self.failed or self.directory_failures)
