"""Core data models for batchrm."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, asdict
from enum import Enum
from typing import Optional, Union

from .errors import TargetError
from .formatting import thousands_separated


@dataclass(frozen=True)
class RunOptions:
    """Policy flags for a single run. Built once, never mutated."""

    dry_run: bool = False
    stop_on_error: bool = False
    show_detail: bool = True
    print_summary: bool = False

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return asdict(self)


@dataclass(frozen=True)
class Target:
    """A path together with its size, as measured just before removal."""

    path: str
    size: int


@dataclass
class RunReport:
    """
    Counters accumulated over one run.

    Only the executor mutates a report, and every counter only grows.
    After a completed run total_examined == removed + skipped.
    """

    dry_run: bool = False
    total_examined: int = 0
    removed: int = 0
    skipped: int = 0
    bytes_freed: int = 0

    def record_examined(self) -> None:
        self.total_examined += 1

    def record_removed(self, size: int) -> None:
        self.removed += 1
        self.bytes_freed += size

    def record_skipped(self) -> None:
        self.skipped += 1

    @property
    def bytes_freed_formatted(self) -> str:
        return thousands_separated(self.bytes_freed)

    @property
    def has_skips(self) -> bool:
        """Return True if at least one target was skipped."""
        return self.skipped > 0

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "dry_run": self.dry_run,
            "total_examined": self.total_examined,
            "removed": self.removed,
            "skipped": self.skipped,
            "bytes_freed": self.bytes_freed,
        }


class OutcomeStatus(Enum):
    """How a run ended."""

    COMPLETED = "completed"
    HALTED = "halted"


@dataclass(frozen=True)
class Outcome:
    """Result tag of a run; a halted run carries the error that stopped it."""

    status: OutcomeStatus
    error: Optional[TargetError] = None

    @classmethod
    def completed(cls) -> Outcome:
        return cls(status=OutcomeStatus.COMPLETED)

    @classmethod
    def halted(cls, error: TargetError) -> Outcome:
        return cls(status=OutcomeStatus.HALTED, error=error)

    @property
    def is_halted(self) -> bool:
        return self.status is OutcomeStatus.HALTED

    @property
    def failed_path(self) -> str | None:
        """Path of the target that halted the run, if any."""
        return self.error.path if self.error is not None else None


@dataclass(frozen=True)
class DetailEvent:
    """Emitted for each target before removal is attempted."""

    path: str
    size_bytes: int


@dataclass(frozen=True)
class WarningEvent:
    """Emitted when a target is skipped after an error."""

    path: str
    error_message: str


@dataclass(frozen=True)
class SummaryEvent:
    """Emitted once after a run that went through every target."""

    total_examined: int
    removed: int
    skipped: int
    bytes_freed_formatted: str

    @classmethod
    def from_report(cls, report: RunReport) -> SummaryEvent:
        """Create a summary from a finished report."""
        return cls(
            total_examined=report.total_examined,
            removed=report.removed,
            skipped=report.skipped,
            bytes_freed_formatted=report.bytes_freed_formatted,
        )


Event = Union[DetailEvent, WarningEvent, SummaryEvent]


class EventSink(ABC):
    """Receiver for the events produced during a run."""

    @abstractmethod
    def emit(self, event: Event) -> None:
        """Handle a single event."""
