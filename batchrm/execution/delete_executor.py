"""File deletion executor for batchrm.

CONTRACT:
- Files are ONLY removed in this module
- Targets are handled one at a time, in the order given
- Every per-target error is turned into a skip or a halt; none is retried
- dry_run=True never touches the filesystem
- A halted run still returns the report accumulated up to the failure
"""

from __future__ import annotations

import logging
import os
from typing import Iterable

from batchrm.core.constants import TRACE_LEVEL
from batchrm.core.errors import (
    STAGE_REMOVE,
    STAGE_STAT,
    TargetAccessDenied,
    TargetError,
    classify_os_error,
)
from batchrm.core.logging_config import LoggingEventSink
from batchrm.core.models import (
    DetailEvent,
    EventSink,
    Outcome,
    RunOptions,
    RunReport,
    SummaryEvent,
    Target,
    WarningEvent,
)
from batchrm.execution.lock_resolver import LockResolver, is_sharing_violation

logger = logging.getLogger(__name__)


class DeleteExecutor:
    """
    Removes a sequence of files under a stop/continue error policy.

    Per target:
    1. Count it as examined
    2. Read its size → error handled by policy
    3. Emit DetailEvent (show_detail only)
    4. Remove it (skipped in dry run) → error handled by policy
    5. Add it to the removed count and freed bytes
    """

    def __init__(
        self,
        sink: EventSink | None = None,
        lock_resolver: LockResolver | None = None,
    ) -> None:
        """
        Initialize the DeleteExecutor.

        Args:
            sink: Receiver for detail, warning and summary events.
                Logs them if None.
            lock_resolver: Used to name processes holding a file whose
                removal failed with a sharing violation. Creates new one if None.
        """
        self.sink = sink or LoggingEventSink()
        self.lock_resolver = lock_resolver or LockResolver()

    def run(self, targets: Iterable[str], options: RunOptions) -> tuple[RunReport, Outcome]:
        """
        Remove every target.

        Args:
            targets: Concrete paths, already expanded, in processing order
            options: Policy flags for this run

        Returns:
            The run report and how the run ended
        """
        report = RunReport(dry_run=options.dry_run)

        for path in targets:
            report.record_examined()

            try:
                target = self._measure(path)

                if options.show_detail:
                    self.sink.emit(DetailEvent(path=target.path, size_bytes=target.size))

                if not options.dry_run:
                    self._remove(target)
            except TargetError as error:
                if options.stop_on_error:
                    logger.debug("Halting at %s after %d target(s)", path, report.total_examined)
                    return report, Outcome.halted(error)

                self.sink.emit(WarningEvent(path=path, error_message=str(error)))
                report.record_skipped()
                continue

            report.record_removed(target.size)
            logger.log(TRACE_LEVEL, "Removed %s (%d bytes)", path, target.size)

        if options.print_summary:
            self.sink.emit(SummaryEvent.from_report(report))

        return report, Outcome.completed()

    def _measure(self, path: str) -> Target:
        """
        Read the current size of a target.

        Raises:
            TargetError: The size could not be read
        """
        try:
            size = os.stat(path).st_size
        except (OSError, ValueError) as e:
            raise classify_os_error(path, STAGE_STAT, e) from e
        return Target(path=path, size=size)

    def _remove(self, target: Target) -> None:
        """
        Remove a target from the filesystem.

        Raises:
            TargetError: The removal was rejected
        """
        try:
            os.remove(target.path)
        except (OSError, ValueError) as e:
            error = classify_os_error(target.path, STAGE_REMOVE, e)
            if isinstance(error, TargetAccessDenied) and is_sharing_violation(e):
                holders = self.lock_resolver.find_holders(target.path)
                if holders:
                    error = TargetAccessDenied(target.path, STAGE_REMOVE, e, holders)
            raise error from e
