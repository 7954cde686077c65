"""Logging configuration and event sinks for batchrm."""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .constants import (
    LOGS_DIR,
    DEBUG_LOG_FILE,
    AUDIT_LOG_FILE,
    DEBUG_LOG_MAX_BYTES,
    DEBUG_LOG_BACKUP_COUNT,
    TRACE_LEVEL,
)
from .models import (
    DetailEvent,
    Event,
    EventSink,
    Outcome,
    RunReport,
    SummaryEvent,
    WarningEvent,
)

# Logger names
AUDIT_LOGGER_NAME = "audit"
EVENTS_LOGGER_NAME = "batchrm.events"

# Format strings
CONSOLE_FORMAT = "%(message)s"
DEBUG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
AUDIT_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"

# Above CRITICAL, so nothing passes
LEVEL_OFF = logging.CRITICAL + 10

logging.addLevelName(TRACE_LEVEL, "TRACE")


class _BelowLevelFilter(logging.Filter):
    """Pass only records strictly below a level."""

    def __init__(self, level: int) -> None:
        super().__init__()
        self.level = level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self.level


def console_level(quiet: bool = False, debug: int = 0) -> int:
    """
    Map verbosity flags to a console log level.

    Args:
        quiet: Silence all output
        debug: Number of --debug flags (0 INFO, 1 DEBUG, 2+ TRACE)

    Returns:
        A logging level
    """
    if quiet:
        return LEVEL_OFF
    if debug <= 0:
        return logging.INFO
    if debug == 1:
        return logging.DEBUG
    return TRACE_LEVEL


def _mark(handler: logging.Handler) -> logging.Handler:
    handler._batchrm = True  # type: ignore[attr-defined]
    return handler


def _remove_own_handlers(target: logging.Logger) -> None:
    for handler in list(target.handlers):
        if getattr(handler, "_batchrm", False):
            target.removeHandler(handler)
            handler.close()


def setup_logging(
    quiet: bool = False,
    debug: int = 0,
    write_logs: bool = False,
    log_dir: Path | None = None,
) -> None:
    """
    Configure application logging.

    Sets up:
    1. Console: INFO and below to stdout, WARNING and above to stderr
    2. Debug log (write_logs only): rotating file handler with TRACE level
    3. Audit log (write_logs only): append-only file, one line per run

    Calling it again replaces the handlers installed by the previous call.

    Args:
        quiet: Turn console output off
        debug: Console verbosity (see console_level)
        write_logs: Also write the debug and audit log files
        log_dir: Directory for the log files; LOGS_DIR if None
    """
    level = console_level(quiet, debug)

    root_logger = logging.getLogger()
    root_logger.setLevel(TRACE_LEVEL)
    _remove_own_handlers(root_logger)

    out_handler = logging.StreamHandler(sys.stdout)
    out_handler.setLevel(level)
    out_handler.addFilter(_BelowLevelFilter(logging.WARNING))
    out_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    root_logger.addHandler(_mark(out_handler))

    err_handler = logging.StreamHandler(sys.stderr)
    err_handler.setLevel(max(level, logging.WARNING))
    err_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    root_logger.addHandler(_mark(err_handler))

    audit_logger = logging.getLogger(AUDIT_LOGGER_NAME)
    audit_logger.setLevel(logging.INFO)
    audit_logger.propagate = False  # Don't send to root logger
    _remove_own_handlers(audit_logger)

    if not write_logs:
        return

    if log_dir is None:
        log_dir, debug_file, audit_file = LOGS_DIR, DEBUG_LOG_FILE, AUDIT_LOG_FILE
    else:
        debug_file = log_dir / DEBUG_LOG_FILE.name
        audit_file = log_dir / AUDIT_LOG_FILE.name
    log_dir.mkdir(parents=True, exist_ok=True)

    debug_handler = RotatingFileHandler(
        debug_file,
        maxBytes=DEBUG_LOG_MAX_BYTES,
        backupCount=DEBUG_LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    debug_handler.setLevel(TRACE_LEVEL)
    debug_handler.setFormatter(logging.Formatter(DEBUG_FORMAT))
    root_logger.addHandler(_mark(debug_handler))

    audit_handler = logging.FileHandler(
        audit_file,
        mode="a",
        encoding="utf-8",
    )
    audit_handler.setLevel(logging.INFO)
    audit_handler.setFormatter(logging.Formatter(AUDIT_FORMAT))
    audit_logger.addHandler(_mark(audit_handler))


def get_audit_logger() -> logging.Logger:
    """Return the audit logger instance."""
    return logging.getLogger(AUDIT_LOGGER_NAME)


def log_run_operation(report: RunReport, outcome: Outcome) -> None:
    """
    Log a finished run to the audit log.

    Args:
        report: Counters of the run
        outcome: How the run ended
    """
    audit = get_audit_logger()
    mode = "DRY_RUN" if report.dry_run else "REMOVE"
    audit.info(
        "%s | examined=%d | removed=%d | skipped=%d | bytes=%d | outcome=%s%s",
        mode,
        report.total_examined,
        report.removed,
        report.skipped,
        report.bytes_freed,
        outcome.status.value,
        f" | failed={outcome.failed_path}" if outcome.is_halted else "",
    )


class LoggingEventSink(EventSink):
    """Renders engine events as log records."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or logging.getLogger(EVENTS_LOGGER_NAME)

    def emit(self, event: Event) -> None:
        if isinstance(event, DetailEvent):
            self.logger.info("Deleting: %s for %d bytes.", event.path, event.size_bytes)
        elif isinstance(event, WarningEvent):
            self.logger.warning("%s Continuing.", event.error_message)
        elif isinstance(event, SummaryEvent):
            self.logger.info("Total files examined:        %5d", event.total_examined)
            self.logger.info("Files removed:               %5d", event.removed)
            self.logger.info("Files skipped due to errors: %5d", event.skipped)
            self.logger.info("Bytes freed:                 %s", event.bytes_freed_formatted)
        else:
            raise TypeError(f"Unsupported event type: {type(event).__name__}")


class RecordingEventSink(EventSink):
    """Keeps every emitted event in memory, in order."""

    def __init__(self) -> None:
        self.events: list[Event] = []

    def emit(self, event: Event) -> None:
        self.events.append(event)

    def of_type(self, event_type: type) -> list[Event]:
        """Return the recorded events of one type."""
        return [e for e in self.events if isinstance(e, event_type)]
