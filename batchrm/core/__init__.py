"""Core module for batchrm."""

from .config import ConfigManager, ConfigError
from .errors import (
    TargetError,
    TargetNotFound,
    TargetAccessDenied,
    StatFailed,
    RemoveFailed,
    classify_os_error,
)
from .formatting import thousands_separated
from .logging_config import (
    setup_logging,
    get_audit_logger,
    log_run_operation,
    LoggingEventSink,
    RecordingEventSink,
)
from .models import (
    RunOptions,
    Target,
    RunReport,
    Outcome,
    OutcomeStatus,
    DetailEvent,
    WarningEvent,
    SummaryEvent,
    EventSink,
)
from .path_resolver import expand_targets

__all__ = [
    # Config
    "ConfigManager",
    "ConfigError",
    # Errors
    "TargetError",
    "TargetNotFound",
    "TargetAccessDenied",
    "StatFailed",
    "RemoveFailed",
    "classify_os_error",
    # Formatting
    "thousands_separated",
    # Logging
    "setup_logging",
    "get_audit_logger",
    "log_run_operation",
    "LoggingEventSink",
    "RecordingEventSink",
    # Models
    "RunOptions",
    "Target",
    "RunReport",
    "Outcome",
    "OutcomeStatus",
    "DetailEvent",
    "WarningEvent",
    "SummaryEvent",
    "EventSink",
    # Paths
    "expand_targets",
]
