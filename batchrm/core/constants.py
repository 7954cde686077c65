"""Application constants and paths for batchrm."""

import os
from pathlib import Path

# Application metadata
APP_NAME = "batchrm"
APP_VERSION = "1.0.0"
CONFIG_VERSION = 1


def _config_root() -> Path:
    appdata = os.environ.get("APPDATA")
    if appdata:
        return Path(appdata)
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg and xdg.strip():
        return Path(xdg).expanduser()
    return Path("~/.config").expanduser()


# Base paths
CONFIG_DIR = _config_root() / APP_NAME
LOGS_DIR = CONFIG_DIR / "logs"

# File paths
CONFIG_FILE = CONFIG_DIR / "config.json"
DEBUG_LOG_FILE = LOGS_DIR / "debug.log"
AUDIT_LOG_FILE = LOGS_DIR / "audit.log"

# Logging settings
DEBUG_LOG_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
DEBUG_LOG_BACKUP_COUNT = 3
TRACE_LEVEL = 5

# Rendered in place of a number that could not be formatted
FORMAT_FALLBACK = "NaN"

# Default settings
DEFAULT_SETTINGS = {
    "stop_on_error": False,
    "show_detail": True,
    "print_summary": False,
    "recursive_glob": True,
    "write_logs": False,
}
