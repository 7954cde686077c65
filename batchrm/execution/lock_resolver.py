"""Detection of processes holding a file open."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import psutil

logger = logging.getLogger(__name__)

# Windows error code for sharing violation (file open elsewhere)
ERROR_SHARING_VIOLATION = 32


def is_sharing_violation(exc: BaseException) -> bool:
    """Return True if exc reports a file held open by another process."""
    return getattr(exc, "winerror", None) == ERROR_SHARING_VIOLATION


class LockResolver:
    """Finds running processes that keep a target file open."""

    def find_holders(self, path: Path | str) -> list[str]:
        """
        Find processes that have a file open.

        Args:
            path: File to look for

        Returns:
            Sorted, de-duplicated process names; empty if none are found or
            processes cannot be enumerated
        """
        wanted = os.path.normcase(os.path.abspath(str(path)))
        holders: set[str] = set()

        try:
            for proc in psutil.process_iter(["name", "pid"]):
                try:
                    for open_file in proc.open_files():
                        if os.path.normcase(open_file.path) == wanted:
                            holders.add(proc.info["name"] or f"pid {proc.info['pid']}")
                            break
                except (psutil.NoSuchProcess, psutil.AccessDenied):
                    continue
        except Exception as e:
            logger.warning("Error enumerating processes: %s", e)
            return []

        if holders:
            logger.debug("%s is held open by %s", path, ", ".join(sorted(holders)))
        return sorted(holders)
