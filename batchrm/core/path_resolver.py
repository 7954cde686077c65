"""Expansion of command line patterns into concrete target paths."""

from __future__ import annotations

import glob
import logging
import os
from typing import Iterable

from .constants import TRACE_LEVEL

logger = logging.getLogger(__name__)


def expand_pattern(pattern: str, recursive: bool = True) -> list[str]:
    """
    Expand a single argument into file paths.

    A leading "~" is expanded first. Arguments without glob characters are
    then returned as they are, whether or not they exist. A pattern with no
    file matches is also returned as it is.

    Args:
        pattern: Path or glob pattern
        recursive: Let "**" match any number of directories

    Returns:
        Sorted list of matching files, or [pattern]
    """
    pattern = os.path.expanduser(pattern)
    if not glob.has_magic(pattern):
        return [pattern]

    matches = sorted(
        p for p in glob.glob(pattern, recursive=recursive)
        if not os.path.isdir(p)
    )
    if not matches:
        logger.debug("Pattern %s matched no files", pattern)
        return [pattern]

    logger.log(TRACE_LEVEL, "Pattern %s expanded to %d file(s)", pattern, len(matches))
    return matches


def expand_targets(patterns: Iterable[str], recursive: bool = True) -> list[str]:
    """
    Expand arguments into an ordered list of target paths.

    Empty arguments are dropped; a path produced more than once is kept only
    at its first position.

    Args:
        patterns: Paths and glob patterns in command line order
        recursive: Let "**" match any number of directories

    Returns:
        Ordered, de-duplicated list of paths
    """
    targets: list[str] = []
    seen: set[str] = set()

    for pattern in patterns:
        if not pattern or not pattern.strip():
            logger.warning("Ignoring empty path argument")
            continue

        for path in expand_pattern(pattern, recursive=recursive):
            if path in seen:
                logger.debug("Skipping duplicate path %s", path)
                continue
            seen.add(path)
            targets.append(path)

    return targets
