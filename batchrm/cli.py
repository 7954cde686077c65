"""Command line interface for batchrm."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from batchrm.core.config import ConfigError, ConfigManager
from batchrm.core.constants import APP_NAME, APP_VERSION, TRACE_LEVEL
from batchrm.core.logging_config import LoggingEventSink, log_run_operation, setup_logging
from batchrm.core.models import Outcome
from batchrm.core.path_resolver import expand_targets
from batchrm.execution.delete_executor import DeleteExecutor

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_HALTED = 1
EXIT_CONFIG = 1


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Remove files, with dry-run, stop-on-error and summary options.",
    )
    p.add_argument("files", nargs="*", help="Files or glob patterns to remove (** recurses)")
    p.add_argument("-s", "--stop", action="store_true", help="Stop at the first file that cannot be removed")
    p.add_argument("-o", "--detail-off", action="store_true", help="Do not list each file as it is removed")
    p.add_argument("-r", "--dry-run", action="store_true", help="Show what would be removed without removing it")
    p.add_argument("-p", "--print-summary", action="store_true", help="Print counts and bytes freed at the end")
    p.add_argument("--no-glob", action="store_true", help="Treat arguments as literal paths")
    p.add_argument("-q", "--quiet", action="store_true", help="Suppress all output")
    p.add_argument(
        "-d",
        "--debug",
        action="count",
        default=0,
        help="Increase output verbosity (repeat for trace output)",
    )
    p.add_argument("-c", "--config", default=None, help="Path to the settings file")
    p.add_argument("--version", action="version", version=f"{APP_NAME} {APP_VERSION}")
    return p


def error_text(outcome: Outcome) -> str:
    """Message printed for a halted run, with double quotes stripped."""
    return f"{outcome.error} Halting.".replace('"', "")


def main(argv: Sequence[str] | None = None) -> int:
    """
    Run the command line tool.

    Returns:
        Exit code (0 when every target was processed)
    """
    args = build_parser().parse_args(argv)

    setup_logging(quiet=args.quiet, debug=args.debug)

    try:
        config = ConfigManager(Path(args.config).expanduser() if args.config else None)
    except (ConfigError, OSError) as e:
        logger.error("%s", e)
        return EXIT_CONFIG

    settings = config.settings
    if settings["write_logs"]:
        setup_logging(
            quiet=args.quiet,
            debug=args.debug,
            write_logs=True,
            log_dir=config.log_dir,
        )

    options = config.build_options(
        dry_run=args.dry_run,
        stop_on_error=True if args.stop else None,
        show_detail=False if args.detail_off else None,
        print_summary=True if args.print_summary else None,
    )
    logger.debug("Run options: %s", options.to_dict())

    if args.no_glob:
        targets = list(args.files)
    else:
        targets = expand_targets(args.files, recursive=settings["recursive_glob"])
    logger.log(TRACE_LEVEL, "Targets: %s", targets)

    if options.dry_run:
        logger.info("Dry-run starting.")

    executor = DeleteExecutor(sink=LoggingEventSink())
    report, outcome = executor.run(targets, options)
    log_run_operation(report, outcome)

    if outcome.is_halted:
        logger.error("%s", error_text(outcome))
        return EXIT_HALTED

    if report.has_skips:
        logger.debug("Completed with %d of %d file(s) skipped", report.skipped, report.total_examined)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
