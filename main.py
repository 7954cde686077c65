"""Application entry point for batchrm.

Parses the command line, removes the requested files and exits with the
run's exit code.
"""

import sys

from batchrm.cli import main

if __name__ == "__main__":
    sys.exit(main())
