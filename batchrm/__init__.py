"""batchrm - remove files in bulk with dry-run and error policies."""

from batchrm.core.constants import APP_VERSION

__version__ = APP_VERSION
