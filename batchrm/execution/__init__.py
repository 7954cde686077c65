"""Deletion engine package for batchrm."""

from batchrm.execution.lock_resolver import LockResolver
from batchrm.execution.delete_executor import DeleteExecutor

__all__ = [
    "LockResolver",
    "DeleteExecutor",
]
