"""Shared pytest fixtures for batchrm tests."""

import json
import logging
import shutil
import tempfile
from pathlib import Path

import pytest

from batchrm.core import logging_config
from batchrm.core.logging_config import RecordingEventSink


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by setup_logging after each test."""
    yield
    logging_config._remove_own_handlers(logging.getLogger())
    logging_config._remove_own_handlers(logging.getLogger(logging_config.AUDIT_LOGGER_NAME))


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    path = Path(tempfile.mkdtemp())
    yield path
    shutil.rmtree(path, ignore_errors=True)


@pytest.fixture
def temp_config_file(temp_dir):
    """Create a temporary config file path."""
    return temp_dir / "config" / "config.json"


@pytest.fixture
def valid_config_data():
    """Return valid configuration data."""
    return {
        "version": 1,
        "settings": {
            "stop_on_error": True,
            "show_detail": False,
            "print_summary": True,
            "recursive_glob": True,
            "write_logs": False,
        },
    }


@pytest.fixture
def temp_config_with_data(temp_config_file, valid_config_data):
    """Create a temporary config file with valid data."""
    temp_config_file.parent.mkdir(parents=True, exist_ok=True)
    with open(temp_config_file, "w", encoding="utf-8") as f:
        json.dump(valid_config_data, f)
    return temp_config_file


@pytest.fixture
def make_file(temp_dir):
    """Return a factory that writes a file of a given size under temp_dir."""

    def _make(name: str, size: int = 0) -> Path:
        path = temp_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"x" * size)
        return path

    return _make


@pytest.fixture
def recording_sink():
    """Return an in-memory event sink."""
    return RecordingEventSink()
