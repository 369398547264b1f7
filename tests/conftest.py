"""Shared pytest fixtures for browserware tests."""

import json
import shutil
import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    path = Path(tempfile.mkdtemp())
    yield path
    shutil.rmtree(path, ignore_errors=True)


@pytest.fixture
def temp_config_file(temp_dir):
    """Create a temporary config file path."""
    return temp_dir / "config.json"


@pytest.fixture
def valid_config_data():
    """Return valid configuration data."""
    return {
        "version": 1,
        "settings": {
            "probe_versions": False,
            "version_timeout": 2.5,
            "extra_desktop_dirs": ["~/apps"],
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
def sample_browser_data():
    """Return serialized Browser data."""
    return {
        "id": "chrome",
        "name": "Google Chrome",
        "variant": {"type": "Chromium", "value": "stable"},
        "version": "120.0.6099.109",
        "executable": "/Applications/Google Chrome.app/Contents/MacOS/Google Chrome",
        "bundle_id": "com.google.Chrome",
    }
