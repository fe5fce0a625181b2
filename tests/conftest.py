"""
Pytest configuration and shared fixtures for versionparser tests.

This module provides reusable fixtures and test utilities used across
the test suite.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from versionparser.logging import SilentLogger, set_global_logger
from versionparser.vocabulary import reset_tag_types


@pytest.fixture(autouse=True)
def clean_state():
    """
    Reset process-wide state around every test.

    Restores the built-in tag vocabulary and the silent global logger, so
    registrations or CLI logger setup in one test never leak into another.
    """
    reset_tag_types()
    set_global_logger(SilentLogger())
    yield
    reset_tag_types()
    set_global_logger(SilentLogger())


@pytest.fixture
def tmp_test_dir(tmp_path: Path) -> Path:
    """
    Provide a temporary directory for test artifacts.

    Automatically cleaned up after test completion.
    """
    return tmp_path


@pytest.fixture
def sample_config_data() -> dict[str, Any]:
    """Provide a configuration with two custom tags and render options."""
    return {
        "tags": [
            {"name": "nightly", "weight": 9, "short": "n"},
            {"name": "preview", "weight": 5},
        ],
        "render": {
            "separator": "_",
            "uppercase": True,
        },
    }


@pytest.fixture
def create_yaml_file(tmp_test_dir: Path):
    """
    Factory fixture for creating temporary YAML files.

    Usage:
        yaml_path = create_yaml_file("test.yaml", {"key": "value"})
    """

    def _create(filename: str, data: dict[str, Any]) -> Path:
        path = tmp_test_dir / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.dump(data, f)
        return path

    return _create
