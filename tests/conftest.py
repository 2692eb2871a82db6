"""Shared fixtures for yamlenv tests."""

from pathlib import Path
from typing import Callable

import pytest

from yamlenv.logger import reset_loggers


@pytest.fixture(autouse=True)
def fresh_loggers():
    """Start and finish every test without cached loggers bound to old streams."""
    reset_loggers()
    yield
    reset_loggers()


@pytest.fixture
def write_yaml(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write YAML text to a file under tmp_path and return its path."""

    def _write(content: str, name: str = "config.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
