# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import Generator

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary project directory with declared requirements."""
    project_dir = tmp_path / "test_project"
    project_dir.mkdir()

    pyproject = project_dir / "pyproject.toml"
    pyproject.write_text(
        """[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "test-plugin"
version = "1.2.0"

[tool.semversion.requires]
host-core = ">=2.0.0 || 1.9.x"
chat-api = "[1.0.0, 2.0.0]"
"""
    )

    yield project_dir
