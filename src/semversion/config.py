# SPDX-License-Identifier: MIT
"""Compatibility declarations loaded from pyproject.toml.

A project declares its own version and the versions it accepts from the
components it depends on:

    [project]
    name = "my-plugin"
    version = "1.2.0"

    [tool.semversion.requires]
    host-core = ">=2.0.0 || 1.9.x"
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .errors import ConfigError, SemversionError
from .requirement import RangeRequirement, parse_range_requirement
from .semver import is_valid_version, parse_version


@dataclass(frozen=True)
class RequirementCheck:
    """Outcome of checking one declared requirement.

    Attributes:
        name: Name of the required component
        requirement: The compiled requirement
        provided: Version supplied for the component, None if not supplied
        satisfied: True if the supplied version satisfies the requirement
    """

    name: str
    requirement: RangeRequirement
    provided: Optional[str]
    satisfied: bool

    @property
    def missing(self) -> bool:
        return self.provided is None


@dataclass
class SemversionConfig:
    """Configuration loaded from pyproject.toml.

    Attributes:
        project_dir: Directory containing pyproject.toml
        name: Project name
        version: Project version, ``[tool.semversion].version`` taking precedence
        requires: Requirement text keyed by component name
    """

    project_dir: Path
    name: str = ""
    version: str = ""
    requires: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "SemversionConfig":
        """Load configuration from pyproject.toml.

        Raises:
            ConfigError: If the file is invalid
            FileNotFoundError: If pyproject.toml doesn't exist
        """
        project_path = Path(project_dir)
        pyproject_path = project_path / "pyproject.toml"

        if not pyproject_path.exists():
            raise FileNotFoundError(f"pyproject.toml not found in {project_path}")

        try:
            with open(pyproject_path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax: {e}") from e

        return cls.from_pyproject_dict(pyproject, project_path)

    @classmethod
    def from_pyproject_dict(
        cls,
        pyproject: dict[str, Any],
        project_dir: Path,
    ) -> "SemversionConfig":
        """Create a SemversionConfig from a parsed pyproject.toml dictionary.

        Raises:
            ConfigError: If the version or any requirement is invalid
        """
        project = pyproject.get("project", {})
        tool_semversion = pyproject.get("tool", {}).get("semversion", {})

        version = tool_semversion.get("version") or project.get("version", "")
        if version and not is_valid_version(version):
            raise ConfigError(f"Invalid version {version!r} in {project_dir / 'pyproject.toml'}")

        requires = tool_semversion.get("requires", {})
        if not isinstance(requires, dict):
            raise ConfigError("[tool.semversion.requires] must be a table")

        for name, requirement in requires.items():
            if not isinstance(requirement, str):
                raise ConfigError(f"Requirement for {name!r} must be a string")
            try:
                parse_range_requirement(requirement)
            except SemversionError as e:
                raise ConfigError(f"Invalid requirement for {name!r}: {e}") from e

        return cls(
            project_dir=project_dir,
            name=project.get("name", ""),
            version=version,
            requires=dict(requires),
        )

    @property
    def label(self) -> str:
        """Return "name version" for messages, falling back to the project directory name."""
        name = self.name or self.project_dir.name
        return f"{name} {self.version}" if self.version else name

    def requirements(self) -> dict[str, RangeRequirement]:
        """Compile the declared requirements."""
        return {name: parse_range_requirement(text) for name, text in self.requires.items()}

    def check(self, provided: dict[str, str]) -> list[RequirementCheck]:
        """Check supplied component versions against the declared requirements.

        Args:
            provided: Version text keyed by component name

        Returns:
            One RequirementCheck per declared requirement, in declaration order

        Raises:
            InvalidVersionError: If a supplied version is invalid
        """
        results: list[RequirementCheck] = []
        for name, requirement in self.requirements().items():
            version = provided.get(name)
            satisfied = version is not None and requirement.test(parse_version(version))
            results.append(
                RequirementCheck(
                    name=name,
                    requirement=requirement,
                    provided=version,
                    satisfied=satisfied,
                )
            )
        return results


def find_project_root(start_dir: Optional[str | Path] = None) -> Path:
    """Find the project root by looking for pyproject.toml.

    Args:
        start_dir: Directory to start searching from (defaults to cwd)

    Returns:
        Path to the project root directory

    Raises:
        ConfigError: If no project root is found
    """
    current = Path(start_dir) if start_dir else Path.cwd()
    current = current.resolve()

    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent

    raise ConfigError("Could not find project root (no pyproject.toml found)")


def load_config(project_dir: Optional[str | Path] = None) -> SemversionConfig:
    """Load configuration from the project directory.

    Args:
        project_dir: Project directory (defaults to finding project root)

    Raises:
        ConfigError: If configuration cannot be loaded
        FileNotFoundError: If pyproject.toml doesn't exist
    """
    if project_dir is None:
        project_dir = find_project_root()

    return SemversionConfig.from_pyproject(project_dir)
