# SPDX-License-Identifier: MIT
"""Version parsing.

Supports MAJOR.MINOR[.PATCH] with optional pre-release identifier and build metadata:
- Pre-release: -alpha, -alpha.1, -beta, -RC19, -dev-1
- Build metadata: +build, +build.123, +20240101
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Union

from .errors import InvalidVersionError

if TYPE_CHECKING:
    from .requirement import RangeRequirement

# SemVer 2.0.0 grammar with an optional patch component
# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
VERSION_PATTERN = re.compile(
    r"^(?P<major>0|[1-9][0-9]*)"
    r"\.(?P<minor>0|[1-9][0-9]*)"
    r"(?:\.(?P<patch>0|[1-9][0-9]*))?"
    r"(?:-(?P<identifier>(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+(?P<metadata>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$"
)


@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """Represents a parsed version.

    Ordering and equality ignore ``metadata``; ``1.0`` and ``1.0.0`` are equal.

    Attributes:
        main_version: Numeric components (major, minor and optionally more)
        identifier: Optional pre-release identifier (e.g., "alpha.1", "RC19")
        metadata: Optional build metadata (e.g., "build.123")
    """

    main_version: tuple[int, ...]
    identifier: Optional[str] = None
    metadata: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "main_version", tuple(self.main_version))
        if len(self.main_version) < 2 or any(
            not isinstance(part, int) or part < 0 for part in self.main_version
        ):
            raise InvalidVersionError(
                str(self.main_version),
                "Main version needs at least two non-negative integer components",
            )

    def __str__(self) -> str:
        """Return the string form, metadata included."""
        version = self.base_version
        if self.identifier is not None:
            version += f"-{self.identifier}"
        if self.metadata is not None:
            version += f"+{self.metadata}"
        return version

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare(other) == 0

    def __hash__(self) -> int:
        # Trailing zeros are insignificant; identifiers may compare equal
        # without being identical, so they stay out of the hash.
        main = self.main_version
        while len(main) > 1 and main[-1] == 0:
            main = main[:-1]
        return hash(main)

    def __lt__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare(other) < 0

    def __le__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare(other) <= 0

    def __gt__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare(other) > 0

    def __ge__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare(other) >= 0

    def _compare(self, other: Version) -> int:
        from .compare import compare_versions

        return compare_versions(self, other)

    @property
    def major(self) -> int:
        return self.main_version[0]

    @property
    def minor(self) -> int:
        return self.main_version[1]

    @property
    def patch(self) -> Optional[int]:
        """Return the patch number, or None for a two-component version."""
        return self.main_version[2] if len(self.main_version) > 2 else None

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return self.identifier is not None

    @property
    def base_version(self) -> str:
        """Return the main version without identifier or metadata."""
        return ".".join(str(part) for part in self.main_version)

    def satisfies(self, requirement: Union[str, RangeRequirement]) -> bool:
        """Check this version against a requirement or requirement text.

        Raises:
            RequirementError: If ``requirement`` is text that cannot be parsed
        """
        from .requirement import parse_range_requirement

        if isinstance(requirement, str):
            requirement = parse_range_requirement(requirement)
        return requirement.test(self)


def parse_version(version_string: str) -> Version:
    """Parse a version string into a Version object.

    Args:
        version_string: A string of the form
            MAJOR.MINOR[.PATCH][-identifier][+metadata]

    Returns:
        A Version object with parsed components

    Raises:
        InvalidVersionError: If the string does not follow the version grammar

    Examples:
        >>> parse_version("1.2.3")
        Version(main_version=(1, 2, 3), identifier=None, metadata=None)

        >>> parse_version("1.0-RC19+build.7")
        Version(main_version=(1, 0), identifier='RC19', metadata='build.7')
    """
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    if not version_string:
        raise InvalidVersionError(version_string, "Version string cannot be empty")

    match = VERSION_PATTERN.fullmatch(version_string)
    if not match:
        raise InvalidVersionError(version_string)

    # The main version runs up to the first '-' or '+'; whichever comes first
    # decides how the remainder splits.
    main_end = len(version_string)
    for index, char in enumerate(version_string):
        if char in "-+":
            main_end = index
            break

    identifier: Optional[str] = None
    metadata: Optional[str] = None
    remainder = version_string[main_end:]
    if remainder.startswith("-"):
        identifier, _, build = remainder[1:].partition("+")
        metadata = build or None
    elif remainder.startswith("+"):
        metadata = remainder[1:]

    main_version = tuple(int(part) for part in version_string[:main_end].split("."))
    return Version(main_version=main_version, identifier=identifier, metadata=metadata)


def is_valid_version(version_string: str) -> bool:
    """Check if a string is a valid version.

    Examples:
        >>> is_valid_version("1.0")
        True
        >>> is_valid_version("1")
        False
    """
    if not isinstance(version_string, str):
        return False
    return VERSION_PATTERN.fullmatch(version_string) is not None
