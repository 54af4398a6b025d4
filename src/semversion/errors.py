# SPDX-License-Identifier: MIT
"""Exception hierarchy for version and requirement parsing."""

from __future__ import annotations

from typing import Any


class SemversionError(Exception):
    """Base class for all errors raised by semversion."""

    pass


class InvalidVersionError(SemversionError, ValueError):
    """Raised when a version string does not follow the version grammar."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid version: {version!r}"
        super().__init__(self.message)


class RequirementError(SemversionError, ValueError):
    """Base class for range requirement parsing failures."""

    def __init__(self, requirement: str, message: str):
        self.requirement = requirement
        self.message = message
        super().__init__(self.message)


class EmptyRequirementError(RequirementError):
    """Raised when a requirement string is blank."""

    def __init__(self, requirement: str):
        super().__init__(requirement, "Invalid requirement: empty requirement rule")


class UnsupportedRuleError(RequirementError):
    """Raised when a sub-rule matches none of the supported rule shapes."""

    def __init__(self, requirement: str, rule: str):
        self.rule = rule
        super().__init__(requirement, f"Unsupported requirement rule: {rule!r}")


class RequirementNotSatisfiedError(SemversionError):
    """Raised when a version does not satisfy a range requirement."""

    def __init__(self, requirement: Any, version: Any):
        self.requirement = requirement
        self.version = version
        super().__init__(f"Version {version} does not satisfy requirement {requirement}")


class ConfigError(SemversionError):
    """Raised when configuration loading fails."""

    pass
