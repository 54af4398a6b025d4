# SPDX-License-Identifier: MIT
"""Version parsing, comparison and range requirements.

This package parses version strings into comparable values and compiles
range requirement expressions into predicates, so a host application can
decide whether a plugin or library version is acceptable.

Example:
    >>> from semversion import parse_version, parse_range_requirement
    >>>
    >>> version = parse_version("1.2.3-RC2+build.456")
    >>> version.main_version
    (1, 2, 3)
    >>> version.identifier
    'RC2'
    >>>
    >>> requirement = parse_range_requirement("1.2.x || >=2.0.0")
    >>> requirement.test(version)
    True
    >>> str(requirement)
    '1.2.x || >=2.0.0'
"""

__version__ = "0.1.0"

from .errors import (
    SemversionError,
    InvalidVersionError,
    RequirementError,
    EmptyRequirementError,
    UnsupportedRuleError,
    RequirementNotSatisfiedError,
    ConfigError,
)
from .semver import (
    Version,
    parse_version,
    is_valid_version,
    VERSION_PATTERN,
)
from .compare import (
    compare_versions,
    version_key,
)
from .requirement import (
    RangeRequirement,
    Rule,
    ExactRule,
    WildcardRule,
    RangeRule,
    ComparisonRule,
    compile_rule,
    parse_range_requirement,
    is_valid_requirement,
)

__all__ = [
    # Errors
    "SemversionError",
    "InvalidVersionError",
    "RequirementError",
    "EmptyRequirementError",
    "UnsupportedRuleError",
    "RequirementNotSatisfiedError",
    "ConfigError",
    # Version parsing
    "Version",
    "parse_version",
    "is_valid_version",
    "VERSION_PATTERN",
    # Version comparison
    "compare_versions",
    "version_key",
    # Range requirements
    "RangeRequirement",
    "Rule",
    "ExactRule",
    "WildcardRule",
    "RangeRule",
    "ComparisonRule",
    "compile_rule",
    "parse_range_requirement",
    "is_valid_requirement",
]
