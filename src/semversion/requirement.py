# SPDX-License-Identifier: MIT
"""Range requirement parsing.

A requirement is one or more rules joined by ``||``; a version satisfies the
requirement when it satisfies any of its rules. Supported rule shapes:

- Exact: ``1.2.3``, ``1.0-RC2``
- Wildcard: ``1.x``, ``1.2.x``
- Hyphen range: ``1.0.0 - 2.0.0`` (inclusive, bounds in either order)
- Bracket range: ``[1.0.0, 2.0.0]`` (same as the hyphen range)
- Comparison: ``>=1.0.0``, ``>1.0``, ``<=2.0.0``, ``<2.0``, ``=1.5.0``

Example:
    >>> requirement = parse_range_requirement(">=1.0.0 || <0.5.0")
    >>> requirement.test("2.0.0")
    True
    >>> str(requirement)
    '>=1.0.0 || <0.5.0'
"""

from __future__ import annotations

import logging
import operator
import re
from dataclasses import dataclass
from typing import Callable, Optional, Union

from .compare import compare_versions
from .errors import (
    EmptyRequirementError,
    RequirementNotSatisfiedError,
    SemversionError,
    UnsupportedRuleError,
)
from .semver import Version, parse_version

logger = logging.getLogger(__name__)

OR_SEPARATOR = "||"

# Loose version text; the captured text is validated by parse_version.
# The suffix stops at whitespace, commas and closing brackets.
_VERSION_TEXT = r"[0-9]+(?:\.[0-9]+)+(?:[-+][^\s,\]]+)?"

_EXACT_PATTERN = re.compile(_VERSION_TEXT)
_WILDCARD_PATTERN = re.compile(r"(?P<prefix>[0-9]+(?:\.[0-9]+)*\.)x")
_HYPHEN_RANGE_PATTERN = re.compile(
    rf"(?P<start>{_VERSION_TEXT})\s*-\s*(?P<end>{_VERSION_TEXT})"
)
_BRACKET_RANGE_PATTERN = re.compile(
    rf"\[(?P<start>{_VERSION_TEXT})\s*,\s*(?P<end>{_VERSION_TEXT})\]"
)
_COMPARISON_PATTERN = re.compile(
    rf"(?P<operator>>=|<=|=|>|<)\s*(?P<version>{_VERSION_TEXT})"
)

# Relation the comparison result must hold against zero
_OPERATORS: dict[str, Callable[[int, int], bool]] = {
    ">=": operator.ge,
    ">": operator.gt,
    "<=": operator.le,
    "<": operator.lt,
    "=": operator.eq,
}


def _coerce(version: Union[str, Version]) -> Version:
    return parse_version(version) if isinstance(version, str) else version


@dataclass(frozen=True, slots=True)
class ExactRule:
    """Matches versions equal to ``version`` (metadata ignored)."""

    version: Version

    def test(self, version: Version) -> bool:
        return compare_versions(version, self.version) == 0


@dataclass(frozen=True, slots=True)
class WildcardRule:
    """Matches versions whose string form continues the dotted ``prefix``."""

    prefix: str
    pattern: re.Pattern[str]

    def test(self, version: Version) -> bool:
        return self.pattern.fullmatch(str(version)) is not None


@dataclass(frozen=True, slots=True)
class RangeRule:
    """Matches versions between ``lower`` and ``upper``, both inclusive."""

    lower: Version
    upper: Version

    def test(self, version: Version) -> bool:
        return (
            compare_versions(self.lower, version) <= 0
            and compare_versions(version, self.upper) <= 0
        )


@dataclass(frozen=True, slots=True)
class ComparisonRule:
    """Matches versions standing in ``operator`` relation to ``version``."""

    operator: str
    version: Version

    def test(self, version: Version) -> bool:
        return _OPERATORS[self.operator](compare_versions(version, self.version), 0)


Rule = Union[ExactRule, WildcardRule, RangeRule, ComparisonRule]


def _match_exact(text: str) -> Optional[Rule]:
    if not _EXACT_PATTERN.fullmatch(text):
        return None
    return ExactRule(parse_version(text))


def _match_wildcard(text: str) -> Optional[Rule]:
    match = _WILDCARD_PATTERN.fullmatch(text)
    if not match:
        return None
    prefix = match.group("prefix")
    return WildcardRule(prefix=prefix, pattern=re.compile(re.escape(prefix) + ".+"))


def _make_range(match: re.Match[str]) -> Rule:
    start = parse_version(match.group("start"))
    end = parse_version(match.group("end"))
    if compare_versions(start, end) > 0:
        start, end = end, start
    return RangeRule(lower=start, upper=end)


def _match_hyphen_range(text: str) -> Optional[Rule]:
    match = _HYPHEN_RANGE_PATTERN.fullmatch(text)
    return _make_range(match) if match else None


def _match_bracket_range(text: str) -> Optional[Rule]:
    match = _BRACKET_RANGE_PATTERN.fullmatch(text)
    return _make_range(match) if match else None


def _match_comparison(text: str) -> Optional[Rule]:
    match = _COMPARISON_PATTERN.fullmatch(text)
    if not match:
        return None
    return ComparisonRule(
        operator=match.group("operator"),
        version=parse_version(match.group("version")),
    )


# Tried in order, first match wins
_RECOGNIZERS: tuple[Callable[[str], Optional[Rule]], ...] = (
    _match_exact,
    _match_wildcard,
    _match_hyphen_range,
    _match_bracket_range,
    _match_comparison,
)


def compile_rule(rule_text: str, requirement: Optional[str] = None) -> Rule:
    """Compile a single trimmed rule into a Rule.

    Args:
        rule_text: One rule, without ``||`` and surrounding whitespace
        requirement: The full requirement the rule came from, for error reporting

    Returns:
        The compiled rule

    Raises:
        UnsupportedRuleError: If the text matches none of the rule shapes
        InvalidVersionError: If a matched shape contains an invalid version
    """
    for recognize in _RECOGNIZERS:
        rule = recognize(rule_text)
        if rule is not None:
            logger.debug("Compiled rule %r as %s", rule_text, type(rule).__name__)
            return rule
    raise UnsupportedRuleError(requirement if requirement is not None else rule_text, rule_text)


@dataclass(frozen=True, slots=True)
class RangeRequirement:
    """A compiled range requirement.

    Attributes:
        text: The requirement exactly as written by the caller
        rules: Compiled rules, one per ``||`` separated piece
    """

    text: str
    rules: tuple[Rule, ...]

    def __str__(self) -> str:
        return self.text

    def __call__(self, version: Union[str, Version]) -> bool:
        return self.test(version)

    def test(self, version: Union[str, Version]) -> bool:
        """Return True if ``version`` satisfies any of the rules.

        Raises:
            InvalidVersionError: If ``version`` is an invalid version string
        """
        parsed = _coerce(version)
        return any(rule.test(parsed) for rule in self.rules)

    def assert_satisfied(self, version: Union[str, Version]) -> Version:
        """Return the parsed version, or raise if it does not satisfy the requirement.

        Raises:
            RequirementNotSatisfiedError: If the version fails the requirement
            InvalidVersionError: If ``version`` is an invalid version string
        """
        parsed = _coerce(version)
        if not self.test(parsed):
            raise RequirementNotSatisfiedError(self, parsed)
        return parsed


def parse_range_requirement(requirement: str) -> RangeRequirement:
    """Parse a requirement string into a RangeRequirement.

    Args:
        requirement: Rules separated by ``||``

    Returns:
        A RangeRequirement whose string form is ``requirement`` unchanged

    Raises:
        EmptyRequirementError: If the requirement is blank
        UnsupportedRuleError: If any rule matches none of the rule shapes
        InvalidVersionError: If any rule contains an invalid version

    Examples:
        >>> parse_range_requirement("1.2.x").test("1.2.5-beta")
        True
        >>> parse_range_requirement("[1.0.0, 2.0.0]").test("2.0.1")
        False
    """
    if not isinstance(requirement, str) or not requirement.strip():
        raise EmptyRequirementError(requirement if isinstance(requirement, str) else "")

    rules = tuple(
        compile_rule(piece.strip(), requirement) for piece in requirement.split(OR_SEPARATOR)
    )
    logger.debug("Parsed requirement %r into %d rule(s)", requirement, len(rules))
    return RangeRequirement(text=requirement, rules=rules)


def is_valid_requirement(requirement: str) -> bool:
    """Check if a string parses as a range requirement."""
    try:
        parse_range_requirement(requirement)
    except SemversionError:
        return False
    return True
