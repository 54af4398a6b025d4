# SPDX-License-Identifier: MIT
"""Version comparison.

Main versions compare component-wise with missing components read as zero.
A release outranks any pre-release of the same main version, and pre-release
identifiers compare chunk by chunk after their shared prefix is skipped.
Build metadata is ignored in comparisons.
"""

from __future__ import annotations

import functools
import re
from itertools import zip_longest
from typing import Any, Union

from .semver import Version, parse_version

_CHUNK_SEPARATOR = re.compile(r"[.-]")


def _coerce(version: Union[str, Version]) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def _shared_prefix_length(identifier1: str, identifier2: str) -> int:
    """Return the length of the shared prefix that may be skipped.

    The prefix only extends up to the last non-digit character the two
    identifiers share, so a common leading digit never gets cut off a number:
    "RC19" and "RC107" share "RC1" but only "RC" is skipped.
    """
    size = 0
    for index, (char1, char2) in enumerate(zip(identifier1, identifier2)):
        if char1 != char2:
            break
        if not char1.isdigit():
            size = index + 1
    return size


def _compare_chunk(chunk1: str, chunk2: str) -> int:
    if chunk1.isdecimal() and chunk2.isdecimal():
        n1, n2 = int(chunk1), int(chunk2)
        if n1 != n2:
            return -1 if n1 < n2 else 1
        return 0

    # Character-wise; a shorter chunk sorts first when it is a prefix of the other
    if chunk1 != chunk2:
        return -1 if chunk1 < chunk2 else 1
    return 0


def _compare_identifier(identifier1: str | None, identifier2: str | None) -> int:
    """Compare two pre-release identifiers.

    Returns:
        -1 if identifier1 < identifier2
        0 if identifier1 == identifier2
        1 if identifier1 > identifier2

    A version without an identifier has higher precedence than one with an
    identifier (1.0.0 > 1.0.0-alpha).
    """
    if identifier1 is None and identifier2 is None:
        return 0
    if identifier1 is None:
        return 1  # Release > pre-release
    if identifier2 is None:
        return -1  # Pre-release < release

    skipped = _shared_prefix_length(identifier1, identifier2)
    chunks1 = _CHUNK_SEPARATOR.split(identifier1[skipped:])
    chunks2 = _CHUNK_SEPARATOR.split(identifier2[skipped:])

    for chunk1, chunk2 in zip_longest(chunks1, chunks2):
        # The side that ran out of chunks first is lower: dev < dev-1
        if chunk1 is None:
            return -1
        if chunk2 is None:
            return 1
        result = _compare_chunk(chunk1, chunk2)
        if result != 0:
            return result

    return 0


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0", "1.0.0+build.5")
        0
        >>> compare_versions("1.0-RC19", "1.0-RC107")
        -1
        >>> compare_versions("1.0.0", "1.0.0-rc.1")
        1
    """
    v1 = _coerce(version1)
    v2 = _coerce(version2)

    main_pairs = list(zip_longest(v1.main_version, v2.main_version, fillvalue=0))
    if v1.identifier == v2.identifier and all(a == b for a, b in main_pairs):
        return 0

    for val1, val2 in main_pairs:
        if val1 != val2:
            return -1 if val1 < val2 else 1

    return _compare_identifier(v1.identifier, v2.identifier)


_CompareKey: Any = functools.cmp_to_key(compare_versions)


def version_key(version: Union[str, Version]) -> Any:
    """Return a sort key for a version, suitable for sorting.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    return _CompareKey(_coerce(version))
