# SPDX-License-Identifier: MIT
"""Unit tests for version comparison."""

import pytest

from semversion import (
    InvalidVersionError,
    Version,
    parse_version,
    compare_versions,
    version_key,
)

PRECEDENCE_LADDER = [
    "1.0.0-alpha",
    "1.0.0-alpha.1",
    "1.0.0-beta",
    "1.0.0-beta.2",
    "1.0.0-beta.11",
    "1.0.0-rc.1",
    "1.0.0",
]

FIXTURES = [
    "0.9.9",
    "1.0-RC1",
    "1.0-RC2",
    "1.0-RC19",
    "1.0-RC107",
    "1.0-RC-dev",
    "1.0-RC-dev-1",
    "1.0.0-alpha",
    "1.0.0-alpha.1",
    "1.0.0-beta.11",
    "1.0.0",
    "1.0.0+build.1",
    "1.0.1",
    "1.1",
    "2.0.0-rc.1",
    "2.0.0",
]


class TestCompareVersions:
    """Tests for compare_versions function."""

    def test_equal_versions(self):
        """Test that equal versions compare as equal."""
        assert compare_versions("1.0.0", "1.0.0") == 0

    def test_major_difference(self):
        assert compare_versions("1.0.0", "2.0.0") == -1
        assert compare_versions("2.0.0", "1.0.0") == 1

    def test_minor_difference(self):
        assert compare_versions("1.0.0", "1.1.0") == -1
        assert compare_versions("1.1.0", "1.0.0") == 1

    def test_patch_difference(self):
        assert compare_versions("1.0.0", "1.0.1") == -1
        assert compare_versions("1.0.1", "1.0.0") == 1

    def test_main_version_ladder(self):
        """Test 1.0.0 < 1.0.1 < 1.1.0 < 2.0.0."""
        ladder = ["1.0.0", "1.0.1", "1.1.0", "2.0.0"]
        for lower, higher in zip(ladder, ladder[1:]):
            assert compare_versions(lower, higher) == -1

    def test_missing_components_are_zero(self):
        """Test that absent components compare as zero."""
        assert compare_versions("1.0", "1.0.0") == 0
        assert compare_versions("1.0", "1.0.1") == -1
        assert compare_versions(Version((1, 0, 0, 1)), "1.0") == 1

    def test_numeric_not_lexical(self):
        """Test that components compare as integers."""
        assert compare_versions("1.10.0", "1.9.0") == 1

    def test_prerelease_vs_release(self):
        """Test that pre-release is less than release."""
        assert compare_versions("1.0.0-alpha", "1.0.0") == -1
        assert compare_versions("1.0.0", "1.0.0-alpha") == 1

    def test_main_version_beats_identifier(self):
        """Test that the main version is compared before the identifier."""
        assert compare_versions("1.0.1-alpha", "1.0.0") == 1

    def test_build_metadata_ignored(self):
        """Test that build metadata is ignored in comparison."""
        assert compare_versions("1.0.0+a", "1.0.0+b") == 0
        assert compare_versions("1.0.0+build", "1.0.0") == 0
        assert compare_versions("1.0.0-rc.1+a", "1.0.0-rc.1+b") == 0

    def test_version_objects(self):
        """Test comparison with Version objects."""
        assert compare_versions(parse_version("1.0.0"), parse_version("2.0.0")) == -1

    def test_mixed_string_and_version(self):
        v = parse_version("1.0.0")
        assert compare_versions(v, "2.0.0") == -1
        assert compare_versions("1.0.0", v) == 0

    def test_invalid_string(self):
        with pytest.raises(InvalidVersionError):
            compare_versions("1", "1.0.0")


class TestIdentifierOrdering:
    """Tests for pre-release identifier ordering."""

    def test_precedence_ladder(self):
        """Test the standard pre-release precedence ladder."""
        for lower, higher in zip(PRECEDENCE_LADDER, PRECEDENCE_LADDER[1:]):
            assert compare_versions(lower, higher) == -1, f"{lower} should be < {higher}"
            assert compare_versions(higher, lower) == 1, f"{higher} should be > {lower}"

    def test_shared_digit_prefix_kept(self):
        """Test that a shared leading digit is not cut off a number."""
        assert compare_versions("1.0-RC19", "1.0-RC107") == -1
        assert compare_versions("1.0-RC107", "1.0-RC19") == 1

    def test_numbered_identifiers(self):
        assert compare_versions("1.0-RC1", "1.0-RC2") == -1
        assert compare_versions("1.0.0-alpha.2", "1.0.0-alpha.10") == -1

    def test_extra_chunk_is_greater(self):
        """Test that an identifier with more chunks sorts after its prefix."""
        assert compare_versions("1.0-RC-dev", "1.0-RC-dev-1") == -1
        assert compare_versions("1.0-RC-dev-1", "1.0-RC-dev") == 1

    def test_hyphen_and_dot_separate_chunks(self):
        """Test that '-' and '.' are equivalent chunk separators."""
        assert compare_versions("1.0.0-beta.2", "1.0.0-beta-2") == 0

    def test_numeric_chunks(self):
        assert compare_versions("1.0.0-1", "1.0.0-2") == -1
        assert compare_versions("1.0.0-10", "1.0.0-2") == 1

    def test_character_comparison(self):
        """Test that non-numeric chunks compare character by character."""
        assert compare_versions("1.0.0-alpha", "1.0.0-beta") == -1
        assert compare_versions("1.0.0-Beta", "1.0.0-alpha") == -1
        assert compare_versions("1.0.0-rc", "1.0.0-rcx") == -1


class TestComparatorLaws:
    """Ordering laws over a fixed fixture set."""

    @pytest.fixture
    def versions(self):
        return [parse_version(v) for v in FIXTURES]

    def test_reflexive(self, versions):
        for v in versions:
            assert compare_versions(v, v) == 0

    def test_antisymmetric(self, versions):
        for a in versions:
            for b in versions:
                assert compare_versions(a, b) == -compare_versions(b, a)

    def test_transitive(self, versions):
        for a in versions:
            for b in versions:
                for c in versions:
                    if compare_versions(a, b) <= 0 and compare_versions(b, c) <= 0:
                        assert compare_versions(a, c) <= 0, f"{a} <= {b} <= {c}"


class TestVersionKey:
    """Tests for version_key function."""

    def test_sorting_basic(self):
        versions = ["2.0.0", "1.0.0", "1.1.0", "1.0.1"]
        assert sorted(versions, key=version_key) == ["1.0.0", "1.0.1", "1.1.0", "2.0.0"]

    def test_sorting_ladder(self):
        shuffled = list(reversed(PRECEDENCE_LADDER))
        assert sorted(shuffled, key=version_key) == PRECEDENCE_LADDER

    def test_sorting_version_objects(self):
        versions = [parse_version("2.0.0"), parse_version("1.0.0")]
        assert [str(v) for v in sorted(versions, key=version_key)] == ["1.0.0", "2.0.0"]
