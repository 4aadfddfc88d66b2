# SPDX-License-Identifier: MIT
"""Unit tests for the SemVer grammar recognizers."""

import pytest

from strict_semver import (
    is_valid_version,
    is_valid_pre_release,
    is_valid_build_metadata,
)


class TestIsValidVersion:
    """Tests for is_valid_version function."""

    @pytest.mark.parametrize(
        "version",
        [
            "0.0.4",
            "1.2.3",
            "10.20.30",
            "1.1.2-prerelease+meta",
            "1.1.2+meta",
            "1.1.2+meta-valid",
            "1.0.0-alpha",
            "1.0.0-alpha.beta.1",
            "1.0.0-alpha0.valid",
            "1.0.0-alpha.0valid",
            "1.0.0-rc.1+build.1",
            "1.2.3----RC-SNAPSHOT.12.9.1--.12+788",
            "1.0.0+0.build.1-rc.10000aaa-kk-0.1",
            "99999999999999999999999.999999999999999999.99999999999999999",
            "1.0.0-0A.is.legal",
            "2.0.0+build.1848",
        ],
    )
    def test_valid(self, version):
        """Test versions from the SemVer reference list are accepted."""
        assert is_valid_version(version) is True

    @pytest.mark.parametrize(
        "version",
        [
            "",
            "1",
            "1.0",
            "1.2.3.4",
            "1.0.0-",
            "1.0.0+",
            "01.0.0",
            "1.01.0",
            "1.0.01",
            "1.0.0-01",
            "1.2.3-0123",
            "1.2.3-0123.0123",
            "1.2.3-beta..1",
            "1.2.3+build..1",
            "1.1.2+.123",
            "+invalid",
            "-invalid",
            "alpha.beta",
            "v1.0.0",
            "1.0.0-alpha_beta",
            "1.0.0+build_1",
            " 1.0.0",
            "1.0.0 ",
            "1.0.0\n",
            "1.0.0-alpha+beta+gamma",
            "-1.0.0",
        ],
    )
    def test_invalid(self, version):
        """Test malformed versions are rejected."""
        assert is_valid_version(version) is False

    def test_all_zero_matches_grammar(self):
        """Test 0.0.0 is grammatical even though it cannot be constructed."""
        assert is_valid_version("0.0.0") is True

    def test_non_ascii_digits(self):
        """Test that non-ASCII digits are not treated as numbers."""
        assert is_valid_version("١.0.0") is False
        assert is_valid_version("1.0.0-٢") is False

    def test_none_input(self):
        """Test None returns False instead of raising."""
        assert is_valid_version(None) is False  # type: ignore

    def test_non_string_input(self):
        """Test non-string input returns False."""
        assert is_valid_version(100) is False  # type: ignore


class TestIsValidPreRelease:
    """Tests for is_valid_pre_release function."""

    @pytest.mark.parametrize(
        "pre_release",
        ["", "0", "alpha", "alpha.1", "0.3.7", "x.7.z.92", "x-y-z.--", "0a", "-", "rc.10"],
    )
    def test_valid(self, pre_release):
        """Test valid identifier lists, including the empty list."""
        assert is_valid_pre_release(pre_release) is True

    @pytest.mark.parametrize(
        "pre_release",
        ["01", "alpha.01", "alpha.", ".alpha", "alpha..beta", "alpha_1", "alpha+1", " alpha"],
    )
    def test_invalid(self, pre_release):
        """Test leading zeros, empty identifiers and foreign characters are rejected."""
        assert is_valid_pre_release(pre_release) is False

    def test_none_input(self):
        """Test None is distinguished from the empty string."""
        assert is_valid_pre_release(None) is False  # type: ignore


class TestIsValidBuildMetadata:
    """Tests for is_valid_build_metadata function."""

    @pytest.mark.parametrize(
        "build_metadata",
        ["", "001", "build.1", "exp.sha.5114f85", "20130313144700", "0.build.1-rc.10000aaa-kk-0.1"],
    )
    def test_valid(self, build_metadata):
        """Test valid build metadata, leading zeros included."""
        assert is_valid_build_metadata(build_metadata) is True

    @pytest.mark.parametrize(
        "build_metadata",
        ["build.", ".build", "build..1", "build_1", "build+1", "build 1"],
    )
    def test_invalid(self, build_metadata):
        """Test empty identifiers and foreign characters are rejected."""
        assert is_valid_build_metadata(build_metadata) is False

    def test_leading_zero_differs_from_pre_release(self):
        """Test that leading zeros are fine in build metadata only."""
        assert is_valid_build_metadata("007") is True
        assert is_valid_pre_release("007") is False

    def test_none_input(self):
        """Test None is distinguished from the empty string."""
        assert is_valid_build_metadata(None) is False  # type: ignore
