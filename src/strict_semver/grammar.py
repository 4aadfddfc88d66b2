# SPDX-License-Identifier: MIT
"""Grammar recognizers for Semantic Versioning 2.0.0.

The patterns follow the ABNF at https://semver.org/#backusnaur-form-grammar-for-valid-semver-versions.
Character classes are spelled out as ``[0-9]`` rather than ``\\d`` so that
non-ASCII digits are never accepted, and every check uses ``fullmatch`` so
no leading or trailing characters slip through.
"""

from __future__ import annotations

import re

# Numeric identifier: "0" or digits without a leading zero
_NUMERIC = r"(?:0|[1-9][0-9]*)"

# Pre-release identifier: numeric, or alphanumerics/hyphens with at least one non-digit
_PRE_RELEASE_IDENTIFIER = rf"(?:{_NUMERIC}|[0-9]*[A-Za-z-][0-9A-Za-z-]*)"

# Build identifier: alphanumerics/hyphens, leading zeros allowed
_BUILD_IDENTIFIER = r"[0-9A-Za-z-]+"

PRE_RELEASE_PATTERN = re.compile(
    rf"{_PRE_RELEASE_IDENTIFIER}(?:\.{_PRE_RELEASE_IDENTIFIER})*"
)

BUILD_METADATA_PATTERN = re.compile(rf"{_BUILD_IDENTIFIER}(?:\.{_BUILD_IDENTIFIER})*")

SEMVER_PATTERN = re.compile(
    rf"(?P<major>{_NUMERIC})"
    rf"\.(?P<minor>{_NUMERIC})"
    rf"\.(?P<patch>{_NUMERIC})"
    rf"(?:-(?P<prerelease>{PRE_RELEASE_PATTERN.pattern}))?"
    rf"(?:\+(?P<buildmetadata>{BUILD_METADATA_PATTERN.pattern}))?"
)


def is_valid_version(version_string: str) -> bool:
    """Check if a string is a valid semantic version.

    This is a pure grammar check. It never raises: ``None``, non-string
    input and the empty string all give ``False``. The all-zero version
    ``0.0.0`` matches the grammar and is therefore reported as valid here,
    although :func:`strict_semver.parse_version` refuses to build it.

    Examples:
        >>> is_valid_version("1.0.0-alpha+001")
        True
        >>> is_valid_version("1.0")
        False
        >>> is_valid_version(" 1.0.0")
        False
    """
    if not isinstance(version_string, str) or not version_string:
        return False
    return SEMVER_PATTERN.fullmatch(version_string) is not None


def is_valid_pre_release(pre_release: str) -> bool:
    """Return True if ``pre_release`` is empty or a valid pre-release identifier list.

    Examples:
        >>> is_valid_pre_release("alpha.1")
        True
        >>> is_valid_pre_release("")
        True
        >>> is_valid_pre_release("alpha.01")
        False
    """
    if not isinstance(pre_release, str):
        return False
    if not pre_release:
        return True
    return PRE_RELEASE_PATTERN.fullmatch(pre_release) is not None


def is_valid_build_metadata(build_metadata: str) -> bool:
    """Return True if ``build_metadata`` is empty or a valid build identifier list.

    Unlike pre-release identifiers, numeric build identifiers may carry
    leading zeros.

    Examples:
        >>> is_valid_build_metadata("exp.sha.5114f85")
        True
        >>> is_valid_build_metadata("001")
        True
        >>> is_valid_build_metadata("build..1")
        False
    """
    if not isinstance(build_metadata, str):
        return False
    if not build_metadata:
        return True
    return BUILD_METADATA_PATTERN.fullmatch(build_metadata) is not None
