# SPDX-License-Identifier: MIT
"""Semantic version values and parsing.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -0.3.7, -x.7.z.92
- Build metadata: +build, +build.123, +20130313144700, +001

A :class:`Version` is validated once, when it is created, and never changes
afterwards. The all-zero version ``0.0.0`` is rejected.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from .errors import VersionFormatError, VersionUsageError
from .grammar import (
    BUILD_METADATA_PATTERN,
    PRE_RELEASE_PATTERN,
    SEMVER_PATTERN,
)

logger = logging.getLogger(__name__)

# Version of semver.org implemented by this package
SEMVER_SPEC_VERSION = "2.0.0"

# CPython's default int() string conversion limit, enforced on every interpreter
_MAX_COMPONENT_DIGITS = 4300


def _check_component(name: str, value: int) -> None:
    # bool is an int subclass, but True.0.0 is not a version
    if isinstance(value, bool) or not isinstance(value, int):
        raise VersionUsageError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise VersionUsageError(f"{name} < 0")


def _check_identifiers(name: str, value: str, pattern: re.Pattern[str]) -> None:
    if value is None:
        raise VersionUsageError(f"{name} is None")
    if not isinstance(value, str):
        raise VersionUsageError(f"{name} must be a string, got {type(value).__name__}")
    if value and pattern.fullmatch(value) is None:
        raise VersionFormatError(value, f"Invalid {name.replace('_', '-')}: {value}")


@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """Represents a semantic version.

    Equality, ordering and hashing follow SemVer precedence, so build
    metadata is ignored by ``==``, ``<`` and ``hash()``. Use
    :meth:`equals_with_build_metadata` or
    :func:`strict_semver.compare_with_build_metadata` when it matters.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        pre_release: Dot-separated pre-release identifiers, "" if none
        build_metadata: Dot-separated build identifiers, "" if none

    Raises:
        VersionUsageError: If a component is negative or not an int, if all
            three components are zero, or if an identifier list is None
        VersionFormatError: If pre_release or build_metadata breaks the
            SemVer grammar
    """

    major: int
    minor: int
    patch: int
    pre_release: str = ""
    build_metadata: str = ""

    def __post_init__(self) -> None:
        _check_component("major", self.major)
        _check_component("minor", self.minor)
        _check_component("patch", self.patch)
        if self.major == 0 and self.minor == 0 and self.patch == 0:
            raise VersionUsageError("all parts are 0")
        _check_identifiers("pre_release", self.pre_release, PRE_RELEASE_PATTERN)
        _check_identifiers("build_metadata", self.build_metadata, BUILD_METADATA_PATTERN)

    @classmethod
    def parse(cls, version_string: str, allow_pre_release: bool = True) -> Version:
        """Parse a version string. See :func:`parse_version`."""
        return parse_version(version_string, allow_pre_release=allow_pre_release)

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.pre_release:
            version += f"-{self.pre_release}"
        if self.build_metadata:
            version += f"+{self.build_metadata}"
        return version

    def to_string(self) -> str:
        return str(self)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    @property
    def pre_release_parts(self) -> tuple[str, ...]:
        """Return the pre-release identifiers, or an empty tuple."""
        return tuple(self.pre_release.split(".")) if self.pre_release else ()

    @property
    def build_metadata_parts(self) -> tuple[str, ...]:
        """Return the build metadata identifiers, or an empty tuple."""
        return tuple(self.build_metadata.split(".")) if self.build_metadata else ()

    @property
    def is_initial_development(self) -> bool:
        """Return True for 0.y.z versions, whose public API is not yet stable."""
        return self.major == 0

    @property
    def is_pre_release(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.pre_release)

    @property
    def has_build_metadata(self) -> bool:
        return bool(self.build_metadata)

    # Comparison

    def compare_to(self, other: Version) -> int:
        """Compare by precedence. Returns -1, 0 or 1."""
        return compare(self, other)

    def compare_to_with_build_metadata(self, other: Version) -> int:
        """Compare by precedence, then by build metadata. Returns -1, 0 or 1."""
        return compare_with_build_metadata(self, other)

    def equals_with_build_metadata(self, other: object) -> bool:
        """Return True if both versions are equal including build metadata."""
        if not isinstance(other, Version):
            return False
        return self.compare_to_with_build_metadata(other) == 0

    def min(self, other: Version) -> Version:
        """Return the lower of ``self`` and ``other``, ``self`` on a tie."""
        return min_version(self, other)

    def max(self, other: Version) -> Version:
        """Return the greater of ``self`` and ``other``, ``self`` on a tie."""
        return max_version(self, other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) == 0

    def __lt__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __hash__(self) -> int:
        # Must agree with __eq__, so build metadata stays out
        return hash((self.major, self.minor, self.patch, self.pre_release))


def create_version(
    major: int,
    minor: int,
    patch: int,
    pre_release: str = "",
    build_metadata: str = "",
) -> Version:
    """Create a Version from its components.

    ``pre_release`` and ``build_metadata`` may be the empty string, in which
    case the version has no such field. Passing ``None`` is a usage error.

    Raises:
        VersionUsageError: If a component is negative, all components are
            zero, or an identifier list is None
        VersionFormatError: If a non-empty identifier list is malformed

    Examples:
        >>> create_version(1, 2, 3)
        Version(major=1, minor=2, patch=3, pre_release='', build_metadata='')
        >>> str(create_version(1, 0, 0, "rc.1", "exp.sha.5114f85"))
        '1.0.0-rc.1+exp.sha.5114f85'
    """
    return Version(major, minor, patch, pre_release, build_metadata)


def parse_version(version_string: str, allow_pre_release: bool = True) -> Version:
    """Parse a semantic version string into a Version object.

    The whole string has to match; surrounding whitespace is not stripped.

    Args:
        version_string: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+build])
        allow_pre_release: When False, a version carrying a pre-release or
            build metadata is rejected, leaving plain ``X.Y.Z`` only

    Returns:
        A Version object with parsed components

    Raises:
        VersionUsageError: If version_string is None or not a string
        VersionFormatError: If the string does not follow semantic
            versioning, is ``0.0.0``, or is not a plain release when
            ``allow_pre_release`` is False

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, pre_release='', build_metadata='')

        >>> parse_version("2.0.0-rc.1+build.456")
        Version(major=2, minor=0, patch=0, pre_release='rc.1', build_metadata='build.456')
    """
    if version_string is None:
        raise VersionUsageError("version_string is None")
    if not isinstance(version_string, str):
        raise VersionUsageError(
            f"Version must be a string, got {type(version_string).__name__}"
        )

    match = SEMVER_PATTERN.fullmatch(version_string)
    if not match:
        logger.debug("Rejected version string %r", version_string)
        raise VersionFormatError(version_string)

    if any(len(match.group(name)) > _MAX_COMPONENT_DIGITS for name in ("major", "minor", "patch")):
        logger.debug("Rejected oversized version component in %r...", version_string[:64])
        raise VersionFormatError(
            version_string, f"Version component too large: {version_string[:64]}..."
        )
    try:
        major = int(match.group("major"))
        minor = int(match.group("minor"))
        patch = int(match.group("patch"))
    except ValueError as exc:
        # sys.set_int_max_str_digits() may have lowered the limit
        logger.debug("Rejected oversized version component in %r...", version_string[:64])
        raise VersionFormatError(
            version_string, f"Version component too large: {version_string[:64]}..."
        ) from exc
    if major == 0 and minor == 0 and patch == 0:
        logger.debug("Rejected all-zero version %r", version_string)
        raise VersionFormatError(version_string, f"Version 0.0.0 is not allowed: {version_string}")

    pre_release = match.group("prerelease") or ""
    build_metadata = match.group("buildmetadata") or ""
    if not allow_pre_release and (pre_release or build_metadata):
        logger.debug("Rejected non-release version %r", version_string)
        raise VersionFormatError(
            version_string,
            f"Version is expected to have no pre-release or build metadata part: {version_string}",
        )

    return Version(major, minor, patch, pre_release, build_metadata)


def parse_release_version(version_string: str) -> Version:
    """Parse a plain ``X.Y.Z`` release version.

    Examples:
        >>> parse_release_version("1.4.2")
        Version(major=1, minor=4, patch=2, pre_release='', build_metadata='')
    """
    return parse_version(version_string, allow_pre_release=False)


COMPLIANCE = Version(2, 0, 0)

# Imported last: compare.py needs Version defined above
from .compare import (  # noqa: E402
    compare,
    compare_with_build_metadata,
    max_version,
    min_version,
)
