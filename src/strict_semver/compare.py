# SPDX-License-Identifier: MIT
"""Version comparison following SemVer 2.0.0 precedence.

Precedence is decided by major, minor and patch, then by pre-release
identifiers. A pre-release has lower precedence than the plain release:
1.0.0-alpha < 1.0.0-alpha.1 < 1.0.0-alpha.beta < 1.0.0-beta < 1.0.0-beta.2
< 1.0.0-beta.11 < 1.0.0-rc.1 < 1.0.0

Build metadata does not figure into precedence. :func:`compare_with_build_metadata`
is an extended ordering that breaks such ties by build metadata; a version
with build metadata sorts after the same version without it.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Sequence

from .errors import VersionUsageError
from .semver import Version


def _sign(a, b) -> int:
    return (a > b) - (a < b)


def _is_numeric(identifier: str) -> bool:
    # str.isdigit() also accepts non-ASCII digits such as "²"
    return identifier.isascii() and identifier.isdigit()


def _numeric_key(identifier: str) -> tuple[int, str]:
    # Orders digit strings by value without int(), which refuses very long
    # strings; leading zeros (legal in build metadata) do not count
    digits = identifier.lstrip("0") or "0"
    return (len(digits), digits)


def _compare_identifier(id1: str, id2: str) -> int:
    """Compare a single pair of identifiers.

    Digits-only identifiers compare numerically and always have lower
    precedence than identifiers with letters or hyphens, which compare in
    ASCII order.
    """
    is_num1 = _is_numeric(id1)
    is_num2 = _is_numeric(id2)

    if is_num1 and is_num2:
        return _sign(_numeric_key(id1), _numeric_key(id2))
    if is_num1:
        return -1
    if is_num2:
        return 1
    return _sign(id1, id2)


def _compare_identifiers(parts1: Sequence[str], parts2: Sequence[str]) -> int:
    """Compare two identifier lists, used for pre-release and build metadata alike."""
    for p1, p2 in zip(parts1, parts2):
        result = _compare_identifier(p1, p2)
        if result != 0:
            return result

    # All compared parts equal - longer list has higher precedence
    return _sign(len(parts1), len(parts2))


def _compare_pre_release(v1: Version, v2: Version) -> int:
    if v1.is_pre_release and v2.is_pre_release:
        return _compare_identifiers(v1.pre_release_parts, v2.pre_release_parts)
    if v1.is_pre_release:
        return -1  # Pre-release < release
    if v2.is_pre_release:
        return 1
    return 0


def _compare_build_metadata(v1: Version, v2: Version) -> int:
    if v1.has_build_metadata and v2.has_build_metadata:
        return _compare_identifiers(v1.build_metadata_parts, v2.build_metadata_parts)
    if v1.has_build_metadata:
        return 1
    if v2.has_build_metadata:
        return -1
    return 0


def _compare(v1: Version, v2: Version, include_build_metadata: bool) -> int:
    if v1 is v2:
        return 0

    for attr in ("major", "minor", "patch"):
        result = _sign(getattr(v1, attr), getattr(v2, attr))
        if result != 0:
            return result

    result = _compare_pre_release(v1, v2)
    if result != 0 or not include_build_metadata:
        return result
    return _compare_build_metadata(v1, v2)


def _check_operands(v1: Version, v2: Version) -> None:
    # TypeError, as sorting machinery expects for unorderable operands
    for name, value in (("v1", v1), ("v2", v2)):
        if value is None:
            raise TypeError(f"{name} is None")
        if not isinstance(value, Version):
            raise TypeError(f"{name} must be a Version, got {type(value).__name__}")


def compare(v1: Version, v2: Version) -> int:
    """Compare two versions by SemVer precedence.

    Args:
        v1: First version
        v2: Second version

    Returns:
        -1 if v1 < v2
        0 if v1 == v2
        1 if v1 > v2

    Raises:
        TypeError: If either operand is None or not a Version

    Note:
        Build metadata is ignored, so 1.0.0+build1 and 1.0.0+build2 are equal.

    Examples:
        >>> from strict_semver import parse_version
        >>> compare(parse_version("1.0.0"), parse_version("2.0.0"))
        -1
        >>> compare(parse_version("1.0.0-rc.1"), parse_version("1.0.0"))
        -1
        >>> compare(parse_version("1.0.0+build1"), parse_version("1.0.0+build2"))
        0
    """
    _check_operands(v1, v2)
    return _compare(v1, v2, include_build_metadata=False)


def compare_with_build_metadata(v1: Version, v2: Version) -> int:
    """Compare two versions by precedence, then by build metadata.

    This is not part of the SemVer specification. Build metadata identifiers
    are compared with the same rules as pre-release identifiers, and only
    once both versions are equal in precedence.

    Raises:
        TypeError: If either operand is None or not a Version

    Examples:
        >>> from strict_semver import parse_version
        >>> compare_with_build_metadata(parse_version("1.0.0+build1"), parse_version("1.0.0+build2"))
        -1
        >>> compare_with_build_metadata(parse_version("1.0.0"), parse_version("1.0.0+build"))
        -1
    """
    _check_operands(v1, v2)
    return _compare(v1, v2, include_build_metadata=True)


def equals(v1: Version, v2: Version) -> bool:
    """Return True if both versions have the same precedence."""
    return compare(v1, v2) == 0


def equals_with_build_metadata(v1: Version, v2: Version) -> bool:
    """Return True if both versions are equal including their build metadata."""
    return compare_with_build_metadata(v1, v2) == 0


def min_version(v1: Version, v2: Version) -> Version:
    """Return the lower of two versions; the first one if they are equal.

    Raises:
        VersionUsageError: If either argument is None
    """
    if v1 is None:
        raise VersionUsageError("v1 is None")
    if v2 is None:
        raise VersionUsageError("v2 is None")
    return v1 if compare(v1, v2) <= 0 else v2


def max_version(v1: Version, v2: Version) -> Version:
    """Return the greater of two versions; the first one if they are equal.

    Raises:
        VersionUsageError: If either argument is None
    """
    if v1 is None:
        raise VersionUsageError("v1 is None")
    if v2 is None:
        raise VersionUsageError("v2 is None")
    return v2 if compare(v1, v2) < 0 else v1


# Key functions for sorted(), min() and max()
natural_order = cmp_to_key(compare)
with_build_metadata_order = cmp_to_key(compare_with_build_metadata)


def version_key(version: Version) -> tuple:
    """Return a sort key for a version, ordered exactly like :func:`compare`.

    Args:
        version: Version object

    Returns:
        A tuple that can be used for sorting versions

    Examples:
        >>> from strict_semver import parse_version
        >>> versions = [parse_version(v) for v in ["1.0.0", "2.0.0", "1.0.0-alpha"]]
        >>> [str(v) for v in sorted(versions, key=version_key)]
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    if not isinstance(version, Version):
        raise TypeError(f"version must be a Version, got {type(version).__name__}")

    # No pre-release becomes (1,) to sort after every (0, ...) pre-release.
    # Numeric identifiers become (0, length, digits) and sort before (1, 0, text).
    if not version.is_pre_release:
        pre_release_key: tuple = (1,)
    else:
        parts = []
        for part in version.pre_release_parts:
            if _is_numeric(part):
                parts.append((0, *_numeric_key(part)))
            else:
                parts.append((1, 0, part))
        pre_release_key = (0, tuple(parts))

    return (version.major, version.minor, version.patch, pre_release_key)
