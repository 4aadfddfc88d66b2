# SPDX-License-Identifier: MIT
"""Strict Semantic Versioning 2.0.0 parsing, validation and comparison.

This package parses version strings exactly as the SemVer 2.0.0 grammar
allows, builds immutable :class:`Version` values and orders them by SemVer
precedence, with an optional extended ordering that also considers build
metadata.

Example:
    >>> from strict_semver import parse_version, compare, is_valid_version
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.pre_release_parts
    ('alpha', '1')
    >>>
    >>> is_valid_version("1.0")
    False
    >>>
    >>> compare(parse_version("1.0.0-rc.1"), parse_version("1.0.0"))
    -1
"""

import logging

__version__ = "0.1.0"

from .errors import (
    VersionError,
    VersionFormatError,
    VersionUsageError,
)
from .grammar import (
    SEMVER_PATTERN,
    PRE_RELEASE_PATTERN,
    BUILD_METADATA_PATTERN,
    is_valid_version,
    is_valid_pre_release,
    is_valid_build_metadata,
)
from .semver import (
    COMPLIANCE,
    SEMVER_SPEC_VERSION,
    Version,
    create_version,
    parse_version,
    parse_release_version,
)
from .compare import (
    compare,
    compare_with_build_metadata,
    equals,
    equals_with_build_metadata,
    min_version,
    max_version,
    natural_order,
    with_build_metadata_order,
    version_key,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Errors
    "VersionError",
    "VersionFormatError",
    "VersionUsageError",
    # Grammar
    "SEMVER_PATTERN",
    "PRE_RELEASE_PATTERN",
    "BUILD_METADATA_PATTERN",
    "is_valid_version",
    "is_valid_pre_release",
    "is_valid_build_metadata",
    # Version values and parsing
    "COMPLIANCE",
    "SEMVER_SPEC_VERSION",
    "Version",
    "create_version",
    "parse_version",
    "parse_release_version",
    # Version comparison
    "compare",
    "compare_with_build_metadata",
    "equals",
    "equals_with_build_metadata",
    "min_version",
    "max_version",
    "natural_order",
    "with_build_metadata_order",
    "version_key",
]
