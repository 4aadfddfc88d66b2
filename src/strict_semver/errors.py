# SPDX-License-Identifier: MIT
"""Exceptions raised by strict_semver."""

from __future__ import annotations


class VersionError(Exception):
    """Base class for all version errors."""


class VersionFormatError(VersionError, ValueError):
    """Raised when a version string or identifier list breaks the SemVer grammar."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid semantic version: {version}"
        super().__init__(self.message)


class VersionUsageError(VersionError, ValueError):
    """Raised when a caller violates a precondition the grammar does not cover.

    Missing or mistyped arguments, negative components and the all-zero
    version ``0.0.0`` end up here.
    """
