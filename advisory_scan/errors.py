"""
Error types raised by the scanner.

Each error carries the process exit code the CLI maps it to.
"""

from __future__ import annotations


class ScanError(Exception):
    """Base class for every user-visible scan failure."""

    exit_code = 1


class InvalidSeverityArgument(ScanError, ValueError):
    """Severity value is not one of low, medium, high, critical."""

    exit_code = 2


class ManifestNotFound(ScanError):
    """The dependency manifest does not exist."""

    exit_code = 3


class ManifestInvalid(ScanError):
    """The dependency manifest is not well-formed JSON."""

    exit_code = 4


class NoDependencies(ScanError):
    """The dependency manifest declares no dependencies."""

    exit_code = 5


class AdvisoryQueryFailed(ScanError):
    """The advisory source could not be queried."""

    exit_code = 6


class InvalidSettings(ScanError, ValueError):
    """A setting from the environment or command line is invalid."""

    exit_code = 7
