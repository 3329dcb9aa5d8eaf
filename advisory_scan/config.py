"""
Runtime settings for the scanner.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import InvalidSettings


DEFAULT_ADVISORY_URL = "https://api.github.com/advisories"
DEFAULT_ECOSYSTEM = "npm"
DEFAULT_TIMEOUT = 30.0
DEFAULT_PER_PAGE = 100
MANIFEST_FILENAME = "package.json"


def parse_timeout(value: str) -> float:
    """Parse a timeout in seconds, which must be a positive number.

    Raises:
        InvalidSettings: if the value is not a positive number
    """
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        raise InvalidSettings(f"Invalid timeout '{value}' - expected a number of seconds") from None
    if not timeout > 0:
        raise InvalidSettings(f"Invalid timeout '{value}' - must be greater than zero")
    return timeout


@dataclass(frozen=True)
class ScannerSettings:
    """Where and how to query the advisory source."""

    advisory_url: str = DEFAULT_ADVISORY_URL
    ecosystem: str = DEFAULT_ECOSYSTEM
    timeout: float = DEFAULT_TIMEOUT
    per_page: int = DEFAULT_PER_PAGE
    token: Optional[str] = None

    @staticmethod
    def from_env(environ: Optional[Mapping[str, str]] = None) -> "ScannerSettings":
        """Build settings from ``ADVISORY_SCAN_*`` and ``GITHUB_TOKEN``.

        Raises:
            InvalidSettings: if ``ADVISORY_SCAN_TIMEOUT`` is not a positive number
        """
        env = os.environ if environ is None else environ
        timeout = env.get("ADVISORY_SCAN_TIMEOUT")
        return ScannerSettings(
            advisory_url=env.get("ADVISORY_SCAN_URL") or DEFAULT_ADVISORY_URL,
            timeout=parse_timeout(timeout) if timeout else DEFAULT_TIMEOUT,
            token=env.get("GITHUB_TOKEN") or None,
        )
