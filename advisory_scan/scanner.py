"""
Scan a project's declared dependencies against the advisory database.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from .advisory_client import GitHubAdvisoryClient
from .aggregation import aggregate_advisories
from .config import ScannerSettings
from .interfaces import AdvisorySource, ManifestSource
from .manifest import ManifestReader
from .models import ScanConfig, ScanResult


logger = logging.getLogger(__name__)


class VulnerabilityScanner:
    """Run one scan: manifest, advisory query, aggregation."""

    def __init__(
        self,
        manifest_path: Union[str, Path] = Path("."),
        settings: Optional[ScannerSettings] = None,
        config: Optional[ScanConfig] = None,
        client: Optional[AdvisorySource] = None,
        manifest: Optional[ManifestSource] = None,
    ):
        """Initialize the scanner.

        Args:
            manifest_path: Project directory or manifest file
            settings: Advisory source settings
            config: Minimum severity and verbosity
            client: Advisory source, defaults to the GitHub advisory API
            manifest: Manifest source, defaults to reading ``manifest_path``
        """
        self.settings = settings or ScannerSettings()
        self.config = config or ScanConfig()
        self.client = client or GitHubAdvisoryClient(self.settings)
        self.manifest = manifest or ManifestReader(manifest_path)

    def scan(self) -> ScanResult:
        """Run the scan.

        Returns:
            The declared dependencies and the aggregated findings

        Raises:
            ScanError: for any manifest or advisory query failure
        """
        dependencies = self.manifest.read()
        affects = [dependency.affects for dependency in dependencies]

        advisories = self.client.query(self.settings.ecosystem, affects)
        findings = aggregate_advisories(advisories, self.config)
        logger.info(
            "Aggregated %d advisories into %d findings",
            len(advisories), len(findings),
        )

        return ScanResult(
            dependencies=dependencies,
            advisories_fetched=len(advisories),
            findings=findings,
        )
