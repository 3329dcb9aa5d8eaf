"""
Group advisories into one finding per affected package.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable

from .models import AdvisoryRecord, AggregatedFinding, ScanConfig


logger = logging.getLogger(__name__)


def aggregate_advisories(
    advisories: Iterable[AdvisoryRecord],
    config: ScanConfig,
) -> Dict[str, AggregatedFinding]:
    """Merge advisories into findings keyed by package name.

    The minimum severity only gates the creation of a finding. Once a package
    has a finding, every later advisory for it is merged regardless of
    severity. The score only changes together with a strictly higher
    severity, so a later advisory of equal severity keeps the first score.

    Args:
        advisories: Advisory records, in the order returned by the source
        config: Minimum severity and verbosity

    Returns:
        Findings in order of first appearance
    """
    findings: Dict[str, AggregatedFinding] = {}

    for advisory in advisories:
        for vulnerability in advisory.vulnerabilities:
            package_name = vulnerability.package_name
            finding = findings.get(package_name)

            if finding is not None:
                finding.summaries.append(f"{advisory.summary} Ref. URL: {advisory.html_url}")

                if vulnerability.vulnerable_version_range not in finding.vulnerable_versions_range:
                    finding.vulnerable_versions_range.append(vulnerability.vulnerable_version_range)

                if advisory.severity.ordinal > finding.severity.ordinal:
                    finding.severity = advisory.severity
                    finding.score = advisory.cvss_score

                if config.verbose:
                    finding.descriptions.append(advisory.description)
                continue

            if config.min_severity is not None and advisory.severity < config.min_severity:
                logger.debug(
                    "Skipping %s for %s: %s is below %s",
                    advisory.ghsa_id, package_name,
                    advisory.severity.value, config.min_severity.value,
                )
                continue

            findings[package_name] = AggregatedFinding(
                package_name=package_name,
                summaries=[f"{advisory.summary} -> Ref. URL: {advisory.html_url}"],
                vulnerable_versions_range=[vulnerability.vulnerable_version_range],
                severity=advisory.severity,
                score=advisory.cvss_score,
                descriptions=[advisory.description] if config.verbose else None,
            )

    return findings
