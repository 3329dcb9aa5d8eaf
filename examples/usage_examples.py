#!/usr/bin/env python3
"""
Example script showing how to use the advisory-scan library.
"""

from pathlib import Path

from advisory_scan.aggregation import aggregate_advisories
from advisory_scan.models import (
    AdvisoryRecord,
    ScanConfig,
    Severity,
    VulnerabilityEntry,
)
from advisory_scan.reporting import format_report
from advisory_scan.scanner import VulnerabilityScanner


def example_basic_scan():
    """Example: Scan the project in the current directory."""
    print("="*60)
    print("Example 1: Basic Scan")
    print("="*60)

    scanner = VulnerabilityScanner(Path("."))
    result = scanner.scan()

    print(f"Dependencies scanned: {len(result.dependencies)}")
    print(f"Advisories fetched: {result.advisories_fetched}")
    print(format_report(result.findings, verbose=False))


def example_filtered_scan():
    """Example: Only report packages first seen with high severity or above."""
    print("\n" + "="*60)
    print("Example 2: Filtered, Verbose Scan")
    print("="*60)

    config = ScanConfig(min_severity=Severity.HIGH, verbose=True)
    scanner = VulnerabilityScanner(Path("./package.json"), config=config)
    result = scanner.scan()

    print(format_report(result.findings, verbose=True))


def example_offline_aggregation():
    """Example: Aggregate advisory records without the network."""
    print("\n" + "="*60)
    print("Example 3: Offline Aggregation")
    print("="*60)

    advisories = [
        AdvisoryRecord(
            summary="Regular Expression Denial of Service",
            html_url="https://github.com/advisories/GHSA-example-1",
            severity=Severity.LOW,
            cvss_score=3.7,
            description="Crafted input can make matching slow.",
            vulnerabilities=(VulnerabilityEntry("foo", "< 2.0.0"),),
        ),
        AdvisoryRecord(
            summary="Prototype Pollution",
            html_url="https://github.com/advisories/GHSA-example-2",
            severity=Severity.HIGH,
            cvss_score=7.5,
            description="Object prototypes can be modified.",
            vulnerabilities=(VulnerabilityEntry("foo", "< 1.0.0"),),
        ),
    ]

    findings = aggregate_advisories(advisories, ScanConfig())
    print(format_report(findings, verbose=False, declared={"foo": "0.9.0"}))


if __name__ == "__main__":
    example_offline_aggregation()
    example_basic_scan()
    example_filtered_scan()
