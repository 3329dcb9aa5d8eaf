"""
Text report for aggregated findings.
"""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional

from .models import AggregatedFinding, Severity
from .versions import is_version_affected


RESET = "\033[0m"
BOLD = "\033[1m"

SEVERITY_COLORS = {
    Severity.LOW: "\033[33m",       # yellow
    Severity.MEDIUM: "\033[91m",    # bright red
    Severity.HIGH: "\033[31m",      # red
    Severity.CRITICAL: "\033[35m",  # magenta
}

RULE = "_" * 51
DIVIDER = "-" * 34


def bold(text, color: bool = True) -> str:
    if not color:
        return str(text)
    return f"{BOLD}{text}{RESET}"


def colorize_severity(severity: Severity, color: bool = True) -> str:
    if not color:
        return severity.value
    return f"{SEVERITY_COLORS[severity]}{severity.value}{RESET}"


def format_score(score: float) -> str:
    return f"{score:g}"


def _declared_line(version: str, finding: AggregatedFinding, color: bool) -> str:
    affected = is_version_affected(version, finding.vulnerable_versions_range)
    if affected is None:
        status = "could not be compared"
    elif affected:
        status = "within an affected range"
    else:
        status = "outside the affected ranges"
    return f"Declared version: {bold(version, color)} ({status})"


def render_finding(
    finding: AggregatedFinding,
    verbose: bool,
    color: bool = True,
    declared_version: Optional[str] = None,
) -> str:
    """Format one finding as a block of lines."""
    lines = [
        f"Vulnerable package: {bold(finding.package_name, color)}"
        f" - Severity: {bold(colorize_severity(finding.severity, color), color)}"
        f" - Score: {bold(format_score(finding.score), color)}",
        f"Affected versions: {bold(', '.join(finding.vulnerable_versions_range), color)}",
    ]
    if declared_version is not None:
        lines.append(_declared_line(declared_version, finding, color))

    lines.append(bold('Summary', color))
    lines.extend(finding.summaries)

    if verbose:
        lines.append(bold('Description', color))
        lines.extend(finding.descriptions or [])

    return "\n".join(lines)


def render_findings(
    findings: Dict[str, AggregatedFinding],
    verbose: bool,
    color: bool = True,
    declared: Optional[Mapping[str, str]] = None,
) -> List[str]:
    """Format every finding, keeping the findings' order."""
    declared = declared or {}
    return [
        render_finding(finding, verbose, color, declared.get(package_name))
        for package_name, finding in findings.items()
    ]


def format_report(
    findings: Dict[str, AggregatedFinding],
    verbose: bool,
    color: bool = True,
    declared: Optional[Mapping[str, str]] = None,
) -> str:
    """Build the full report with header, dividers and footer."""
    blocks = render_findings(findings, verbose, color, declared)
    body = f"\n{DIVIDER}\n".join(blocks) if blocks else "No vulnerabilities found"
    return "\n".join([
        bold("REPORT", color),
        RULE + "\n",
        body,
        RULE,
        "REPORT DONE",
    ])
