"""
Core data models for advisory scanning.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from .errors import InvalidSeverityArgument


class Severity(Enum):
    """Advisory severity, ordered by its ordinal."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @property
    def ordinal(self) -> int:
        return _SEVERITY_ORDINALS[self]

    def __lt__(self, other: "Severity") -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.ordinal < other.ordinal

    def __le__(self, other: "Severity") -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.ordinal <= other.ordinal

    def __gt__(self, other: "Severity") -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.ordinal > other.ordinal

    def __ge__(self, other: "Severity") -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.ordinal >= other.ordinal

    @classmethod
    def parse(cls, value: str, strict: bool = False) -> "Severity":
        """Parse a severity name.

        Advisory payloads are matched case-insensitively. With ``strict``
        only the exact lowercase names are accepted.

        Raises:
            InvalidSeverityArgument: if the value is not a known level
        """
        text = str(value) if strict else str(value).strip().lower()
        try:
            return cls(text)
        except ValueError:
            raise InvalidSeverityArgument(
                f"Invalid severity value '{value}' - "
                f"Allowed values: {', '.join(s.value for s in cls)}"
            ) from None


_SEVERITY_ORDINALS = {
    Severity.LOW: 0,
    Severity.MEDIUM: 1,
    Severity.HIGH: 2,
    Severity.CRITICAL: 3,
}


@dataclass(frozen=True)
class DeclaredDependency:
    """A dependency as declared in the manifest, with its range normalized."""

    name: str
    version: str

    @property
    def affects(self) -> str:
        return f"{self.name}@{self.version}"


@dataclass(frozen=True)
class VulnerabilityEntry:
    """One package and version range covered by an advisory."""

    package_name: str
    vulnerable_version_range: str


@dataclass(frozen=True)
class AdvisoryRecord:
    """A published advisory.

    Severity, score and description apply to every entry in
    ``vulnerabilities``.
    """

    summary: str
    html_url: str
    severity: Severity
    cvss_score: float
    description: str
    vulnerabilities: Tuple[VulnerabilityEntry, ...] = ()
    ghsa_id: Optional[str] = None
    cve_id: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "AdvisoryRecord":
        """Build a record from one GitHub advisory JSON object.

        Raises:
            InvalidSeverityArgument: if the advisory severity is unknown
        """
        cvss = payload.get('cvss') or {}
        score = cvss.get('score')

        entries = []
        for vuln in payload.get('vulnerabilities') or []:
            package = vuln.get('package') or {}
            entries.append(VulnerabilityEntry(
                package_name=package.get('name', ''),
                vulnerable_version_range=vuln.get('vulnerable_version_range') or '',
            ))

        return cls(
            summary=payload.get('summary') or '',
            html_url=payload.get('html_url') or '',
            severity=Severity.parse(payload.get('severity')),
            cvss_score=float(score) if score is not None else 0.0,
            description=payload.get('description') or '',
            vulnerabilities=tuple(entries),
            ghsa_id=payload.get('ghsa_id'),
            cve_id=payload.get('cve_id'),
        )


@dataclass
class AggregatedFinding:
    """Merged view of every advisory affecting one package."""

    package_name: str
    summaries: List[str]
    vulnerable_versions_range: List[str]
    severity: Severity
    score: float
    descriptions: Optional[List[str]] = None


@dataclass(frozen=True)
class ScanConfig:
    """Options that shape aggregation and rendering."""

    min_severity: Optional[Severity] = None
    verbose: bool = False


@dataclass(frozen=True)
class ScanResult:
    """Outcome of one scan."""

    dependencies: Tuple[DeclaredDependency, ...]
    advisories_fetched: int
    findings: Dict[str, AggregatedFinding] = field(default_factory=dict)

    def declared_version(self, name: str) -> Optional[str]:
        for dependency in self.dependencies:
            if dependency.name == name:
                return dependency.version
        return None
