"""
Interfaces for the manifest and advisory sources.
"""

from __future__ import annotations

from typing import List, Protocol, Sequence, Tuple

from .models import AdvisoryRecord, DeclaredDependency


class ManifestSource(Protocol):
    """Provide the declared dependencies of a project."""

    def read(self) -> Tuple[DeclaredDependency, ...]:
        ...


class AdvisorySource(Protocol):
    """Query published advisories for a set of dependencies."""

    def query(self, ecosystem: str, affects: Sequence[str]) -> List[AdvisoryRecord]:
        ...
