"""
Read declared dependencies from a package.json manifest.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Tuple, Union

from .config import MANIFEST_FILENAME
from .errors import ManifestInvalid, ManifestNotFound, NoDependencies
from .models import DeclaredDependency


logger = logging.getLogger(__name__)


def normalize_version(version_range: str) -> str:
    """Drop the first ``^`` and the first ``~`` from a version range."""
    return version_range.replace('^', '', 1).replace('~', '', 1)


def resolve_manifest_path(path: Union[str, Path]) -> Path:
    """Return the manifest file for a project directory or file path."""
    path = Path(path)
    if path.is_dir():
        return path / MANIFEST_FILENAME
    return path


def read_manifest(path: Union[str, Path]) -> Dict[str, str]:
    """Load a manifest and map dependency names to normalized versions.

    Args:
        path: Project directory or path to the manifest file

    Returns:
        Dependency name to version, in manifest order

    Raises:
        ManifestNotFound: if the manifest does not exist
        ManifestInvalid: if the manifest is not a JSON object
        NoDependencies: if no dependencies are declared
    """
    manifest_file = resolve_manifest_path(path)
    if not manifest_file.is_file():
        raise ManifestNotFound(f"{manifest_file.name} is not found in {manifest_file.parent}")

    logger.info("Reading manifest %s", manifest_file)
    try:
        with open(manifest_file, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ManifestInvalid(f"{manifest_file.name} is not valid: {e}") from e

    if not isinstance(data, dict):
        raise ManifestInvalid(f"{manifest_file.name} is not valid: expected a JSON object")

    dependencies = data.get('dependencies')
    if dependencies is not None and not isinstance(dependencies, dict):
        raise ManifestInvalid(f"{manifest_file.name} is not valid: 'dependencies' must be an object")
    if not dependencies:
        raise NoDependencies(f"Missing dependencies in {manifest_file.name}")

    normalized = {}
    for name, version in dependencies.items():
        if not isinstance(version, str):
            raise ManifestInvalid(
                f"{manifest_file.name} is not valid: version of '{name}' must be a string"
            )
        normalized[name] = normalize_version(version)
    return normalized


class ManifestReader:
    """Manifest source backed by a package.json file."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def read(self) -> Tuple[DeclaredDependency, ...]:
        dependencies = read_manifest(self.path)
        logger.info("Found %d dependencies", len(dependencies))
        return tuple(
            DeclaredDependency(name=name, version=version)
            for name, version in dependencies.items()
        )
