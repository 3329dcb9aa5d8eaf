"""Tests for manifest reading."""

import json
from pathlib import Path

import pytest

from advisory_scan.errors import ManifestInvalid, ManifestNotFound, NoDependencies
from advisory_scan.manifest import ManifestReader, normalize_version, read_manifest
from advisory_scan.models import DeclaredDependency


def write_manifest(directory: Path, data) -> Path:
    manifest = directory / "package.json"
    manifest.write_text(json.dumps(data), encoding="utf-8")
    return manifest


def test_normalize_version():
    assert normalize_version("^1.2.3") == "1.2.3"
    assert normalize_version("~1.2.3") == "1.2.3"
    assert normalize_version("1.2.3") == "1.2.3"


def test_normalize_version_strips_first_occurrence_only():
    assert normalize_version("^^1.2.3") == "^1.2.3"
    assert normalize_version("~~1.2.3") == "~1.2.3"
    assert normalize_version("^~1.2.3") == "1.2.3"


def test_read_manifest_from_directory(tmp_path: Path):
    write_manifest(tmp_path, {
        "name": "demo",
        "dependencies": {"express": "^4.17.1", "lodash": "~4.17.20", "left-pad": "1.3.0"},
    })

    deps = read_manifest(tmp_path)

    assert deps == {"express": "4.17.1", "lodash": "4.17.20", "left-pad": "1.3.0"}
    assert list(deps) == ["express", "lodash", "left-pad"]


def test_read_manifest_from_file_path(tmp_path: Path):
    manifest = tmp_path / "other.json"
    manifest.write_text(json.dumps({"dependencies": {"axios": "^0.21.0"}}), encoding="utf-8")

    assert read_manifest(manifest) == {"axios": "0.21.0"}


def test_missing_manifest(tmp_path: Path):
    with pytest.raises(ManifestNotFound):
        read_manifest(tmp_path)
    with pytest.raises(ManifestNotFound):
        read_manifest(tmp_path / "missing.json")


def test_invalid_manifest(tmp_path: Path):
    (tmp_path / "package.json").write_text("{not json", encoding="utf-8")

    with pytest.raises(ManifestInvalid):
        read_manifest(tmp_path)


def test_manifest_must_be_object(tmp_path: Path):
    write_manifest(tmp_path, ["express"])

    with pytest.raises(ManifestInvalid):
        read_manifest(tmp_path)


def test_empty_dependencies(tmp_path: Path):
    write_manifest(tmp_path, {"dependencies": {}})

    with pytest.raises(NoDependencies):
        read_manifest(tmp_path)


def test_missing_dependencies(tmp_path: Path):
    write_manifest(tmp_path, {"name": "demo", "devDependencies": {"jest": "^29.0.0"}})

    with pytest.raises(NoDependencies):
        read_manifest(tmp_path)


def test_manifest_reader_returns_declared_dependencies(tmp_path: Path):
    write_manifest(tmp_path, {"dependencies": {"express": "^4.17.1", "lodash": "4.17.20"}})

    deps = ManifestReader(tmp_path).read()

    assert deps == (
        DeclaredDependency("express", "4.17.1"),
        DeclaredDependency("lodash", "4.17.20"),
    )
    assert [d.affects for d in deps] == ["express@4.17.1", "lodash@4.17.20"]


@pytest.mark.parametrize("dependencies", [[], "", False, ["express"], "express"])
def test_dependencies_must_be_object(tmp_path: Path, dependencies):
    write_manifest(tmp_path, {"dependencies": dependencies})

    with pytest.raises(ManifestInvalid):
        read_manifest(tmp_path)


def test_null_dependencies(tmp_path: Path):
    write_manifest(tmp_path, {"dependencies": None})

    with pytest.raises(NoDependencies):
        read_manifest(tmp_path)


@pytest.mark.parametrize("version", [None, 1, ["^1.0.0"]])
def test_version_must_be_string(tmp_path: Path, version):
    write_manifest(tmp_path, {"dependencies": {"express": version}})

    with pytest.raises(ManifestInvalid):
        read_manifest(tmp_path)
