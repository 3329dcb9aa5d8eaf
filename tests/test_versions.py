"""Tests for advisory range matching."""

import pytest
from packaging.specifiers import InvalidSpecifier

from advisory_scan.versions import is_version_affected, parse_range


def test_parse_range():
    assert "1.0.0" in parse_range("< 2.0.0")
    assert "1.1.0" in parse_range(">= 1.0.0, < 1.2.3")
    assert "1.2.3" not in parse_range(">= 1.0.0, < 1.2.3")
    assert "1.2.3" in parse_range("= 1.2.3")


def test_parse_range_rejects_garbage():
    with pytest.raises(InvalidSpecifier):
        parse_range("")
    with pytest.raises(InvalidSpecifier):
        parse_range("1.x || 2.x")


def test_is_version_affected():
    assert is_version_affected("1.5.0", ["< 1.0.0", "< 2.0.0"]) is True
    assert is_version_affected("2.0.0", ["< 1.0.0", "< 2.0.0"]) is False


def test_is_version_affected_unparseable():
    assert is_version_affected("latest", ["< 2.0.0"]) is None
    assert is_version_affected("1.0.0", ["garbage"]) is None
    assert is_version_affected("1.0.0", []) is None
