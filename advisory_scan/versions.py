"""
Match declared versions against advisory version ranges.
"""

from __future__ import annotations

import re
from typing import Iterable, Optional

from packaging import version as pkg_version
from packaging.specifiers import InvalidSpecifier, SpecifierSet


_CLAUSE_RE = re.compile(r'^(<=|>=|<|>|=)\s*v?(\S+)$')


def parse_range(range_text: str) -> SpecifierSet:
    """Convert an advisory range such as ``>= 1.0.0, < 1.2.3`` to a specifier set.

    Raises:
        InvalidSpecifier: if a clause cannot be parsed
    """
    clauses = []
    for clause in range_text.split(','):
        clause = clause.strip()
        if not clause:
            continue
        match = _CLAUSE_RE.match(clause)
        if not match:
            raise InvalidSpecifier(clause)
        operator, bound = match.groups()
        if operator == '=':
            operator = '=='
        clauses.append(f"{operator}{bound}")
    if not clauses:
        raise InvalidSpecifier(range_text)
    return SpecifierSet(','.join(clauses))


def is_version_affected(version: str, ranges: Iterable[str]) -> Optional[bool]:
    """Check whether a declared version falls inside any affected range.

    Returns:
        True if a range contains the version, False if every parseable range
        excludes it, None if the version or all of the ranges are unparseable
    """
    try:
        current = pkg_version.parse(version)
    except pkg_version.InvalidVersion:
        return None

    checked = False
    for range_text in ranges:
        try:
            specifier = parse_range(range_text)
        except InvalidSpecifier:
            continue
        checked = True
        if specifier.contains(current, prereleases=True):
            return True

    return False if checked else None
