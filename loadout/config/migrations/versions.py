"""
Version string parsing and ordering.

Versions follow PEP 440 as implemented by ``packaging``: missing trailing
segments count as zero ("1.0" == "1.0.0") and pre-releases sort before
their release ("0.13.0rc1" < "0.13.0").
"""

from packaging.version import InvalidVersion, Version

from ..errors import InvalidVersionError


def parse_version(version: str) -> Version:
    """
    Parse a version string.

    Raises:
        InvalidVersionError: If version is empty or malformed
    """
    if not isinstance(version, str) or not version.strip():
        raise InvalidVersionError(version)
    try:
        return Version(version.strip())
    except InvalidVersion as e:
        raise InvalidVersionError(version) from e


def compare_versions(a: str, b: str) -> int:
    """Return negative, zero or positive when a is older, equal or newer than b."""
    va, vb = parse_version(a), parse_version(b)
    if va < vb:
        return -1
    if va > vb:
        return 1
    return 0
