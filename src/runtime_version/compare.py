# SPDX-License-Identifier: MIT
"""Runtime version comparison.

Ordering: numeric components first, then a release outranks any version
carrying an identifier. Two identifiers are compared as plain strings.
"""

from __future__ import annotations

from typing import Union

from .version import NullComparisonError, RuntimeVersion, parse_version


def _coerce(version: Union[str, RuntimeVersion]) -> RuntimeVersion:
    if version is None:
        raise NullComparisonError("Cannot compare a version with None")
    if isinstance(version, str):
        return parse_version(version)
    if not isinstance(version, RuntimeVersion):
        raise TypeError(f"Cannot compare RuntimeVersion with {type(version).__name__}")
    return version


def compare_versions(
    version1: Union[str, RuntimeVersion], version2: Union[str, RuntimeVersion]
) -> int:
    """Compare two runtime versions.

    Args:
        version1: First version (string or RuntimeVersion object)
        version2: Second version (string or RuntimeVersion object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        NullComparisonError: If either version is None
        MalformedVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("1.7.0_80", "1.8")
        -1
        >>> compare_versions("1.8.0-ea", "1.8.0")
        -1
        >>> compare_versions("1.8", "1.8.0_00")
        0
    """
    return _coerce(version1).compare_to(_coerce(version2))


def version_key(version: Union[str, RuntimeVersion]) -> tuple:
    """Return a sort key for a version, consistent with compare_versions().

    Examples:
        >>> sorted(["1.8.0", "1.7.0", "1.8.0-ea"], key=version_key)
        ['1.7.0', '1.8.0-ea', '1.8.0']
    """
    v = _coerce(version)

    # Releases become (1, "") so they sort after any identifier
    if v.identifier is None:
        identifier_key = (1, "")
    else:
        identifier_key = (0, v.identifier)

    return (v.huge, v.major, v.minor, v.patch, identifier_key)


def is_at_least(
    version: Union[str, RuntimeVersion], minimum: Union[str, RuntimeVersion]
) -> bool:
    """Return True if version is the same as or newer than minimum.

    Examples:
        >>> is_at_least("1.8.0_25", "1.8")
        True
        >>> is_at_least("1.8.0-ea", "1.8")
        False
    """
    return compare_versions(version, minimum) >= 0
