# SPDX-License-Identifier: MIT
"""Runtime version parsing and rendering.

Supports the HUGE.MAJOR[.MINOR[_PATCH]][-IDENTIFIER] format used by Java
runtimes:
- 1.8          -> 1.8.0
- 1.8.0_25     -> 1.8.0_25
- 1.8.0_5      -> 1.8.0_05 (patch is rendered with at least two digits)
- 1.8.0_25-ea  -> 1.8.0_25-ea

References:
- http://www.oracle.com/technetwork/java/javase/versioning-naming-139433.html
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

# Whole-string pattern. The identifier is everything after the first "-"
# following the numeric portion and is not parsed any further. It may not
# contain a line terminator (\n, \r, U+0085, U+2028, U+2029).
VERSION_PATTERN = re.compile(
    r"(?P<huge>[0-9]+)"
    r"\.(?P<major>[0-9]+)"
    r"(?:\.(?P<minor>[0-9]+)(?:_(?P<patch>[0-9]+))?)?"
    r"(?:-(?P<identifier>[^\n\r\u0085\u2028\u2029]+))?"
)

# Largest numeric component accepted by the parser (signed 32-bit).
MAX_COMPONENT = 2**31 - 1

_NUMERIC_FIELDS = ("huge", "major", "minor", "patch")


class VersionError(ValueError):
    """Base class for all runtime version errors."""

    pass


class MissingVersionError(VersionError):
    """Raised when there is no version string to parse."""

    def __init__(self, message: str = "Version string must not be None"):
        self.message = message
        super().__init__(message)


class MalformedVersionError(VersionError):
    """Raised when a version string does not match the version format."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid runtime version: '{version}'"
        super().__init__(self.message)


class InvalidVersionArgumentError(VersionError):
    """Raised when a RuntimeVersion is constructed from invalid fields."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(message)


class NullComparisonError(VersionError, TypeError):
    """Raised when a version is compared against None."""

    pass


@dataclass(frozen=True, slots=True)
class RuntimeVersion:
    """Represents a parsed runtime version.

    Attributes:
        huge: Outermost version component (1 for every Java up to 8)
        major: Major version number
        minor: Minor version number, 0 when omitted
        patch: Patch (update) number, 0 when omitted
        identifier: Optional qualifier such as "ea" or "rc1". None marks a
            general-availability release.
    """

    huge: int
    major: int
    minor: int = 0
    patch: int = 0
    identifier: Optional[str] = None

    def __post_init__(self) -> None:
        for name in _NUMERIC_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidVersionArgumentError(
                    name, f"{name} must be an int, got {type(value).__name__}"
                )
            if value < 0:
                raise InvalidVersionArgumentError(name, f"{name} must not be negative")
        if self.identifier is not None:
            if not isinstance(self.identifier, str):
                raise InvalidVersionArgumentError(
                    "identifier",
                    f"identifier must be a string, got {type(self.identifier).__name__}",
                )
            if not self.identifier:
                raise InvalidVersionArgumentError(
                    "identifier", "identifier must not be empty string"
                )

    @classmethod
    def parse(cls, version_string: str) -> RuntimeVersion:
        """Parse a version string. See parse_version()."""
        return parse_version(version_string)

    def __str__(self) -> str:
        return self.to_version_string()

    def to_version_string(self) -> str:
        """Return the canonical string representation of the version.

        A zero patch is omitted entirely, so "1.8.0_00" renders as "1.8.0".
        """
        version = f"{self.huge}.{self.major}.{self.minor}"
        if self.patch != 0:
            version += f"_{self.patch:02d}"
        if self.identifier is not None:
            version += f"-{self.identifier}"
        return version

    @property
    def is_release(self) -> bool:
        """Return True if this is a general-availability release."""
        return self.identifier is None

    @property
    def is_prerelease(self) -> bool:
        """Return True if this version carries an identifier."""
        return self.identifier is not None

    @property
    def base_version(self) -> RuntimeVersion:
        """Return the release with the same numeric components."""
        return RuntimeVersion(self.huge, self.major, self.minor, self.patch)

    def compare_to(self, other: RuntimeVersion) -> int:
        """Compare this version with another.

        Returns:
            -1 if self < other
            0 if self == other
            1 if self > other

        Raises:
            NullComparisonError: If other is None
            TypeError: If other is not a RuntimeVersion

        Note:
            Identifiers are compared as plain strings, which is only an
            approximation: "rc10" sorts before "rc2".
        """
        if other is None:
            raise NullComparisonError("Cannot compare a version with None")
        if not isinstance(other, RuntimeVersion):
            raise TypeError(f"Cannot compare RuntimeVersion with {type(other).__name__}")

        for name in _NUMERIC_FIELDS:
            val1 = getattr(self, name)
            val2 = getattr(other, name)
            if val1 != val2:
                return -1 if val1 < val2 else 1

        if self.identifier is None:
            # Release > ea/rc
            return 0 if other.identifier is None else 1
        if other.identifier is None:
            return -1
        if self.identifier == other.identifier:
            return 0
        return -1 if self.identifier < other.identifier else 1

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, RuntimeVersion):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, RuntimeVersion):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, RuntimeVersion):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, RuntimeVersion):
            return NotImplemented
        return self.compare_to(other) >= 0


# Smallest possible version.
MIN_VALUE = RuntimeVersion(0, 0, 0, 0)


def _component(match: re.Match[str], name: str, version_string: str) -> int:
    text = match.group(name)
    if text is None:
        return 0
    # int() rejects digit strings over 4300 characters
    digits = text.lstrip("0") or "0"
    if len(digits) > len(str(MAX_COMPONENT)) or int(digits) > MAX_COMPONENT:
        raise MalformedVersionError(
            version_string,
            f"Invalid runtime version: '{version_string}' ({name} {text} is out of range)",
        )
    return int(digits)


def parse_version(version_string: str) -> RuntimeVersion:
    """Parse a runtime version string into a RuntimeVersion object.

    Args:
        version_string: A string in HUGE.MAJOR[.MINOR[_PATCH]][-IDENTIFIER]
            format. The whole string must match; whitespace is not stripped.

    Returns:
        A RuntimeVersion with minor and patch defaulted to 0 when omitted

    Raises:
        MissingVersionError: If version_string is None
        MalformedVersionError: If the string does not match the format or a
            numeric component does not fit in a signed 32-bit integer

    Examples:
        >>> parse_version("1.8")
        RuntimeVersion(huge=1, major=8, minor=0, patch=0, identifier=None)

        >>> parse_version("1.8.0_25-ea")
        RuntimeVersion(huge=1, major=8, minor=0, patch=25, identifier='ea')
    """
    if version_string is None:
        raise MissingVersionError()
    if not isinstance(version_string, str):
        raise MalformedVersionError(
            str(version_string),
            f"Version must be a string, got {type(version_string).__name__}",
        )

    match = VERSION_PATTERN.fullmatch(version_string)
    if not match:
        raise MalformedVersionError(version_string)

    return RuntimeVersion(
        huge=_component(match, "huge", version_string),
        major=_component(match, "major", version_string),
        minor=_component(match, "minor", version_string),
        patch=_component(match, "patch", version_string),
        identifier=match.group("identifier"),
    )


def is_valid_version(version_string: str) -> bool:
    """Check if a string is a valid runtime version.

    Examples:
        >>> is_valid_version("1.8.0_25")
        True
        >>> is_valid_version("1")
        False
    """
    try:
        parse_version(version_string)
    except VersionError:
        return False
    return True
