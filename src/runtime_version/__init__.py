# SPDX-License-Identifier: MIT
"""Runtime version parsing and comparison.

This package parses, renders and compares versions in the
HUGE.MAJOR[.MINOR[_PATCH]][-IDENTIFIER] format used by Java runtimes, and
detects the current runtime version from the environment.

Example:
    >>> from runtime_version import parse_version, compare_versions, MIN_VALUE
    >>>
    >>> version = parse_version("1.8.0_5-ea")
    >>> version.patch
    5
    >>> str(version)
    '1.8.0_05-ea'
    >>>
    >>> compare_versions("1.8.0-ea", "1.8.0")
    -1
    >>> MIN_VALUE <= version
    True
"""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

from .version import (
    RuntimeVersion,
    parse_version,
    is_valid_version,
    VersionError,
    MissingVersionError,
    MalformedVersionError,
    InvalidVersionArgumentError,
    NullComparisonError,
    MIN_VALUE,
    MAX_COMPONENT,
    VERSION_PATTERN,
)
from .compare import (
    compare_versions,
    version_key,
    is_at_least,
)
from .config import (
    ResolverConfig,
    ConfigError,
)
from .runtime import (
    RUNTIME,
    detect_runtime_version,
    resolve_runtime_version,
    system_version_string,
    specification_version_string,
)

__all__ = [
    # Version parsing
    "RuntimeVersion",
    "parse_version",
    "is_valid_version",
    "MIN_VALUE",
    "MAX_COMPONENT",
    "VERSION_PATTERN",
    # Errors
    "VersionError",
    "MissingVersionError",
    "MalformedVersionError",
    "InvalidVersionArgumentError",
    "NullComparisonError",
    "ConfigError",
    # Version comparison
    "compare_versions",
    "version_key",
    "is_at_least",
    # Runtime detection
    "ResolverConfig",
    "RUNTIME",
    "detect_runtime_version",
    "resolve_runtime_version",
    "system_version_string",
    "specification_version_string",
]
