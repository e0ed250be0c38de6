# SPDX-License-Identifier: MIT
"""Detection of the runtime version from the process environment.

Sources are consulted in order:
1. The full version string (JAVA_VERSION by default), e.g. 1.8.0_25
2. The specification version (JAVA_SPECIFICATION_VERSION by default), e.g. 1.8

A source that is missing, unreadable or unparseable is skipped. When no
source yields a version, MIN_VALUE is used.
"""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

from .config import ConfigError, ResolverConfig
from .version import MIN_VALUE, MalformedVersionError, RuntimeVersion, parse_version

logger = logging.getLogger(__name__)


def _read_variable(name: str, environ: Optional[Mapping[str, str]]) -> Optional[str]:
    if environ is None:
        environ = os.environ
    try:
        return environ.get(name)
    except PermissionError:
        logger.debug("Permission denied reading %s", name)
        return None


def system_version_string(
    config: Optional[ResolverConfig] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Optional[str]:
    """Return the raw full version string, or None if unavailable."""
    config = config or ResolverConfig()
    return _read_variable(config.version_variable, environ)


def specification_version_string(
    config: Optional[ResolverConfig] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Optional[str]:
    """Return the raw specification version string, or None if unavailable."""
    config = config or ResolverConfig()
    return _read_variable(config.specification_variable, environ)


def _parse_source(name: str, version_string: Optional[str]) -> Optional[RuntimeVersion]:
    if version_string is None:
        logger.debug("%s is not set", name)
        return None
    try:
        version = parse_version(version_string)
    except MalformedVersionError as e:
        # Probably something like 1.8.0_25.1
        logger.debug("Ignoring %s: %s", name, e)
        return None
    logger.debug("Runtime version %s taken from %s", version, name)
    return version


def detect_runtime_version(
    config: Optional[ResolverConfig] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Optional[RuntimeVersion]:
    """Detect the runtime version from the environment.

    Args:
        config: Variable names to consult. Defaults to ResolverConfig().
        environ: Mapping to read from. Defaults to os.environ.

    Returns:
        The version from the first usable source, or None if neither the full
        version nor the specification version could be parsed
    """
    config = config or ResolverConfig()

    version = _parse_source(config.version_variable, system_version_string(config, environ))
    if version is None:
        version = _parse_source(
            config.specification_variable,
            specification_version_string(config, environ),
        )
    return version


def resolve_runtime_version(
    config: Optional[ResolverConfig] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> RuntimeVersion:
    """Return the detected runtime version, falling back to MIN_VALUE.

    Examples:
        >>> resolve_runtime_version(environ={"JAVA_VERSION": "1.8.0_25"})
        RuntimeVersion(huge=1, major=8, minor=0, patch=25, identifier=None)
        >>> resolve_runtime_version(environ={})
        RuntimeVersion(huge=0, major=0, minor=0, patch=0, identifier=None)
    """
    version = detect_runtime_version(config, environ)
    if version is None:
        logger.debug("No runtime version found, using %s", MIN_VALUE)
        return MIN_VALUE
    return version


def _config_from_env() -> ResolverConfig:
    try:
        return ResolverConfig.from_env()
    except ConfigError as e:
        logger.warning("Ignoring runtime version configuration: %s", e)
        return ResolverConfig()


# The best available approximation of the runtime version, resolved once.
RUNTIME: RuntimeVersion = resolve_runtime_version(_config_from_env())
