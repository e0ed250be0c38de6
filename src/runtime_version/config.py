# SPDX-License-Identifier: MIT
"""Configuration for runtime version resolution."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

# e.g. 1.8.0_25
DEFAULT_VERSION_VARIABLE = "JAVA_VERSION"

# e.g. 1.8
DEFAULT_SPECIFICATION_VARIABLE = "JAVA_SPECIFICATION_VERSION"


class ConfigError(Exception):
    """Raised when resolver configuration is invalid."""

    pass


@dataclass(frozen=True)
class ResolverConfig:
    """Names of the environment variables consulted for the runtime version.

    Attributes:
        version_variable: Variable holding the full version string
        specification_variable: Variable holding the specification version,
            used when the full version is missing or unusable
    """

    version_variable: str = DEFAULT_VERSION_VARIABLE
    specification_variable: str = DEFAULT_SPECIFICATION_VARIABLE

    def __post_init__(self) -> None:
        if not self.version_variable:
            raise ConfigError("version_variable must not be empty")
        if not self.specification_variable:
            raise ConfigError("specification_variable must not be empty")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ResolverConfig":
        """Create configuration from environment variables.

        RUNTIME_VERSION_VARIABLE and RUNTIME_VERSION_SPECIFICATION_VARIABLE
        rename the variables the resolver reads.
        """
        if environ is None:
            environ = os.environ

        kwargs = {}
        if version_variable := environ.get("RUNTIME_VERSION_VARIABLE"):
            kwargs["version_variable"] = version_variable.strip()
        if specification_variable := environ.get("RUNTIME_VERSION_SPECIFICATION_VARIABLE"):
            kwargs["specification_variable"] = specification_variable.strip()

        return cls(**kwargs)
