# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for runtime version tests."""

from __future__ import annotations

from typing import Iterator, Mapping

import pytest
from click.testing import CliRunner


class DeniedEnviron(Mapping[str, str]):
    """Environment mapping that refuses to reveal some variables."""

    def __init__(self, values: Mapping[str, str], denied: set[str]) -> None:
        self._values = dict(values)
        self._denied = set(denied)

    def __getitem__(self, key: str) -> str:
        if key in self._denied:
            raise PermissionError(f"access to {key} denied")
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove every variable the resolver reads from the process environment."""
    for name in (
        "JAVA_VERSION",
        "JAVA_SPECIFICATION_VERSION",
        "RUNTIME_VERSION_VARIABLE",
        "RUNTIME_VERSION_SPECIFICATION_VARIABLE",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def denied_environ() -> type[DeniedEnviron]:
    """Factory for environments that raise PermissionError on some variables."""
    return DeniedEnviron
