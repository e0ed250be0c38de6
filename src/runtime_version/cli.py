# SPDX-License-Identifier: MIT
"""CLI entry point for the runtime-version command."""

from __future__ import annotations

import logging
import sys
from typing import Optional

import click

from .compare import compare_versions, is_at_least, version_key
from .config import ConfigError, ResolverConfig
from .runtime import resolve_runtime_version
from .version import RuntimeVersion, VersionError, parse_version


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def _current_version() -> RuntimeVersion:
    return resolve_runtime_version(ResolverConfig.from_env())


def _parse_argument(value: str) -> RuntimeVersion:
    try:
        return parse_version(value)
    except VersionError as e:
        echo_error(str(e))
        sys.exit(1)


@click.group()
@click.version_option(package_name="runtime-version")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
def cli(verbose: bool) -> None:
    """Parse and compare runtime version numbers.

    \b
    Examples:
        runtime-version parse 1.8.0_25
        runtime-version compare 1.8.0-ea 1.8.0
        runtime-version check 1.8
        runtime-version show
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


@cli.command()
@click.argument("version")
@click.option("--fields", is_flag=True, help="Print each component on its own line.")
def parse(version: str, fields: bool) -> None:
    """Print the canonical form of VERSION."""
    v = _parse_argument(version)
    if not fields:
        echo_info(v.to_version_string())
        return
    echo_info(f"huge={v.huge}")
    echo_info(f"major={v.major}")
    echo_info(f"minor={v.minor}")
    echo_info(f"patch={v.patch}")
    echo_info(f"identifier={v.identifier or ''}")


@cli.command()
@click.argument("version1")
@click.argument("version2")
def compare(version1: str, version2: str) -> None:
    """Print -1, 0 or 1 as VERSION1 is older, equal or newer than VERSION2."""
    echo_info(str(compare_versions(_parse_argument(version1), _parse_argument(version2))))


@cli.command(name="sort")
@click.argument("versions", nargs=-1, required=True)
@click.option("--reverse", is_flag=True, help="Sort newest first.")
def sort_versions(versions: tuple[str, ...], reverse: bool) -> None:
    """Print VERSIONS oldest first."""
    keys = {version: version_key(_parse_argument(version)) for version in versions}
    for version in sorted(versions, key=keys.__getitem__, reverse=reverse):
        echo_info(version)


@cli.command()
@click.argument("minimum")
@click.option(
    "--version",
    "version",
    default=None,
    help="Version to check instead of the detected runtime version.",
)
def check(minimum: str, version: Optional[str]) -> None:
    """Exit with status 0 if the runtime version is at least MINIMUM."""
    required = _parse_argument(minimum)
    actual = _parse_argument(version) if version is not None else _current_version()

    if is_at_least(actual, required):
        echo_success(f"{actual} satisfies >= {required}")
        return
    echo_error(f"{actual} does not satisfy >= {required}")
    sys.exit(1)


@cli.command()
def show() -> None:
    """Print the runtime version detected from the environment."""
    echo_info(_current_version().to_version_string())


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)
    except VersionError as e:
        echo_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
