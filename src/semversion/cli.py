# SPDX-License-Identifier: MIT
"""CLI entry point for the semversion command."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from .compare import compare_versions, version_key
from .config import SemversionConfig, load_config
from .errors import SemversionError
from .requirement import parse_range_requirement
from .semver import parse_version


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[SemversionConfig] = None
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None

    def load_config(self) -> SemversionConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config(self.project_dir)
        return self.config


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.secho(f"Warning: {message}", fg="yellow", err=True)


@click.group()
@click.version_option(package_name="semversion")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Change to directory before running command.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Version parsing and range requirement tool.

    \b
    Examples:
        semversion parse 1.0.0-RC2+build.5
        semversion compare 1.0-RC19 1.0-RC107
        semversion sort 2.0.0 1.0.0 1.0.0-alpha
        semversion check 1.2.5 "1.2.x || >=2.0.0"
        semversion verify --provide host-core=2.1.0
    """
    ctx.verbose = verbose
    ctx.project_dir = directory
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)


@cli.command()
@click.argument("version")
def parse(version: str) -> None:
    """Show the components of VERSION."""
    try:
        parsed = parse_version(version)
    except SemversionError as e:
        echo_error(str(e))
        raise SystemExit(1)

    echo_info(f"Main version: {'.'.join(str(part) for part in parsed.main_version)}")
    echo_info(f"Identifier:   {parsed.identifier or '-'}")
    echo_info(f"Metadata:     {parsed.metadata or '-'}")


@cli.command()
@click.argument("version1")
@click.argument("version2")
def compare(version1: str, version2: str) -> None:
    """Compare VERSION1 with VERSION2.

    Build metadata is ignored.
    """
    try:
        result = compare_versions(version1, version2)
    except SemversionError as e:
        echo_error(str(e))
        raise SystemExit(1)

    symbol = {-1: "<", 0: "=", 1: ">"}[result]
    echo_info(f"{version1} {symbol} {version2}")


@cli.command(name="sort")
@click.argument("versions", nargs=-1, required=True)
@click.option("--reverse", "-r", is_flag=True, help="Sort from newest to oldest.")
def sort_versions(versions: tuple[str, ...], reverse: bool) -> None:
    """Print VERSIONS from oldest to newest."""
    try:
        ordered = sorted(versions, key=version_key, reverse=reverse)
    except SemversionError as e:
        echo_error(str(e))
        raise SystemExit(1)

    for version in ordered:
        echo_info(version)


@cli.command()
@click.argument("version")
@click.argument("requirement")
def check(version: str, requirement: str) -> None:
    """Check whether VERSION satisfies REQUIREMENT.

    Exits with status 1 if it does not.

    \b
    Examples:
        semversion check 1.5.0 "1.0.0 - 2.0.0"
        semversion check 0.1.0 ">=1.0.0 || <0.5.0"
    """
    try:
        compiled = parse_range_requirement(requirement)
        satisfied = compiled.test(version)
    except SemversionError as e:
        echo_error(str(e))
        raise SystemExit(1)

    if satisfied:
        echo_success(f"{version} satisfies {compiled}")
    else:
        echo_error(f"{version} does not satisfy {compiled}")
        raise SystemExit(1)


def _parse_provided(values: tuple[str, ...]) -> dict[str, str]:
    provided: dict[str, str] = {}
    for value in values:
        name, sep, version = value.partition("=")
        if not sep or not name or not version:
            raise click.BadParameter(
                f"Expected NAME=VERSION, got {value!r}", param_hint="'--provide'"
            )
        provided[name.strip()] = version.strip()
    return provided


@cli.command()
@click.option(
    "--provide",
    "-p",
    multiple=True,
    metavar="NAME=VERSION",
    help="Version of a required component. May be repeated.",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Treat components without a provided version as failures.",
)
@pass_context
def verify(ctx: Context, provide: tuple[str, ...], strict: bool) -> None:
    """Verify provided versions against the project's declared requirements.

    Requirements are read from [tool.semversion.requires] in pyproject.toml.

    \b
    Examples:
        semversion verify --provide host-core=2.1.0
        semversion -C path/to/plugin verify -p host-core=1.9.3 --strict
    """
    provided = _parse_provided(provide)
    try:
        config = ctx.load_config()
    except (SemversionError, FileNotFoundError) as e:
        echo_error(str(e))
        raise SystemExit(1)

    if not config.requires:
        echo_warning("No requirements declared in [tool.semversion.requires]")
        return

    echo_info(f"Verifying {config.label}")

    try:
        results = config.check(provided)
    except SemversionError as e:
        echo_error(str(e))
        raise SystemExit(1)

    failed = False
    for result in results:
        if result.missing:
            message = f"{result.name}: no version provided (requires {result.requirement})"
            if strict:
                echo_error(message)
                failed = True
            else:
                echo_warning(message)
        elif result.satisfied:
            echo_success(f"{result.name} {result.provided} satisfies {result.requirement}")
        else:
            echo_error(f"{result.name} {result.provided} does not satisfy {result.requirement}")
            failed = True

    if failed:
        raise SystemExit(1)

    echo_success(f"{config.label}: all requirements satisfied")


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except SemversionError as e:
        echo_error(str(e))
        sys.exit(1)
    except FileNotFoundError as e:
        echo_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
