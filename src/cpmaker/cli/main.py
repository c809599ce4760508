# SPDX-License-Identifier: MIT
"""CLI entry point for the cpmaker command."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from ..result import ContentPackError, ValidationResult


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None

    @property
    def working_dir(self) -> Path:
        return self.project_dir or Path.cwd()


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
    """Print a warning message to stderr."""
    click.secho(f"Warning: {message}", fg="yellow", err=True)


def report_result(result: ValidationResult) -> None:
    """Print the warnings and errors of a validation result."""
    if result.warnings:
        echo_warning(f"Warnings ({len(result.warnings)}):")
        for issue in result.warnings:
            echo_warning(f"  - {issue}")

    if result.errors:
        echo_error(f"Errors ({len(result.errors)}):")
        for issue in result.errors:
            echo_error(f"  - {issue}")


@click.group()
@click.version_option(package_name="cpmaker")
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
    """Content Patcher content pack tool.

    Validate and build manifest.json and content.json for Content Patcher
    content packs.

    \b
    Examples:
        cpmaker validate
        cpmaker validate "dist/[CP] Better Crops"
        cpmaker build -o dist
        cpmaker preview --document content
    """
    ctx.verbose = verbose
    ctx.project_dir = directory
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Import and register commands
from .commands import build, preview, validate

cli.add_command(validate.validate)
cli.add_command(build.build)
cli.add_command(preview.preview)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except ContentPackError as e:
        echo_error(str(e))
        sys.exit(1)
    except FileNotFoundError as e:
        echo_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
