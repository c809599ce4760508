# SPDX-License-Identifier: MIT
"""Validate a content pack project or a built content pack."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from ...result import ContentPackError
from ...validator import validate_pack
from ..main import Context, echo_error, echo_info, echo_success, pass_context, report_result
from . import load_source


@click.command()
@click.argument(
    "path",
    required=False,
    type=click.Path(exists=True, path_type=Path),
)
@click.option(
    "--strict",
    is_flag=True,
    help="Treat warnings as errors.",
)
@pass_context
def validate(ctx: Context, path: Optional[Path], strict: bool) -> None:
    """Validate a content pack.

    PATH may be a project directory containing contentpack.toml, a built pack
    directory containing manifest.json and content.json, or either file.
    Defaults to the current directory.

    \b
    Examples:
        cpmaker validate                      # Validate current project
        cpmaker validate "dist/[CP] My Pack"  # Validate a built pack
        cpmaker validate --strict             # Treat warnings as errors
    """
    source = path or ctx.working_dir
    echo_info(f"Validating: {source}")

    try:
        pack = load_source(source)
    except (ContentPackError, FileNotFoundError) as e:
        echo_error(str(e))
        raise SystemExit(1)

    result = validate_pack(pack)

    if ctx.verbose:
        echo_info(f"  Pack: {pack.manifest.name} ({pack.manifest.unique_id})")
        echo_info(f"  Changes: {len(pack.changes)}")

    echo_info("")
    report_result(result)

    if not result.is_valid:
        echo_error("\nValidation failed!")
        raise SystemExit(1)

    if result.warnings and strict:
        echo_error("\nValidation failed (strict mode)!")
        raise SystemExit(1)

    if result.warnings:
        echo_success("\nValidation passed with warnings.")
    else:
        echo_success("\nValidation passed!")
