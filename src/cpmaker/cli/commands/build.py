# SPDX-License-Identifier: MIT
"""Build manifest.json and content.json from a project."""

from __future__ import annotations

from pathlib import Path

import click

from ...config import find_project_root, load_project
from ...result import ContentPackError
from ...serializer import PackWriteError, save_pack
from ...validator import validate_pack
from ..main import (
    Context,
    echo_error,
    echo_info,
    echo_success,
    echo_warning,
    pass_context,
    report_result,
)


@click.command()
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(file_okay=False, path_type=Path),
    default="dist",
    help="Directory to write manifest.json and content.json into.",
)
@click.option(
    "--draft",
    is_flag=True,
    help="Write the pack even if validation fails.",
)
@pass_context
def build(ctx: Context, output_dir: Path, draft: bool) -> None:
    """Build a content pack from contentpack.toml.

    The pack is validated first; an invalid pack is only written with --draft.

    \b
    Examples:
        cpmaker build                           # Write to ./dist
        cpmaker build -o "Mods/[CP] My Pack"    # Write into a mod folder
        cpmaker build --draft                   # Write even with errors
    """
    try:
        project_dir = find_project_root(ctx.working_dir)
        pack = load_project(project_dir)
    except (ContentPackError, FileNotFoundError) as e:
        echo_error(str(e))
        raise SystemExit(1)

    if not output_dir.is_absolute():
        output_dir = project_dir / output_dir

    result = validate_pack(pack)
    report_result(result)

    if not result.is_valid:
        if not draft:
            echo_error("\nBuild aborted: the pack is invalid. Use --draft to write it anyway.")
            raise SystemExit(1)
        echo_warning("Writing draft pack with validation errors.")

    try:
        saved = save_pack(pack, output_dir)
    except PackWriteError as e:
        echo_error(str(e))
        raise SystemExit(1)

    if ctx.verbose:
        echo_info(f"Pack: {pack.manifest.name} v{pack.manifest.version}")
        echo_info(f"Changes: {len(pack.changes)}")

    echo_success(f"  Created: {saved.manifest_path}")
    echo_success(f"  Created: {saved.content_path}")
    echo_success("\nBuild complete!")
