# SPDX-License-Identifier: MIT
"""Print the JSON documents a project would produce."""

from __future__ import annotations

import click

from ...result import ContentPackError
from ...serializer import content_to_json, manifest_to_json
from ..main import Context, echo_error, echo_info, pass_context
from . import load_source


@click.command()
@click.option(
    "--document",
    "-d",
    type=click.Choice(["manifest", "content", "all"]),
    default="all",
    help="Which document to print.",
)
@pass_context
def preview(ctx: Context, document: str) -> None:
    """Print manifest.json and/or content.json without writing files.

    The pack is not validated, so drafts can be previewed.
    """
    try:
        pack = load_source(ctx.working_dir)
    except (ContentPackError, FileNotFoundError) as e:
        echo_error(str(e))
        raise SystemExit(1)

    if document in ("manifest", "all"):
        if document == "all":
            echo_info("# manifest.json")
        echo_info(manifest_to_json(pack.manifest))

    if document in ("content", "all"):
        if document == "all":
            echo_info("# content.json")
        echo_info(content_to_json(pack.changes, pack.format))
