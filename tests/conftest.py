# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest
from click.testing import CliRunner

from cpmaker.model import ContentPack, ContentPackFor, Manifest, Patch


def _build_manifest(**overrides) -> Manifest:
    """Create a valid manifest, overriding selected fields."""
    values = {
        "name": "Test",
        "author": "A",
        "version": "1.0.0",
        "description": "d",
        "unique_id": "Author.Test",
        "content_pack_for": ContentPackFor(unique_id="Pathoschild.ContentPatcher"),
    }
    values.update(overrides)
    return Manifest(**values)


@pytest.fixture(scope="session")
def make_manifest() -> Callable[..., Manifest]:
    """Factory for valid manifests; keyword arguments override fields."""
    return _build_manifest


@pytest.fixture
def valid_pack() -> ContentPack:
    """A minimal valid pack with one Load change."""
    return ContentPack(
        manifest=_build_manifest(),
        changes=[Patch(action="Load", target="Assets/x.png")],
    )


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


PROJECT_TOML = """[pack]
name = "Better Crops"
author = "Jane"
version = "1.0.0"
description = "Nicer crop sprites"
unique_id = "Jane.BetterCrops"
update_keys = ["Nexus:1234"]
format = "2.0.0"

[pack.content_pack_for]
minimum_version = "2.0.0"

[[changes]]
Action = "Load"
Target = "TileSheets/crops"
FromFile = "assets/crops.png"

[[changes]]
Action = "EditData"
Target = "Data/Objects"
When = { Season = "spring" }

[changes.Entries]
"Jane.BetterCrops_Seed" = "seed data"
"""


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """A project directory containing a valid contentpack.toml."""
    project = tmp_path / "better_crops"
    project.mkdir()
    (project / "contentpack.toml").write_text(PROJECT_TOML, encoding="utf-8")
    return project
