# SPDX-License-Identifier: MIT
"""Tests for the cpmaker command line."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from cpmaker.cli.main import cli
from cpmaker.model import ContentPack, Patch
from cpmaker.serializer import save_pack


class TestValidateCommand:
    """Tests for cpmaker validate."""

    def test_validate_project(self, cli_runner: CliRunner, project_dir: Path) -> None:
        result = cli_runner.invoke(cli, ["-C", str(project_dir), "validate"])

        assert result.exit_code == 0
        assert "Validation passed!" in result.output

    def test_validate_built_pack(
        self, cli_runner: CliRunner, tmp_path: Path, make_manifest
    ) -> None:
        pack = ContentPack(manifest=make_manifest(), changes=[Patch("Load", "Assets/x.png")])
        save_pack(pack, tmp_path / "pack")

        result = cli_runner.invoke(cli, ["validate", str(tmp_path / "pack")])

        assert result.exit_code == 0
        assert "Validation passed" in result.output

    def test_validate_manifest_file_path(
        self, cli_runner: CliRunner, tmp_path: Path, make_manifest
    ) -> None:
        pack = ContentPack(manifest=make_manifest(), changes=[Patch("Load", "Assets/x.png")])
        saved = save_pack(pack, tmp_path)

        result = cli_runner.invoke(cli, ["validate", str(saved.manifest_path)])

        assert result.exit_code == 0

    def test_validate_reports_all_errors(
        self, cli_runner: CliRunner, tmp_path: Path, make_manifest
    ) -> None:
        pack = ContentPack(manifest=make_manifest(unique_id="AuthorTest"), changes=[])
        save_pack(pack, tmp_path)

        result = cli_runner.invoke(cli, ["validate", str(tmp_path)])

        assert result.exit_code == 1
        assert "Errors (2)" in result.output
        assert "[Manifest.UniqueID]" in result.output
        assert "[Changes]" in result.output
        assert "Validation failed!" in result.output

    def test_strict_fails_on_warnings(
        self, cli_runner: CliRunner, tmp_path: Path, make_manifest
    ) -> None:
        manifest = make_manifest(minimum_api_version="latest")
        save_pack(ContentPack(manifest=manifest, changes=[Patch("Load", "x")]), tmp_path)

        lenient = cli_runner.invoke(cli, ["validate", str(tmp_path)])
        strict = cli_runner.invoke(cli, ["validate", "--strict", str(tmp_path)])

        assert lenient.exit_code == 0
        assert "passed with warnings" in lenient.output
        assert strict.exit_code == 1
        assert "strict mode" in strict.output

    def test_malformed_json(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "manifest.json").write_text("{", encoding="utf-8")
        (tmp_path / "content.json").write_text('{"Changes": []}', encoding="utf-8")

        result = cli_runner.invoke(cli, ["validate", str(tmp_path)])

        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output

    def test_nothing_to_validate(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["validate", str(tmp_path)])

        assert result.exit_code == 1
        assert "contentpack.toml" in result.output


class TestBuildCommand:
    """Tests for cpmaker build."""

    def test_build_writes_documents(self, cli_runner: CliRunner, project_dir: Path) -> None:
        result = cli_runner.invoke(cli, ["-C", str(project_dir), "build"])

        assert result.exit_code == 0, result.output
        manifest = json.loads((project_dir / "dist" / "manifest.json").read_text(encoding="utf-8"))
        content = json.loads((project_dir / "dist" / "content.json").read_text(encoding="utf-8"))
        assert manifest["UniqueID"] == "Jane.BetterCrops"
        assert content["Format"] == "2.0.0"
        assert [c["Action"] for c in content["Changes"]] == ["Load", "EditData"]
        assert "Build complete!" in result.output

    def test_build_custom_output(self, cli_runner: CliRunner, project_dir: Path, tmp_path: Path) -> None:
        output = tmp_path / "Mods" / "[CP] Better Crops"

        result = cli_runner.invoke(cli, ["-C", str(project_dir), "build", "-o", str(output)])

        assert result.exit_code == 0, result.output
        assert (output / "manifest.json").exists()
        assert (output / "content.json").exists()

    def test_build_refuses_invalid_pack(self, cli_runner: CliRunner, project_dir: Path) -> None:
        toml = project_dir / "contentpack.toml"
        toml.write_text(
            toml.read_text(encoding="utf-8").replace("Jane.BetterCrops", "JaneBetterCrops"),
            encoding="utf-8",
        )

        result = cli_runner.invoke(cli, ["-C", str(project_dir), "build"])

        assert result.exit_code == 1
        assert "Build aborted" in result.output
        assert not (project_dir / "dist").exists()

    def test_build_draft(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "contentpack.toml").write_text('[pack]\nname = "Draft"\n', encoding="utf-8")

        result = cli_runner.invoke(cli, ["-C", str(tmp_path), "build", "--draft"])

        assert result.exit_code == 0, result.output
        content = json.loads((tmp_path / "dist" / "content.json").read_text(encoding="utf-8"))
        assert content["Changes"] == []

    def test_built_pack_passes_validate(self, cli_runner: CliRunner, project_dir: Path) -> None:
        """Whatever build writes, validate accepts."""
        toml = project_dir / "contentpack.toml"
        toml.write_text(
            toml.read_text(encoding="utf-8").replace(
                'When = { Season = "spring" }',
                'When = { Season = "spring", DayOfMonth = "5" }',
            ),
            encoding="utf-8",
        )

        build = cli_runner.invoke(cli, ["-C", str(project_dir), "build"])
        check = cli_runner.invoke(cli, ["validate", str(project_dir / "dist")])

        assert build.exit_code == 0, build.output
        assert check.exit_code == 0, check.output
        assert "Validation passed!" in check.output

    def test_build_rejects_non_string_condition(self, cli_runner: CliRunner, project_dir: Path) -> None:
        toml = project_dir / "contentpack.toml"
        toml.write_text(
            toml.read_text(encoding="utf-8").replace(
                'When = { Season = "spring" }',
                'When = { Season = "spring", DayOfMonth = 5 }',
            ),
            encoding="utf-8",
        )

        result = cli_runner.invoke(cli, ["-C", str(project_dir), "build"])

        assert result.exit_code == 1
        assert "changes[1].When.DayOfMonth must be a string" in result.output
        assert not (project_dir / "dist").exists()

    def test_build_rejects_non_string_action(self, cli_runner: CliRunner, project_dir: Path) -> None:
        toml = project_dir / "contentpack.toml"
        toml.write_text(
            toml.read_text(encoding="utf-8").replace('Action = "Load"', "Action = 5"),
            encoding="utf-8",
        )

        build = cli_runner.invoke(cli, ["-C", str(project_dir), "build"])
        check = cli_runner.invoke(cli, ["-C", str(project_dir), "validate"])

        assert build.exit_code == 1
        assert "changes[0].Action must be a string" in build.output
        assert check.exit_code == 1
        assert "changes[0].Action must be a string" in check.output


class TestPreviewCommand:
    """Tests for cpmaker preview."""

    def test_preview_content(self, cli_runner: CliRunner, project_dir: Path) -> None:
        result = cli_runner.invoke(cli, ["-C", str(project_dir), "preview", "-d", "content"])

        assert result.exit_code == 0
        assert json.loads(result.output)["Changes"][0]["Target"] == "TileSheets/crops"
        assert not (project_dir / "dist").exists()

    def test_preview_all(self, cli_runner: CliRunner, project_dir: Path) -> None:
        result = cli_runner.invoke(cli, ["-C", str(project_dir), "preview"])

        assert result.exit_code == 0
        assert "# manifest.json" in result.output
        assert "# content.json" in result.output
        assert '"Name": "Better Crops"' in result.output
