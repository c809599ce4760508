# SPDX-License-Identifier: MIT
"""Tests for model defaults."""

from cpmaker.model import (
    CONTENT_PATCHER_ID,
    DEFAULT_MINIMUM_API_VERSION,
    ContentPack,
    ContentPackFor,
    Manifest,
    Patch,
)


class TestDefaults:
    """Tests for default values of model types."""

    def test_manifest_defaults(self):
        manifest = Manifest()
        assert manifest.version == "1.0.0"
        assert manifest.minimum_api_version == DEFAULT_MINIMUM_API_VERSION == "4.0.0"
        assert manifest.update_keys == []
        assert manifest.content_pack_for == ContentPackFor(unique_id=CONTENT_PATCHER_ID)

    def test_content_pack_for_defaults(self):
        target = ContentPackFor()
        assert target.unique_id == "Pathoschild.ContentPatcher"
        assert target.minimum_version is None

    def test_patch_defaults(self):
        patch = Patch()
        assert patch.fields == {}
        assert patch.when is None

    def test_empty_pack_constructible(self):
        pack = ContentPack()
        assert pack.changes == []
        assert pack.format is None

    def test_mutable_defaults_not_shared(self):
        first, second = ContentPack(), ContentPack()
        first.changes.append(Patch(action="Load"))
        first.manifest.update_keys.append("Nexus:1")
        assert second.changes == []
        assert second.manifest.update_keys == []
        assert first.manifest.content_pack_for is not second.manifest.content_pack_for
