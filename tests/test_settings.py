"""Tests for editor settings loading."""

import pytest

from lineage.config.settings import EditorSettings, load_settings
from lineage.io.loaders import LoaderError


def test_missing_file_gives_defaults(tmp_path):
    settings = load_settings(str(tmp_path / "lineage.yaml"))

    assert settings == EditorSettings()
    assert settings.compact_chains is False
    assert settings.reposition is True


def test_load_compaction_policy(tmp_path):
    path = tmp_path / "lineage.yaml"
    path.write_text("editor:\n  compact_chains: true\n", encoding="utf-8")

    settings = load_settings(str(path))

    assert settings.compact_chains is True
    assert settings.reposition is True


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "lineage.yaml"
    path.write_text("", encoding="utf-8")

    assert load_settings(str(path)) == EditorSettings()


def test_unknown_key_rejected(tmp_path):
    path = tmp_path / "lineage.yaml"
    path.write_text("editor:\n  balance_tree: true\n", encoding="utf-8")

    with pytest.raises(LoaderError) as exc_info:
        load_settings(str(path))

    assert "Invalid settings file" in str(exc_info.value)
    assert "editor.balance_tree" in str(exc_info.value)


def test_invalid_yaml_rejected(tmp_path):
    path = tmp_path / "lineage.yaml"
    path.write_text("editor: {compact_chains: true\n", encoding="utf-8")

    with pytest.raises(LoaderError) as exc_info:
        load_settings(str(path))

    assert "not valid YAML" in str(exc_info.value)


def test_settings_path_default(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    from lineage.cli.paths import settings_path

    assert settings_path(None) == str(tmp_path / "lineage.yaml")
    assert settings_path("custom.yaml") == "custom.yaml"
