"""Editor configuration loaded from ``lineage.yaml``.

Expected format:
editor:
  compact_chains: false
  reposition: true
"""

from __future__ import annotations

import os
from typing import Any, Dict

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from lineage.io.loaders.errors import LoaderError


class EditorSettings(BaseModel):
    """Policy knobs for the structural editor."""

    model_config = ConfigDict(extra="forbid")

    # Collapse single-child chains after every deletion
    compact_chains: bool = False
    # Recompute rows from the root after every deletion
    reposition: bool = True


class SettingsFileSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")

    editor: EditorSettings = EditorSettings()


def _read_yaml(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_settings(path: str) -> EditorSettings:
    """Load editor settings; a missing file yields the defaults."""
    if not os.path.exists(path):
        return EditorSettings()
    try:
        data = _read_yaml(path)
    except yaml.YAMLError as exc:
        raise LoaderError(path, "Settings file is not valid YAML", cause=exc) from exc
    try:
        spec = SettingsFileSpec.model_validate(data)
    except ValidationError as exc:
        raise LoaderError(path, "Invalid settings file", cause=exc) from exc
    return spec.editor


__all__ = ["EditorSettings", "SettingsFileSpec", "load_settings"]
