from __future__ import annotations

"""Utilities for resolving configuration and graph file paths."""

from pathlib import Path

SETTINGS_FILENAME = "lineage.yaml"


def settings_path(path: str | None) -> str:
    return path or str(Path.cwd() / SETTINGS_FILENAME)


def graphs_dir() -> Path:
    return Path.cwd() / "graphs"


def find_graph_file(name_or_path: str) -> str:
    """
    Find a graph file.

    1. If path exists as-is, use it
    2. If path exists with .yaml extension, use it
    3. Otherwise, look in the graphs/ folder (adding .yaml if missing)

    Raises:
        FileNotFoundError: If file cannot be found
    """
    p = Path(name_or_path)
    if p.exists():
        return str(p)

    if not name_or_path.endswith(".yaml"):
        p_with_yaml = Path(f"{name_or_path}.yaml")
        if p_with_yaml.exists():
            return str(p_with_yaml)

    base_name = p.name if p.name.endswith(".yaml") else f"{p.name}.yaml"
    candidate = graphs_dir() / base_name
    if candidate.exists():
        return str(candidate)

    raise FileNotFoundError(
        f"Graph file not found: '{name_or_path}'\nLooked in:\n  - {name_or_path}\n  - {candidate}"
    )


__all__ = ["SETTINGS_FILENAME", "find_graph_file", "graphs_dir", "settings_path"]
