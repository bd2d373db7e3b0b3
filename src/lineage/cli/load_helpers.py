from __future__ import annotations

"""Loading graphs and settings with CLI-friendly errors."""

from typing import Optional

import typer
from rich.console import Console

from lineage.cli.paths import find_graph_file, settings_path
from lineage.config.settings import EditorSettings, load_settings
from lineage.core.graph.models import LineageGraph
from lineage.io.loaders import LoaderError, load_graph
from lineage.io.synthetic import generate_sample_tree


def load_graph_or_exit(file_path: Optional[str], *, console: Console) -> LineageGraph:
    """Load a graph file, or the sample tree when no file is given."""
    if file_path is None:
        return generate_sample_tree()
    try:
        resolved = find_graph_file(file_path)
    except FileNotFoundError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1)
    try:
        return load_graph(resolved)
    except LoaderError as err:
        console.print(f"[red]Failed to load graph:[/red] {err}")
        raise typer.Exit(code=1)


def load_settings_or_exit(config: Optional[str], *, console: Console) -> EditorSettings:
    try:
        return load_settings(settings_path(config))
    except LoaderError as err:
        console.print(f"[red]Failed to load settings:[/red] {err}")
        raise typer.Exit(code=1)


__all__ = ["load_graph_or_exit", "load_settings_or_exit"]
