"""
Lineage CLI: inspect, validate, prune and compact lineage trees.

Every command works on a graph YAML file, or on the built-in sample tree when
no file is given. Graphs are edited in memory only; results are printed.
"""

from __future__ import annotations

from typing import Optional

import typer
import yaml
from rich.console import Console

from lineage.cli.formatters import (
    build_lineage_tree,
    build_nodes_table,
    build_result_table,
    format_statistics,
)
from lineage.cli.load_helpers import load_graph_or_exit, load_settings_or_exit
from lineage.core.compactor import simplify_chains
from lineage.core.graph.validators import GraphValidator
from lineage.core.layout import reposition
from lineage.io.loaders.graph_loader import dump_graph_spec
from lineage.io.synthetic import SyntheticSpec, generate_random_tree
from lineage.services.pruning_service import PruningService
from lineage.utils.logging import configure_logging

app = typer.Typer(help="Lineage CLI: inspect, validate, prune and compact lineage trees.")
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    configure_logging(verbose)


def _render_graph(graph, *, table: bool = False) -> None:
    console.print(format_statistics(graph))
    if table:
        console.print(build_nodes_table(graph))
    console.print(build_lineage_tree(graph))


@app.command()
def show(
    file_path: Optional[str] = typer.Argument(None, help="Graph YAML file (defaults to the sample tree)"),
    table: bool = typer.Option(False, "--table", help="Also print the node table"),
) -> None:
    """Show a lineage tree."""
    graph = load_graph_or_exit(file_path, console=console)
    _render_graph(graph, table=table)


@app.command()
def validate(
    file_path: Optional[str] = typer.Argument(None, help="Graph YAML file (defaults to the sample tree)"),
) -> None:
    """Check that a graph is a single rooted tree with consistent links."""
    graph = load_graph_or_exit(file_path, console=console)

    errors = GraphValidator(graph).validate_all()
    if errors:
        console.print("[red]Validation errors detected:[/red]")
        for error in errors:
            console.print(f" - {error}")
        raise typer.Exit(code=1)

    console.print(f"[green]OK[/green] {len(graph.nodes)} node(s), {len(graph.links)} link(s)")
    console.print("[green]All validations passed[/green]")


@app.command()
def prune(
    links: list[str] = typer.Argument(..., help="Link ids to delete, applied in order"),
    graph_file: Optional[str] = typer.Option(None, "--graph", "-g", help="Graph YAML file"),
    compact: Optional[bool] = typer.Option(
        None, "--compact/--no-compact", help="Collapse non-branching chains after each deletion"
    ),
    config: Optional[str] = typer.Option(None, "--config", help="Settings file (defaults to ./lineage.yaml)"),
    as_json: bool = typer.Option(False, "--json", help="Print the resulting graph as JSON"),
) -> None:
    """Delete links and everything below them, then repair the tree."""
    settings = load_settings_or_exit(config, console=console)
    if compact is not None:
        settings = settings.model_copy(update={"compact_chains": compact})

    graph = load_graph_or_exit(graph_file, console=console)
    service = PruningService(graph, settings)
    result = service.delete_many(links)

    if as_json:
        console.print_json(data=graph.to_dict())
        return

    for link_id in result.ignored_link_ids:
        console.print(f"[yellow]Link not found (ignored)[/yellow]: {link_id}")

    console.print(f"\n[bold]Prune Complete[/bold]: {result.describe()}")
    if result.changed:
        console.print(build_result_table(result))
    _render_graph(graph)


@app.command()
def compact(
    file_path: Optional[str] = typer.Argument(None, help="Graph YAML file (defaults to the sample tree)"),
) -> None:
    """Collapse every non-branching chain and re-layout the tree."""
    graph = load_graph_or_exit(file_path, console=console)
    before = len(graph.nodes)
    reposition(simplify_chains(graph))
    console.print(f"[bold]Compacted[/bold]: {before - len(graph.nodes)} node(s) removed")
    _render_graph(graph)


@app.command()
def generate(
    depth: int = typer.Option(3, "--depth", min=0, max=12, help="Number of generations below the root"),
    branching: int = typer.Option(3, "--branching", min=1, max=8, help="Maximum children per node"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
) -> None:
    """Print a random lineage graph as YAML."""
    graph = generate_random_tree(SyntheticSpec(depth=depth, max_children=branching, seed=seed))
    typer.echo(yaml.safe_dump(dump_graph_spec(graph), default_flow_style=False, sort_keys=False))


__all__ = ["app"]
