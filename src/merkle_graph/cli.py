"""CLI for merkle-graph."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from merkle_graph import __version__
from merkle_graph.errors import MerkleGraphError
from merkle_graph.graph import draw_graph
from merkle_graph.layout import guard, tree_stats
from merkle_graph.layout.constants import MAX_NODES
from merkle_graph.layout.guard import Overflow
from merkle_graph.parser import Orientation, parse_tree_json
from merkle_graph.render import Container, Page
from merkle_graph.render.constants import CONTAINER_KEY, DEFAULT_WIDTH
from merkle_graph.themes import THEMES


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """merkle-graph: Render Merkle trees as zoomable SVG diagrams."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output file path. Defaults to <input>.html (or .svg with --svg)")
@click.option("--theme", type=click.Choice(list(THEMES.keys())), default="default",
              help="Visual theme (default: default)")
@click.option("--orientation", type=click.Choice([o.value for o in Orientation]),
              default=Orientation.HORIZONTAL.value,
              help="Axis carrying tree depth (default: horizontal)")
@click.option("--width", type=click.FloatRange(min=1), default=DEFAULT_WIDTH,
              help=f"Container width in pixels (default: {DEFAULT_WIDTH:g})")
@click.option("--limit", type=click.IntRange(min=1), default=MAX_NODES,
              help=f"Largest tree that is drawn (default: {MAX_NODES})")
@click.option("--svg", "svg_only", is_flag=True,
              help="Write only the SVG instead of an HTML page")
def render(
    input_file: Path,
    output: Path | None,
    theme: str,
    orientation: str,
    width: float,
    limit: int,
    svg_only: bool,
) -> None:
    """Render a JSON tree definition to an HTML page or SVG."""
    root = _load(input_file)

    page = Page([Container(key=CONTAINER_KEY, width=width)])
    container = page[CONTAINER_KEY]
    result = draw_graph(
        container,
        root,
        orientation=Orientation(orientation),
        limit=limit,
        theme=THEMES[theme],
    )

    if output is None:
        output = input_file.with_suffix(".svg" if svg_only else ".html")

    if result.overflow is not None:
        # The notice replaces whatever an earlier run wrote to the output
        if svg_only:
            output.write_text(container.content.to_svg(width))
        else:
            output.write_text(page.to_html(title=input_file.stem))
        click.echo(f"{result.overflow.message} -> {output}")
        return

    if svg_only:
        output.write_text(result.surface.as_svg())
    else:
        output.write_text(page.to_html(title=input_file.stem))
    click.echo(f"Rendered {len(result.layout.nodes)} nodes, "
               f"{len(result.layout.links)} links -> {output}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def validate(input_file: Path) -> None:
    """Validate a JSON tree definition."""
    root = _load(input_file)
    stats = tree_stats(root)
    click.echo(f"Valid: {stats.nodes} nodes, {stats.leaves} leaves, depth {stats.depth}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("--limit", type=click.IntRange(min=1), default=MAX_NODES,
              help=f"Largest tree that is drawn (default: {MAX_NODES})")
def info(input_file: Path, limit: int) -> None:
    """Show information about a JSON tree definition."""
    root = _load(input_file)
    stats = tree_stats(root)

    click.echo(f"Root: {root.text}")
    click.echo(f"Nodes: {stats.nodes}")
    click.echo(f"Leaves: {stats.leaves}")
    click.echo(f"Depth: {stats.depth}")
    decision = guard(root, limit)
    if isinstance(decision, Overflow):
        click.echo(f"Drawable: no ({decision.count} > {decision.limit})")
    else:
        click.echo("Drawable: yes")


def _load(input_file: Path):
    try:
        return parse_tree_json(input_file.read_text())
    except MerkleGraphError as e:
        click.echo(f"Parse error: {e}", err=True)
        raise SystemExit(1)
