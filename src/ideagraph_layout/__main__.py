"""CLI entry point for ideagraph-layout."""

import json
import logging
import sys

import click

from ideagraph_layout.config import LayoutConfig
from ideagraph_layout.layout import layout_graph, relayout_all, relayout_from
from ideagraph_layout.serialization import GraphFormatError, apply_positions, parse_document

_DEFAULTS = LayoutConfig()


def _write(output: str | None, text: str) -> None:
    if output:
        try:
            with open(output, "w") as f:
                f.write(text)
        except OSError as e:
            click.echo(f"error: cannot write '{output}': {e}", err=True)
            sys.exit(1)
    else:
        click.echo(text)


@click.command()
@click.argument("input", required=False, type=click.Path(exists=True))
@click.option("--changed", "-c", "changed", type=str, default=None, help="Re-layout starting from this node id")
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
@click.option("--indent", "indent", type=int, default=2, help="JSON indentation")
@click.option("--report", is_flag=True, help="Print the full layout's columns instead of the document")
@click.option("--col-gap", type=float, default=_DEFAULTS.col_gap, help="Horizontal gap between columns")
@click.option("--row-gap", type=float, default=_DEFAULTS.row_gap, help="Vertical gap between nodes")
@click.option("--default-width", type=float, default=_DEFAULTS.default_width, help="Width of nodes without one")
@click.option("--default-height", type=float, default=_DEFAULTS.default_height, help="Height of nodes without one")
@click.option(
    "--threshold",
    type=int,
    default=_DEFAULTS.incremental_threshold,
    help="Node count up to which --changed lays out everything",
)
@click.option("--verbose", "-v", is_flag=True, help="Log layout decisions to stderr")
def main(
    input: str | None,
    changed: str | None,
    output: str | None,
    indent: int,
    report: bool,
    col_gap: float,
    row_gap: float,
    default_width: float,
    default_height: float,
    threshold: int,
    verbose: bool,
) -> None:
    """Lay out an idea graph JSON document ({"nodes": [...], "edges": [...]})."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if report and changed is not None:
        click.echo("error: --report describes the full layout and cannot be combined with --changed", err=True)
        sys.exit(1)

    try:
        config = LayoutConfig(
            col_gap=col_gap,
            row_gap=row_gap,
            default_width=default_width,
            default_height=default_height,
            incremental_threshold=threshold,
        )
    except ValueError as e:
        click.echo(f"error: {e}", err=True)
        sys.exit(1)

    if input:
        try:
            with open(input) as f:
                text = f.read()
        except OSError as e:
            click.echo(f"error: cannot read '{input}': {e}", err=True)
            sys.exit(1)
    else:
        text = sys.stdin.read()

    try:
        document = parse_document(text)
    except GraphFormatError as e:
        click.echo(f"format error: {e}", err=True)
        sys.exit(1)
    nodes, edges = document.to_graph()

    if report:
        result = layout_graph(nodes, edges, config)
        lines = [f"{len(nodes)} nodes in {result.column_count()} columns"]
        lines += [f"column {rank}: {' '.join(ids)}" for rank, ids in result.columns.items()]
        if result.degraded:
            lines.append(f"degraded: {result.degraded_reason}")
        _write(output, "\n".join(lines))
        return

    if changed is not None:
        laid = relayout_from(nodes, edges, changed, config)
    else:
        laid = relayout_all(nodes, edges, config)

    _write(output, json.dumps(apply_positions(document, laid), indent=indent))


if __name__ == "__main__":
    main()
