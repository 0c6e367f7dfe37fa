"""Command-line interface for html-creator."""

import json
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger

from html_creator.core.importer.json_reader import parse_forest
from html_creator.creator import HtmlCreator
from html_creator.logging_config import configure_logging
from html_creator.models.node import Node

app = typer.Typer(help="html-creator: build HTML documents from JSON node descriptors.")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    configure_logging(verbose=verbose)


def _load_forest(source: Path) -> list[Node]:
    """Read and parse a JSON forest, exiting with code 1 on failure."""
    if not source.exists():
        logger.error("Source file not found: {}", source)
        raise typer.Exit(1)
    try:
        raw = source.read_text(encoding="utf-8")
    except OSError as e:
        logger.error("Cannot read {}: {}", source, e)
        raise typer.Exit(1) from e
    try:
        return parse_forest(json.loads(raw))
    except ValueError as e:
        # json.JSONDecodeError is a ValueError as well
        logger.error("Cannot read {}: {}", source, e)
        raise typer.Exit(1) from e


@app.command()
def render(
    source: Path = typer.Argument(..., help="JSON file with a list of node descriptors"),
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write HTML to this file instead of stdout"),
    ] = None,
    boilerplate: bool = typer.Option(
        False, "--boilerplate", "-b", help="Wrap the nodes in a head/body skeleton"
    ),
    title: Annotated[
        str | None,
        typer.Option("--title", "-t", help="Set the document title"),
    ] = None,
    fragment: bool = typer.Option(
        False, "--fragment", "-f", help="Omit the doctype and html wrapper"
    ),
) -> None:
    """Render a JSON forest of node descriptors as HTML."""
    forest = _load_forest(source)

    creator = HtmlCreator(forest)
    if boilerplate:
        creator.with_boilerplate(forest)
    if title:
        creator.document.set_title(title)

    if output is None:
        typer.echo(creator.render_html(exclude_html_tag=fragment))
        return

    if fragment:
        logger.warning("--fragment is ignored when writing to a file")
    if not creator.render_html_to_file(output):
        raise typer.Exit(1)
