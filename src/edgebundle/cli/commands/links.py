"""
Links Command - List the drawable links.

Prints the projected link list in draw order, as a table or as JSON for
other tools.
"""

import sys
from pathlib import Path
from typing import List

import click
from pydantic import BaseModel, Field
from rich.console import Console
from rich.table import Table

from ...config import load_config
from ...session import BundleSession
from ..renderers import JsonRenderer
from ..utils import load_session, resolve_config

console = Console()


# --- API Models ---
class ApiLink(BaseModel):
    source: str
    target: str
    type: str


class LinksResponse(BaseModel):
    count: int
    links: List[ApiLink] = Field(default_factory=list)


@click.command()
@click.argument("input_file", type=click.Path(dir_okay=False))
@click.option("-t", "--type", "rel_type", default=None, help="Only links of this relationship type")
@click.option("-c", "--config", "config_file", default=None, help="Config YAML")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def links(input_file: str, rel_type: str | None, config_file: str | None, as_json: bool):
    """List the links that would be drawn for INPUT_FILE."""
    renderer = JsonRenderer("links")

    if as_json:
        error_to_report = None
        response = None
        with renderer.capture():
            try:
                config = load_config(Path(config_file) if config_file else None)
                session = BundleSession.from_path(input_file, config=config)
                response = _build_response(session.links, rel_type)
            except Exception as e:
                error_to_report = e

        # Outside capture context, so output reaches stdout
        if error_to_report:
            renderer.render_error(error_to_report)
            sys.exit(1)
        renderer.render_success(response)
        return

    config = resolve_config(config_file)
    if config is None:
        sys.exit(1)
    session = load_session(input_file, config=config)
    if session is None:
        sys.exit(1)

    response = _build_response(session.links, rel_type)
    if not response.links:
        click.echo(click.style("No links to draw.", fg="yellow"))
        return

    table = Table(title=f"{response.count} link(s)")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Source", style="cyan")
    table.add_column("Target", style="green")
    table.add_column("Type", style="magenta")
    for i, link in enumerate(response.links, 1):
        table.add_row(str(i), link.source, link.target, link.type)
    console.print(table)


def _build_response(records, rel_type: str | None) -> LinksResponse:
    items = [
        ApiLink(source=r.source_id, target=r.target_id, type=r.type)
        for r in records
        if rel_type is None or r.type == rel_type
    ]
    return LinksResponse(count=len(items), links=items)
