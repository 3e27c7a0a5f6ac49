"""
Render Command - Generate the interactive edge bundling page.

Builds the graph, lays it out, and writes a standalone HTML file that
draws it with D3. Leaves passed with --lock start out highlighted.
"""

import sys
from pathlib import Path
from typing import Tuple

import click

from ...render.html import open_visualization
from ..utils import echo_info, echo_success, echo_warning, load_session, resolve_config


@click.command()
@click.argument("input_file", type=click.Path(dir_okay=False))
@click.option("-o", "--output", default="bundle.html", help="Output HTML file")
@click.option("-c", "--config", "config_file", default=None,
              help="Config YAML (default: .edgebundle/config.yaml if present)")
@click.option("-l", "--lock", "locks", multiple=True,
              help="Leaf id to lock initially (repeatable)")
@click.option("--open", "open_browser", is_flag=True, help="Open the page in the browser")
def render(input_file: str, output: str, config_file: str | None,
           locks: Tuple[str, ...], open_browser: bool):
    """
    Render INPUT_FILE as a radial hierarchical edge bundling diagram.

    \b
    Examples:
      edgebundle render org.json
      edgebundle render org.json -o org.html --lock Org.Teams.Platform
    """
    config = resolve_config(config_file)
    if config is None:
        sys.exit(1)

    session = load_session(input_file, config=config, locked=locks)
    if session is None:
        sys.exit(1)

    for leaf_id in session.unknown_ids(locks):
        echo_warning(f"No leaf named '{leaf_id}', lock has no effect")

    output_path = Path(output)
    if open_browser:
        open_visualization(session.scene(), str(output_path))
    else:
        session.write(output_path)

    echo_success(f"Generated: {output_path}")
    echo_info(f"{len(session.graph)} leaves, {len(session.links)} links")

    diagnostics = session.graph.diagnostics
    if not diagnostics.is_clean:
        skipped = len(diagnostics.unresolved) + len(diagnostics.suppressed)
        echo_info(f"{skipped} edge(s) not drawn. Run 'edgebundle check {input_file}' for details.")
    echo_info(f"Open: file://{output_path.absolute()}")
