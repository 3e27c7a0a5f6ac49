"""
Inspect Command - Show one leaf's bilinks.
"""

import sys

import click

from ..utils import echo_error, load_session, resolve_config


@click.command()
@click.argument("input_file", type=click.Path(dir_okay=False))
@click.argument("leaf_id")
@click.option("-c", "--config", "config_file", default=None, help="Config YAML")
def inspect(input_file: str, leaf_id: str, config_file: str | None) -> None:
    """
    Show outgoing and incoming relationships of LEAF_ID.

    LEAF_ID is the dotted path from the root, e.g. Org.Teams.Platform.
    """
    config = resolve_config(config_file)
    if config is None:
        sys.exit(1)
    session = load_session(input_file, config=config)
    if session is None:
        sys.exit(1)

    graph = session.graph
    leaf = graph.get_leaf(leaf_id)
    if leaf is None:
        echo_error(f"Leaf not found: {leaf_id}")
        candidates = [i for i in graph.leaf_ids if i.endswith(f".{leaf_id}")]
        if candidates:
            click.echo("Did you mean:")
            for candidate in candidates[:5]:
                click.echo(f"  {candidate}")
        sys.exit(1)

    outgoing = graph.outgoing(leaf)
    incoming = graph.incoming(leaf)

    click.echo()
    click.echo(f"🔗 {click.style(leaf.id, bold=True)}")
    click.echo("═" * 60)

    click.echo(f"Outgoing ({len(outgoing)}):")
    for i, edge in enumerate(outgoing):
        connector = "└─" if i == len(outgoing) - 1 else "├─"
        if edge.target is None:
            target = click.style(f"{edge.target_id} (unresolved, not drawn)", fg="red")
        else:
            target = click.style(edge.target.id, fg="green")
        click.echo(f"  {connector} {click.style(edge.type, fg='magenta')} → {target}")

    click.echo()
    click.echo(f"Incoming ({len(incoming)}):")
    for i, link in enumerate(incoming):
        connector = "└─" if i == len(incoming) - 1 else "├─"
        click.echo(
            f"  {connector} {click.style(link.source.id, fg='cyan')} → "
            f"{click.style(link.type, fg='magenta')}"
        )
    click.echo()
