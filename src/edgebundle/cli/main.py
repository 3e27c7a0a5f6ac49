"""
edgebundle CLI - Main entry point.

This module registers all CLI commands. Each command is implemented
in its own module under cli/commands/.
"""

import click

from .commands import check, initialize, inspect, links, render
from .utils import configure_logging


@click.group()
@click.version_option(package_name="edgebundle")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """edgebundle: Radial Hierarchical Edge Bundling.

    Draws a tree of entities as a circle of labels with typed,
    bundled relationship links between them.

    \b
    Quick Start:
      edgebundle init
      edgebundle check org.json
      edgebundle render org.json --output org.html --open
    """
    configure_logging(verbose)


# Register commands
main.add_command(render.render)
main.add_command(links.links)
main.add_command(inspect.inspect)
main.add_command(check.check)
main.add_command(initialize.init)

if __name__ == "__main__":
    main()
