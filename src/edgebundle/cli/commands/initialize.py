"""
Init Command - Write a starter configuration.

Creates `.edgebundle/config.yaml` holding every rendering default, ready
to be edited (colours, opacities, bands, relationship vocabulary).
"""

from pathlib import Path

import click
import yaml
from rich.console import Console
from rich.prompt import Confirm

from ...config import CONFIG_DIR, CONFIG_FILE, BundleConfig

console = Console()


def default_config_dict(project_name: str) -> dict:
    config = BundleConfig(title=project_name).model_dump(exclude={"bands"})
    return {"version": "1.0", **config}


def _init_project(root_dir: Path, force: bool) -> bool:
    config_dir = root_dir / CONFIG_DIR
    config_file = config_dir / CONFIG_FILE

    if config_file.exists() and not force:
        if not Confirm.ask(f"{config_file} exists. Overwrite?", default=False):
            console.print("[yellow]Aborted.[/yellow]")
            return False

    config_dir.mkdir(exist_ok=True)
    with open(config_file, "w") as f:
        yaml.dump(default_config_dict(root_dir.name), f, sort_keys=False, default_flow_style=False)

    console.print("\n✨ [bold green]Initialized successfully![/bold green]")
    console.print(f"   Config created at: [dim]{config_file}[/dim]")
    return True


@click.command()
@click.option("--force", is_flag=True, help="Overwrite existing configuration")
def init(force: bool):
    """Create .edgebundle/config.yaml with the default rendering settings."""
    _init_project(Path.cwd(), force)
