"""Init command — create a new project file."""

import typer

from vfxquote.cli.inputs import load_config, open_store
from vfxquote.cli.ui.console import print_info, print_muted, print_success
from vfxquote.cli.ui.prompts import confirm_action


def init(
    name: str = typer.Option(
        "Untitled Project",
        "--name",
        "-n",
        help="Project name shown on reports.",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite an existing project file without asking.",
    ),
    project_file: str | None = typer.Option(
        None,
        "--project",
        "-p",
        help="Path to the project file. Defaults to the configured project file.",
    ),
    config_file: str | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to configuration YAML file.",
    ),
) -> None:
    """Create a new project holding a single default scene."""
    settings = load_config(config_file)
    store = open_store(settings, project_file)

    if store.exists() and not force:
        if not confirm_action(f"'{store.path}' already exists. Overwrite?", default=False):
            print_info("Aborted.")
            raise typer.Exit()

    state = store.create(name=name, currency=settings.currency_symbol)
    print_success(f"Created project '{state.project.name}' at {store.path}")
    print_muted("Next: 'vfxquote scene set roto=Easy' to configure the first scene.")
