"""Export and import commands — move scene lists in and out of a project."""

from pathlib import Path

import typer

from vfxquote.cli.inputs import load_config, load_project, open_store
from vfxquote.cli.ui.console import print_error, print_info, print_success
from vfxquote.cli.ui.prompts import confirm_action
from vfxquote.errors import InterchangeError
from vfxquote.state import export_to_file, import_from_file


def export_scenes(
    output: str = typer.Argument(..., help="File to write the scene list to."),
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
    """Export every scene of the project as JSON."""
    settings = load_config(config_file)
    state = load_project(open_store(settings, project_file))

    path = export_to_file(state.scenes, output)
    print_success(f"Exported {len(state.scenes)} scene(s) to {path}")


def import_scenes(
    source: str = typer.Argument(..., help="JSON file previously written by 'export'."),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Replace the current scenes without asking.",
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
    """Replace the project's scenes with those from an exported file.

    Creates the project file if it does not exist yet.
    """
    settings = load_config(config_file)
    store = open_store(settings, project_file)

    source_path = Path(source)
    if not source_path.exists():
        print_error(f"File not found: {source_path}")
        raise typer.Exit(code=1)

    try:
        scenes = import_from_file(source_path)
    except InterchangeError as exc:
        print_error(str(exc))
        raise typer.Exit(code=1)

    if store.exists():
        state = load_project(store)
        if not force and not confirm_action(
            f"Replace {len(state.scenes)} existing scene(s)?", default=False
        ):
            print_info("Aborted.")
            raise typer.Exit()
    else:
        state = store.create(currency=settings.currency_symbol)

    state.replace_scenes(scenes)
    store.save(state)
    print_success(f"Imported {len(scenes)} scene(s) into {store.path}")
