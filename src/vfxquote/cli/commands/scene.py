"""Scene commands — manage the scene list of a project."""

import typer
from pydantic import ValidationError
from rich.markup import escape
from rich.table import Table

from vfxquote.cli.inputs import load_config, load_project, open_store, parse_assignments
from vfxquote.cli.ui.console import BRAND_COLOR, console, print_error, print_info, print_success
from vfxquote.cli.ui.prompts import confirm_action
from vfxquote.cli.ui.report_view import print_report, print_shot_configuration
from vfxquote.core import PricingEngine
from vfxquote.errors import VFXQuoteError
from vfxquote.models.project import Scene
from vfxquote.reports import build_shot_report, format_money
from vfxquote.state import ProjectState, ProjectStore

scene_app = typer.Typer(
    name="scene",
    help="Add, remove, rename and configure the scenes of a project.",
    no_args_is_help=True,
)

_PROJECT_OPTION_HELP = "Path to the project file. Defaults to the configured project file."
_CONFIG_OPTION_HELP = "Path to configuration YAML file."


def _open(project_file: str | None, config_file: str | None) -> tuple[ProjectStore, ProjectState]:
    settings = load_config(config_file)
    store = open_store(settings, project_file)
    return store, load_project(store)


def _resolve(state: ProjectState, ref: str | None) -> Scene:
    try:
        return state.resolve(ref) if ref else state.active_scene
    except VFXQuoteError as exc:
        print_error(str(exc))
        raise typer.Exit(code=1)


@scene_app.command("list")
def list_scenes(
    project_file: str | None = typer.Option(None, "--project", "-p", help=_PROJECT_OPTION_HELP),
    config_file: str | None = typer.Option(None, "--config", "-c", help=_CONFIG_OPTION_HELP),
) -> None:
    """List scenes with their totals. The active scene is marked with '*'."""
    settings = load_config(config_file)
    state = load_project(open_store(settings, project_file))
    try:
        estimate = PricingEngine(settings).estimate_project(state.project)
    except VFXQuoteError as exc:
        print_error(str(exc))
        raise typer.Exit(code=1)
    currency = state.project.currency

    table = Table(title=escape(state.project.name), title_style=f"bold {BRAND_COLOR}")
    table.add_column("", width=1)
    table.add_column("ID", style="dim")
    table.add_column("Name", style="bold")
    table.add_column("Description")
    table.add_column("Total", justify="right")
    for scene, breakdown in estimate.items:
        table.add_row(
            "*" if scene.id == state.active_scene.id else "",
            scene.id[:8],
            escape(scene.name),
            escape(scene.description),
            format_money(breakdown.total, currency),
        )
    table.add_section()
    table.add_row("", "", "Project total", "", format_money(estimate.total, currency), style="bold")
    console.print(table)


@scene_app.command("add")
def add_scene(
    name: str | None = typer.Option(None, "--name", "-n", help="Scene name. Defaults to 'Scene N'."),
    description: str = typer.Option("", "--description", "-d", help="Free-text notes."),
    assignments: list[str] | None = typer.Argument(
        None, help="Initial settings as field=value pairs, e.g. duration=8 roto=Hard."
    ),
    project_file: str | None = typer.Option(None, "--project", "-p", help=_PROJECT_OPTION_HELP),
    config_file: str | None = typer.Option(None, "--config", "-c", help=_CONFIG_OPTION_HELP),
) -> None:
    """Add a scene to the project and make it active."""
    store, state = _open(project_file, config_file)
    changes = parse_assignments(assignments)

    try:
        data = state.defaults.with_changes(**changes)
    except ValidationError as exc:
        print_error(f"Invalid value: {exc.errors()[0]['msg']}")
        raise typer.Exit(code=1)

    scene = state.add_scene(name=name, description=description, data=data)
    store.save(state)
    print_success(f"Added scene '{scene.name}' ({scene.id[:8]})")


@scene_app.command("remove")
def remove_scene(
    scene_ref: str = typer.Argument(..., help="Scene id, id prefix or name."),
    force: bool = typer.Option(False, "--force", "-f", help="Remove without asking."),
    project_file: str | None = typer.Option(None, "--project", "-p", help=_PROJECT_OPTION_HELP),
    config_file: str | None = typer.Option(None, "--config", "-c", help=_CONFIG_OPTION_HELP),
) -> None:
    """Remove a scene. The last remaining scene cannot be removed."""
    store, state = _open(project_file, config_file)
    scene = _resolve(state, scene_ref)

    if not force and not confirm_action(f"Remove scene '{scene.name}'?", default=False):
        print_info("Aborted.")
        raise typer.Exit()

    try:
        state.delete_scene(scene.id)
    except VFXQuoteError as exc:
        print_error(str(exc))
        raise typer.Exit(code=1)

    store.save(state)
    print_success(f"Removed scene '{scene.name}'")


@scene_app.command("rename")
def rename_scene(
    scene_ref: str = typer.Argument(..., help="Scene id, id prefix or name."),
    name: str = typer.Argument(..., help="New scene name."),
    project_file: str | None = typer.Option(None, "--project", "-p", help=_PROJECT_OPTION_HELP),
    config_file: str | None = typer.Option(None, "--config", "-c", help=_CONFIG_OPTION_HELP),
) -> None:
    """Rename a scene."""
    store, state = _open(project_file, config_file)
    scene = _resolve(state, scene_ref)
    old_name = scene.name

    try:
        state.rename_scene(scene.id, name)
    except VFXQuoteError as exc:
        print_error(str(exc))
        raise typer.Exit(code=1)

    store.save(state)
    print_success(f"Renamed '{old_name}' to '{scene.name}'")


@scene_app.command("describe")
def describe_scene(
    description: str = typer.Argument(..., help="New description text."),
    scene_ref: str | None = typer.Option(
        None, "--scene", "-s", help="Scene id, id prefix or name. Defaults to the active scene."
    ),
    project_file: str | None = typer.Option(None, "--project", "-p", help=_PROJECT_OPTION_HELP),
    config_file: str | None = typer.Option(None, "--config", "-c", help=_CONFIG_OPTION_HELP),
) -> None:
    """Replace a scene's description."""
    store, state = _open(project_file, config_file)
    scene = _resolve(state, scene_ref)
    state.describe_scene(scene.id, description)
    store.save(state)
    print_success(f"Updated description of '{scene.name}'")


@scene_app.command("set")
def set_scene(
    assignments: list[str] = typer.Argument(
        ..., help="Settings as field=value pairs, e.g. resolution=4K simulation=Hard fps=60."
    ),
    scene_ref: str | None = typer.Option(
        None, "--scene", "-s", help="Scene id, id prefix or name. Defaults to the active scene."
    ),
    project_file: str | None = typer.Option(None, "--project", "-p", help=_PROJECT_OPTION_HELP),
    config_file: str | None = typer.Option(None, "--config", "-c", help=_CONFIG_OPTION_HELP),
) -> None:
    """Change settings of a scene and show its new total.

    Fields are the shot inputs: base_price, duration, resolution, fps,
    any driver (roto, match_move, simulation, ...), brief, supervision
    and reel.
    """
    settings = load_config(config_file)
    store = open_store(settings, project_file)
    state = load_project(store)
    scene = _resolve(state, scene_ref)
    changes = parse_assignments(assignments)

    try:
        state.update_scene(scene.id, **changes)
        breakdown = PricingEngine(settings).estimate(scene.data)
    except ValidationError as exc:
        print_error(f"Invalid value: {exc.errors()[0]['msg']}")
        raise typer.Exit(code=1)
    except VFXQuoteError as exc:
        print_error(str(exc))
        raise typer.Exit(code=1)

    store.save(state)
    print_success(
        f"Updated '{scene.name}': total {format_money(breakdown.total, state.project.currency)}"
    )


@scene_app.command("use")
def use_scene(
    scene_ref: str = typer.Argument(..., help="Scene id, id prefix or name."),
    project_file: str | None = typer.Option(None, "--project", "-p", help=_PROJECT_OPTION_HELP),
    config_file: str | None = typer.Option(None, "--config", "-c", help=_CONFIG_OPTION_HELP),
) -> None:
    """Make a scene the active one for subsequent commands."""
    store, state = _open(project_file, config_file)
    scene = _resolve(state, scene_ref)
    state.set_active(scene.id)
    store.save(state)
    print_success(f"Active scene: '{scene.name}'")


@scene_app.command("show")
def show_scene(
    scene_ref: str | None = typer.Argument(
        None, help="Scene id, id prefix or name. Defaults to the active scene."
    ),
    project_file: str | None = typer.Option(None, "--project", "-p", help=_PROJECT_OPTION_HELP),
    config_file: str | None = typer.Option(None, "--config", "-c", help=_CONFIG_OPTION_HELP),
) -> None:
    """Show a scene's inputs and its itemized estimate."""
    settings = load_config(config_file)
    state = load_project(open_store(settings, project_file))
    scene = _resolve(state, scene_ref)

    try:
        breakdown = PricingEngine(settings).estimate(scene.data)
    except VFXQuoteError as exc:
        print_error(str(exc))
        raise typer.Exit(code=1)

    print_shot_configuration(scene.data, title=scene.name)
    print_report(
        build_shot_report(
            scene.data,
            breakdown,
            title=scene.name,
            description=scene.description,
            currency=state.project.currency,
        )
    )
