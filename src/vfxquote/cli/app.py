"""Main Typer application for the VFX Quote CLI."""

import typer

from vfxquote import __version__
from vfxquote.cli.commands.config_cmd import config
from vfxquote.cli.commands.init_cmd import init
from vfxquote.cli.commands.quote import quote
from vfxquote.cli.commands.report import report
from vfxquote.cli.commands.scene import scene_app
from vfxquote.cli.commands.transfer import export_scenes, import_scenes
from vfxquote.cli.ui.console import configure_logging, console

app = typer.Typer(
    name="vfxquote",
    help="Estimate the production cost of VFX shots and multi-scene projects.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"vfxquote version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Log pricing details to stderr.",
    ),
) -> None:
    """VFX Quote — itemized cost estimates for VFX work.

    Quick start: run [bold]vfxquote quote --duration 8 --set roto=Hard[/bold]
    for a one-off shot estimate.

    Projects: run [bold]vfxquote init[/bold], then manage scenes with
    [bold]vfxquote scene[/bold] and print totals with [bold]vfxquote report[/bold].
    """
    configure_logging(verbose)


# Register commands from individual modules
app.command()(quote)
app.command()(init)
app.command()(report)
app.command(name="export")(export_scenes)
app.command(name="import")(import_scenes)
app.command()(config)
app.add_typer(scene_app, name="scene")
