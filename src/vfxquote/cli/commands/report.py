"""Report command — itemized estimate for a scene or the whole project."""

import re
from pathlib import Path

import typer

from vfxquote.cli.inputs import load_config, load_project, open_store
from vfxquote.cli.ui.console import print_error, print_success
from vfxquote.cli.ui.report_view import print_report
from vfxquote.core import PricingEngine
from vfxquote.errors import VFXQuoteError
from vfxquote.reports import build_project_report, build_shot_report, render_text


def _slug(title: str) -> str:
    slug = re.sub(r"[^a-z0-9]+", "-", title.lower()).strip("-")
    return slug or "report"


def report(
    scene_ref: str | None = typer.Option(
        None,
        "--scene",
        "-s",
        help="Report a single scene (id, id prefix or name) instead of the project.",
    ),
    output: str | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Also write the report as plain text to this file.",
    ),
    save: bool = typer.Option(
        False,
        "--save",
        help="Also write the report to the configured report directory.",
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
    """Print an itemized estimate with discounts and totals.

    Without --scene the report covers every scene and ends with the
    project total.
    """
    settings = load_config(config_file)
    state = load_project(open_store(settings, project_file))
    engine = PricingEngine(settings)

    try:
        if scene_ref:
            scene = state.resolve(scene_ref)
            result = build_shot_report(
                scene.data,
                engine.estimate(scene.data),
                title=scene.name,
                description=scene.description,
                currency=state.project.currency,
            )
        else:
            result = build_project_report(state.project, engine.estimate_project(state.project))
    except VFXQuoteError as exc:
        print_error(str(exc))
        raise typer.Exit(code=1)

    print_report(result)

    if save and not output:
        output = str(Path(settings.project.report_dir) / f"{_slug(result.title)}.txt")
    if output:
        path = Path(output)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(render_text(result), encoding="utf-8")
        print_success(f"Report written to {path}")
