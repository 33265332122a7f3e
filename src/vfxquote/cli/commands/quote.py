"""Quote command — price a single shot without touching a project."""

import json

import typer
from pydantic import ValidationError

from vfxquote.cli.inputs import (
    DRIVER_FIELDS,
    coerce_value,
    load_config,
    parse_assignments,
    shot_defaults,
)
from vfxquote.cli.ui.console import console, print_error
from vfxquote.cli.ui.report_view import print_report, print_segments
from vfxquote.core import PricingEngine
from vfxquote.errors import PricingError
from vfxquote.models.shot import FrameRate, Resolution, Toggle
from vfxquote.reports import build_shot_report


def quote(
    base_price: float | None = typer.Option(
        None,
        "--base-price",
        "-b",
        help="Price per second of footage. Defaults to the configured base price.",
    ),
    duration: float | None = typer.Option(
        None,
        "--duration",
        "-d",
        help="Shot duration in seconds. Defaults to the configured duration.",
    ),
    resolution: Resolution = typer.Option(
        Resolution.HD_1080,
        "--resolution",
        "-r",
        help="Delivery resolution.",
    ),
    fps: FrameRate = typer.Option(
        FrameRate.FPS_30,
        "--fps",
        help="Delivery frame rate.",
    ),
    levels: list[str] | None = typer.Option(
        None,
        "--set",
        "-s",
        help="Driver complexity as driver=level, e.g. roto=Hard. Repeatable.",
    ),
    brief: str | None = typer.Option(
        None,
        "--brief",
        help="Creative brief: Clear / 'Not Clear', or None-Hard on a graded scale.",
    ),
    supervision: bool = typer.Option(
        False,
        "--supervision/--no-supervision",
        help="On-scene supervision (5% discount).",
    ),
    reel: bool = typer.Option(
        False,
        "--reel/--no-reel",
        help="Allow use on the studio showreel (5% discount).",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the breakdown as JSON instead of a table.",
    ),
    config_file: str | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to configuration YAML file.",
    ),
) -> None:
    """Estimate the cost of a single shot.

    Set driver levels with repeated --set options, for example
    [bold]--set roto=Easy --set simulation=Hard[/bold]. Drivers left
    unset are priced at None.
    """
    settings = load_config(config_file)
    changes = parse_assignments(levels, allowed=DRIVER_FIELDS)
    if brief is not None:
        changes["brief"] = coerce_value("brief", brief)

    try:
        defaults = shot_defaults(settings)
        shot = defaults.with_changes(
            base_price=defaults.base_price if base_price is None else base_price,
            duration=defaults.duration if duration is None else duration,
            resolution=resolution,
            frame_rate=fps,
            on_scene_supervision=Toggle.YES if supervision else Toggle.NO,
            allow_showreel_usage=Toggle.YES if reel else Toggle.NO,
            **changes,
        )
        breakdown = PricingEngine(settings).estimate(shot)
    except ValidationError as exc:
        print_error(f"Invalid shot configuration: {exc.errors()[0]['msg']}")
        raise typer.Exit(code=1)
    except PricingError as exc:
        print_error(str(exc))
        raise typer.Exit(code=1)

    if as_json:
        console.print_json(json.dumps(breakdown.to_dict()))
        return

    currency = settings.currency_symbol
    print_report(build_shot_report(shot, breakdown, currency=currency))
    segments = breakdown.chart_segments()
    if segments:
        print_segments(segments, breakdown.subtotal, currency)
