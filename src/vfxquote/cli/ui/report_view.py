"""Rich renderers for shot configurations and reports."""

from rich.markup import escape
from rich.table import Table

from vfxquote.models.drivers import DRIVER_INFO, Driver, Phase
from vfxquote.models.shot import ShotConfiguration
from vfxquote.reports import LineKind, Report, format_money

from .console import BRAND_COLOR, console
from .styles import LINE_STYLES, style_for

_PHASE_TITLES: dict[Phase, str] = {
    Phase.PREP: "Prep",
    Phase.ASSETS: "Assets",
    Phase.ANIMATION_FX: "Animation & FX",
    Phase.POST: "Post",
    Phase.EXTRAS: "Extras",
}


def _styled(text: str, style: str) -> str:
    return f"[{style}]{escape(text)}[/]" if style else escape(text)


def print_report(report: Report) -> None:
    """Print each report section as a table, then the project total."""
    for section in report.sections:
        table = Table(
            title=escape(section.title),
            title_style=f"bold {BRAND_COLOR}",
            caption=escape(section.description) if section.description else None,
        )
        table.add_column("Item")
        table.add_column("Selection")
        table.add_column("Amount", justify="right")
        for item in section.items:
            if item.kind in (LineKind.SUBTOTAL, LineKind.TOTAL):
                table.add_section()
            selection = item.selection
            if item.driver is not None:
                selection = _styled(item.selection, style_for(item.driver, item.selection))
            table.add_row(
                item.label,
                selection,
                format_money(item.amount, report.currency),
                style=LINE_STYLES[item.kind] or None,
            )
        console.print(table)

    if len(report.sections) > 1:
        console.print(
            f"[bold]Project total ({len(report.sections)} scenes):[/bold] "
            f"[bold {BRAND_COLOR}]{format_money(report.total, report.currency)}[/]"
        )


def print_shot_configuration(shot: ShotConfiguration, title: str = "Configuration") -> None:
    """Print every input of a shot, driver levels styled by complexity."""
    table = Table(title=escape(title), title_style=f"bold {BRAND_COLOR}")
    table.add_column("Group", style="dim")
    table.add_column("Input", style="bold")
    table.add_column("Value")

    table.add_row("Base", "Base price / sec", f"{shot.base_price:,g}")
    table.add_row("", "Duration", f"{shot.duration:g}s")
    table.add_row("", "Resolution", shot.resolution.value)
    table.add_row("", "Frame rate", f"{shot.frame_rate.value} FPS")

    previous: Phase | None = None
    for driver in Driver:
        phase = DRIVER_INFO[driver].phase
        if phase != previous:
            table.add_section()
        level = shot.level(driver).value
        table.add_row(
            _PHASE_TITLES[phase] if phase != previous else "",
            DRIVER_INFO[driver].label,
            _styled(level, style_for(driver, level)),
        )
        previous = phase

    table.add_section()
    table.add_row(
        "Discounts",
        "On-scene supervision",
        _styled(shot.on_scene_supervision.value, style_for(None, shot.on_scene_supervision)),
    )
    table.add_row(
        "",
        "Allow on showreel",
        _styled(shot.allow_showreel_usage.value, style_for(None, shot.allow_showreel_usage)),
    )
    console.print(table)


def print_segments(segments: list[tuple[str, float]], total: float, currency: str) -> None:
    """Print grouped cost categories with their share of the total as bars."""
    table = Table(title="Cost by Category", title_style=f"bold {BRAND_COLOR}", show_header=False)
    table.add_column("Category")
    table.add_column("Share")
    table.add_column("Amount", justify="right")
    for name, value in segments:
        share = value / total if total > 0 else 0.0
        bar = "#" * max(1, round(share * 30))
        table.add_row(name, f"[{BRAND_COLOR}]{bar}[/] {share:.0%}", format_money(value, currency))
    console.print(table)
