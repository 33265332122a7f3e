"""Declarative styles for driver levels and report lines.

One table keyed by level, with per-driver overrides, replaces a colour
map per input. ``style_for`` is the only lookup the renderers use.
"""

from vfxquote.models.drivers import Driver
from vfxquote.models.shot import BriefClarity, Complexity, Toggle
from vfxquote.reports.builder import LineKind

LEVEL_STYLES: dict[str, str] = {
    Complexity.NONE: "dim",
    Complexity.EASY: "yellow",
    Complexity.MEDIUM: "dark_orange",
    Complexity.HARD: "bold red",
    BriefClarity.CLEAR: "dim",
    BriefClarity.NOT_CLEAR: "red",
    Toggle.NO: "dim",
    Toggle.YES: "yellow",
}

DRIVER_STYLE_OVERRIDES: dict[Driver, dict[str, str]] = {
    Driver.URGENT: {
        Complexity.EASY: "red",
        Complexity.MEDIUM: "bold red",
        Complexity.HARD: "bold white on red",
    },
}

LINE_STYLES: dict[LineKind, str] = {
    LineKind.CHARGE: "",
    LineKind.DISCOUNT: "green",
    LineKind.SUBTOTAL: "bold",
    LineKind.TOTAL: "bold bright_cyan",
}


def style_for(driver: Driver | None, level: str) -> str:
    """Return the Rich style for a level, honouring per-driver overrides."""
    if driver is not None:
        override = DRIVER_STYLE_OVERRIDES.get(driver, {}).get(level)
        if override:
            return override
    return LEVEL_STYLES.get(level, "")
