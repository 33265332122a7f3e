"""Report generation for VFX Quote."""

from .builder import (
    LineItem,
    LineKind,
    Report,
    ReportSection,
    build_project_report,
    build_shot_report,
    shot_line_items,
)
from .formatting import format_money, render_text

__all__ = [
    "LineItem",
    "LineKind",
    "Report",
    "ReportSection",
    "build_project_report",
    "build_shot_report",
    "format_money",
    "render_text",
    "shot_line_items",
]
