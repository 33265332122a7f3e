"""CLI UI components for VFX Quote."""

from .console import (
    configure_logging,
    console,
    err_console,
    print_error,
    print_header,
    print_info,
    print_key_value_table,
    print_muted,
    print_success,
)
from .prompts import confirm_action
from .report_view import print_report, print_segments, print_shot_configuration
from .styles import style_for

__all__ = [
    "configure_logging",
    "confirm_action",
    "console",
    "err_console",
    "print_error",
    "print_header",
    "print_info",
    "print_key_value_table",
    "print_muted",
    "print_report",
    "print_segments",
    "print_shot_configuration",
    "print_success",
    "style_for",
]
