"""Rich console singleton and styled output helpers for the VFX Quote CLI."""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

# Singleton console instance used throughout the CLI
console = Console()
# Diagnostics go to stderr so --json output stays clean
err_console = Console(stderr=True)

BRAND_COLOR = "bright_cyan"
SUCCESS_COLOR = "green"
ERROR_COLOR = "red"
MUTED_COLOR = "dim"


def configure_logging(verbose: bool = False) -> None:
    """Route library logging through Rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _prefixed(color: str, marker: str, message: str) -> None:
    # Scene names, paths and error text are user data, never markup.
    console.print(f"[{color}]\\[{marker}][/{color}] {escape(message)}")


def print_header(title: str) -> None:
    """Print a styled header panel for a CLI section."""
    console.print(
        Panel(
            Text(title, style=f"bold {BRAND_COLOR}", justify="center"),
            border_style=BRAND_COLOR,
            padding=(1, 2),
        )
    )


def print_success(message: str) -> None:
    _prefixed(SUCCESS_COLOR, "+", message)


def print_error(message: str) -> None:
    _prefixed(ERROR_COLOR, "x", message)


def print_info(message: str) -> None:
    _prefixed(BRAND_COLOR, "*", message)


def print_muted(message: str) -> None:
    """Print secondary text such as hints about the next command."""
    console.print(Text(message, style=MUTED_COLOR))


def print_key_value_table(title: str, data: dict[str, str]) -> None:
    """Print a two-column settings table.

    Args:
        title: Table title.
        data: Setting labels mapped to their display values.
    """
    table = Table(title=title, title_style=BRAND_COLOR, show_header=False)
    table.add_column("Setting", style="bold")
    table.add_column("Value")
    for key, value in data.items():
        table.add_row(key, Text(str(value)))
    console.print(table)
