"""Config command — view current configuration settings."""

import typer

from vfxquote.cli.inputs import load_config
from vfxquote.cli.ui.console import console, print_header, print_key_value_table, print_muted


def config(
    config_file: str | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to configuration YAML file.",
    ),
) -> None:
    """View the resolved configuration.

    Values come from the YAML config file, falling back to environment
    variables and then built-in defaults.
    """
    settings = load_config(config_file)

    print_header("VFX Quote Configuration")

    print_key_value_table(
        "Pricing",
        {
            "Frame Rate Policy": settings.pricing.frame_rate_policy,
            "Brief Scale": settings.pricing.brief_scale,
            "Currency": settings.pricing.currency_symbol,
        },
    )
    console.print()

    print_key_value_table(
        "Shot Defaults",
        {
            "Base Price / sec": f"{settings.defaults.base_price:,g}",
            "Duration": f"{settings.defaults.duration:g}s",
        },
    )
    console.print()

    print_key_value_table(
        "Project",
        {
            "Project File": settings.project.project_file,
            "Report Directory": settings.project.report_dir,
        },
    )

    print_muted("\nConfig file: use --config to specify a custom YAML config.")
