"""Shared option parsing and project loading for CLI commands."""

from enum import StrEnum

import typer
from pydantic import ValidationError

from vfxquote.config import load_settings
from vfxquote.config.settings import Settings
from vfxquote.errors import ConfigError
from vfxquote.models.drivers import Driver
from vfxquote.models.shot import (
    BriefClarity,
    Complexity,
    FrameRate,
    Resolution,
    ShotConfiguration,
    Toggle,
)
from vfxquote.state import ProjectState, ProjectStore

from .ui.console import print_error

FIELD_ALIASES: dict[str, str] = {
    "price": "base_price",
    "fps": "frame_rate",
    "supervision": "on_scene_supervision",
    "management": "on_scene_supervision",
    "reel": "allow_showreel_usage",
    "showreel": "allow_showreel_usage",
}

TOGGLE_FIELDS = frozenset({"on_scene_supervision", "allow_showreel_usage"})
_TRUTHY = frozenset({"yes", "y", "true", "on", "1"})
_FALSY = frozenset({"no", "n", "false", "off", "0"})

FIELD_ENUMS: dict[str, tuple[type[StrEnum], ...]] = {
    "resolution": (Resolution,),
    "frame_rate": (FrameRate,),
    "brief": (BriefClarity, Complexity),
    **{driver.value: (Complexity,) for driver in Driver if driver is not Driver.BRIEF},
}

SHOT_FIELDS = frozenset(ShotConfiguration.model_fields)
DRIVER_FIELDS = frozenset(driver.value for driver in Driver)


def normalise_field(name: str) -> str:
    """Map user-typed field names (``match-move``, ``fps``) to model fields."""
    key = name.strip().lower().replace("-", "_")
    return FIELD_ALIASES.get(key, key)


def coerce_value(field: str, raw: str) -> object:
    """Convert a raw CLI string into the value a shot field expects.

    Enum values match case-insensitively. Numbers are left as strings;
    the model coerces invalid numbers to zero.
    """
    value = raw.strip()
    if field in TOGGLE_FIELDS:
        lowered = value.lower()
        if lowered in _TRUTHY:
            return Toggle.YES
        if lowered in _FALSY:
            return Toggle.NO
        return value
    for enum_cls in FIELD_ENUMS.get(field, ()):
        for member in enum_cls:
            if member.value.lower() == value.lower():
                return member
    return value


def parse_assignments(
    pairs: list[str] | None, allowed: frozenset[str] = SHOT_FIELDS
) -> dict[str, object]:
    """Parse ``field=value`` pairs into shot configuration changes.

    Raises:
        typer.BadParameter: If a pair is malformed or names an unknown field.
    """
    changes: dict[str, object] = {}
    for pair in pairs or []:
        name, sep, raw = pair.partition("=")
        if not sep or not name.strip():
            raise typer.BadParameter(f"Expected field=value, got '{pair}'")
        field = normalise_field(name)
        if field not in allowed:
            raise typer.BadParameter(
                f"Unknown field '{name}'. Choose from: {', '.join(sorted(allowed))}"
            )
        changes[field] = coerce_value(field, raw)
    return changes


def load_config(config_file: str | None) -> Settings:
    """Load settings for a command, exiting with an error when they are invalid."""
    try:
        return load_settings(config_file)
    except ConfigError as exc:
        print_error(str(exc))
        raise typer.Exit(code=1) from exc


def shot_defaults(settings: Settings) -> ShotConfiguration:
    """Starting configuration for new shots, from the defaults section.

    The brief starts at the empty level of the configured brief scale.
    """
    graded = settings.pricing.brief_scale == "graded"
    return ShotConfiguration(
        base_price=settings.defaults.base_price,
        duration=settings.defaults.duration,
        brief=Complexity.NONE if graded else BriefClarity.CLEAR,
    )


def open_store(settings: Settings, project_file: str | None = None) -> ProjectStore:
    """Create a store for the project file from the option or settings."""
    return ProjectStore(project_file or settings.project_file, defaults=shot_defaults(settings))


def load_project(store: ProjectStore) -> ProjectState:
    """Load the project file, exiting with an error when it is missing or unreadable."""
    if not store.exists():
        print_error(
            f"No project file found at '{store.path}'. "
            "Run 'vfxquote init' to create one."
        )
        raise typer.Exit(code=1)
    try:
        return store.load()
    except ValidationError as exc:
        print_error(f"Project file '{store.path}' is not a valid project: {exc.error_count()} error(s)")
        raise typer.Exit(code=1) from exc
    except UnicodeDecodeError as exc:
        print_error(f"Project file '{store.path}' is not UTF-8 text")
        raise typer.Exit(code=1) from exc
    except OSError as exc:
        print_error(f"Cannot read project file '{store.path}': {exc.strerror or exc}")
        raise typer.Exit(code=1) from exc
