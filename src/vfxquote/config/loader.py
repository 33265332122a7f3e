"""Configuration file loading utilities for VFX Quote."""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings

from ..errors import ConfigError
from .settings import (
    DefaultsSettings,
    PricingSettings,
    ProjectSettings,
    Settings,
)

logger = logging.getLogger(__name__)

# Default config file names to search for
DEFAULT_CONFIG_FILES = ["config.yaml", "config.yml", "vfxquote.yaml", "vfxquote.yml"]

# Top-level YAML keys and the settings section each one populates
SECTIONS: dict[str, type[BaseSettings]] = {
    "pricing": PricingSettings,
    "defaults": DefaultsSettings,
    "project": ProjectSettings,
}


class ConfigLoader:
    """Builds ``Settings`` from a YAML file, falling back to the environment.

    Each section model is itself a ``BaseSettings``, so any value the YAML
    file leaves out is read from an environment variable of the same name
    (``FRAME_RATE_POLICY``, ``BASE_PRICE``, ...) before the default applies.
    """

    def __init__(self, config_path: Path | str | None = None) -> None:
        """Initialize the config loader.

        Args:
            config_path: Optional path to a specific config file.
                         If None, searches for default config files.
        """
        self.config_path = Path(config_path) if config_path else None
        self._yaml_config: dict[str, Any] | None = None

    def find_config_file(self, search_dir: Path | None = None) -> Path | None:
        """Find a config file in the given or current directory.

        An explicit ``config_path`` wins when it exists.
        """
        if self.config_path and self.config_path.exists():
            return self.config_path

        search_dir = search_dir or Path.cwd()
        for filename in DEFAULT_CONFIG_FILES:
            path = search_dir / filename
            if path.exists():
                return path
        return None

    def load_yaml_config(self, path: Path | None = None) -> dict[str, Any]:
        """Load the YAML file as a mapping of section name to values.

        Returns:
            Dictionary with configuration values, empty dict if no file found.

        Raises:
            ConfigError: If an explicitly requested file is missing, the
                YAML cannot be parsed, or it is not a mapping of sections.
        """
        if self._yaml_config is not None:
            return self._yaml_config

        if path is None and self.config_path and not self.config_path.exists():
            raise ConfigError(f"Config file not found: {self.config_path}")

        config_file = path or self.find_config_file()
        if config_file is None:
            self._yaml_config = {}
            return self._yaml_config

        try:
            with open(config_file, encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Config file {config_file} is not valid YAML: {exc}") from exc

        content = content or {}
        if not isinstance(content, dict):
            raise ConfigError(f"Config file {config_file} must contain a mapping of sections")
        for name in SECTIONS:
            if not isinstance(content.get(name) or {}, dict):
                raise ConfigError(f"Config section '{name}' in {config_file} must be a mapping")

        logger.debug("Loaded configuration from %s", config_file)
        self._yaml_config = content
        return self._yaml_config

    def load_settings(self, config_path: Path | str | None = None) -> Settings:
        """Load settings from the YAML sections and the environment.

        Args:
            config_path: Optional path to a specific config file.

        Returns:
            Fully configured Settings instance.

        Raises:
            ConfigError: If the file is unreadable or a value is invalid.
        """
        if config_path:
            self.config_path = Path(config_path)

        yaml_config = self.load_yaml_config()

        sections: dict[str, BaseSettings] = {}
        for name, model in SECTIONS.items():
            try:
                sections[name] = model(**(yaml_config.get(name) or {}))
            except ValidationError as exc:
                first = exc.errors()[0]
                field = ".".join(str(part) for part in first["loc"])
                raise ConfigError(f"Invalid setting {name}.{field}: {first['msg']}") from exc

        return Settings(**sections)


def load_settings(config_path: Path | str | None = None) -> Settings:
    """Convenience function to load settings.

    Args:
        config_path: Optional path to a specific config file.

    Returns:
        Fully configured Settings instance.
    """
    loader = ConfigLoader(config_path)
    return loader.load_settings()
