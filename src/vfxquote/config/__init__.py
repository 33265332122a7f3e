"""Configuration module for VFX Quote."""

from .loader import ConfigLoader, load_settings
from .settings import (
    DefaultsSettings,
    PricingSettings,
    ProjectSettings,
    Settings,
)

__all__ = [
    "ConfigLoader",
    "DefaultsSettings",
    "PricingSettings",
    "ProjectSettings",
    "Settings",
    "load_settings",
]
