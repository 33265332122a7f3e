"""Pydantic settings models for VFX Quote configuration."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PricingSettings(BaseSettings):
    """Pricing policy settings for this deployment."""

    model_config = SettingsConfigDict(extra="ignore")

    frame_rate_policy: Literal["subtotal", "resolution"] = Field(
        default="subtotal",
        description=(
            "60fps surcharge base: 'subtotal' adds 20% of the scene subtotal, "
            "'resolution' doubles the resolution surcharge"
        ),
    )
    brief_scale: Literal["binary", "graded"] = Field(
        default="binary",
        description="Creative brief scale: binary (Clear/Not Clear) or graded (None-Hard)",
    )
    currency_symbol: str = Field(
        default="MMK",
        min_length=1,
        description="Currency symbol shown after amounts",
    )


class DefaultsSettings(BaseSettings):
    """Starting values for newly created shots."""

    model_config = SettingsConfigDict(extra="ignore")

    base_price: float = Field(
        default=100.0,
        ge=0.0,
        description="Default price per second of footage",
    )
    duration: float = Field(
        default=5.0,
        ge=0.0,
        description="Default shot duration in seconds",
    )


class ProjectSettings(BaseSettings):
    """Project file and report output settings."""

    model_config = SettingsConfigDict(extra="ignore")

    project_file: str = Field(
        default="vfx_project.json",
        description="Project file holding the scene list",
    )
    report_dir: str = Field(
        default="reports",
        description="Directory for written reports",
    )


class Settings(BaseSettings):
    """Root settings aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
    )

    pricing: PricingSettings = Field(default_factory=PricingSettings)
    defaults: DefaultsSettings = Field(default_factory=DefaultsSettings)
    project: ProjectSettings = Field(default_factory=ProjectSettings)

    @property
    def project_file(self) -> str:
        """Convenience accessor for the project file path."""
        return self.project.project_file

    @property
    def currency_symbol(self) -> str:
        """Convenience accessor for the display currency."""
        return self.pricing.currency_symbol
