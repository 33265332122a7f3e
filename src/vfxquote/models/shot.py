"""Shot configuration model for VFX Quote."""

import math
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .drivers import Driver


class Complexity(StrEnum):
    """Complexity level selecting a row in a driver's multiplier table."""

    NONE = "None"
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"

    @classmethod
    def _missing_(cls, value: object) -> "Complexity | None":
        # Older project files store the empty level as "No".
        if value == "No":
            return cls.NONE
        return None


class Resolution(StrEnum):
    """Delivery resolution."""

    HD_1080 = "1080p"
    UHD_4K = "4K"
    K6 = "6K"


class FrameRate(StrEnum):
    """Delivery frame rate."""

    FPS_30 = "30"
    FPS_60 = "60"


class Toggle(StrEnum):
    """Yes/No administrative flag."""

    YES = "Yes"
    NO = "No"


class BriefClarity(StrEnum):
    """Two-valued creative brief clarity."""

    CLEAR = "Clear"
    NOT_CLEAR = "Not Clear"


def non_negative(value: Any) -> float:
    """Return ``value`` as a finite, non-negative float, or ``0.0``."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number) or number < 0:
        return 0.0
    return number


class ShotConfiguration(BaseModel):
    """Inputs for one shot: technical parameters, driver levels and toggles.

    Instances are immutable; use ``with_changes`` to derive an edited copy.
    Numeric fields never fail validation: anything that is not a finite,
    non-negative number becomes ``0.0``. Enum fields reject values outside
    their domain.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    base_price: float = Field(default=100.0, description="Price per second of footage")
    duration: float = Field(default=5.0, description="Shot length in seconds")
    resolution: Resolution = Resolution.HD_1080
    frame_rate: FrameRate = FrameRate.FPS_30

    # Prep
    roto: Complexity = Complexity.NONE
    cleanup: Complexity = Complexity.NONE
    keying: Complexity = Complexity.NONE
    camera_tracking: Complexity = Complexity.NONE
    object_tracking: Complexity = Complexity.NONE
    match_move: Complexity = Complexity.NONE

    # Assets (flat fee)
    model_3d: Complexity = Complexity.NONE
    rigging: Complexity = Complexity.NONE
    scene_reconstruction: Complexity = Complexity.NONE
    props_environment: Complexity = Complexity.NONE

    # Animation & FX
    animation: Complexity = Complexity.NONE
    mocap: Complexity = Complexity.NONE
    simulation: Complexity = Complexity.NONE

    # Post
    compositing_3d: Complexity = Complexity.NONE
    compositing_2d: Complexity = Complexity.NONE
    layer_animation: Complexity = Complexity.NONE

    # Extras
    urgent: Complexity = Complexity.NONE
    brief: BriefClarity | Complexity = Field(
        default=BriefClarity.CLEAR,
        description="Binary clarity or a graded complexity, per deployment",
    )

    # Discounts
    on_scene_supervision: Toggle = Toggle.NO
    allow_showreel_usage: Toggle = Toggle.NO

    @field_validator("base_price", "duration", mode="before")
    @classmethod
    def coerce_non_negative(cls, value: Any) -> float:
        """Coerce missing or invalid numeric input to zero."""
        return non_negative(value)

    @field_validator(
        "roto",
        "cleanup",
        "keying",
        "camera_tracking",
        "object_tracking",
        "match_move",
        "model_3d",
        "rigging",
        "scene_reconstruction",
        "props_environment",
        "animation",
        "mocap",
        "simulation",
        "compositing_3d",
        "compositing_2d",
        "layer_animation",
        "urgent",
        mode="before",
    )
    @classmethod
    def parse_level(cls, value: Any) -> Complexity:
        return Complexity(value)

    @field_validator("brief", mode="before")
    @classmethod
    def parse_brief(cls, value: Any) -> BriefClarity | Complexity:
        """Resolve the brief against the binary scale first, then the graded one."""
        if isinstance(value, (BriefClarity, Complexity)):
            return value
        if isinstance(value, str):
            for scale in (BriefClarity, Complexity):
                try:
                    return scale(value)
                except ValueError:
                    continue
        raise ValueError(f"Unrecognised brief value: {value!r}")

    @field_validator("frame_rate", mode="before")
    @classmethod
    def parse_frame_rate(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("on_scene_supervision", "allow_showreel_usage", mode="before")
    @classmethod
    def parse_toggle(cls, value: Any) -> Any:
        if isinstance(value, bool):
            return Toggle.YES if value else Toggle.NO
        return value

    @property
    def shot_base_cost(self) -> float:
        """Base price multiplied by duration."""
        return self.base_price * self.duration

    def level(self, driver: Driver) -> BriefClarity | Complexity:
        """Return the level selected for a driver."""
        return getattr(self, driver.value)

    def with_changes(self, **changes: Any) -> "ShotConfiguration":
        """Return a validated copy with the given fields replaced."""
        return type(self).model_validate({**self.model_dump(), **changes})
