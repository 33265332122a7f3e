"""Data models for VFX Quote."""

from .drivers import DRIVER_INFO, FLAT_FEE_DRIVERS, Driver, DriverInfo, Phase
from .project import Project, Scene, new_scene_id
from .shot import (
    BriefClarity,
    Complexity,
    FrameRate,
    Resolution,
    ShotConfiguration,
    Toggle,
)

__all__ = [
    # Drivers
    "DRIVER_INFO",
    "FLAT_FEE_DRIVERS",
    "Driver",
    "DriverInfo",
    "Phase",
    # Shot configuration
    "BriefClarity",
    "Complexity",
    "FrameRate",
    "Resolution",
    "ShotConfiguration",
    "Toggle",
    # Projects
    "Project",
    "Scene",
    "new_scene_id",
]
