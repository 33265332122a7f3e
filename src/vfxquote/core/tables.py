"""Multiplier tables consulted by the pricing engine.

Every table maps a driver's enum domain to a dimensionless multiplier.
Duration-scaled drivers multiply ``base_price * duration``; flat-fee
asset drivers multiply ``base_price`` alone. The tables are read-only
and shared by every engine call.
"""

from collections.abc import Mapping
from enum import StrEnum
from types import MappingProxyType

from vfxquote.models.drivers import Driver
from vfxquote.models.shot import BriefClarity, Complexity, FrameRate, Resolution, Toggle


class FrameRatePolicy(StrEnum):
    """Which running total the 60fps surcharge is taken from."""

    SUBTOTAL = "subtotal"
    RESOLUTION = "resolution"


class BriefScale(StrEnum):
    """Which enum domain the creative brief driver uses."""

    BINARY = "binary"
    GRADED = "graded"


def _levels(easy: float, medium: float, hard: float) -> Mapping[Complexity, float]:
    return MappingProxyType(
        {
            Complexity.NONE: 0.0,
            Complexity.EASY: easy,
            Complexity.MEDIUM: medium,
            Complexity.HARD: hard,
        }
    )


RESOLUTION: Mapping[Resolution, float] = MappingProxyType(
    {
        Resolution.HD_1080: 0.0,
        Resolution.UHD_4K: 0.20,
        Resolution.K6: 0.40,
    }
)

# 60fps adds 20% of the pre-FPS subtotal, or doubles the resolution surcharge.
FRAME_RATE: Mapping[FrameRatePolicy, Mapping[FrameRate, float]] = MappingProxyType(
    {
        FrameRatePolicy.SUBTOTAL: MappingProxyType({FrameRate.FPS_30: 0.0, FrameRate.FPS_60: 0.20}),
        FrameRatePolicy.RESOLUTION: MappingProxyType({FrameRate.FPS_30: 0.0, FrameRate.FPS_60: 2.0}),
    }
)

DRIVERS: Mapping[Driver, Mapping[Complexity, float]] = MappingProxyType(
    {
        # Prep
        Driver.ROTO: _levels(0.35, 0.45, 0.60),
        Driver.CLEANUP: _levels(0.35, 0.45, 0.60),
        Driver.KEYING: _levels(0.30, 0.40, 0.60),
        Driver.CAMERA_TRACKING: _levels(0.15, 0.35, 0.70),
        Driver.OBJECT_TRACKING: _levels(0.15, 0.35, 0.70),
        Driver.MATCH_MOVE: _levels(0.15, 0.60, 1.20),
        # Assets, multiplied by base price only
        Driver.MODEL_3D: _levels(4.0, 9.0, 15.0),
        Driver.RIGGING: _levels(4.0, 9.0, 15.0),
        Driver.SCENE_RECONSTRUCTION: _levels(4.0, 11.0, 20.0),
        Driver.PROPS_ENVIRONMENT: _levels(4.0, 11.0, 20.0),
        # Animation & FX
        Driver.ANIMATION: _levels(0.30, 0.60, 1.20),
        Driver.MOCAP: _levels(0.15, 0.30, 0.60),
        Driver.SIMULATION: _levels(1.0, 3.0, 5.0),
        # Post
        Driver.COMPOSITING_3D: _levels(0.35, 0.45, 0.60),
        Driver.COMPOSITING_2D: _levels(0.15, 0.35, 0.45),
        Driver.LAYER_ANIMATION: _levels(0.30, 0.60, 1.20),
        # Extras
        Driver.URGENT: _levels(0.30, 0.60, 1.20),
    }
)

BRIEF: Mapping[BriefScale, Mapping[BriefClarity | Complexity, float]] = MappingProxyType(
    {
        BriefScale.BINARY: MappingProxyType({BriefClarity.CLEAR: 0.0, BriefClarity.NOT_CLEAR: 0.40}),
        BriefScale.GRADED: _levels(0.20, 0.40, 0.60),
    }
)

MANAGEMENT: Mapping[Toggle, float] = MappingProxyType({Toggle.YES: -0.05, Toggle.NO: 0.0})

REEL_PERMISSION: Mapping[Toggle, float] = MappingProxyType({Toggle.YES: -0.05, Toggle.NO: 0.0})


def driver_table(driver: Driver, brief_scale: BriefScale = BriefScale.BINARY) -> Mapping:
    """Return the multiplier table for a driver under the given brief scale."""
    if driver is Driver.BRIEF:
        return BRIEF[brief_scale]
    return DRIVERS[driver]
