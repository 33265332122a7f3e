"""Cost driver catalogue for VFX Quote.

Each driver is a cost-contributing category with its own complexity
level and multiplier table. The catalogue below is the single place
that describes how a driver is labelled and grouped; the engine and
the presentation layer both read from it.
"""

from dataclasses import dataclass
from enum import StrEnum


class Driver(StrEnum):
    """Cost drivers. Each value is the matching ``ShotConfiguration`` field."""

    ROTO = "roto"
    CLEANUP = "cleanup"
    KEYING = "keying"
    CAMERA_TRACKING = "camera_tracking"
    OBJECT_TRACKING = "object_tracking"
    MATCH_MOVE = "match_move"
    MODEL_3D = "model_3d"
    RIGGING = "rigging"
    SCENE_RECONSTRUCTION = "scene_reconstruction"
    PROPS_ENVIRONMENT = "props_environment"
    ANIMATION = "animation"
    MOCAP = "mocap"
    SIMULATION = "simulation"
    COMPOSITING_3D = "compositing_3d"
    COMPOSITING_2D = "compositing_2d"
    LAYER_ANIMATION = "layer_animation"
    URGENT = "urgent"
    BRIEF = "brief"


class Phase(StrEnum):
    """Production phase a driver belongs to."""

    PREP = "prep"
    ASSETS = "assets"
    ANIMATION_FX = "animation_fx"
    POST = "post"
    EXTRAS = "extras"


@dataclass(frozen=True)
class DriverInfo:
    """Display metadata for a single cost driver."""

    label: str
    description: str
    phase: Phase
    flat_fee: bool = False


DRIVER_INFO: dict[Driver, DriverInfo] = {
    Driver.ROTO: DriverInfo(
        "Roto",
        "Isolating objects frame-by-frame to separate them from the background.",
        Phase.PREP,
    ),
    Driver.CLEANUP: DriverInfo(
        "Cleanup / Paint",
        "Removing wires, rigs, tracking markers or blemishes.",
        Phase.PREP,
    ),
    Driver.KEYING: DriverInfo(
        "Keying (Green Screen)",
        "Extracting subjects from green/blue screens.",
        Phase.PREP,
    ),
    Driver.CAMERA_TRACKING: DriverInfo(
        "Camera Tracking",
        "Deriving the physical camera's movement to match it in 3D space.",
        Phase.PREP,
    ),
    Driver.OBJECT_TRACKING: DriverInfo(
        "Object Tracking",
        "Tracking objects or actors for 3D interaction.",
        Phase.PREP,
    ),
    Driver.MATCH_MOVE: DriverInfo(
        "Match Move",
        "Aligning CG elements to the live-action perspective.",
        Phase.PREP,
    ),
    Driver.MODEL_3D: DriverInfo(
        "3D Model",
        "Digital geometry for characters, props or vehicles. Flat fee.",
        Phase.ASSETS,
        flat_fee=True,
    ),
    Driver.RIGGING: DriverInfo(
        "Rigging",
        "Digital skeleton and controls for animation. Flat fee.",
        Phase.ASSETS,
        flat_fee=True,
    ),
    Driver.SCENE_RECONSTRUCTION: DriverInfo(
        "Scene Reconstruction",
        "3D proxy of the set for lighting reference and collisions. Flat fee.",
        Phase.ASSETS,
        flat_fee=True,
    ),
    Driver.PROPS_ENVIRONMENT: DriverInfo(
        "Props & Environment",
        "Digital set dressing and background elements. Flat fee.",
        Phase.ASSETS,
        flat_fee=True,
    ),
    Driver.ANIMATION: DriverInfo(
        "Keyframe Animation",
        "Manual animation for stylized or complex performance.",
        Phase.ANIMATION_FX,
    ),
    Driver.MOCAP: DriverInfo(
        "Mocap Cleanup",
        "Refining raw motion capture data.",
        Phase.ANIMATION_FX,
    ),
    Driver.SIMULATION: DriverInfo(
        "Simulation (FX)",
        "Fire, water, smoke, cloth or destruction simulations.",
        Phase.ANIMATION_FX,
    ),
    Driver.COMPOSITING_3D: DriverInfo(
        "3D Compositing",
        "Integrating multi-pass 3D renders with live-action footage.",
        Phase.POST,
    ),
    Driver.COMPOSITING_2D: DriverInfo(
        "2D Compositing",
        "Layer-based blending and colour correction of 2D elements.",
        Phase.POST,
    ),
    Driver.LAYER_ANIMATION: DriverInfo(
        "Layer Animation",
        "Animated 2D graphics, HUDs or motion graphics.",
        Phase.POST,
    ),
    Driver.URGENT: DriverInfo(
        "Urgent Delivery",
        "Rush fee for tight deadlines.",
        Phase.EXTRAS,
    ),
    Driver.BRIEF: DriverInfo(
        "Creative Brief",
        "Surcharge for R&D when the brief is not clear.",
        Phase.EXTRAS,
    ),
}

FLAT_FEE_DRIVERS: frozenset[Driver] = frozenset(
    driver for driver, info in DRIVER_INFO.items() if info.flat_fee
)
