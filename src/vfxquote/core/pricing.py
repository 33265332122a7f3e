"""Pricing engine for VFX shots.

Maps a ``ShotConfiguration`` to a fully itemized ``CostBreakdown``.
The order of operations is fixed because each step takes its base
from a specific earlier quantity and intermediate totals are shown to
the user:

1. shot base cost (base price x duration)
2. resolution surcharge on the shot base cost
3. duration-scaled drivers on the shot base cost
4. flat-fee asset drivers on the base price alone
5. subtotal before FPS, then the 60fps surcharge
6. management adjustment on the full subtotal
7. showreel discount on the post-management total

No rounding happens here; formatting is a presentation concern.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Any

from vfxquote.config.settings import Settings
from vfxquote.errors import PricingError
from vfxquote.models.drivers import FLAT_FEE_DRIVERS, Driver
from vfxquote.models.project import Project, Scene
from vfxquote.models.shot import ShotConfiguration, Toggle, non_negative

from . import tables
from .tables import BriefScale, FrameRatePolicy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CostBreakdown:
    """Itemized cost breakdown for a single shot."""

    duration: float
    base_cost: float
    resolution_cost: float
    fps_cost: float

    # Prep
    roto_cost: float
    cleanup_cost: float
    keying_cost: float
    tracking_cost: float

    # Production
    asset_cost: float
    animation_cost: float
    simulation_cost: float

    # Post
    compositing_cost: float
    layer_anim_cost: float

    # Extras
    urgent_cost: float
    brief_cost: float

    # Running totals
    subtotal_before_fps: float
    subtotal: float
    management_adjustment: float
    total_after_management: float
    reel_discount: float
    total: float

    driver_costs: Mapping[Driver, float] = field(
        default_factory=lambda: MappingProxyType({}), hash=False, compare=False
    )

    @property
    def cost_per_second(self) -> float:
        """Average total cost per second of footage."""
        if self.duration <= 0:
            return 0.0
        return self.total / self.duration

    @property
    def has_discounts(self) -> bool:
        """Whether any discount reduced the subtotal."""
        return self.management_adjustment != 0 or self.reel_discount != 0

    def chart_segments(self) -> list[tuple[str, float]]:
        """Group the breakdown into display categories, dropping empty ones."""
        segments = [
            ("Base Cost", self.base_cost),
            ("Resolution & FPS", self.resolution_cost + self.fps_cost),
            ("Prep / Roto", self.roto_cost + self.cleanup_cost + self.keying_cost),
            ("Tracking", self.tracking_cost),
            ("Assets", self.asset_cost),
            ("Animation", self.animation_cost),
            ("FX/Sim", self.simulation_cost),
            ("Compositing", self.compositing_cost + self.layer_anim_cost),
            ("Extras (Rush/Brief)", self.urgent_cost + self.brief_cost),
        ]
        return [(name, value) for name, value in segments if value > 0]

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping of every component."""
        data: dict[str, Any] = {
            f.name: getattr(self, f.name) for f in fields(self) if f.name != "driver_costs"
        }
        data["driver_costs"] = {driver.value: cost for driver, cost in self.driver_costs.items()}
        return data


def _lookup(table: Mapping, key: object, name: str) -> float:
    try:
        return table[key]
    except KeyError:
        raise PricingError(f"Unrecognised value for {name}: {key!r}") from None


def compute_breakdown(
    shot: ShotConfiguration,
    *,
    frame_rate_policy: FrameRatePolicy = FrameRatePolicy.SUBTOTAL,
    brief_scale: BriefScale = BriefScale.BINARY,
) -> CostBreakdown:
    """Compute the itemized cost breakdown for one shot.

    Args:
        shot: The shot configuration to price.
        frame_rate_policy: Base of the 60fps surcharge.
        brief_scale: Enum domain the deployment uses for the creative brief.

    Returns:
        CostBreakdown with every component and running total.

    Raises:
        PricingError: If any level lies outside its multiplier table.
    """
    # Models built without validation may still carry raw numbers.
    base_price = non_negative(shot.base_price)
    duration = non_negative(shot.duration)
    base_cost = base_price * duration

    resolution_cost = base_cost * _lookup(tables.RESOLUTION, shot.resolution, "resolution")

    driver_costs: dict[Driver, float] = {}
    for driver in Driver:
        table = tables.driver_table(driver, brief_scale)
        multiplier = _lookup(table, shot.level(driver), driver.value)
        # Asset builds are one-off costs independent of shot length.
        scale = base_price if driver in FLAT_FEE_DRIVERS else base_cost
        driver_costs[driver] = scale * multiplier

    asset_cost = (
        driver_costs[Driver.MODEL_3D]
        + driver_costs[Driver.RIGGING]
        + driver_costs[Driver.SCENE_RECONSTRUCTION]
        + driver_costs[Driver.PROPS_ENVIRONMENT]
    )
    tracking_cost = (
        driver_costs[Driver.CAMERA_TRACKING]
        + driver_costs[Driver.OBJECT_TRACKING]
        + driver_costs[Driver.MATCH_MOVE]
    )
    animation_cost = driver_costs[Driver.ANIMATION] + driver_costs[Driver.MOCAP]
    compositing_cost = driver_costs[Driver.COMPOSITING_3D] + driver_costs[Driver.COMPOSITING_2D]

    subtotal_before_fps = base_cost + resolution_cost + sum(driver_costs.values())

    fps_table = _lookup(tables.FRAME_RATE, frame_rate_policy, "frame rate policy")
    fps_multiplier = _lookup(fps_table, shot.frame_rate, "frame_rate")
    if frame_rate_policy == FrameRatePolicy.RESOLUTION:
        fps_cost = resolution_cost * fps_multiplier
    else:
        fps_cost = subtotal_before_fps * fps_multiplier

    subtotal = subtotal_before_fps + fps_cost

    management_adjustment = subtotal * _lookup(
        tables.MANAGEMENT, shot.on_scene_supervision, "on_scene_supervision"
    )
    total_after_management = subtotal + management_adjustment

    reel_multiplier = _lookup(
        tables.REEL_PERMISSION, shot.allow_showreel_usage, "allow_showreel_usage"
    )
    reel_discount = 0.0
    if shot.allow_showreel_usage == Toggle.YES:
        reel_discount = total_after_management * reel_multiplier

    total = total_after_management + reel_discount

    return CostBreakdown(
        duration=duration,
        base_cost=base_cost,
        resolution_cost=resolution_cost,
        fps_cost=fps_cost,
        roto_cost=driver_costs[Driver.ROTO],
        cleanup_cost=driver_costs[Driver.CLEANUP],
        keying_cost=driver_costs[Driver.KEYING],
        tracking_cost=tracking_cost,
        asset_cost=asset_cost,
        animation_cost=animation_cost,
        simulation_cost=driver_costs[Driver.SIMULATION],
        compositing_cost=compositing_cost,
        layer_anim_cost=driver_costs[Driver.LAYER_ANIMATION],
        urgent_cost=driver_costs[Driver.URGENT],
        brief_cost=driver_costs[Driver.BRIEF],
        subtotal_before_fps=subtotal_before_fps,
        subtotal=subtotal,
        management_adjustment=management_adjustment,
        total_after_management=total_after_management,
        reel_discount=reel_discount,
        total=total,
        driver_costs=MappingProxyType(driver_costs),
    )


def project_total(
    scenes: Iterable[Scene],
    *,
    frame_rate_policy: FrameRatePolicy = FrameRatePolicy.SUBTOTAL,
    brief_scale: BriefScale = BriefScale.BINARY,
) -> float:
    """Sum the scene totals of a project. Scenes never interact."""
    return sum(
        compute_breakdown(
            scene.data, frame_rate_policy=frame_rate_policy, brief_scale=brief_scale
        ).total
        for scene in scenes
    )


@dataclass(frozen=True)
class ProjectEstimate:
    """Per-scene breakdowns for a project plus the aggregate total."""

    items: tuple[tuple[Scene, CostBreakdown], ...]

    @property
    def total(self) -> float:
        """Sum of every scene total."""
        return sum(breakdown.total for _, breakdown in self.items)

    @property
    def scene_count(self) -> int:
        return len(self.items)

    def breakdown_for(self, scene_id: str) -> CostBreakdown | None:
        """Return the breakdown for a scene id, or None."""
        for scene, breakdown in self.items:
            if scene.id == scene_id:
                return breakdown
        return None


class PricingEngine:
    """Prices shots and projects under the deployment's pricing policy.

    Reads the frame-rate policy and brief scale from settings once and
    applies them to every estimate.
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.frame_rate_policy = FrameRatePolicy(settings.pricing.frame_rate_policy)
        self.brief_scale = BriefScale(settings.pricing.brief_scale)

    def estimate(self, shot: ShotConfiguration) -> CostBreakdown:
        """Calculate the cost breakdown for a single shot.

        Args:
            shot: The shot configuration to price.

        Returns:
            CostBreakdown with itemized costs.
        """
        breakdown = compute_breakdown(
            shot,
            frame_rate_policy=self.frame_rate_policy,
            brief_scale=self.brief_scale,
        )
        logger.debug(
            "Estimated shot: base=%.2f subtotal=%.2f total=%.2f",
            breakdown.base_cost,
            breakdown.subtotal,
            breakdown.total,
        )
        return breakdown

    def estimate_project(self, project: Project) -> ProjectEstimate:
        """Calculate breakdowns for every scene in a project.

        Args:
            project: The project whose scenes should be priced.

        Returns:
            ProjectEstimate with one breakdown per scene, in scene order.
        """
        estimate = ProjectEstimate(
            items=tuple((scene, self.estimate(scene.data)) for scene in project.scenes)
        )
        logger.info(
            "Estimated project %r: %d scenes, total %.2f",
            project.name,
            estimate.scene_count,
            estimate.total,
        )
        return estimate
