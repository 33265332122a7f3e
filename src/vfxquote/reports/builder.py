"""Line-itemized reports built from cost breakdowns.

Reports list every charge with its label, the selected level and the
amount; discounts appear as negative lines and the grand total comes
last.
"""

from dataclasses import dataclass, field
from enum import StrEnum

from ..core.pricing import CostBreakdown, ProjectEstimate
from ..models.drivers import DRIVER_INFO, Driver
from ..models.project import Project
from ..models.shot import BriefClarity, Complexity, FrameRate, ShotConfiguration, Toggle

# Levels that add nothing and are left off the report.
_EMPTY_LEVELS = {Complexity.NONE, BriefClarity.CLEAR}


class LineKind(StrEnum):
    CHARGE = "charge"
    DISCOUNT = "discount"
    SUBTOTAL = "subtotal"
    TOTAL = "total"


@dataclass(frozen=True)
class LineItem:
    """One row of a report."""

    label: str
    selection: str
    amount: float
    kind: LineKind = LineKind.CHARGE
    driver: Driver | None = None


@dataclass(frozen=True)
class ReportSection:
    """Line items for a single scene."""

    title: str
    description: str
    items: tuple[LineItem, ...]
    total: float


@dataclass(frozen=True)
class Report:
    """A complete report: one section per scene and the grand total."""

    title: str
    currency: str
    sections: tuple[ReportSection, ...]
    total: float
    notes: tuple[str, ...] = field(default_factory=tuple)


def shot_line_items(shot: ShotConfiguration, breakdown: CostBreakdown) -> list[LineItem]:
    """Itemize a breakdown against the configuration that produced it."""
    items = [
        LineItem(
            "Base Cost",
            f"{shot.base_price:,g}/s x {shot.duration:g}s",
            breakdown.base_cost,
        )
    ]
    if breakdown.resolution_cost:
        items.append(LineItem("Resolution", shot.resolution.value, breakdown.resolution_cost))
    if shot.frame_rate != FrameRate.FPS_30 or breakdown.fps_cost:
        items.append(LineItem("Frame Rate", f"{shot.frame_rate.value} FPS", breakdown.fps_cost))

    for driver in Driver:
        level = shot.level(driver)
        if level in _EMPTY_LEVELS:
            continue
        items.append(
            LineItem(
                DRIVER_INFO[driver].label,
                level.value,
                breakdown.driver_costs[driver],
                driver=driver,
            )
        )

    if breakdown.has_discounts:
        items.append(LineItem("Subtotal", "", breakdown.subtotal, LineKind.SUBTOTAL))
    if shot.on_scene_supervision == Toggle.YES:
        items.append(
            LineItem(
                "On-Scene Supervision",
                "-5%",
                breakdown.management_adjustment,
                LineKind.DISCOUNT,
            )
        )
    if shot.allow_showreel_usage == Toggle.YES:
        items.append(
            LineItem("Showreel Usage", "-5%", breakdown.reel_discount, LineKind.DISCOUNT)
        )
    return items


def build_shot_report(
    shot: ShotConfiguration,
    breakdown: CostBreakdown,
    *,
    title: str = "Shot Estimate",
    description: str = "",
    currency: str = "MMK",
) -> Report:
    """Build a single-section report for one shot."""
    items = shot_line_items(shot, breakdown)
    items.append(LineItem("Total", "", breakdown.total, LineKind.TOTAL))
    section = ReportSection(
        title=title,
        description=description,
        items=tuple(items),
        total=breakdown.total,
    )
    return Report(title=title, currency=currency, sections=(section,), total=breakdown.total)


def build_project_report(project: Project, estimate: ProjectEstimate) -> Report:
    """Build a report with one section per scene and the project total last."""
    sections = []
    for scene, breakdown in estimate.items:
        items = shot_line_items(scene.data, breakdown)
        items.append(LineItem("Scene Total", "", breakdown.total, LineKind.TOTAL))
        sections.append(
            ReportSection(
                title=scene.name,
                description=scene.description,
                items=tuple(items),
                total=breakdown.total,
            )
        )
    return Report(
        title=project.name,
        currency=project.currency,
        sections=tuple(sections),
        total=estimate.total,
        notes=(f"{estimate.scene_count} scene(s)",),
    )
