"""Core pricing logic for VFX Quote."""

from .pricing import (
    CostBreakdown,
    PricingEngine,
    ProjectEstimate,
    compute_breakdown,
    project_total,
)
from .tables import BriefScale, FrameRatePolicy

__all__ = [
    # Policies
    "BriefScale",
    "FrameRatePolicy",
    # Engine
    "CostBreakdown",
    "PricingEngine",
    "ProjectEstimate",
    "compute_breakdown",
    "project_total",
]
