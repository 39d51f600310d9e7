"""Estimate Service for RenoCost.

Composes the calculators for one project descriptor. This is the single
entry point a request handler needs; each calculator is still usable on
its own.
"""

from typing import Optional

from renocost.models.cost_breakdown import CostTotals
from renocost.models.estimate import ProjectEstimate
from renocost.models.project import ProjectDescriptor
from renocost.services.confidence import score_confidence
from renocost.services.cost_allocation import allocate_costs
from renocost.services.cost_estimator import estimate_cost_totals, get_regional_insight
from renocost.services.payment_schedule import generate_payment_schedule
from renocost.services.timeline_phases import generate_timeline
from renocost.utils.calc_logger import log_estimate_complete


def build_project_estimate(
    descriptor: ProjectDescriptor,
    totals: Optional[CostTotals] = None,
    timeline: Optional[str] = None,
) -> ProjectEstimate:
    """Run every calculator for a project.

    Args:
        descriptor: The project.
        totals: Known category subtotals. When omitted they are estimated
            from the descriptor's area, tier and ZIP code.
        timeline: Schedule label or hours figure passed to the totals
            estimator and the allocation engine.

    Returns:
        ProjectEstimate. The payment schedule is included only when the
        descriptor has both start and end dates.
    """
    if totals is None:
        totals = estimate_cost_totals(
            descriptor.category,
            descriptor.area_sqft,
            descriptor.quality_tier,
            timeline=timeline,
            zip_code=descriptor.zip_code,
        )

    breakdown = allocate_costs(
        totals,
        descriptor.category,
        descriptor.quality_tier,
        descriptor.area_sqft,
        timeline=timeline,
    )
    confidence = score_confidence(descriptor.zip_code, descriptor.category, descriptor.raw_type_text)
    project_timeline = generate_timeline(descriptor.category, descriptor.quality_tier)

    payment_schedule = None
    if descriptor.has_schedule:
        payment_schedule = generate_payment_schedule(
            totals.total, descriptor.start_date, descriptor.end_date
        )

    components = ["totals", "breakdown", "confidence", "timeline"]
    if payment_schedule is not None:
        components.append("payment_schedule")
    log_estimate_complete(
        category=descriptor.category.value,
        quality_tier=descriptor.quality_tier.value,
        total=totals.total,
        components=components,
    )

    return ProjectEstimate(
        descriptor=descriptor,
        totals=totals,
        breakdown=breakdown,
        confidence=confidence,
        timeline=project_timeline,
        payment_schedule=payment_schedule,
        regional_insight=get_regional_insight(descriptor.zip_code),
    )
