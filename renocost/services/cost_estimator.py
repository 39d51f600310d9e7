"""Cost Totals Estimator for RenoCost.

Produces category subtotals for a project from its area and tier when the
caller has no quote to start from. Pricing baseline is Montgomery County,
MD (regional multiplier 1.0).

    cost per sqft = base(category, tier) x regional(zip) x timeline x quality
    project cost  = round(area x cost per sqft)

Components: materials 40%, labor 38% (or timeline hours x crew x rate),
permits 4%, equipment 6%, overhead 12%. The total is the rounded
component sum.
"""

from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

import structlog

from renocost.config.settings import settings
from renocost.models.cost_breakdown import CostTotals
from renocost.models.project import ProjectCategory, QualityTier
from renocost.services.cost_allocation import parse_timeline_hours
from renocost.services.quality import get_quality_multiplier
from renocost.utils.numbers import coerce_amount, round_half_up

logger = structlog.get_logger(__name__)


# =============================================================================
# PRICING TABLES
# =============================================================================


# Maryland regional cost multipliers (Montgomery County baseline = 1.0)
REGIONAL_MULTIPLIERS: Mapping[str, float] = MappingProxyType({
    # Montgomery County (Bethesda, Rockville, Gaithersburg)
    "20814": 1.15, "20815": 1.20, "20816": 1.18, "20817": 1.22, "20852": 1.10, "20853": 1.12,
    "20854": 1.08, "20855": 1.14, "20878": 1.16, "20879": 1.11, "20886": 1.09, "20895": 1.13,
    # Prince George's County (Hyattsville, College Park, Bowie)
    "20737": 0.95, "20740": 0.92, "20742": 0.90, "20782": 0.94, "20783": 0.93, "20784": 0.91,
    "20785": 0.96, "20787": 0.97, "20794": 0.89, "20912": 0.88,
    # Anne Arundel County (Annapolis, Glen Burnie)
    "21401": 1.05, "21403": 1.07, "21409": 1.03, "21122": 1.02, "21144": 1.01, "21146": 1.04,
    # Howard County (Columbia, Ellicott City)
    "21042": 1.12, "21043": 1.14, "21044": 1.11, "21045": 1.13, "21075": 1.10,
})
DEFAULT_REGIONAL_MULTIPLIER = 1.0

# Rush jobs cost more, relaxed schedules less
TIMELINE_MULTIPLIERS: Mapping[str, float] = MappingProxyType({
    "1-2 weeks": 1.25,
    "2-4 weeks": 1.15,
    "4-8 weeks": 1.0,
    "8-12 weeks": 0.95,
    "3-6 months": 0.90,
    "6+ months": 0.85,
})
DEFAULT_TIMELINE_MULTIPLIER = 1.0

# Base cost per square foot. Mid-range has no column and uses standard.
BASE_COSTS_PER_SQFT: Mapping[ProjectCategory, Mapping[QualityTier, float]] = MappingProxyType({
    ProjectCategory.KITCHEN: MappingProxyType({
        QualityTier.BUDGET: 160, QualityTier.STANDARD: 195, QualityTier.PREMIUM: 280, QualityTier.LUXURY: 420,
    }),
    ProjectCategory.BATHROOM: MappingProxyType({
        QualityTier.BUDGET: 220, QualityTier.STANDARD: 285, QualityTier.PREMIUM: 410, QualityTier.LUXURY: 650,
    }),
    ProjectCategory.BASEMENT: MappingProxyType({
        QualityTier.BUDGET: 45, QualityTier.STANDARD: 70, QualityTier.PREMIUM: 105, QualityTier.LUXURY: 150,
    }),
    ProjectCategory.ADDITION: MappingProxyType({
        QualityTier.BUDGET: 180, QualityTier.STANDARD: 240, QualityTier.PREMIUM: 340, QualityTier.LUXURY: 480,
    }),
    ProjectCategory.GENERIC: MappingProxyType({
        QualityTier.BUDGET: 60, QualityTier.STANDARD: 90, QualityTier.PREMIUM: 130, QualityTier.LUXURY: 190,
    }),
})

COMPONENT_SHARES: Mapping[str, float] = MappingProxyType({
    "materials": 0.40,
    "labor": 0.38,
    "permits": 0.04,
    "equipment": 0.06,
    "overhead": 0.12,
})


# =============================================================================
# LOOKUPS
# =============================================================================


def get_regional_multiplier(zip_code: Optional[str]) -> float:
    if not isinstance(zip_code, str):
        return DEFAULT_REGIONAL_MULTIPLIER
    return REGIONAL_MULTIPLIERS.get(zip_code.strip(), DEFAULT_REGIONAL_MULTIPLIER)


def get_timeline_multiplier(timeline: Optional[str]) -> float:
    if not isinstance(timeline, str):
        return DEFAULT_TIMELINE_MULTIPLIER
    return TIMELINE_MULTIPLIERS.get(timeline.strip().lower(), DEFAULT_TIMELINE_MULTIPLIER)


def get_base_cost_per_sqft(category: ProjectCategory, quality_tier: QualityTier) -> float:
    costs = BASE_COSTS_PER_SQFT[category]
    return costs.get(quality_tier, costs[QualityTier.STANDARD])


def get_regional_insight(zip_code: Optional[str]) -> str:
    """Plain-language description of the pricing market for a ZIP code."""
    multiplier = get_regional_multiplier(zip_code)
    if multiplier >= 1.15:
        return (
            "Premium market area - Higher material and labor costs due to "
            "affluent location and strict building standards."
        )
    if multiplier >= 1.05:
        return "Above-average market - Moderate premium for quality materials and skilled contractors."
    if multiplier <= 0.92:
        return "Value market area - Lower baseline costs with good contractor availability."
    return "Standard market rates - Typical Maryland pricing for materials and labor."


# =============================================================================
# ESTIMATION
# =============================================================================


def estimate_cost_totals(
    category: Any,
    area_sqft: Any,
    quality_tier: Any = None,
    timeline: Optional[str] = None,
    zip_code: Optional[str] = None,
    labor_rate: Optional[float] = None,
    labor_workers: Optional[int] = None,
) -> CostTotals:
    """Estimate category subtotals for a project.

    Args:
        category: ProjectCategory; unknown values price as generic.
        area_sqft: Project area. Zero, negative or NaN yields zero totals.
        quality_tier: QualityTier or label; unknown means Standard.
        timeline: Schedule label such as "2-4 weeks" (defaults from
            settings), or an hours figure such as "40 hours" that fixes
            the labor cost.
        zip_code: Postal code for the regional multiplier.
        labor_rate: Hourly rate per worker for hours-based labor.
        labor_workers: Crew size for hours-based labor.

    Returns:
        CostTotals whose overhead is equipment plus overhead.
    """
    category = ProjectCategory.from_label(category)
    tier = QualityTier.from_label(quality_tier)
    area = coerce_amount(area_sqft)
    timeline = timeline or settings.default_timeline

    if area <= 0:
        logger.debug("cost_totals_empty_area", category=category.value)
        return CostTotals()

    cost_per_sqft = (
        get_base_cost_per_sqft(category, tier)
        * get_regional_multiplier(zip_code)
        * get_timeline_multiplier(timeline)
        * get_quality_multiplier(tier)
    )
    base_project_cost = round_half_up(area * cost_per_sqft)

    components = {
        name: round_half_up(base_project_cost * share)
        for name, share in COMPONENT_SHARES.items()
    }

    timeline_hours = parse_timeline_hours(timeline)
    if timeline_hours is not None:
        rate = coerce_amount(labor_rate, settings.labor_rate)
        workers = labor_workers if labor_workers is not None else settings.labor_workers
        components["labor"] = round_half_up(timeline_hours * workers * rate)

    total = sum(components.values())

    logger.debug(
        "cost_totals_estimated",
        category=category.value,
        quality_tier=tier.value,
        area_sqft=area,
        cost_per_sqft=round(cost_per_sqft, 2),
        hours_constrained=timeline_hours is not None,
        total=total
    )

    return CostTotals(
        materials=components["materials"],
        labor=components["labor"],
        permits=components["permits"],
        total=total,
    )


def generate_cost_scenarios(
    category: Any,
    area_sqft: Any,
    quality_tier: Any = None,
    timeline: Optional[str] = None,
    zip_code: Optional[str] = None,
) -> Dict[str, CostTotals]:
    """Alternative totals with the tier or schedule swapped.

    Returns budget_option, premium_option, rush_timeline and
    extended_timeline, in that order.
    """
    return {
        "budget_option": estimate_cost_totals(category, area_sqft, QualityTier.BUDGET, timeline, zip_code),
        "premium_option": estimate_cost_totals(category, area_sqft, QualityTier.PREMIUM, timeline, zip_code),
        "rush_timeline": estimate_cost_totals(category, area_sqft, quality_tier, "2-4 weeks", zip_code),
        "extended_timeline": estimate_cost_totals(category, area_sqft, quality_tier, "3-6 months", zip_code),
    }
