"""RenoCost calculators.

Every calculator is a pure function returning a fresh, immutable model:
- quality: tier -> material multiplier
- classifier: free-form project type -> ProjectCategory
- cost_allocation: category totals -> itemized CostBreakdown
- confidence: input completeness -> ConfidenceAssessment
- roi_calculator: flip ROI, what-if scenarios, rental analysis
- payment_schedule: milestone payments and status updates
- timeline_phases: construction phases and total duration
- cost_estimator: area/tier/ZIP -> CostTotals
- estimate_service: all of the above for one descriptor
"""

from renocost.services.quality import get_quality_multiplier, QUALITY_MULTIPLIERS
from renocost.services.classifier import classify_project_type, describe_project, is_common_project
from renocost.services.cost_allocation import allocate_costs, make_cost_totals
from renocost.services.confidence import score_confidence
from renocost.services.roi_calculator import (
    analyze_rental,
    build_roi_inputs,
    calculate_roi,
    evaluate_roi,
    generate_what_if_scenarios,
)
from renocost.services.payment_schedule import generate_payment_schedule, update_milestone_status
from renocost.services.timeline_phases import generate_timeline, get_total_duration
from renocost.services.cost_estimator import (
    estimate_cost_totals,
    generate_cost_scenarios,
    get_regional_insight,
)
from renocost.services.estimate_service import build_project_estimate

__all__ = [
    "get_quality_multiplier",
    "QUALITY_MULTIPLIERS",
    "classify_project_type",
    "describe_project",
    "is_common_project",
    "allocate_costs",
    "make_cost_totals",
    "score_confidence",
    "analyze_rental",
    "build_roi_inputs",
    "calculate_roi",
    "evaluate_roi",
    "generate_what_if_scenarios",
    "generate_payment_schedule",
    "update_milestone_status",
    "generate_timeline",
    "get_total_duration",
    "estimate_cost_totals",
    "generate_cost_scenarios",
    "get_regional_insight",
    "build_project_estimate",
]
