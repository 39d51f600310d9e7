"""RenoCost data models."""

from renocost.models.project import (
    ConfidenceLevel,
    ProjectCategory,
    ProjectDescriptor,
    QualityTier,
)
from renocost.models.cost_breakdown import CostBreakdown, CostSection, CostTotals, LineItem
from renocost.models.roi import (
    RentalAnalysis,
    RiskTier,
    ROIDefaults,
    ROIInputs,
    ROIQualityLabel,
    ROIResult,
    WhatIfScenario,
)
from renocost.models.payment import PaymentMilestone, PaymentSchedule, PaymentStatus
from renocost.models.timeline import ProjectTimeline, TimelinePhase
from renocost.models.estimate import ConfidenceAssessment, ProjectEstimate

__all__ = [
    "ConfidenceLevel",
    "ProjectCategory",
    "ProjectDescriptor",
    "QualityTier",
    "CostBreakdown",
    "CostSection",
    "CostTotals",
    "LineItem",
    "RentalAnalysis",
    "RiskTier",
    "ROIDefaults",
    "ROIInputs",
    "ROIQualityLabel",
    "ROIResult",
    "WhatIfScenario",
    "PaymentMilestone",
    "PaymentSchedule",
    "PaymentStatus",
    "ProjectTimeline",
    "TimelinePhase",
    "ConfidenceAssessment",
    "ProjectEstimate",
]
