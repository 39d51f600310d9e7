"""Composed estimate models for RenoCost.

A ProjectEstimate bundles every calculator result for one descriptor and
renders the bundle as a plain dict that can be embedded verbatim into a
text-generation prompt or handed to export tooling.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from renocost.models.cost_breakdown import CostBreakdown, CostTotals
from renocost.models.payment import PaymentSchedule
from renocost.models.project import ConfidenceLevel, ProjectDescriptor
from renocost.models.timeline import ProjectTimeline


class ConfidenceAssessment(BaseModel):
    """Estimate confidence with the inputs that drove it."""

    model_config = ConfigDict(frozen=True)

    level: ConfidenceLevel = Field(...)
    has_zip: bool = Field(..., description="A 5-character postal code was supplied")
    is_common_project: bool = Field(..., description="Project type is in the common set")
    key_factors: List[str] = Field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "confidence": self.level.value,
            "hasZip": self.has_zip,
            "isCommonProject": self.is_common_project,
            "keyFactors": list(self.key_factors),
        }


class ProjectEstimate(BaseModel):
    """All calculator outputs for one project descriptor."""

    model_config = ConfigDict(frozen=True)

    descriptor: ProjectDescriptor = Field(...)
    totals: CostTotals = Field(...)
    breakdown: CostBreakdown = Field(...)
    confidence: ConfidenceAssessment = Field(...)
    timeline: ProjectTimeline = Field(...)
    payment_schedule: Optional[PaymentSchedule] = Field(
        None, description="Present when the descriptor has start and end dates"
    )
    regional_insight: str = Field(default="")

    def to_prompt_payload(self) -> Dict[str, Any]:
        """Serializable payload for prompts and export tooling."""
        return {
            "project": self.descriptor.to_dict(),
            "totals": self.totals.to_dict(),
            "costBreakdown": self.breakdown.to_dict(),
            "confidence": self.confidence.to_dict(),
            "timeline": self.timeline.to_dict(),
            "paymentSchedule": (
                self.payment_schedule.to_dict() if self.payment_schedule else None
            ),
            "regionalInsight": self.regional_insight,
        }
