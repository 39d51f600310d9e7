"""Timeline Pydantic models for RenoCost.

This module defines construction phases and the phase-based project
timeline, including which phases sit on the critical path.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, computed_field

from renocost.models.project import ProjectCategory, QualityTier


class TimelinePhase(BaseModel):
    """One construction phase.

    ``critical`` marks phases that gate downstream work and cannot be
    parallelized or skipped (permits, rough-in, waterproofing, ...).
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Phase id")
    name: str = Field(..., description="Phase name")
    duration: str = Field(..., description="Duration range, e.g. '2-3 days'")
    order: int = Field(..., ge=1, description="Position in the sequence")
    critical: bool = Field(default=False, description="Gates downstream phases")
    tasks: List[str] = Field(default_factory=list, description="Work performed in the phase")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "duration": self.duration,
            "order": self.order,
            "critical": self.critical,
            "tasks": list(self.tasks),
        }


class ProjectTimeline(BaseModel):
    """Phase-based project timeline.

    ``total_duration`` comes from an independent lookup and is not the sum
    of the phase durations; the two can disagree.
    """

    model_config = ConfigDict(frozen=True)

    category: ProjectCategory = Field(...)
    quality_tier: QualityTier = Field(...)
    phases: List[TimelinePhase] = Field(..., description="Phases ordered by `order`")
    total_duration: str = Field(..., description="Overall duration estimate")

    @computed_field
    @property
    def critical_phase_ids(self) -> List[str]:
        return [phase.id for phase in self.phases if phase.critical]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category": self.category.value,
            "qualityTier": self.quality_tier.value,
            "phases": [phase.to_dict() for phase in self.phases],
            "totalDuration": self.total_duration,
            "criticalPath": self.critical_phase_ids,
        }
