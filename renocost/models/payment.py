"""Payment schedule Pydantic models for RenoCost."""

from datetime import date
from enum import Enum
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, computed_field


class PaymentStatus(str, Enum):
    """Milestone payment status. Changed only by explicit caller updates."""

    PENDING = "pending"
    DUE = "due"
    PAID = "paid"
    OVERDUE = "overdue"


class PaymentMilestone(BaseModel):
    """Scheduled partial payment tied to project progress."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Milestone id")
    name: str = Field(..., description="Milestone name")
    percentage: int = Field(..., ge=0, le=100, description="Share of project cost")
    amount: int = Field(..., description="Rounded amount due")
    due_date: date = Field(..., description="Due date")
    status: PaymentStatus = Field(default=PaymentStatus.PENDING)
    description: str = Field(default="")
    associated_tasks: List[str] = Field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "percentage": self.percentage,
            "amount": self.amount,
            "dueDate": self.due_date.isoformat(),
            "status": self.status.value,
            "description": self.description,
            "associatedTasks": list(self.associated_tasks),
        }


class PaymentSchedule(BaseModel):
    """Milestone payment schedule for a project."""

    model_config = ConfigDict(frozen=True)

    project_cost: float = Field(..., ge=0)
    start_date: date = Field(...)
    end_date: date = Field(...)
    duration_days: int = Field(..., ge=0, description="Calendar days from start to end")
    milestones: List[PaymentMilestone] = Field(..., description="Milestones in due-date order")

    def milestone(self, milestone_id: str) -> PaymentMilestone:
        for milestone in self.milestones:
            if milestone.id == milestone_id:
                return milestone
        raise KeyError(milestone_id)

    def _total_with_status(self, status: PaymentStatus) -> int:
        return sum(m.amount for m in self.milestones if m.status == status)

    @computed_field
    @property
    def total_paid(self) -> int:
        return self._total_with_status(PaymentStatus.PAID)

    @computed_field
    @property
    def total_due(self) -> int:
        return self._total_with_status(PaymentStatus.DUE)

    @computed_field
    @property
    def progress_percentage(self) -> float:
        """Share of project cost already paid; 0 for a zero-cost project."""
        if self.project_cost <= 0:
            return 0.0
        return (self.total_paid / self.project_cost) * 100

    def to_dict(self) -> Dict[str, Any]:
        return {
            "projectCost": self.project_cost,
            "startDate": self.start_date.isoformat(),
            "endDate": self.end_date.isoformat(),
            "durationDays": self.duration_days,
            "milestones": [m.to_dict() for m in self.milestones],
            "totalPaid": self.total_paid,
            "totalDue": self.total_due,
            "progressPercentage": self.progress_percentage,
        }
