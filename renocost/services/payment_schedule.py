"""Payment Schedule Generator for RenoCost.

Splits a project cost into four fixed-percentage milestones placed along
the project timeline. Milestone statuses only change through explicit
update calls; nothing here moves a status because time has passed.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from types import MappingProxyType
from typing import Any, FrozenSet, Mapping, Optional, Tuple

import structlog

from renocost.config.errors import InvalidStatusTransitionError, MilestoneNotFoundError
from renocost.models.payment import PaymentMilestone, PaymentSchedule, PaymentStatus
from renocost.utils.numbers import coerce_amount, round_half_up

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class MilestoneTemplate:
    """Static definition of one payment milestone.

    ``fraction`` places the due date at start + duration x fraction;
    0.0 pins it to the start date and 1.0 to the end date.
    """

    id: str
    name: str
    percentage: int
    fraction: float
    initial_status: PaymentStatus
    description: str
    associated_tasks: Tuple[str, ...]


MILESTONE_TEMPLATES: Tuple[MilestoneTemplate, ...] = (
    MilestoneTemplate(
        id="deposit",
        name="Project Deposit",
        percentage=25,
        fraction=0.0,
        initial_status=PaymentStatus.PAID,
        description="Initial deposit to secure project start",
        associated_tasks=("Project Planning", "Permit Applications"),
    ),
    MilestoneTemplate(
        id="materials",
        name="Materials & Setup",
        percentage=30,
        fraction=0.2,
        initial_status=PaymentStatus.DUE,
        description="Materials procurement and site preparation",
        associated_tasks=("Demolition", "Material Delivery", "Site Setup"),
    ),
    MilestoneTemplate(
        id="progress",
        name="Progress Payment",
        percentage=30,
        fraction=0.6,
        initial_status=PaymentStatus.PENDING,
        description="Milestone payment for major construction progress",
        associated_tasks=("Rough Construction", "Major Installation"),
    ),
    MilestoneTemplate(
        id="completion",
        name="Final Payment",
        percentage=15,
        fraction=1.0,
        initial_status=PaymentStatus.PENDING,
        description="Final payment upon project completion",
        associated_tasks=("Final Inspection", "Cleanup", "Walkthrough"),
    ),
)

ALLOWED_TRANSITIONS: Mapping[PaymentStatus, FrozenSet[PaymentStatus]] = MappingProxyType({
    PaymentStatus.PENDING: frozenset({PaymentStatus.DUE}),
    PaymentStatus.DUE: frozenset({PaymentStatus.PAID, PaymentStatus.OVERDUE}),
    PaymentStatus.OVERDUE: frozenset({PaymentStatus.PAID}),
    PaymentStatus.PAID: frozenset(),
})


def _due_date(start_date: date, end_date: date, duration_days: int, fraction: float) -> date:
    if fraction <= 0:
        return start_date
    if fraction >= 1:
        return end_date
    return start_date + timedelta(days=round_half_up(duration_days * fraction))


def generate_payment_schedule(
    project_cost: Any,
    start_date: date,
    end_date: Optional[date] = None,
    templates: Tuple[MilestoneTemplate, ...] = MILESTONE_TEMPLATES,
) -> PaymentSchedule:
    """Generate the milestone payment schedule.

    Args:
        project_cost: Total project cost; NaN or negative becomes 0.
        start_date: Project start (deposit due date).
        end_date: Project end (final payment due date). An end before the
            start, or a missing end, collapses the schedule onto the start.
        templates: Milestone definitions; percentages must sum to 100.

    Returns:
        PaymentSchedule with milestones in due-date order.
    """
    cost = coerce_amount(project_cost)
    if end_date is None or end_date < start_date:
        end_date = start_date
    duration_days = (end_date - start_date).days

    milestones = [
        PaymentMilestone(
            id=template.id,
            name=template.name,
            percentage=template.percentage,
            amount=round_half_up(cost * template.percentage / 100),
            due_date=_due_date(start_date, end_date, duration_days, template.fraction),
            status=template.initial_status,
            description=template.description,
            associated_tasks=list(template.associated_tasks),
        )
        for template in templates
    ]

    logger.debug(
        "payment_schedule_generated",
        project_cost=cost,
        duration_days=duration_days,
        milestones=[m.id for m in milestones]
    )

    return PaymentSchedule(
        project_cost=cost,
        start_date=start_date,
        end_date=end_date,
        duration_days=duration_days,
        milestones=milestones,
    )


def update_milestone_status(
    schedule: PaymentSchedule,
    milestone_id: str,
    new_status: Any,
) -> PaymentSchedule:
    """Return a new schedule with one milestone moved to ``new_status``.

    Raises:
        MilestoneNotFoundError: If no milestone has ``milestone_id``.
        InvalidStatusTransitionError: If the move is not allowed, including
            an unrecognized status value.
    """
    try:
        current = schedule.milestone(milestone_id)
    except KeyError:
        raise MilestoneNotFoundError(milestone_id)

    try:
        status = PaymentStatus(new_status)
    except ValueError:
        raise InvalidStatusTransitionError(milestone_id, current.status.value, str(new_status))

    if status not in ALLOWED_TRANSITIONS[current.status]:
        raise InvalidStatusTransitionError(milestone_id, current.status.value, status.value)

    milestones = [
        m.model_copy(update={"status": status}) if m.id == milestone_id else m
        for m in schedule.milestones
    ]

    logger.info(
        "payment_status_updated",
        milestone_id=milestone_id,
        from_status=current.status.value,
        to_status=status.value
    )

    return schedule.model_copy(update={"milestones": milestones})
