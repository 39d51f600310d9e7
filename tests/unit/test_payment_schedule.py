"""Unit tests for the payment schedule generator and status updates."""

from datetime import date

import pytest
from pydantic import ValidationError

from renocost.config.errors import (
    ErrorCode,
    InvalidStatusTransitionError,
    MilestoneNotFoundError,
)
from renocost.models.payment import PaymentStatus
from renocost.services.payment_schedule import (
    MILESTONE_TEMPLATES,
    generate_payment_schedule,
    update_milestone_status,
)


START = date(2025, 1, 1)
END = date(2025, 3, 1)


@pytest.fixture
def schedule():
    return generate_payment_schedule(30000, START, END)


# =============================================================================
# Generation
# =============================================================================


class TestGeneratePaymentSchedule:
    """Tests for generate_payment_schedule."""

    def test_reference_schedule(self, schedule):
        """30000 over 59 days splits 25/30/30/15."""
        assert schedule.duration_days == 59
        assert [(m.id, m.amount, m.due_date) for m in schedule.milestones] == [
            ("deposit", 7500, date(2025, 1, 1)),
            ("materials", 9000, date(2025, 1, 13)),
            ("progress", 9000, date(2025, 2, 5)),
            ("completion", 4500, date(2025, 3, 1)),
        ]

    def test_names_and_initial_statuses(self, schedule):
        assert [m.name for m in schedule.milestones] == [
            "Project Deposit", "Materials & Setup", "Progress Payment", "Final Payment",
        ]
        assert [m.status for m in schedule.milestones] == [
            PaymentStatus.PAID, PaymentStatus.DUE, PaymentStatus.PENDING, PaymentStatus.PENDING,
        ]

    def test_percentages_sum_to_100(self):
        assert sum(t.percentage for t in MILESTONE_TEMPLATES) == 100

    @pytest.mark.parametrize("cost", [30000, 10001, 33333, 99999, 1])
    def test_amounts_stay_within_rounding_of_cost(self, cost):
        schedule = generate_payment_schedule(cost, START, END)
        assert abs(sum(m.amount for m in schedule.milestones) - cost) <= 3

    def test_due_dates_are_ordered(self, schedule):
        due_dates = [m.due_date for m in schedule.milestones]
        assert due_dates == sorted(due_dates)

    def test_end_before_start_collapses_to_start(self):
        schedule = generate_payment_schedule(30000, END, START)
        assert schedule.duration_days == 0
        assert all(m.due_date == END for m in schedule.milestones)

    def test_missing_end_collapses_to_start(self):
        schedule = generate_payment_schedule(30000, START)
        assert schedule.end_date == START
        assert all(m.due_date == START for m in schedule.milestones)

    def test_degenerate_cost_is_zero(self):
        schedule = generate_payment_schedule(float("nan"), START, END)
        assert schedule.project_cost == 0
        assert all(m.amount == 0 for m in schedule.milestones)
        assert schedule.progress_percentage == 0

    def test_totals_and_progress(self, schedule):
        assert schedule.total_paid == 7500
        assert schedule.total_due == 9000
        assert schedule.progress_percentage == pytest.approx(25.0)

    def test_model_dump_includes_totals(self, schedule):
        data = schedule.model_dump(mode="json")
        assert data["total_paid"] == 7500
        assert data["total_due"] == 9000
        assert data["progress_percentage"] == pytest.approx(25.0)

    def test_to_dict(self, schedule):
        data = schedule.to_dict()
        assert data["durationDays"] == 59
        assert data["milestones"][1]["dueDate"] == "2025-01-13"
        assert data["milestones"][0]["status"] == "paid"


# =============================================================================
# Status Updates
# =============================================================================


class TestUpdateMilestoneStatus:
    """Tests for update_milestone_status."""

    def test_due_to_paid(self, schedule):
        updated = update_milestone_status(schedule, "materials", PaymentStatus.PAID)
        assert updated.milestone("materials").status == PaymentStatus.PAID
        assert updated.total_paid == 16500

    def test_original_schedule_unchanged(self, schedule):
        update_milestone_status(schedule, "materials", "paid")
        assert schedule.milestone("materials").status == PaymentStatus.DUE

    def test_pending_to_due_then_overdue_then_paid(self, schedule):
        updated = update_milestone_status(schedule, "progress", "due")
        updated = update_milestone_status(updated, "progress", "overdue")
        updated = update_milestone_status(updated, "progress", "paid")
        assert updated.milestone("progress").status == PaymentStatus.PAID

    def test_paid_is_terminal(self, schedule):
        with pytest.raises(InvalidStatusTransitionError) as exc_info:
            update_milestone_status(schedule, "deposit", "due")
        error = exc_info.value
        assert error.code == ErrorCode.INVALID_STATUS_TRANSITION
        assert error.details["current_status"] == "paid"
        assert error.details["requested_status"] == "due"

    def test_pending_cannot_skip_to_paid(self, schedule):
        """Pending milestones must become due before they are paid."""
        with pytest.raises(InvalidStatusTransitionError) as exc_info:
            update_milestone_status(schedule, "progress", PaymentStatus.PAID)
        assert exc_info.value.details["current_status"] == "pending"
        assert schedule.milestone("progress").status == PaymentStatus.PENDING

    def test_pending_cannot_become_overdue(self, schedule):
        with pytest.raises(InvalidStatusTransitionError):
            update_milestone_status(schedule, "completion", "overdue")

    def test_unknown_status(self, schedule):
        with pytest.raises(InvalidStatusTransitionError):
            update_milestone_status(schedule, "progress", "refunded")

    def test_unknown_milestone(self, schedule):
        with pytest.raises(MilestoneNotFoundError) as exc_info:
            update_milestone_status(schedule, "bonus", "paid")
        assert exc_info.value.to_dict()["code"] == ErrorCode.MILESTONE_NOT_FOUND

    def test_schedule_is_frozen(self, schedule):
        with pytest.raises(ValidationError):
            schedule.project_cost = 0
