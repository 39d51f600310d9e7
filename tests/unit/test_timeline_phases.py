"""Unit tests for the timeline phase generator."""

import pytest

from renocost.models.project import ProjectCategory, QualityTier
from renocost.services.timeline_phases import (
    BATHROOM_PHASES,
    KITCHEN_PHASES,
    PHASE_TEMPLATES,
    TOTAL_DURATIONS,
    generate_timeline,
    get_total_duration,
    increment_duration,
    parse_duration_days,
    summarize_phase_days,
)


# =============================================================================
# Phase Generation
# =============================================================================


class TestGenerateTimeline:
    """Tests for generate_timeline."""

    def test_kitchen_standard_phases(self):
        timeline = generate_timeline(ProjectCategory.KITCHEN, QualityTier.STANDARD)
        assert len(timeline.phases) == 9
        assert [p.order for p in timeline.phases] == list(range(1, 10))
        assert timeline.phases[1].duration == "2-3 days"
        assert timeline.critical_phase_ids == ["planning", "rough_in", "cabinets", "final_inspection"]
        assert timeline.total_duration == "4-8 weeks"

    def test_bathroom_premium_increments_durations(self):
        """Every number in every phase duration goes up by one."""
        timeline = generate_timeline(ProjectCategory.BATHROOM, QualityTier.PREMIUM)
        demolition = next(p for p in timeline.phases if p.id == "demolition")
        assert demolition.duration == "2-3 days"
        assert [p.duration for p in timeline.phases] == [
            increment_duration(t.duration) for t in BATHROOM_PHASES
        ]

    def test_luxury_is_incremented(self):
        timeline = generate_timeline(ProjectCategory.KITCHEN, "luxury")
        assert timeline.phases[0].duration == "2-3 weeks"

    @pytest.mark.parametrize("tier", [QualityTier.BUDGET, QualityTier.STANDARD, QualityTier.MID_RANGE])
    def test_lower_tiers_unchanged(self, tier):
        timeline = generate_timeline(ProjectCategory.BATHROOM, tier)
        assert [p.duration for p in timeline.phases] == [t.duration for t in BATHROOM_PHASES]

    def test_bathroom_critical_path(self):
        timeline = generate_timeline(ProjectCategory.BATHROOM)
        assert timeline.critical_phase_ids == ["planning", "rough_in", "waterproofing", "final_inspection"]

    def test_generic_uses_kitchen_sequence(self):
        timeline = generate_timeline(ProjectCategory.GENERIC)
        assert [p.id for p in timeline.phases] == [t.id for t in KITCHEN_PHASES]
        assert timeline.total_duration == "2-6 weeks"

    def test_category_labels_in_any_case(self):
        timeline = generate_timeline("Bathroom", "Premium")
        assert timeline.category == ProjectCategory.BATHROOM
        assert timeline.phases[1].duration == "2-3 days"
        assert get_total_duration("KITCHEN", "Standard") == "4-8 weeks"

    def test_model_dump_includes_critical_path(self):
        data = generate_timeline(ProjectCategory.BATHROOM).model_dump(mode="json")
        assert data["critical_phase_ids"] == ["planning", "rough_in", "waterproofing", "final_inspection"]

    def test_unknown_category_is_generic(self):
        assert generate_timeline("gazebo").category == ProjectCategory.GENERIC

    def test_every_category_has_phases_and_durations(self):
        assert set(PHASE_TEMPLATES) == set(ProjectCategory)
        for category in ProjectCategory:
            assert set(TOTAL_DURATIONS[category]) == set(QualityTier)

    def test_templates_not_mutated_by_premium(self):
        generate_timeline(ProjectCategory.BATHROOM, QualityTier.PREMIUM)
        assert BATHROOM_PHASES[1].duration == "1-2 days"

    def test_to_dict(self):
        data = generate_timeline(ProjectCategory.BATHROOM).to_dict()
        assert data["totalDuration"] == "2-4 weeks"
        assert data["criticalPath"][0] == "planning"
        assert data["phases"][0]["order"] == 1


# =============================================================================
# Duration Helpers
# =============================================================================


class TestDurations:
    """Tests for duration lookups and parsing."""

    @pytest.mark.parametrize(
        "category,tier,expected",
        [
            (ProjectCategory.KITCHEN, QualityTier.LUXURY, "10-14 weeks"),
            (ProjectCategory.BATHROOM, QualityTier.BUDGET, "2-3 weeks"),
            (ProjectCategory.ADDITION, QualityTier.STANDARD, "12-20 weeks"),
            (ProjectCategory.BASEMENT, "Mid-Range", "8-12 weeks"),
        ],
    )
    def test_get_total_duration(self, category, tier, expected):
        assert get_total_duration(category, tier) == expected

    @pytest.mark.parametrize(
        "duration,expected",
        [("1-2 days", "2-3 days"), ("10-14 weeks", "11-15 weeks"), ("3 days", "4 days"), ("soon", "soon")],
    )
    def test_increment_duration(self, duration, expected):
        assert increment_duration(duration) == expected

    @pytest.mark.parametrize(
        "duration,expected",
        [("1-2 weeks", (7, 14)), ("3 days", (3, 3)), ("3-6 months", (90, 180)), ("soon", (0, 0)), ("", (0, 0))],
    )
    def test_parse_duration_days(self, duration, expected):
        assert parse_duration_days(duration) == expected

    def test_phase_sum_is_independent_of_total(self):
        """Summed phases are reported separately from the total lookup."""
        timeline = generate_timeline(ProjectCategory.BATHROOM, QualityTier.STANDARD)
        assert summarize_phase_days(timeline) == (16, 30)
        assert timeline.total_duration == "2-4 weeks"
