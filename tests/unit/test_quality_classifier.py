"""Unit tests for the quality multiplier table and project classification."""

import pytest
from pydantic import ValidationError

from renocost.models.project import ProjectCategory, ProjectDescriptor, QualityTier
from renocost.services.classifier import (
    classify_project_type,
    describe_project,
    is_common_project,
)
from renocost.services.quality import (
    DEFAULT_QUALITY_MULTIPLIER,
    QUALITY_MULTIPLIERS,
    get_quality_multiplier,
)
from tests.fixtures.mock_project_data import CLASSIFICATION_CASES, DEGENERATE_AMOUNTS


# =============================================================================
# Quality Multipliers
# =============================================================================


class TestQualityMultipliers:
    """Tests for get_quality_multiplier."""

    @pytest.mark.parametrize(
        "tier,expected",
        [
            (QualityTier.BUDGET, 0.8),
            (QualityTier.STANDARD, 1.0),
            (QualityTier.MID_RANGE, 1.2),
            (QualityTier.PREMIUM, 1.5),
            (QualityTier.LUXURY, 2.0),
        ],
    )
    def test_known_tiers(self, tier, expected):
        """Each tier maps to its fixed multiplier."""
        assert get_quality_multiplier(tier) == expected

    def test_multipliers_strictly_increase_with_tier(self):
        """Budget < Standard < Mid-Range < Premium < Luxury."""
        ordered = [QUALITY_MULTIPLIERS[tier] for tier in QualityTier]
        assert ordered == sorted(ordered)
        assert len(set(ordered)) == len(ordered)

    @pytest.mark.parametrize("label", ["Mid-Range", "mid-range", "midrange", "MID_RANGE", "mid range"])
    def test_mid_range_label_variants(self, label):
        """Common spellings of mid-range resolve to the same tier."""
        assert get_quality_multiplier(label) == 1.2

    @pytest.mark.parametrize("label", [None, "", "gold-plated", 42])
    def test_unknown_tier_defaults_to_standard(self, label):
        """Unrecognized tiers never fail and use the Standard multiplier."""
        assert get_quality_multiplier(label) == DEFAULT_QUALITY_MULTIPLIER == 1.0

    def test_table_is_read_only(self):
        """The multiplier table cannot be modified at runtime."""
        with pytest.raises(TypeError):
            QUALITY_MULTIPLIERS[QualityTier.LUXURY] = 3.0


# =============================================================================
# Classification
# =============================================================================


class TestClassifyProjectType:
    """Tests for classify_project_type."""

    @pytest.mark.parametrize("case", CLASSIFICATION_CASES, ids=lambda c: c["text"] or "empty")
    def test_classification_cases(self, case):
        """Text maps to the expected category, with keyword priority."""
        assert classify_project_type(case["text"]) == ProjectCategory(case["category"])

    def test_none_is_generic(self):
        """Missing text classifies as Generic."""
        assert classify_project_type(None) == ProjectCategory.GENERIC

    def test_case_insensitive(self):
        """Matching ignores case."""
        assert classify_project_type("KiTcHeN") == ProjectCategory.KITCHEN


class TestProjectCategoryLabel:
    """Tests for ProjectCategory.from_label."""

    @pytest.mark.parametrize(
        "label,expected",
        [
            ("Kitchen", ProjectCategory.KITCHEN),
            ("BATHROOM", ProjectCategory.BATHROOM),
            (" Basement ", ProjectCategory.BASEMENT),
            (ProjectCategory.ADDITION, ProjectCategory.ADDITION),
            ("patio", ProjectCategory.GENERIC),
            (None, ProjectCategory.GENERIC),
        ],
    )
    def test_labels_in_any_case(self, label, expected):
        assert ProjectCategory.from_label(label) == expected


class TestIsCommonProject:
    """Tests for is_common_project."""

    def test_kitchen_and_bathroom_are_common(self):
        assert is_common_project("Kitchen Remodel", ProjectCategory.KITCHEN)
        assert is_common_project("bathroom-remodel", ProjectCategory.BATHROOM)

    def test_generic_flooring_is_common(self):
        """Among generic projects only flooring counts as common."""
        assert is_common_project("flooring-installation", ProjectCategory.GENERIC)
        assert not is_common_project("deck construction", ProjectCategory.GENERIC)

    def test_basement_and_addition_are_not_common(self):
        assert not is_common_project("Basement Finish", ProjectCategory.BASEMENT)
        assert not is_common_project("home-addition", ProjectCategory.ADDITION)


# =============================================================================
# Project Descriptor
# =============================================================================


class TestDescribeProject:
    """Tests for describe_project and the ProjectDescriptor model."""

    def test_builds_consistent_descriptor(self, kitchen_descriptor):
        """Category, tier and ZIP are derived from raw inputs."""
        assert kitchen_descriptor.category == ProjectCategory.KITCHEN
        assert kitchen_descriptor.quality_tier == QualityTier.STANDARD
        assert kitchen_descriptor.area_sqft == 200
        assert kitchen_descriptor.zip_code == "20814"
        assert kitchen_descriptor.has_schedule

    @pytest.mark.parametrize("area", DEGENERATE_AMOUNTS)
    def test_degenerate_area_becomes_zero(self, area):
        """NaN, negative and unparseable areas collapse to 0."""
        descriptor = describe_project("Kitchen Remodel", area_sqft=area)
        assert descriptor.area_sqft == 0

    def test_blank_zip_is_none(self):
        """Whitespace-only ZIP codes are treated as missing."""
        assert describe_project("Kitchen", zip_code="   ").zip_code is None

    def test_no_dates_means_no_schedule(self):
        assert not describe_project("Kitchen").has_schedule

    def test_descriptor_is_frozen(self, kitchen_descriptor):
        """Descriptors are immutable."""
        with pytest.raises(ValidationError):
            kitchen_descriptor.area_sqft = 500

    def test_category_derived_when_omitted(self):
        descriptor = ProjectDescriptor(raw_type_text="Master Bathroom")
        assert descriptor.category == ProjectCategory.BATHROOM

    def test_matching_category_label_is_accepted(self):
        descriptor = ProjectDescriptor(category="Kitchen", raw_type_text="Kitchen Remodel")
        assert descriptor.category == ProjectCategory.KITCHEN

    def test_category_must_match_type_text(self):
        """A category that disagrees with the project type is rejected."""
        with pytest.raises(ValidationError, match="does not match"):
            ProjectDescriptor(category=ProjectCategory.ADDITION, raw_type_text="Kitchen Remodel")

    def test_empty_text_only_allows_generic(self):
        assert ProjectDescriptor().category == ProjectCategory.GENERIC
        with pytest.raises(ValidationError):
            ProjectDescriptor(category=ProjectCategory.KITCHEN)

    def test_to_dict_uses_camel_case(self, kitchen_descriptor):
        data = kitchen_descriptor.to_dict()
        assert data["projectType"] == "Kitchen Remodel"
        assert data["qualityTier"] == "standard"
        assert data["startDate"] == "2025-01-01"
        assert data["endDate"] == "2025-03-01"
