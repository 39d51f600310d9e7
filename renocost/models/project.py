"""Project descriptor models for RenoCost.

This module defines the closed category and quality-tier enums and the
project descriptor every calculator consumes.
"""

from datetime import date
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


# =============================================================================
# ENUMS
# =============================================================================


class ProjectCategory(str, Enum):
    """Closed set of project categories."""

    KITCHEN = "kitchen"
    BATHROOM = "bathroom"
    BASEMENT = "basement"
    ADDITION = "addition"
    GENERIC = "generic"

    @classmethod
    def from_label(cls, label: Any) -> "ProjectCategory":
        """Parse a category label in any case, falling back to GENERIC.

        Accepts enum members and labels such as "Kitchen" or "BATHROOM".
        """
        if isinstance(label, cls):
            return label
        if not isinstance(label, str):
            return cls.GENERIC
        try:
            return cls(label.strip().lower())
        except ValueError:
            return cls.GENERIC


class QualityTier(str, Enum):
    """Material and finish grade."""

    BUDGET = "budget"
    STANDARD = "standard"
    MID_RANGE = "mid_range"
    PREMIUM = "premium"
    LUXURY = "luxury"

    @classmethod
    def from_label(cls, label: Any) -> "QualityTier":
        """Parse a free-form tier label, falling back to STANDARD.

        Accepts enum members and labels such as "Mid-Range", "midrange"
        or "mid_range" in any case.
        """
        if isinstance(label, cls):
            return label
        if not isinstance(label, str):
            return cls.STANDARD
        normalized = label.strip().lower().replace("-", "_").replace(" ", "_")
        if normalized == "midrange":
            normalized = "mid_range"
        try:
            return cls(normalized)
        except ValueError:
            return cls.STANDARD

    @property
    def is_premium_or_higher(self) -> bool:
        return self in (QualityTier.PREMIUM, QualityTier.LUXURY)


class ConfidenceLevel(str, Enum):
    """Confidence in an estimate, derived from input completeness."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


# =============================================================================
# PROJECT DESCRIPTOR
# =============================================================================


class ProjectDescriptor(BaseModel):
    """Coarse description of a renovation project.

    ``category`` is always derived from ``raw_type_text`` by the classifier.
    A supplied category that disagrees with the text is rejected.
    """

    model_config = ConfigDict(frozen=True)

    category: ProjectCategory = Field(
        default=ProjectCategory.GENERIC, description="Derived from raw_type_text"
    )
    raw_type_text: str = Field(default="", description="Free-form project type")
    area_sqft: float = Field(default=0.0, ge=0, description="Project area in square feet")
    quality_tier: QualityTier = Field(
        default=QualityTier.STANDARD, description="Material quality tier"
    )
    zip_code: Optional[str] = Field(None, description="Postal code, if known")
    start_date: Optional[date] = Field(None, description="Planned start date")
    end_date: Optional[date] = Field(None, description="Planned end date")

    @model_validator(mode="before")
    @classmethod
    def derive_category(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        from renocost.services.classifier import classify_project_type

        raw_type_text = data.get("raw_type_text") or ""
        derived = classify_project_type(raw_type_text)
        supplied = data.get("category")
        if supplied is not None and ProjectCategory.from_label(supplied) != derived:
            raise ValueError(
                f"category {supplied!r} does not match project type "
                f"{raw_type_text!r} (classified as {derived.value})"
            )
        return {**data, "raw_type_text": raw_type_text, "category": derived}

    @property
    def has_schedule(self) -> bool:
        """True when both start and end dates are known."""
        return self.start_date is not None and self.end_date is not None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "category": self.category.value,
            "projectType": self.raw_type_text,
            "areaSqFt": self.area_sqft,
            "qualityTier": self.quality_tier.value,
            "zipCode": self.zip_code,
            "startDate": self.start_date.isoformat() if self.start_date else None,
            "endDate": self.end_date.isoformat() if self.end_date else None,
        }
